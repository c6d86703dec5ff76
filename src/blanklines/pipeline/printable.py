"""Stage 4: Printable-ratio heuristic."""

from __future__ import annotations

from blanklines._utils import DEFAULT_SAMPLE_BYTES, NON_PRINTABLE_THRESHOLD
from blanklines.enums import Evidence, Verdict
from blanklines.pipeline import Classification

# Printable ASCII (0x20-0x7E) plus tab, newline and carriage return.
# bytes.translate deletes these; anything left over needs a closer look.
_PRINTABLE: bytes = bytes([0x09, 0x0A, 0x0D, *range(0x20, 0x7F)])
_PRINTABLE_SET: frozenset[int] = frozenset(_PRINTABLE)


def _utf8_sequence_length(lead: int) -> int:
    """Expected length of the UTF-8 sequence introduced by *lead*, or 0."""
    # 0xC0-0xC1 only produce overlong encodings of ASCII.
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def valid_utf8_sequence_at(data: bytes, index: int) -> int:
    """Return the length of a well-formed UTF-8 sequence at *index*, or 0.

    The window is checked with a strict decode, which also rejects
    overlong forms, surrogates and code points above U+10FFFF.
    """
    seq_len = _utf8_sequence_length(data[index])
    if not seq_len:
        return 0
    window = data[index : index + seq_len]
    if len(window) != seq_len:
        return 0
    try:
        window.decode("utf-8", errors="strict")
    except UnicodeDecodeError:
        return 0
    return seq_len


def non_printable_ratio(data: bytes, sample_bytes: int = DEFAULT_SAMPLE_BYTES) -> float:
    """Fraction of the sampled bytes that are neither printable nor UTF-8.

    Bytes belonging to a valid multi-byte UTF-8 sequence count as printable.
    A sequence that starts inside the sample is checked against the full
    buffer, so one cut off by the sample boundary is not penalised.
    """
    sample = data[:sample_bytes]
    if not sample:
        return 0.0
    if not sample.translate(None, _PRINTABLE):
        return 0.0

    length = len(sample)
    non_printable = 0
    i = 0
    while i < length:
        byte = sample[i]
        if byte in _PRINTABLE_SET:
            i += 1
            continue
        seq_len = valid_utf8_sequence_at(data, i)
        if seq_len:
            i += seq_len
            continue
        non_printable += 1
        i += 1
    return non_printable / length


def classify_printable(
    data: bytes, sample_bytes: int = DEFAULT_SAMPLE_BYTES
) -> Classification:
    """Resolve a buffer with no decisive evidence to text or binary.

    Unlike the earlier stages this one always answers.
    """
    score = non_printable_ratio(data, sample_bytes)
    verdict = Verdict.BINARY if score > NON_PRINTABLE_THRESHOLD else Verdict.TEXT
    return Classification(verdict, Evidence.PRINTABLE_RATIO, score=score)
