"""Content classifier: runs the text/binary stages in priority order."""

from __future__ import annotations

from collections.abc import Iterable

from blanklines._utils import DEFAULT_SAMPLE_BYTES
from blanklines.enums import Evidence, Verdict
from blanklines.pipeline import Classification
from blanklines.pipeline.binary import detect_nul
from blanklines.pipeline.content_type import classify_content_type
from blanklines.pipeline.printable import classify_printable
from blanklines.pipeline.signatures import detect_signature

_EMPTY_RESULT = Classification(Verdict.TEXT, Evidence.EMPTY)


def run_classifier(
    data: bytes,
    headers: Iterable[tuple[str, str]] | None = None,
    sample_bytes: int = DEFAULT_SAMPLE_BYTES,
) -> Classification:
    """Decide whether *data* is safe to treat as text.

    The first decisive stage wins; the printable-ratio heuristic always
    decides, so the result is never ambiguous.

    :param data: The body bytes to examine.
    :param headers: Optional ``(name, value)`` pairs for the message.
    :param sample_bytes: How many leading bytes the heuristic inspects.
    :returns: A :class:`Classification` with a TEXT or BINARY verdict.
    """
    # Stage 1: Content-Type is the most authoritative signal when present.
    header_result = classify_content_type(headers)
    if header_result is not None:
        return header_result

    # An empty body cannot be corrupted by line rewriting.
    if not data:
        return _EMPTY_RESULT

    # Stage 2: magic numbers catch mislabelled or unlabelled binaries.
    signature_result = detect_signature(data)
    if signature_result is not None:
        return signature_result

    # Stage 3: NUL bytes.
    nul_result = detect_nul(data)
    if nul_result is not None:
        return nul_result

    # Stage 4: printable ratio over the leading sample.
    return classify_printable(data, sample_bytes)
