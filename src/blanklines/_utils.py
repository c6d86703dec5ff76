"""Internal shared utilities for blanklines."""

from __future__ import annotations

#: Number of leading bytes inspected by the printable-ratio heuristic.
DEFAULT_SAMPLE_BYTES: int = 1024

#: Fraction of non-printable bytes above which a sample is binary.
NON_PRINTABLE_THRESHOLD: float = 0.30

#: Messages shorter than this are passed through by the handler untouched.
MIN_MESSAGE_LENGTH: int = 10


def _validate_sample_bytes(sample_bytes: int) -> None:
    """Raise ValueError if *sample_bytes* is not a positive integer."""
    if (
        isinstance(sample_bytes, bool)
        or not isinstance(sample_bytes, int)
        or sample_bytes < 1
    ):
        msg = "sample_bytes must be a positive integer"
        raise ValueError(msg)


def _as_bytes(data: bytes | bytearray | memoryview) -> bytes:
    """Return *data* as an immutable ``bytes`` object.

    ``bytes`` input is returned as-is so callers can rely on identity when
    nothing changes.
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    msg = f"expected a bytes-like object, got {type(data).__name__}"
    raise TypeError(msg)
