"""Stage 3: NUL byte detection."""

from __future__ import annotations

from blanklines.enums import Evidence, Verdict
from blanklines.pipeline import Classification

_NUL_RESULT = Classification(Verdict.BINARY, Evidence.NUL_BYTE)


def contains_nul(data: bytes) -> bool:
    """Return True if *data* holds at least one 0x00 byte."""
    return b"\x00" in data


def detect_nul(data: bytes) -> Classification | None:
    """Any NUL byte is decisive binary evidence; text protocols never carry one."""
    if contains_nul(data):
        return _NUL_RESULT
    return None
