"""Binary-safe removal of extra blank lines from HTTP messages."""

from __future__ import annotations

from collections.abc import Iterable

from blanklines._utils import DEFAULT_SAMPLE_BYTES, _as_bytes, _validate_sample_bytes
from blanklines.config import Settings
from blanklines.enums import Evidence, Failure, LineEnding, ToolType, Verdict
from blanklines.handler import MessageHandler
from blanklines.message import Message, Request, Response
from blanklines.pipeline import Classification, ProcessingResult
from blanklines.pipeline.classifier import run_classifier
from blanklines.pipeline.normalize import (
    collapse_blank_lines,
    detect_line_ending,
    strip_leading_blank_lines,
)
from blanklines.pipeline.orchestrator import find_boundary, run_body, run_message

__version__ = "1.0.0"
__all__ = [
    "Classification",
    "Evidence",
    "Failure",
    "LineEnding",
    "Message",
    "MessageHandler",
    "ProcessingResult",
    "Request",
    "Response",
    "Settings",
    "ToolType",
    "Verdict",
    "classify",
    "collapse_blank_lines",
    "detect_line_ending",
    "find_boundary",
    "is_text_content",
    "process",
    "process_body",
    "strip_leading_blank_lines",
]


def classify(
    data: bytes | bytearray,
    headers: Iterable[tuple[str, str]] | None = None,
    sample_bytes: int = DEFAULT_SAMPLE_BYTES,
) -> Classification:
    """Classify a body as text or binary and say why.

    *headers* is an optional list of ``(name, value)`` pairs; only
    ``Content-Type`` is consulted.
    """
    _validate_sample_bytes(sample_bytes)
    return run_classifier(_as_bytes(data), headers, sample_bytes)


def is_text_content(
    data: bytes | bytearray,
    headers: Iterable[tuple[str, str]] | None = None,
    sample_bytes: int = DEFAULT_SAMPLE_BYTES,
) -> bool:
    """Return True if *data* is safe to rewrite as text."""
    return classify(data, headers, sample_bytes).is_text


def process(
    data: bytes | bytearray,
    headers: Iterable[tuple[str, str]] | None = None,
    sample_bytes: int = DEFAULT_SAMPLE_BYTES,
) -> ProcessingResult:
    """Remove extra blank lines from a complete HTTP message.

    The body is classified first: text bodies lose leading blank lines and
    have interior blank runs collapsed to one line, binary bodies only lose
    leading blank lines.  A message without a header/body boundary, or one
    that fails in any way, is returned unchanged.
    """
    _validate_sample_bytes(sample_bytes)
    return run_message(_as_bytes(data), headers, sample_bytes)


def process_body(message: Message) -> ProcessingResult:
    """Trim leading blank lines from the body of a split message.

    Use ``message.with_body(result.data)`` to rebuild the message; size
    headers are left for the caller to recompute.
    """
    return run_body(message)
