"""Blank-line normalization for message bodies."""

from __future__ import annotations

import logging
import re

from blanklines.enums import Failure, LineEnding
from blanklines.pipeline import ProcessingResult

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")

_LF = 0x0A
# Bytes that may appear on a blank line besides its terminating LF.
_HORIZONTAL_BLANKS: frozenset[int] = frozenset(b" \t\r")
_ALL_BLANK_RESULT = b"\n"
# Characters a decoded line may hold and still count as blank.
_LINE_BLANKS = " \t\r\x0b\x0c"


def detect_line_ending(text: str | bytes) -> LineEnding:
    """CRLF if any ``\\r\\n`` pair occurs in *text*, LF otherwise."""
    crlf = b"\r\n" if isinstance(text, bytes) else "\r\n"
    return LineEnding.CRLF if crlf in text else LineEnding.LF


def is_blank(line: str) -> bool:
    """True for a line holding only horizontal whitespace or a carriage return."""
    return not line.strip(_LINE_BLANKS)


def strip_leading_blank_lines(data: bytes) -> bytes:
    """Drop the whitespace-only lines at the very start of *data*.

    Works on raw bytes, so it is safe for binary content: nothing after the
    first line holding a non-blank byte is looked at.  A buffer made only
    of blank lines becomes a single ``\\n``; an empty buffer stays empty.
    """
    if not data:
        return data

    start = 0
    for index, byte in enumerate(data):
        if byte == _LF:
            start = index + 1
        elif byte not in _HORIZONTAL_BLANKS:
            break
    else:
        return _ALL_BLANK_RESULT

    if start == 0:
        return data
    return data[start:]


def collapse_lines(lines: list[str]) -> list[str]:
    """Drop leading blank lines and squeeze interior blank runs to one line.

    Non-blank lines are kept verbatim, as is the first line of each
    interior blank run.
    """
    kept: list[str] = []
    seen_content = False
    previous_blank = False
    for line in lines:
        blank = is_blank(line)
        if blank:
            if seen_content and not previous_blank:
                kept.append(line)
        else:
            kept.append(line)
            seen_content = True
        previous_blank = blank
    return kept


def normalize_text(data: bytes) -> ProcessingResult:
    """Collapse blank lines in UTF-8 text, reporting how it went.

    When *data* does not decode as UTF-8 only the leading blank lines are
    stripped, at the byte level, and the result carries
    :attr:`Failure.DECODE_FAILURE`.
    """
    if not data:
        return ProcessingResult.unchanged(data)

    try:
        text = data.decode("utf-8", errors="strict")
    except UnicodeDecodeError as exc:
        logger.debug("Body is not valid UTF-8 (%s); trimming leading blank lines", exc)
        return ProcessingResult.compare(
            data, strip_leading_blank_lines(data), Failure.DECODE_FAILURE
        )

    lines = _LINE_BREAK.split(text)
    if len(lines) <= 1:
        return ProcessingResult.unchanged(data)

    ending = detect_line_ending(text)
    cleaned = ending.value.join(collapse_lines(lines))
    return ProcessingResult.compare(data, cleaned.encode("utf-8"))


def collapse_blank_lines(data: bytes) -> bytes:
    """Rewrite blank-line runs in text content.

    Leading blank lines are dropped, every interior run of blank lines is
    reduced to its first line, and the lines are re-joined with the line
    ending that dominates the input.  Input that turns out not to be UTF-8
    falls back to :func:`strip_leading_blank_lines`.
    """
    return normalize_text(data).data
