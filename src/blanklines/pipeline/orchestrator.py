"""Message processor: splits a message, classifies its body, normalizes it."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from blanklines._utils import DEFAULT_SAMPLE_BYTES
from blanklines.enums import Failure, LineEnding
from blanklines.message import Message, parse_header_block
from blanklines.pipeline import Classification, ProcessingResult
from blanklines.pipeline.binary import detect_nul
from blanklines.pipeline.classifier import run_classifier
from blanklines.pipeline.normalize import normalize_text, strip_leading_blank_lines
from blanklines.pipeline.signatures import detect_signature

logger = logging.getLogger(__name__)

_CRLF_SEPARATOR = LineEnding.CRLF.separator
_LF_SEPARATOR = LineEnding.LF.separator


def find_boundary(data: bytes) -> tuple[int, LineEnding] | None:
    """Locate the header/body separator.

    ``\\r\\n\\r\\n`` is preferred when it occurs before the first bare
    ``\\n\\n``.

    :returns: ``(offset, style)`` of the separator, or ``None`` when the
        message has no header/body boundary.
    """
    crlf = data.find(_CRLF_SEPARATOR)
    lf = data.find(_LF_SEPARATOR)
    if crlf != -1 and (lf == -1 or crlf < lf):
        return crlf, LineEnding.CRLF
    if lf != -1:
        return lf, LineEnding.LF
    return None


def normalize_body(body: bytes, classification: Classification) -> ProcessingResult:
    """Normalize *body* as its classification allows.

    Text gets the full blank-line collapse; binary only loses leading blank
    padding, since its interior bytes must never be read as lines.  A text
    verdict taken from ``Content-Type`` is overruled when the body opens
    with a binary signature or holds a NUL byte.
    """
    if classification.is_text:
        classification = detect_signature(body) or detect_nul(body) or classification
    if classification.is_text:
        result = normalize_text(body)
        return ProcessingResult(
            result.data, result.modified, result.failure, classification
        )
    return ProcessingResult.compare(
        body, strip_leading_blank_lines(body), classification=classification
    )


def _process_message(
    data: bytes,
    headers: Iterable[tuple[str, str]] | None,
    sample_bytes: int,
) -> ProcessingResult:
    boundary = find_boundary(data)
    if boundary is None:
        logger.debug("No header/body boundary in %d-byte message", len(data))
        return ProcessingResult.unchanged(data, Failure.NO_BOUNDARY)

    offset, style = boundary
    head = data[:offset]
    separator = style.separator
    body = data[offset + len(separator) :]

    if headers is None:
        headers = parse_header_block(head)
    classification = run_classifier(body, headers, sample_bytes)
    body_result = normalize_body(body, classification)
    if not body_result.modified:
        return ProcessingResult.unchanged(
            data, body_result.failure, classification
        )
    return ProcessingResult.compare(
        data,
        head + separator + body_result.data,
        body_result.failure,
        classification,
    )


def run_message(
    data: bytes,
    headers: Iterable[tuple[str, str]] | None = None,
    sample_bytes: int = DEFAULT_SAMPLE_BYTES,
) -> ProcessingResult:
    """Normalize a complete HTTP message (whole-message mode).

    The separator is written back exactly as found, so a message that needs
    no change comes back as the very same object.  Any unexpected error
    leaves the message unchanged with :attr:`Failure.INTERNAL_ERROR`.

    :param data: The raw request or response bytes.
    :param headers: Header list to classify with.  When ``None`` the header
        fields are parsed from the message itself.
    :param sample_bytes: Bytes inspected by the printable-ratio heuristic.
    :returns: A :class:`ProcessingResult`.
    """
    try:
        return _process_message(data, headers, sample_bytes)
    except Exception:
        logger.exception("Failed to normalize message; leaving it unchanged")
        return ProcessingResult.unchanged(data, Failure.INTERNAL_ERROR)


def run_body(message: Message) -> ProcessingResult:
    """Trim leading blank lines from an already split message's body.

    Body-only mode never collapses interior lines and leaves size headers
    such as ``Content-Length`` for the caller to recompute.
    """
    body = message.body
    try:
        return ProcessingResult.compare(body, strip_leading_blank_lines(body))
    except Exception:
        logger.exception("Failed to trim message body; leaving it unchanged")
        return ProcessingResult.unchanged(body, Failure.INTERNAL_ERROR)
