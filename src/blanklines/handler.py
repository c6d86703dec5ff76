"""Interception hook: decides whether a message is normalized and does it."""

from __future__ import annotations

import logging
from collections.abc import Callable

from blanklines._utils import (
    DEFAULT_SAMPLE_BYTES,
    MIN_MESSAGE_LENGTH,
    _validate_sample_bytes,
)
from blanklines.config import Settings
from blanklines.enums import ToolType
from blanklines.message import Message, Request, Response
from blanklines.pipeline import ProcessingResult
from blanklines.pipeline.orchestrator import run_body, run_message

logger = logging.getLogger(__name__)

#: Answers whether a URL is inside the user's target scope.
ScopePredicate = Callable[[str], bool]


def _everything_in_scope(url: str) -> bool:
    return True


class MessageHandler:
    """Applies the settings gate, then whole-message normalization.

    Raw request and response bytes that pass the gate are run through the
    processor and the result is returned for the caller to put back on the
    wire when ``modified`` is set.  No method raises on message content.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        in_scope: ScopePredicate = _everything_in_scope,
        sample_bytes: int = DEFAULT_SAMPLE_BYTES,
    ) -> None:
        _validate_sample_bytes(sample_bytes)
        self.settings = settings if settings is not None else Settings()
        self._in_scope = in_scope
        self._sample_bytes = sample_bytes

    def should_process(self, tool: ToolType, url: str) -> bool:
        """``enabled(tool) and (not scope_restricted or url in scope)``."""
        if not self.settings.is_enabled(tool):
            return False
        if not self.settings.is_scope_restricted():
            return True
        try:
            return bool(self._in_scope(url))
        except Exception:
            logger.warning(
                "Scope check failed for %s; treating it as in scope", url, exc_info=True
            )
            return True

    def handle_raw(
        self, data: bytes, tool: ToolType, url: str = ""
    ) -> ProcessingResult:
        """Normalize a raw message if the gate lets it through."""
        if not self.should_process(tool, url) or len(data) < MIN_MESSAGE_LENGTH:
            return ProcessingResult.unchanged(data)
        result = run_message(data, sample_bytes=self._sample_bytes)
        if result.modified:
            logger.info("Removed extra blank lines from %s", url or "message")
        return result

    def handle_request(
        self, raw: bytes, tool: ToolType, request: Request | None = None
    ) -> ProcessingResult:
        """Normalize the wire bytes *raw* of an outgoing request."""
        return self.handle_raw(raw, tool, request.url if request is not None else "")

    def handle_response(
        self, raw: bytes, tool: ToolType, response: Response | None = None
    ) -> ProcessingResult:
        """Normalize the wire bytes *raw* of a received response.

        Scope is judged by the URL of the request that produced it.
        """
        return self.handle_raw(raw, tool, response.url if response is not None else "")

    def handle_body(self, message: Message, tool: ToolType) -> ProcessingResult:
        """Body-only variant: trim leading blank lines from *message*'s body.

        The caller rebuilds the message with :meth:`Request.with_body` or
        :meth:`Response.with_body` and recomputes its length header.
        """
        if not self.should_process(tool, message.url):
            return ProcessingResult.unchanged(message.body)
        result = run_body(message)
        if result.modified:
            logger.info(
                "Removed leading blank lines from body of %s", message.url or "message"
            )
        return result
