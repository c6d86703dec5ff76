"""HTTP message views handed over by the interception layer."""

from __future__ import annotations

import dataclasses
import re

from blanklines.pipeline.content_type import get_header

#: ``(name, value)`` pairs in wire order.
HeaderList = tuple[tuple[str, str], ...]

_HEADER_LINE = re.compile(rb"^([!#$%&'*+.^_`|~0-9A-Za-z-]+)[ \t]*:[ \t]*(.*?)[ \t]*$")


def parse_header_block(block: bytes) -> HeaderList:
    """Parse ``Name: value`` lines from a raw header block.

    The request or status line and anything that is not a header field
    are skipped.  Values are decoded as Latin-1 so every byte survives.
    """
    headers: list[tuple[str, str]] = []
    for raw_line in block.split(b"\n"):
        match = _HEADER_LINE.match(raw_line.rstrip(b"\r"))
        if match is None:
            continue
        name, value = match.groups()
        headers.append((name.decode("latin-1"), value.decode("latin-1")))
    return tuple(headers)


@dataclasses.dataclass(frozen=True, slots=True)
class Request:
    """An intercepted request whose header fields and body are already split."""

    headers: HeaderList
    body: bytes
    url: str = ""

    def header(self, name: str) -> str | None:
        return get_header(self.headers, name)

    def with_body(self, body: bytes) -> Request:
        return dataclasses.replace(self, body=body)


@dataclasses.dataclass(frozen=True, slots=True)
class Response:
    """An intercepted response, tied to the request that produced it."""

    headers: HeaderList
    body: bytes
    status_code: int = 200
    initiating_request: Request | None = None

    @property
    def url(self) -> str:
        if self.initiating_request is None:
            return ""
        return self.initiating_request.url

    def header(self, name: str) -> str | None:
        return get_header(self.headers, name)

    def with_body(self, body: bytes) -> Response:
        return dataclasses.replace(self, body=body)


Message = Request | Response
