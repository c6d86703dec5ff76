"""Stage 1: Content-Type header evidence."""

from __future__ import annotations

import re
from collections.abc import Iterable

from blanklines.enums import Evidence, Verdict
from blanklines.pipeline import Classification

# Structured-syntax suffixes (RFC 6839) cover the vendor JSON/XML types,
# e.g. application/vnd.api+json or application/soap+xml.
_TEXT_CONTENT_TYPE = re.compile(
    r"(?:text/"
    r"|application/(?:json|xml|javascript|x-javascript|ecmascript"
    r"|x-www-form-urlencoded|graphql|x-yaml|yaml|x-ndjson)\b"
    r"|application/[\w.+-]*\+(?:json|xml)\b)",
    re.IGNORECASE,
)

_BINARY_CONTENT_TYPE = re.compile(
    r"(?:image/|audio/|video/|font/"
    r"|application/(?:octet-stream|pdf|zip|x-zip-compressed|x-rar-compressed"
    r"|vnd\.rar|x-7z-compressed|x-tar|gzip|x-gzip|x-bzip2|x-xz|zstd"
    r"|x-executable|x-msdownload|x-msdos-program|x-sharedlib|wasm"
    r"|java-archive|x-java-archive|java-vm|x-shockwave-flash|msword"
    r"|vnd\.ms-|vnd\.openxmlformats-|vnd\.oasis\.opendocument\."
    r"|x-font-|font-|x-pkcs12|pkcs12|pkix-cert|x-x509-ca-cert))",
    re.IGNORECASE,
)

_CONTENT_TYPE = "content-type"


def get_header(headers: Iterable[tuple[str, str]], name: str) -> str | None:
    """Return the trimmed value of the first header called *name*.

    The lookup is case-insensitive; ``None`` means the header is absent.
    """
    wanted = name.lower()
    for header_name, value in headers:
        if header_name.strip().lower() == wanted:
            return value.strip()
    return None


def classify_content_type(
    headers: Iterable[tuple[str, str]] | None,
) -> Classification | None:
    """Classify from the ``Content-Type`` header alone.

    :param headers: ``(name, value)`` pairs, or ``None`` when the caller
        has no header list.
    :returns: A decisive :class:`Classification`, or ``None`` when the
        header is missing or on neither list.
    """
    if headers is None:
        return None
    content_type = get_header(headers, _CONTENT_TYPE)
    if not content_type:
        return None
    if _TEXT_CONTENT_TYPE.match(content_type):
        return Classification(Verdict.TEXT, Evidence.CONTENT_TYPE, content_type)
    if _BINARY_CONTENT_TYPE.match(content_type):
        return Classification(Verdict.BINARY, Evidence.CONTENT_TYPE, content_type)
    return None
