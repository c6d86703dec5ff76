"""Stage 2: Magic-number signatures of well-known binary formats."""

from __future__ import annotations

import dataclasses

from blanklines.enums import Evidence, Verdict
from blanklines.pipeline import Classification


@dataclasses.dataclass(frozen=True, slots=True)
class BinarySignature:
    """A byte prefix identifying a binary file format."""

    prefix: bytes
    label: str
    category: str

    def matches(self, data: bytes) -> bool:
        return data.startswith(self.prefix)


# Table order is match order; the first matching prefix names the format.
BINARY_SIGNATURES: tuple[BinarySignature, ...] = (
    # Images
    BinarySignature(b"\xff\xd8\xff", "jpeg", "image"),
    BinarySignature(b"\x89PNG", "png", "image"),
    BinarySignature(b"GIF8", "gif", "image"),
    BinarySignature(b"II*\x00", "tiff", "image"),
    BinarySignature(b"MM\x00*", "tiff", "image"),
    BinarySignature(b"BM", "bmp", "image"),
    BinarySignature(b"\x00\x00\x01\x00", "ico", "image"),
    BinarySignature(b"\x00\x00\x02\x00", "cur", "image"),
    BinarySignature(b"8BPS", "psd", "image"),
    # RIFF containers: WebP, WAV, AVI
    BinarySignature(b"RIFF", "riff", "container"),
    # Archives and compression
    BinarySignature(b"PK\x03\x04", "zip", "archive"),
    BinarySignature(b"PK\x05\x06", "zip-empty", "archive"),
    BinarySignature(b"PK\x07\x08", "zip-spanned", "archive"),
    BinarySignature(b"Rar!", "rar", "archive"),
    BinarySignature(b"7z\xbc\xaf", "7z", "archive"),
    BinarySignature(b"\x1f\x8b", "gzip", "archive"),
    BinarySignature(b"BZh", "bzip2", "archive"),
    BinarySignature(b"\xfd7zXZ\x00", "xz", "archive"),
    BinarySignature(b"\x28\xb5\x2f\xfd", "zstd", "archive"),
    BinarySignature(b"MSCF", "cab", "archive"),
    # Audio
    BinarySignature(b"ID3", "mp3-id3", "audio"),
    BinarySignature(b"\xff\xfb", "mp3", "audio"),
    BinarySignature(b"\xff\xf3", "mp3", "audio"),
    BinarySignature(b"\xff\xf2", "mp3", "audio"),
    BinarySignature(b"fLaC", "flac", "audio"),
    BinarySignature(b"OggS", "ogg", "audio"),
    # Video
    BinarySignature(b"\x00\x00\x00\x14ftyp", "mp4", "video"),
    BinarySignature(b"\x00\x00\x00\x18ftyp", "mp4", "video"),
    BinarySignature(b"\x00\x00\x00\x1cftyp", "mp4", "video"),
    BinarySignature(b"\x00\x00\x00\x20ftyp", "mp4", "video"),
    BinarySignature(b"\x1a\x45\xdf\xa3", "matroska", "video"),
    BinarySignature(b"FLV\x01", "flv", "video"),
    BinarySignature(b"\x30\x26\xb2\x75\x8e\x66\xcf\x11", "asf", "video"),
    # Documents
    BinarySignature(b"%PDF", "pdf", "document"),
    BinarySignature(b"\xd0\xcf\x11\xe0", "ole2", "document"),
    BinarySignature(b"{\\rtf1", "rtf", "document"),
    BinarySignature(b"SQLite format 3\x00", "sqlite", "document"),
    # Executables
    BinarySignature(b"MZ", "pe", "executable"),
    BinarySignature(b"\x7fELF", "elf", "executable"),
    BinarySignature(b"\xfe\xed\xfa\xce", "mach-o", "executable"),
    BinarySignature(b"\xfe\xed\xfa\xcf", "mach-o", "executable"),
    BinarySignature(b"\xce\xfa\xed\xfe", "mach-o", "executable"),
    BinarySignature(b"\xcf\xfa\xed\xfe", "mach-o", "executable"),
    BinarySignature(b"\xca\xfe\xba\xbe", "java-class", "executable"),
    BinarySignature(b"\x00asm", "wasm", "executable"),
    # Fonts
    BinarySignature(b"wOFF", "woff", "font"),
    BinarySignature(b"wOF2", "woff2", "font"),
    BinarySignature(b"OTTO", "otf", "font"),
    BinarySignature(b"\x00\x01\x00\x00\x00", "ttf", "font"),
    # Key and certificate material
    BinarySignature(b"-----BEGIN ", "pem", "crypto"),
    BinarySignature(b"\x30\x82", "der", "crypto"),
)

_SHORTEST_PREFIX = min(len(sig.prefix) for sig in BINARY_SIGNATURES)


def match_signature(data: bytes) -> BinarySignature | None:
    """Return the first table entry whose prefix starts *data*."""
    if len(data) < _SHORTEST_PREFIX:
        return None
    for signature in BINARY_SIGNATURES:
        if signature.matches(data):
            return signature
    return None


def detect_signature(data: bytes) -> Classification | None:
    """Classify *data* as binary when it opens with a known magic number.

    :param data: The raw byte data to examine.
    :returns: A binary :class:`Classification` labelled with the format, or
        ``None``.
    """
    signature = match_signature(data)
    if signature is None:
        return None
    return Classification(Verdict.BINARY, Evidence.SIGNATURE, signature.label)
