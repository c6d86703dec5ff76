"""Enumerations for blanklines."""

import enum


class Verdict(enum.Enum):
    """Final answer of the content classifier."""

    TEXT = "text"
    BINARY = "binary"


class Evidence(enum.Enum):
    """Which classifier stage produced a verdict."""

    CONTENT_TYPE = "content-type"
    SIGNATURE = "signature"
    NUL_BYTE = "nul-byte"
    PRINTABLE_RATIO = "printable-ratio"
    EMPTY = "empty"


class LineEnding(enum.Enum):
    """Line terminator style detected in a message."""

    CRLF = "\r\n"
    LF = "\n"

    @property
    def separator(self) -> bytes:
        """The header/body separator written in this style."""
        return self.value.encode("ascii") * 2


class Failure(enum.Enum):
    """Conditions that leave a message (partly) unnormalized."""

    NO_BOUNDARY = "no-boundary"
    DECODE_FAILURE = "decode-failure"
    INTERNAL_ERROR = "internal-error"


class ToolType(enum.IntFlag):
    """Bit flags for the interception tools a message can come from."""

    PROXY = 1
    REPEATER = 2
    INTRUDER = 4
    EXTENSIONS = 8
    SCANNER = 16
    TARGET = 32
    SEQUENCER = 64
    ALL = PROXY | REPEATER | INTRUDER | EXTENSIONS | SCANNER | TARGET | SEQUENCER


#: Tools that are processed when no explicit selection has been made.
DEFAULT_TOOLS: ToolType = (
    ToolType.PROXY | ToolType.REPEATER | ToolType.INTRUDER | ToolType.EXTENSIONS
)
