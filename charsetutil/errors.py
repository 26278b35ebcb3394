"""Exception types raised by charsetutil.

Malformed input is never an error on its own: the UTF-8 helpers classify
or strip bad bytes instead of raising.  Errors are reserved for arguments
the library cannot act on, such as an unknown encoding name.
"""


class CharsetError(Exception):
    """Base class for all charsetutil errors."""


class UnsupportedEncodingError(CharsetError, LookupError):
    """Raised when an encoding name cannot be resolved to a text codec."""

    def __init__(self, encoding: str, message: str = "") -> None:
        self.encoding = encoding
        super().__init__(message or f"Unsupported encoding: {encoding!r}")


class CodePointDecodeError(CharsetError, ValueError):
    """Raised when an escaped code point cannot be converted from its encoding."""

    def __init__(self, escape: str, encoding: str) -> None:
        self.escape = escape
        self.encoding = encoding
        super().__init__(f"Cannot decode {escape!r} from {encoding!r}")


__all__ = ["CharsetError", "UnsupportedEncodingError", "CodePointDecodeError"]
