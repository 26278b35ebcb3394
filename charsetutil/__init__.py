"""charsetutil – character set and text normalisation helpers."""

from .accents import ACCENTED_CHARACTERS
from .charset import (
    TextSanitizer,
    cleanup_utf8,
    decode_hex_code_points,
    decode_non_breaking_spaces,
    is_utf8,
    remove_accents,
)
from .errors import CharsetError, CodePointDecodeError, UnsupportedEncodingError
from .settings import SanitizerSettings, get_settings, reload_settings

__all__ = [
    "TextSanitizer",
    "is_utf8",
    "cleanup_utf8",
    "decode_hex_code_points",
    "decode_non_breaking_spaces",
    "remove_accents",
    "ACCENTED_CHARACTERS",
    "CharsetError",
    "UnsupportedEncodingError",
    "CodePointDecodeError",
    "SanitizerSettings",
    "get_settings",
    "reload_settings",
]
