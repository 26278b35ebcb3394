"""Character set helpers.

This module hosts :class:`TextSanitizer`, a namespace of stateless text
transformations, and exports each of them as a plain function:

* :func:`is_utf8` – check that a byte sequence is well-formed UTF-8.
* :func:`cleanup_utf8` – strip malformed UTF-8 byte sequences.
* :func:`decode_hex_code_points` – decode ``\\uXXXX`` escapes.
* :func:`decode_non_breaking_spaces` – turn ``&nbsp;`` and U+00A0 into
  plain spaces.
* :func:`remove_accents` – replace accented letters with ASCII.

Every function accepts ``str`` or a bytes-like object and returns the
same kind it was given (``bytes`` for any bytes-like input).
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Union

from .accents import ACCENTED_CHARACTERS
from .encodings import resolve_encoding
from .errors import CodePointDecodeError
from .settings import get_settings
from .utils.byte_text import Text, like, to_bytes, to_str
from .utils.validation import validate_policy, validate_text

logger = logging.getLogger(__name__)

# Alternatives are tried in order at each position; the first one wins.
_MALFORMED_UTF8 = re.compile(
    rb"[\x00-\x08\x10\x0B\x0C\x0E-\x19\x7F]"
    rb"|[\x00-\x7F][\x80-\xBF]+"
    rb"|(?:[\xC0\xC1]|[\xF0-\xFF])[\x80-\xBF]*"
    rb"|[\xC2-\xDF](?:(?![\x80-\xBF])|[\x80-\xBF]{2,})"
    rb"|[\xE0-\xEF](?:[\x80-\xBF](?![\x80-\xBF])|(?![\x80-\xBF]{2})|[\x80-\xBF]{3,})"
)

_HEX_ESCAPE = re.compile(r"\\u([0-9a-fA-F]{4,6})")

_NBSP_ENTITY = "&nbsp;"
_NBSP = "\u00a0"

_ACCENT_PATTERN = re.compile(
    "|".join(re.escape(key) for key in sorted(ACCENTED_CHARACTERS, key=len, reverse=True))
)


def is_utf8(text: Text) -> bool:
    """Return True if *text* is a well-formed UTF-8 byte sequence.

    Overlong forms, encoded surrogates and values above U+10FFFF are
    rejected.  The empty string is valid.
    """
    validate_text(text)
    try:
        to_bytes(text).decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True


def cleanup_utf8(text: Text, strict: bool = True) -> Union[str, bytes]:
    """Remove malformed UTF-8 byte sequences from *text*.

    Stray control bytes, continuation bytes without a lead, invalid or
    4-byte leads and truncated or overlong 2-/3-byte sequences are
    dropped; everything else keeps its order.

    With *strict* (the default) bytes that are still not valid UTF-8 after
    that pass are dropped too, so the result always satisfies
    :func:`is_utf8`.
    """
    validate_text(text)
    data = _MALFORMED_UTF8.sub(b"", to_bytes(text))
    if strict:
        data = data.decode("utf-8", "ignore").encode("utf-8")
    return like(text, data)


def decode_hex_code_points(
    text: Text,
    source_encoding: Optional[str] = None,
    on_error: Optional[str] = None,
) -> Union[str, bytes]:
    """Decode ``\\uXXXX`` escapes in *text*.

    Parameters
    ----------
    text:
        The text to scan.
    source_encoding:
        Encoding of the two bytes spelled by each escape.  Defaults to the
        configured default encoding (``UCS-2BE``).
    on_error:
        What to do with an escape whose bytes cannot be decoded:
        ``"keep"`` leaves it as is, ``"remove"`` drops it and ``"strict"``
        raises :class:`CodePointDecodeError`.  Defaults to the configured
        policy (``"keep"``).

    Escapes with five or six hex digits are removed.  An unknown
    *source_encoding* raises :class:`UnsupportedEncodingError`.
    """
    validate_text(text)
    encoding = source_encoding
    policy = on_error
    if encoding is None or policy is None:
        settings = get_settings()
        encoding = settings.default_encoding if encoding is None else encoding
        policy = settings.on_decode_error if policy is None else policy
    validate_policy(policy)
    codec = resolve_encoding(encoding)

    def _replace(match: re.Match) -> str:
        digits = match.group(1)
        if len(digits) > 4:
            return ""
        try:
            return bytes.fromhex(digits).decode(codec)
        # punycode and idna raise a bare UnicodeError
        except UnicodeError:
            if policy == "strict":
                raise CodePointDecodeError(match.group(0), encoding) from None
            logger.debug("Cannot decode %s from %s, policy=%s", match.group(0), encoding, policy)
            return match.group(0) if policy == "keep" else ""

    return like(text, _HEX_ESCAPE.sub(_replace, to_str(text)))


def decode_non_breaking_spaces(text: Text) -> Union[str, bytes]:
    """Replace ``&nbsp;`` entities and U+00A0 characters with spaces.

    Bytes that are not valid UTF-8 only get the entity replaced.
    """
    validate_text(text)
    if isinstance(text, str):
        return text.replace(_NBSP_ENTITY, " ").replace(_NBSP, " ")

    data = bytes(text).replace(_NBSP_ENTITY.encode("ascii"), b" ")
    try:
        decoded = data.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.debug("Skipping U+00A0 replacement for non UTF-8 input: %s", e)
        return data
    return decoded.replace(_NBSP, " ").encode("utf-8")


def remove_accents(text: Text) -> Union[str, bytes]:
    """Replace accented letters with their ASCII equivalents.

    Characters missing from :data:`ACCENTED_CHARACTERS` are left alone.
    """
    validate_text(text)
    result = _ACCENT_PATTERN.sub(lambda m: ACCENTED_CHARACTERS[m.group(0)], to_str(text))
    return like(text, result)


class TextSanitizer:
    """Stateless character set utilities, grouped under one name."""

    is_utf8 = staticmethod(is_utf8)
    cleanup_utf8 = staticmethod(cleanup_utf8)
    decode_hex_code_points = staticmethod(decode_hex_code_points)
    decode_non_breaking_spaces = staticmethod(decode_non_breaking_spaces)
    remove_accents = staticmethod(remove_accents)

    ACCENTED_CHARACTERS = ACCENTED_CHARACTERS


__all__ = [
    "TextSanitizer",
    "is_utf8",
    "cleanup_utf8",
    "decode_hex_code_points",
    "decode_non_breaking_spaces",
    "remove_accents",
]
