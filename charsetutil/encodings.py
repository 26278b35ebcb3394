"""Encoding name registry.

Escaped code points are usually produced by tools that name their
encodings the way mbstring/iconv do (``UCS-2BE``, ``UCS-2LE`` ...).
Python's codec registry does not know the UCS-2 names, so this module
maps them onto the equivalent UTF-16 codecs and otherwise defers to
:func:`codecs.lookup`:

* :func:`resolve_encoding` – return the Python codec name for an
  encoding identifier or raise :class:`UnsupportedEncodingError`.
* :func:`list_encoding_aliases` – return the extra aliases understood
  on top of the standard codec registry.
"""

from __future__ import annotations

import codecs
from functools import lru_cache
from typing import Dict

from .errors import UnsupportedEncodingError

DEFAULT_ENCODING = "UCS-2BE"

# UCS-2 is UTF-16 restricted to the BMP; an unmarked stream is big-endian.
_EXTRA_ALIASES = {
    "ucs2": "utf-16-be",
    "ucs2be": "utf-16-be",
    "ucs2le": "utf-16-le",
    "iso10646ucs2": "utf-16-be",
}


def _alias_key(name: str) -> str:
    return "".join(ch for ch in name.lower() if ch.isalnum())


def list_encoding_aliases() -> Dict[str, str]:
    """Return the aliases resolved here before the codec registry is consulted."""
    return dict(_EXTRA_ALIASES)


@lru_cache(maxsize=128)
def resolve_encoding(name: str) -> str:
    """Return the canonical Python codec name for *name*.

    Raises :class:`UnsupportedEncodingError` when the name is unknown or
    refers to a bytes-to-bytes / text-to-text transform (``base64``,
    ``rot13`` ...) rather than a text encoding.
    """
    if not isinstance(name, str) or not name.strip():
        raise UnsupportedEncodingError(str(name), "Encoding name must be a non-empty string")
    codec_name = _EXTRA_ALIASES.get(_alias_key(name), name.strip())
    try:
        info = codecs.lookup(codec_name)
    except LookupError:
        raise UnsupportedEncodingError(name) from None
    if not getattr(info, "_is_text_encoding", True):
        raise UnsupportedEncodingError(name, f"{name!r} is not a text encoding")
    return info.name


__all__ = ["DEFAULT_ENCODING", "resolve_encoding", "list_encoding_aliases"]
