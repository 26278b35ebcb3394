"""
Conversions between str and bytes.

The UTF-8 helpers work on raw bytes, while callers may hand in either
``str`` or bytes-like objects.  A ``str`` is viewed as its UTF-8
encoding; surrogate escapes (``errors="surrogateescape"``) turn back
into the raw bytes they stand for, and any other lone surrogate is
encoded with ``surrogatepass`` so it still shows up as invalid UTF-8.
"""

from typing import Union

Text = Union[str, bytes, bytearray, memoryview]


def to_bytes(text: Text) -> bytes:
    """Return the byte view of *text*."""
    if not isinstance(text, str):
        return bytes(text)
    try:
        return text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return text.encode("utf-8", "surrogatepass")


def to_str(text: Text) -> str:
    """Return *text* as str, keeping undecodable bytes as surrogate escapes."""
    if isinstance(text, str):
        return text
    return bytes(text).decode("utf-8", "surrogateescape")


def like(original: Text, result: Union[str, bytes]) -> Union[str, bytes]:
    """Convert *result* back to the kind of object *original* was.

    str inputs get str results; every bytes-like input gets ``bytes``.
    """
    if isinstance(original, str):
        return to_str(result)
    if isinstance(result, str):
        return result.encode("utf-8", "surrogateescape")
    return result
