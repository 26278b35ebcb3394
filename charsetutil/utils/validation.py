"""
Validation helpers.

Light-weight runtime checks for the arguments accepted by the public
helpers.  Type problems raise ``TypeError``; bad option values raise
``ValueError``.
"""

from typing import Any

DECODE_ERROR_POLICIES = ("keep", "remove", "strict")


def validate_text(value: Any, name: str = "text") -> None:
    """Raise a TypeError unless *value* is a str or a bytes-like object."""
    if not isinstance(value, (str, bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be str or bytes-like, not {type(value).__name__}")


def validate_policy(value: str) -> str:
    """Return *value* if it names a decode-error policy, else raise ValueError."""
    if value not in DECODE_ERROR_POLICIES:
        allowed = ", ".join(DECODE_ERROR_POLICIES)
        raise ValueError(f"Unknown decode error policy {value!r}; expected one of: {allowed}")
    return value
