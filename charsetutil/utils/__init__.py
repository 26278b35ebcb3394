"""
Utility subpackage for charsetutil.

Helpers shared by the transformations: str/bytes conversion that keeps
invalid bytes intact, and argument validation.
"""

from .byte_text import Text, like, to_bytes, to_str
from .validation import DECODE_ERROR_POLICIES, validate_policy, validate_text

__all__ = [
    "Text",
    "like",
    "to_bytes",
    "to_str",
    "DECODE_ERROR_POLICIES",
    "validate_policy",
    "validate_text",
]
