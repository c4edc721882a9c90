# jsonmark/constants.py
"""Marker space and wire-format constants shared across jsonmark."""

# Unicode Private Use Area (BMP); does not occur in ordinary text.
PRIVATE_USE_START: str = "\uE000"
PRIVATE_USE_END: str = "\uF8FF"

DEFAULT_MARKER: str = PRIVATE_USE_START
DEFAULT_DELIMITER: str = ":"

# Identifier used for strings that already begin with the marker.
ESCAPE_IDENTIFIER: str = "string"

# Largest integer an IEEE-754 double represents exactly (Number.MAX_SAFE_INTEGER).
MAX_SAFE_INTEGER: int = 2**53 - 1

ON_UNKNOWN_KEEP: str = "keep"
ON_UNKNOWN_RAISE: str = "raise"
ON_UNKNOWN_POLICIES: frozenset[str] = frozenset({ON_UNKNOWN_KEEP, ON_UNKNOWN_RAISE})

__all__ = [
    "PRIVATE_USE_START",
    "PRIVATE_USE_END",
    "DEFAULT_MARKER",
    "DEFAULT_DELIMITER",
    "ESCAPE_IDENTIFIER",
    "MAX_SAFE_INTEGER",
    "ON_UNKNOWN_KEEP",
    "ON_UNKNOWN_RAISE",
    "ON_UNKNOWN_POLICIES",
]
