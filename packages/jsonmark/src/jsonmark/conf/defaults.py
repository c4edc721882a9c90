"""Default configuration values for jsonmark."""

from ..constants import DEFAULT_DELIMITER, DEFAULT_MARKER, ON_UNKNOWN_KEEP

DEFAULTS: dict[str, object] = {
    # Wire format
    "MARKER": DEFAULT_MARKER,
    "DELIMITER": DEFAULT_DELIMITER,
    # Decoding policy for marked strings with an unregistered identifier
    "ON_UNKNOWN": ON_UNKNOWN_KEEP,
    # Output/runtime defaults
    "ENSURE_ASCII": False,
    "INCLUDE_BUILTINS": True,
}
