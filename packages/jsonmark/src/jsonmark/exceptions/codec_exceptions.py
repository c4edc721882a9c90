# jsonmark/exceptions/codec_exceptions.py
from .base import JSONMarkError

__all__ = [
    "CodecError", "CodecConfigurationError", "InvalidMarkerError",
    "CodecEncodeError", "TypeEncodeError", "UnsupportedValueError", "CircularReferenceError",
    "CodecDecodeError", "MalformedPayloadError", "UnknownTypeError",
]


class CodecError(JSONMarkError):
    """Base error for all codec-related failures."""


class CodecConfigurationError(CodecError, ValueError):
    """Codec options are missing or invalid."""


class InvalidMarkerError(CodecConfigurationError):
    """Marker or delimiter cannot form an unambiguous marked string."""


# ----------------------------------------------------------------------------
# Encode errors
# ----------------------------------------------------------------------------
class CodecEncodeError(CodecError):
    """Failed to encode a value or document."""


class TypeEncodeError(CodecEncodeError):
    """A registered type's encoder raised or returned a non-string payload."""

    def __init__(self, identifier: str, message: str) -> None:
        self.identifier = identifier
        super().__init__(f"Encoder for {identifier!r} failed: {message}")


class UnsupportedValueError(CodecEncodeError, TypeError):
    """Value is neither JSON-native nor matched by any registered type."""

    def __init__(self, value: object, path: str) -> None:
        self.value = value
        self.path = path
        super().__init__(
            f"Object of type {type(value).__name__} at {path} is not JSON serializable "
            f"and matches no registered type"
        )


class CircularReferenceError(CodecEncodeError, ValueError):
    """Container references itself; cycles are not representable."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Circular reference detected at {path}")


# ----------------------------------------------------------------------------
# Decode errors
# ----------------------------------------------------------------------------
class CodecDecodeError(CodecError):
    """Failed to decode a marked value or document."""


class MalformedPayloadError(CodecDecodeError, ValueError):
    """Identifier resolved but the registered decoder rejected the payload."""

    def __init__(self, identifier: str, payload: str, message: str) -> None:
        self.identifier = identifier
        self.payload = payload
        shown = payload if len(payload) <= 80 else payload[:77] + "..."
        super().__init__(f"Malformed payload for {identifier!r} ({shown!r}): {message}")


class UnknownTypeError(CodecDecodeError, LookupError):
    """Marked string names an identifier the registry does not know."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"No JSON value type registered for identifier {identifier!r}")
