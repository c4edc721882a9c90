"""
Exception hierarchy for jsonmark.

Every error raised by the package derives from `JSONMarkError`. Registry
errors live in `registry_exceptions`, codec errors in `codec_exceptions`;
both are re-exported here so callers can catch them from one place.

Hierarchy:
    JSONMarkError
    ├── RegistryError
    │   ├── RegistryDuplicateError
    │   │   └── DuplicateIdentifierError
    │   ├── RegistryLookupError (KeyError)
    │   ├── RegistryFrozenError (RuntimeError)
    │   └── InvalidIdentifierError (ValueError)
    └── CodecError
        ├── CodecConfigurationError (ValueError)
        │   └── InvalidMarkerError
        ├── CodecEncodeError
        │   ├── TypeEncodeError
        │   ├── UnsupportedValueError (TypeError)
        │   └── CircularReferenceError (ValueError)
        └── CodecDecodeError
            ├── MalformedPayloadError (ValueError)
            └── UnknownTypeError (LookupError)

Malformed JSON text is not wrapped: `json.JSONDecodeError` propagates as-is.
"""
from .base import JSONMarkError
from .registry_exceptions import (
    RegistryError,
    RegistryDuplicateError,
    RegistryLookupError,
    RegistryFrozenError,
    InvalidIdentifierError,
    DuplicateIdentifierError,
)
from .codec_exceptions import (
    CodecError,
    CodecConfigurationError,
    InvalidMarkerError,
    CodecEncodeError,
    TypeEncodeError,
    UnsupportedValueError,
    CircularReferenceError,
    CodecDecodeError,
    MalformedPayloadError,
    UnknownTypeError,
)

__all__ = [
    # --- Core (./base.py) ---
    "JSONMarkError",

    # --- Registry ---
    "RegistryError", "RegistryDuplicateError", "RegistryLookupError", "RegistryFrozenError",
    "InvalidIdentifierError", "DuplicateIdentifierError",

    # --- Codec ---
    "CodecError", "CodecConfigurationError", "InvalidMarkerError",
    "CodecEncodeError", "TypeEncodeError", "UnsupportedValueError", "CircularReferenceError",
    "CodecDecodeError", "MalformedPayloadError", "UnknownTypeError",
]
