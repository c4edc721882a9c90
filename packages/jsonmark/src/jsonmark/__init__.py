"""
jsonmark — extensible JSON codec with marked strings.

Values JSON cannot represent natively (big integers, bytes, regular
expressions, non-finite floats, typed arrays, decimals and application types)
are written as *marked strings*::

    MARKER IDENTIFIER [DELIMITER PAYLOAD]       e.g. "\\ue000bigint:12345678901234567890"

and turned back into values on parse. The output is ordinary JSON text.

Import Guidelines:
------------------
- `JSONMark` is the codec; build one per configuration.
- `stringify`, `parse`, `prepare`, `restore` use the process default codec
  (`jsonmark.instance`).
- `json_type` / `JSONType` define custom types; `codec.type` registers classes.
- `install()` / `uninstall()` patch `json.dumps` / `json.loads` (optional).
- `jsonmark.exceptions` holds the error hierarchy.
"""
from importlib.metadata import PackageNotFoundError, version

# codec first: conf.models imports codec.transform
from .codec import OMIT, JSONMark, MarkFormat, is_private_use_marker
from .conf import CodecOptions, Settings
from .builtins import BUILTIN_IDENTIFIERS, builtin_types
from .exceptions import (
    JSONMarkError,
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
    RegistryError,
    InvalidIdentifierError,
    DuplicateIdentifierError,
    RegistryFrozenError,
    RegistryLookupError,
)
from .instance import get_default, parse, prepare, push_default, restore, set_default, stringify
from .install import install, is_installed, original_json, uninstall
from .registry import TypeRegistry
from .types import JSONType, json_type

try:
    __version__ = version("jsonmark")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "JSONMark",
    "MarkFormat",
    "OMIT",
    "is_private_use_marker",
    "JSONType",
    "json_type",
    "TypeRegistry",
    "CodecOptions",
    "Settings",
    "BUILTIN_IDENTIFIERS",
    "builtin_types",
    "stringify",
    "parse",
    "prepare",
    "restore",
    "get_default",
    "set_default",
    "push_default",
    "install",
    "uninstall",
    "is_installed",
    "original_json",
    "JSONMarkError",
    "CodecError",
    "CodecConfigurationError",
    "InvalidMarkerError",
    "CodecEncodeError",
    "TypeEncodeError",
    "UnsupportedValueError",
    "CircularReferenceError",
    "CodecDecodeError",
    "MalformedPayloadError",
    "UnknownTypeError",
    "RegistryError",
    "InvalidIdentifierError",
    "DuplicateIdentifierError",
    "RegistryFrozenError",
    "RegistryLookupError",
]
