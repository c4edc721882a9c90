# jsonmark/builtins.py
"""
Built-in encodable types.

Registered (in this order) into every codec created with
``include_builtins=True``:

    bigint      int outside +/- (2**53 - 1)       "-12345678901234567890"
    decimal     decimal.Decimal                   "3.14"
    bytes       bytes / bytearray / memoryview    base64 ("AQID")
    regexp      compiled str pattern              "source|flags"  (flags from "aimsx")
    NaN         float("nan")                      no payload
    Infinity    float("inf")                      no payload
    -Infinity   float("-inf")                     no payload
    array       array.array                       "typecode|base64", little-endian items

`bytes` always decodes to `bytes`; bytearray and memoryview inputs lose their
concrete type. Regex flags outside ``aimsx`` (e.g. ``re.LOCALE``) are not
representable and raise `TypeEncodeError` on encode.
"""

import base64
import binascii
import decimal
import math
import re
import sys
from array import array
from typing import Any

from .constants import MAX_SAFE_INTEGER
from .types import JSONType

__all__ = [
    "BIGINT",
    "DECIMAL",
    "BYTES",
    "REGEXP",
    "NAN",
    "INFINITY",
    "NEGATIVE_INFINITY",
    "ARRAY",
    "BUILTIN_IDENTIFIERS",
    "builtin_types",
]

_REGEX_FLAGS: dict[str, re.RegexFlag] = {
    "a": re.ASCII,
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
}
# Implied for every str pattern; never written to the payload.
_IMPLICIT_FLAGS = re.UNICODE

_BIG_ENDIAN = sys.byteorder == "big"


def _b64encode(data: Any) -> str:
    return base64.b64encode(bytes(data)).decode("ascii")


def _b64decode(payload: str) -> bytes:
    try:
        return base64.b64decode(payload.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as err:
        raise ValueError(f"invalid base64: {err}") from err


# --- bigint ---

def _is_bigint(value: Any) -> bool:
    return type(value) is not bool and isinstance(value, int) and abs(value) > MAX_SAFE_INTEGER


def _decode_bigint(payload: str) -> int:
    if not payload or not payload.lstrip("+-").isdigit():
        raise ValueError(f"not an integer: {payload!r}")
    return int(payload)


# --- regexp ---

def _is_str_pattern(value: Any) -> bool:
    return isinstance(value, re.Pattern) and isinstance(value.pattern, str)


def _encode_regexp(pattern: re.Pattern) -> str:
    remaining = pattern.flags & ~_IMPLICIT_FLAGS
    letters = []
    for letter, flag in _REGEX_FLAGS.items():
        if remaining & flag:
            letters.append(letter)
            remaining &= ~flag
    if remaining:
        raise ValueError(f"unsupported regex flags: {re.RegexFlag(remaining)!r}")
    return f"{pattern.pattern}|{''.join(letters)}"


def _decode_regexp(payload: str) -> re.Pattern:
    if "|" not in payload:
        raise ValueError("expected 'source|flags'")
    source, letters = payload.rsplit("|", 1)
    flags = 0
    for letter in letters:
        try:
            flags |= _REGEX_FLAGS[letter]
        except KeyError:
            raise ValueError(f"unknown regex flag {letter!r}") from None
    return re.compile(source, flags)


# --- non-finite floats ---

def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _is_pos_inf(value: Any) -> bool:
    return isinstance(value, float) and value == math.inf


def _is_neg_inf(value: Any) -> bool:
    return isinstance(value, float) and value == -math.inf


def _no_payload(value: Any) -> str:
    return ""


# --- typed arrays ---

def _encode_array(value: array) -> str:
    if _BIG_ENDIAN:
        value = array(value.typecode, value)
        value.byteswap()
    return f"{value.typecode}|{_b64encode(value.tobytes())}"


def _decode_array(payload: str) -> array:
    typecode, sep, data = payload.partition("|")
    if not sep:
        raise ValueError("expected 'typecode|base64'")
    result = array(typecode)
    result.frombytes(_b64decode(data))
    if _BIG_ENDIAN:
        result.byteswap()
    return result


BIGINT = JSONType("bigint", test=_is_bigint, decode=_decode_bigint)
DECIMAL = JSONType(
    "decimal",
    test=lambda value: isinstance(value, decimal.Decimal),
    decode=decimal.Decimal,
)
BYTES = JSONType(
    "bytes",
    test=lambda value: isinstance(value, (bytes, bytearray, memoryview)),
    encode=_b64encode,
    decode=_b64decode,
)
REGEXP = JSONType("regexp", test=_is_str_pattern, encode=_encode_regexp, decode=_decode_regexp)
NAN = JSONType("NaN", test=_is_nan, encode=_no_payload, decode=lambda payload: math.nan)
INFINITY = JSONType("Infinity", test=_is_pos_inf, encode=_no_payload, decode=lambda payload: math.inf)
NEGATIVE_INFINITY = JSONType("-Infinity", test=_is_neg_inf, encode=_no_payload, decode=lambda payload: -math.inf)
ARRAY = JSONType("array", test=lambda value: isinstance(value, array), encode=_encode_array, decode=_decode_array)

_BUILTINS: tuple[JSONType, ...] = (BIGINT, DECIMAL, BYTES, REGEXP, NAN, INFINITY, NEGATIVE_INFINITY, ARRAY)

BUILTIN_IDENTIFIERS: tuple[str, ...] = tuple(t.identifier for t in _BUILTINS)


def builtin_types() -> tuple[JSONType, ...]:
    """Built-in definitions in registration order."""
    return _BUILTINS
