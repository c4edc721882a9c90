# jsonmark/codec/transform.py
"""Marking transform: one value <-> one marked string.

Wire format (embedded as an ordinary JSON string)::

    MARKER IDENTIFIER [DELIMITER PAYLOAD]

The delimiter is omitted when the payload is empty. Decoding splits at the
first delimiter, so payloads may contain the delimiter but identifiers may
not. Plain strings that already begin with the marker are escaped as
``MARKER "string" DELIMITER original`` before any registered type is
consulted, so no input string can be mistaken for a marked value.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..constants import (
    DEFAULT_DELIMITER,
    DEFAULT_MARKER,
    ESCAPE_IDENTIFIER,
    ON_UNKNOWN_KEEP,
    ON_UNKNOWN_POLICIES,
    ON_UNKNOWN_RAISE,
    PRIVATE_USE_END,
    PRIVATE_USE_START,
)
from ..exceptions.codec_exceptions import (
    InvalidMarkerError,
    MalformedPayloadError,
    TypeEncodeError,
    UnknownTypeError,
)
from ..types import JSONType

logger = logging.getLogger(__name__)

__all__ = [
    "MarkFormat",
    "encode_value",
    "decode_value",
    "is_private_use_marker",
    "starts_with_marker",
]


def is_private_use_marker(marker: str) -> bool:
    """True for a single character inside the BMP Private Use Area."""
    return isinstance(marker, str) and len(marker) == 1 and PRIVATE_USE_START <= marker <= PRIVATE_USE_END


def starts_with_marker(value: Any, marker: str = DEFAULT_MARKER) -> bool:
    return isinstance(value, str) and value.startswith(marker)


@dataclass(frozen=True)
class MarkFormat:
    """Marker/delimiter pair that shapes every marked string."""

    marker: str = DEFAULT_MARKER
    delimiter: str = DEFAULT_DELIMITER

    def __post_init__(self) -> None:
        if not isinstance(self.marker, str) or not self.marker:
            raise InvalidMarkerError(f"marker must be a non-empty str (got {self.marker!r})")
        if not isinstance(self.delimiter, str) or not self.delimiter:
            raise InvalidMarkerError(f"delimiter must be a non-empty str (got {self.delimiter!r})")
        if self.marker == self.delimiter:
            raise InvalidMarkerError(f"marker and delimiter must differ (both {self.marker!r})")

    def mark(self, identifier: str, payload: str = "") -> str:
        if payload:
            return f"{self.marker}{identifier}{self.delimiter}{payload}"
        return f"{self.marker}{identifier}"

    def escape(self, text: str) -> str:
        return self.mark(ESCAPE_IDENTIFIER, text)

    def is_marked(self, value: Any) -> bool:
        return starts_with_marker(value, self.marker)

    def split(self, text: str) -> tuple[str, str] | None:
        """Return ``(identifier, payload)`` for a marked string, else None."""
        if not self.is_marked(text):
            return None
        body = text[len(self.marker):]
        index = body.find(self.delimiter)
        if index > 0:
            return body[:index], body[index + len(self.delimiter):]
        return body, ""


def encode_value(value: Any, types: Mapping[str, JSONType], fmt: MarkFormat) -> Any:
    """Encode one value.

    Returns the marked string when `value` is an escaped string or matches a
    registered type, otherwise `value` itself (the caller then applies the
    default JSON handling).
    """
    if isinstance(value, str) and value.startswith(fmt.marker):
        return fmt.escape(value)

    for identifier, definition in types.items():
        if not definition.matches(value):
            continue
        try:
            payload = definition.to_payload(value)
        except Exception as err:
            raise TypeEncodeError(identifier, str(err)) from err
        return fmt.mark(identifier, payload)

    return value


def decode_value(
    value: Any,
    types: Mapping[str, JSONType],
    fmt: MarkFormat,
    *,
    on_unknown: str = ON_UNKNOWN_KEEP,
) -> Any:
    """Decode one value.

    Non-strings and unmarked strings come back unchanged. A marked string whose
    identifier is unknown comes back unchanged under ``on_unknown="keep"``
    and raises `UnknownTypeError` under ``on_unknown="raise"``.

    :raises MalformedPayloadError: the registered decoder rejected the payload.
    """
    parts = fmt.split(value)
    if parts is None:
        return value
    identifier, payload = parts

    if identifier == ESCAPE_IDENTIFIER:
        return payload

    definition = types.get(identifier)
    if definition is None:
        if on_unknown == ON_UNKNOWN_RAISE:
            raise UnknownTypeError(identifier)
        if on_unknown not in ON_UNKNOWN_POLICIES:
            raise ValueError(f"unknown on_unknown policy {on_unknown!r}")
        logger.debug("decode.unknown_identifier identifier=%r kept as literal", identifier)
        return value

    try:
        return definition.from_payload(payload)
    except Exception as err:
        raise MalformedPayloadError(identifier, payload, str(err) or type(err).__name__) from err
