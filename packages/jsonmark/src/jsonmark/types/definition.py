# jsonmark/types/definition.py
"""Encodable-type definitions.

A `JSONType` describes one value kind JSON cannot carry natively:

- `identifier` names the type inside a marked string;
- `test(value)` decides whether a runtime value belongs to the type;
- `encode(value)` produces the payload embedded after the identifier
  (defaults to ``str(value)``);
- `decode(payload)` rebuilds the value from that payload.

Definitions are immutable. Registries evaluate `test` in registration order
and the first match wins, so overlapping predicates are resolved purely by
the order in which the caller registered them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

__all__ = ["JSONType", "json_type"]


@dataclass(frozen=True)
class JSONType(Generic[T]):
    """Immutable encodable-type definition (identifier, test, decode, encode)."""

    identifier: str
    test: Callable[[Any], bool]
    decode: Callable[[str], T]
    encode: Callable[[T], str] | None = None

    def matches(self, value: Any) -> bool:
        return bool(self.test(value))

    def to_payload(self, value: T) -> str:
        """Encode `value` to its payload string.

        Raises `TypeError` when the encoder produces anything but a `str`.
        """
        payload = (self.encode or str)(value)
        if not isinstance(payload, str):
            raise TypeError(f"payload must be str, got {type(payload).__name__}")
        return payload

    def from_payload(self, payload: str) -> T:
        return self.decode(payload)

    def __repr__(self) -> str:
        return f"JSONType({self.identifier!r})"


def json_type(
    identifier: str,
    *,
    decode: Callable[[str], T],
    test: Callable[[Any], bool] | None = None,
    cls: type | tuple[type, ...] | None = None,
    encode: Callable[[T], str] | None = None,
) -> JSONType[T]:
    """Build a `JSONType`.

    Either `test` or `cls` must be given; `cls` derives an ``isinstance`` test.

        point_type = json_type(
            "Point",
            cls=Point,
            encode=lambda p: f"{p.x},{p.y}",
            decode=lambda s: Point(*map(int, s.split(","))),
        )
    """
    if test is None and cls is None:
        raise TypeError("json_type() requires either 'test' or 'cls'")
    if test is not None and cls is not None:
        raise TypeError("json_type() accepts 'test' or 'cls', not both")
    if test is None:
        kinds = cls

        def test(value: Any) -> bool:
            return isinstance(value, kinds)

    return JSONType(identifier=identifier, test=test, decode=decode, encode=encode)
