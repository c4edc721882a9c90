# jsonmark/decorators.py
"""
Class decorator registering custom types (dual form).

Usage
-----
    @codec.type
    class Point:
        def __init__(self, x, y): ...

        def to_mark(self) -> str:
            return f"{self.x},{self.y}"

        @classmethod
        def from_mark(cls, payload: str) -> "Point":
            return cls(*map(int, payload.split(",")))

    @codec.type(identifier="pt")
    class ShortPoint(Point): ...

Contract
--------
- The decorated class must define ``from_mark(payload)`` (usually a
  classmethod); it becomes the type's decoder.
- ``to_mark()`` is optional; without it the payload is ``str(instance)``.
- The identifier defaults to the class name.
- The resulting `JSONType` is pinned on the class as ``__jsonmark_type__``.
- Instances are matched with ``isinstance``; subclasses registered later
  never win over an earlier registered base class.
"""

import logging
from typing import Any, Callable, Optional, TypeVar

from .registry import TypeRegistry
from .tracing import codec_span
from .types import JSONType

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=type)

__all__ = ("TypeDecorator",)


class TypeDecorator:
    """Callable decorator registering classes into a `TypeRegistry`."""

    decode_attr = "from_mark"
    encode_attr = "to_mark"

    def __init__(self, registry: TypeRegistry) -> None:
        self.registry = registry

    def __call__(
        self,
        _cls: Optional[T] = None,
        *,
        identifier: Optional[str] = None,
    ) -> T | Callable[[T], T]:
        """Support both forms:

            @decorator
            class Foo: ...

            @decorator(identifier="foo")
            class Foo: ...
        """

        def _apply(cls: T) -> T:
            definition = self.build(cls, identifier=identifier)
            with codec_span(
                "jsonmark.type.register",
                attributes={"jsonmark.identifier": definition.identifier, "jsonmark.class": cls.__qualname__},
            ):
                self.registry.register(definition)
            setattr(cls, "__jsonmark_type__", definition)
            logger.debug("type.decorated class=%s.%s identifier=%r", cls.__module__, cls.__qualname__, definition.identifier)
            return cls

        if _cls is not None:
            return _apply(_cls)
        return _apply

    def build(self, cls: type, *, identifier: Optional[str] = None) -> JSONType:
        """Derive a `JSONType` from the class protocol (``from_mark``/``to_mark``)."""
        if not isinstance(cls, type):
            raise TypeError(f"@type can only decorate classes, got {cls!r}")
        decode = getattr(cls, self.decode_attr, None)
        if not callable(decode):
            raise TypeError(
                f"{cls.__module__}.{cls.__qualname__} must define {self.decode_attr}(payload) to use @type"
            )
        encode: Callable[[Any], str] | None = None
        if callable(getattr(cls, self.encode_attr, None)):
            encode = getattr(cls, self.encode_attr)

        def test(value: Any) -> bool:
            return isinstance(value, cls)

        return JSONType(identifier=identifier or cls.__name__, test=test, decode=decode, encode=encode)
