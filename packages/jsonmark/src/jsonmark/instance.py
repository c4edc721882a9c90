"""Process-wide default codec.

The default `JSONMark` is built lazily on first use from `Settings.from_environ()`,
so importing jsonmark never reads configuration. ``push_default`` swaps the
codec for a block (per context, via a ``ContextVar``), which keeps tests and
request handlers from leaking registrations into each other.

The module-level `stringify`, `parse`, `prepare` and `restore` always go to
the codec that is current at call time.
"""
from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from threading import Lock
from typing import Any, Generator

from .codec import JSONMark

_current: ContextVar[JSONMark | None] = ContextVar("jsonmark_current_codec", default=None)
_default: JSONMark | None = None
_default_lock = Lock()


def get_default() -> JSONMark:
    """Return the current codec, creating the process default if needed."""
    codec = _current.get()
    if codec is not None:
        return codec
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = JSONMark()
    return _default


def set_default(codec: JSONMark | None) -> None:
    """Replace the process default; ``None`` rebuilds it lazily on next use."""
    global _default
    with _default_lock:
        _default = codec


@contextmanager
def push_default(codec: JSONMark) -> Generator[JSONMark, None, None]:
    token = _current.set(codec)
    try:
        yield codec
    finally:
        _current.reset(token)


def stringify(value: Any, *args: Any, **kwargs: Any) -> str:
    return get_default().stringify(value, *args, **kwargs)


def parse(text: str | bytes | bytearray, *args: Any, **kwargs: Any) -> Any:
    return get_default().parse(text, *args, **kwargs)


def prepare(value: Any) -> Any:
    return get_default().prepare(value)


def restore(value: Any) -> Any:
    return get_default().restore(value)


def __getattr__(name: str) -> Any:
    # `jsonmark.instance.default` resolves lazily to the current codec.
    if name == "default":
        return get_default()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "get_default",
    "set_default",
    "push_default",
    "stringify",
    "parse",
    "prepare",
    "restore",
]
