"""Optional global adapter: route `json.dumps` / `json.loads` through a codec.

    import json
    import jsonmark

    jsonmark.install()
    json.dumps({"n": 2**64})      # '{"n": "<U+E000>bigint:18446744073709551616"}'
    jsonmark.uninstall()

Only the module attributes are replaced. Code that did ``from json import
dumps`` before `install()` keeps the original function. `json.dump` writes
through its own encoder and is not affected; `json.load` looks up
`json.loads` at call time and is.

While installed, the codec's ``ENSURE_ASCII`` option decides escaping;
`allow_nan`, `check_circular` and `cls` passed to `json.dumps` are ignored
because the codec always rejects cycles and never emits non-finite tokens.
"""

import json
import logging
from threading import Lock
from typing import Any

from ._json import original_json
from .codec import JSONMark
from .instance import get_default

logger = logging.getLogger(__name__)

_lock = Lock()
_installed: JSONMark | None = None


def _make_dumps(codec: JSONMark):
    def dumps(
        obj: Any,
        *,
        skipkeys: bool = False,
        ensure_ascii: bool = True,
        check_circular: bool = True,
        allow_nan: bool = True,
        cls: Any = None,
        indent: int | str | None = None,
        separators: tuple[str, str] | None = None,
        default: Any = None,
        sort_keys: bool = False,
        **kw: Any,
    ) -> str:
        ignored = {"check_circular": check_circular is not True, "allow_nan": allow_nan is not True, "cls": cls is not None}
        ignored.update(dict.fromkeys(kw, True))
        dropped = sorted(name for name, hit in ignored.items() if hit)
        if dropped:
            logger.debug("install.dumps ignoring keyword arguments: %s", ", ".join(dropped))
        return codec.stringify(
            obj,
            indent=indent,
            separators=separators,
            sort_keys=sort_keys,
            skipkeys=skipkeys,
            default=default,
        )

    dumps.__doc__ = original_json.dumps.__doc__
    dumps.__jsonmark_codec__ = codec
    return dumps


def _make_loads(codec: JSONMark):
    def loads(s: str | bytes | bytearray, **kw: Any) -> Any:
        return codec.parse(s, **{k: v for k, v in kw.items() if v is not None})

    loads.__doc__ = original_json.loads.__doc__
    loads.__jsonmark_codec__ = codec
    return loads


def install(codec: JSONMark | None = None) -> JSONMark:
    """Patch `json.dumps`/`json.loads` to use `codec` (the default codec if omitted).

    Installing the same codec again is a no-op; another codec replaces the patch.
    """
    global _installed
    codec = codec if codec is not None else get_default()
    with _lock:
        if _installed is codec:
            return codec
        json.dumps = _make_dumps(codec)
        json.loads = _make_loads(codec)
        replaced, _installed = _installed, codec
    logger.info("jsonmark installed codec=%r replaced=%s", codec, replaced is not None)
    return codec


def uninstall() -> None:
    """Restore the original `json.dumps`/`json.loads`; safe when not installed."""
    global _installed
    with _lock:
        if _installed is None:
            return
        json.dumps = original_json.dumps
        json.loads = original_json.loads
        _installed = None
    logger.info("jsonmark uninstalled")


def is_installed() -> bool:
    return _installed is not None


def installed_codec() -> JSONMark | None:
    return _installed


__all__ = ["install", "uninstall", "is_installed", "installed_codec", "original_json"]
