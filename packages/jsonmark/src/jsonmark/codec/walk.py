# jsonmark/codec/walk.py
"""
Per-node visitor walks around the stdlib json module.

`json.dumps` only calls `default` for objects it cannot serialize and never
shows strings or integers to a hook, so the codec walks the document itself:

- `encode_tree` runs pre-order, like a JSON serializer's replacer: each node
  is offered to the marking transform first, then to the caller's replacer,
  and only then recursed into or checked as a JSON leaf.
- `decode_tree` runs post-order over an already parsed document, like a JSON
  reviver: children first, then the node itself.

Keys passed to replacers/revivers are ``""`` for the root, the member name for
object members and the integer index for array items. Returning `OMIT`
drops an object member; array slots become null.
"""

from __future__ import annotations

import math
from contextlib import contextmanager
from typing import Any, Callable, Iterator

from ..exceptions.codec_exceptions import CircularReferenceError, UnsupportedValueError

__all__ = ["OMIT", "Replacer", "Reviver", "encode_tree", "decode_tree"]


class _Omit:
    __slots__ = ()

    def __repr__(self) -> str:
        return "OMIT"

    def __reduce__(self) -> str:
        return "OMIT"


OMIT: Any = _Omit()

Replacer = Callable[[Any, Any], Any]
Reviver = Callable[[Any, Any], Any]


def _child_path(path: str, key: Any) -> str:
    if isinstance(key, int):
        return f"{path}[{key}]"
    return f"{path}.{key}"


def _is_json_leaf(value: Any) -> bool:
    if value is None or isinstance(value, (str, bool, int)):
        return True
    return isinstance(value, float) and math.isfinite(value)


def encode_tree(
    value: Any,
    visit: Callable[[Any], Any],
    replacer: Replacer | None = None,
    default: Callable[[Any], Any] | None = None,
) -> Any:
    """Return a JSON-native copy of `value` with custom values marked.

    :raises UnsupportedValueError: a leaf is neither JSON-native nor handled by
        `visit`, `replacer` or `default`.
    :raises CircularReferenceError: a container contains itself.
    """
    active: set[int] = set()

    @contextmanager
    def entered(node: Any, path: str) -> Iterator[None]:
        ident = id(node)
        if ident in active:
            raise CircularReferenceError(path)
        active.add(ident)
        try:
            yield
        finally:
            active.discard(ident)

    def walk(key: Any, node: Any, path: str) -> Any:
        marked = visit(node)
        if marked is not node:
            return marked
        if replacer is not None:
            replaced = replacer(key, node)
            if replaced is OMIT:
                return OMIT
            if replaced is not node:
                # replacement values are offered to the transform once more
                marked = visit(replaced)
                if marked is not replaced:
                    return marked
            node = replaced

        if isinstance(node, dict):
            with entered(node, path):
                members = {}
                for k, v in node.items():
                    item = walk(k, v, _child_path(path, k))
                    if item is not OMIT:
                        members[k] = item
                return members
        if isinstance(node, (list, tuple)):
            with entered(node, path):
                items = []
                for i, v in enumerate(node):
                    item = walk(i, v, _child_path(path, i))
                    items.append(None if item is OMIT else item)
                return items
        if _is_json_leaf(node):
            return node
        if default is not None:
            replacement = default(node)
            if replacement is not node:
                return walk(key, replacement, path)
        raise UnsupportedValueError(node, path)

    result = walk("", value, "$")
    return None if result is OMIT else result


def decode_tree(
    value: Any,
    visit: Callable[[Any], Any],
    reviver: Reviver | None = None,
) -> Any:
    """Revive a parsed JSON document in place (post-order) and return it."""

    def walk(key: Any, node: Any) -> Any:
        if isinstance(node, dict):
            for k in list(node):
                item = walk(k, node[k])
                if item is OMIT:
                    del node[k]
                else:
                    node[k] = item
        elif isinstance(node, list):
            for i, child in enumerate(node):
                item = walk(i, child)
                node[i] = None if item is OMIT else item

        decoded = visit(node)
        if decoded is not node:
            return decoded
        if reviver is not None:
            return reviver(key, node)
        return node

    result = walk("", value)
    return None if result is OMIT else result
