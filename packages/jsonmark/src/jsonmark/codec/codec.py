# jsonmark/codec/codec.py


import logging
from collections.abc import Mapping
from typing import Any, Callable, Iterable

from asgiref.sync import sync_to_async
from pydantic import ValidationError

from .transform import MarkFormat, decode_value, encode_value
from .walk import Replacer, Reviver, decode_tree, encode_tree
from .._json import original_json
from ..builtins import builtin_types
from ..conf import CodecOptions, Settings
from ..decorators import TypeDecorator
from ..exceptions.codec_exceptions import CodecConfigurationError, CodecEncodeError
from ..registry import TypeRegistry
from ..tracing import codec_span
from ..types import JSONType

logger = logging.getLogger(__name__)

__all__ = ["JSONMark"]


class JSONMark:
    """Tagged JSON codec.

    Produces standard JSON text in which values JSON cannot carry natively are
    replaced by marked strings, and parses such text back into those values.

    Responsibilities
    ----------------
    • Own (or borrow) a `TypeRegistry` and the marker/delimiter pair.
    • Walk documents, offering every node to the marking transform before the
      caller's replacer/reviver.
    • Delegate text handling to the unpatched stdlib `json` functions.

    Each call reads one snapshot of the registry, so registrations made while a
    call is running only affect later calls.
    """

    def __init__(
        self,
        *,
        marker: str | None = None,
        delimiter: str | None = None,
        types: Iterable[JSONType] = (),
        registry: TypeRegistry | None = None,
        include_builtins: bool | None = None,
        on_unknown: str | None = None,
        ensure_ascii: bool | None = None,
        settings: Mapping[str, Any] | None = None,
    ) -> None:
        try:
            if settings is None:
                settings = Settings.from_environ()
            self._options = CodecOptions.resolve(
                settings,
                marker=marker,
                delimiter=delimiter,
                on_unknown=on_unknown,
                ensure_ascii=ensure_ascii,
                include_builtins=include_builtins,
            )
        except ValidationError as err:
            raise CodecConfigurationError(f"Invalid codec options: {err}") from err
        except ValueError as err:
            raise CodecConfigurationError(str(err)) from err

        self._format = self._options.mark_format()

        if registry is None:
            registry = TypeRegistry(forbidden=(self._format.delimiter,))
            if self._options.include_builtins:
                for definition in builtin_types():
                    registry.register(definition)
        else:
            registry.forbid(self._format.delimiter)
        for definition in types:
            registry.register(definition)
        self._registry = registry

        # @codec.type / @codec.type(identifier="...")
        self.type = TypeDecorator(registry)

        logger.debug(
            "codec.init marker=%r delimiter=%r types=%d on_unknown=%s",
            self._format.marker,
            self._format.delimiter,
            registry.count(),
            self._options.on_unknown,
        )

    # ---- Properties -------------------------------------------------------
    @property
    def registry(self) -> TypeRegistry:
        return self._registry

    @property
    def format(self) -> MarkFormat:
        return self._format

    @property
    def options(self) -> CodecOptions:
        return self._options

    @property
    def marker(self) -> str:
        return self._format.marker

    @property
    def delimiter(self) -> str:
        return self._format.delimiter

    # ---- Registration -----------------------------------------------------
    def register_type(self, definition: JSONType) -> JSONType:
        """Register `definition` with this codec's registry and return it."""
        self._registry.register(definition)
        return definition

    async def aregister_type(self, definition: JSONType) -> JSONType:
        return await sync_to_async(self.register_type, thread_sensitive=False)(definition)

    # ---- Single values ----------------------------------------------------
    def encode_value(self, value: Any) -> Any:
        """Mark one value; unregistered values come back unchanged."""
        return encode_value(value, self._registry.snapshot(), self._format)

    def decode_value(self, value: Any) -> Any:
        """Unmark one value; unmarked values come back unchanged."""
        return decode_value(value, self._registry.snapshot(), self._format, on_unknown=self._options.on_unknown)

    # ---- Documents --------------------------------------------------------
    def stringify(
        self,
        value: Any,
        replacer: Replacer | None = None,
        indent: int | str | None = None,
        *,
        separators: tuple[str, str] | None = None,
        sort_keys: bool = False,
        skipkeys: bool = False,
        default: Callable[[Any], Any] | None = None,
    ) -> str:
        """
        Serialize `value` to tagged JSON text.

        `replacer(key, value)` sees every node after the marking transform
        declined it; return `OMIT` to drop an object member. `default` handles
        values that are neither JSON-native nor registered, as in `json.dumps`.

        :raises UnsupportedValueError: a value cannot be represented.
        :raises CircularReferenceError: the document contains a cycle.
        :raises TypeEncodeError: a registered encoder failed.
        """
        types = self._registry.snapshot()
        fmt = self._format
        with codec_span("jsonmark.stringify", attributes={"jsonmark.types": len(types)}):
            tree = encode_tree(
                value,
                lambda node: encode_value(node, types, fmt),
                replacer=replacer,
                default=default,
            )
            try:
                return original_json.dumps(
                    tree,
                    indent=indent,
                    separators=separators,
                    sort_keys=sort_keys,
                    skipkeys=skipkeys,
                    ensure_ascii=self._options.ensure_ascii,
                    allow_nan=False,
                )
            except (TypeError, ValueError) as err:
                raise CodecEncodeError(f"Failed to serialize document: {err}") from err

    def parse(self, text: str | bytes | bytearray, reviver: Reviver | None = None, **json_kwargs: Any) -> Any:
        """
        Parse tagged JSON text, decoding marked strings.

        Extra keyword arguments go to `json.loads` unchanged.

        :raises json.JSONDecodeError: `text` is not JSON.
        :raises MalformedPayloadError: a registered decoder rejected its payload.
        :raises UnknownTypeError: unknown identifier under ``on_unknown="raise"``.
        """
        types = self._registry.snapshot()
        fmt = self._format
        on_unknown = self._options.on_unknown
        with codec_span("jsonmark.parse", attributes={"jsonmark.types": len(types)}):
            document = original_json.loads(text, **json_kwargs)
            return decode_tree(
                document,
                lambda node: decode_value(node, types, fmt, on_unknown=on_unknown),
                reviver=reviver,
            )

    def prepare(self, value: Any) -> Any:
        """Return a plain JSON-compatible structure with custom values marked."""
        with codec_span("jsonmark.prepare"):
            return original_json.loads(self.stringify(value))

    def restore(self, value: Any) -> Any:
        """Inverse of `prepare`: decode every marked string in a plain structure."""
        with codec_span("jsonmark.restore"):
            return self.parse(original_json.dumps(value, ensure_ascii=False))

    # ---- Async wrappers ---------------------------------------------------
    async def astringify(self, value: Any, *args: Any, **kwargs: Any) -> str:
        return await sync_to_async(self.stringify, thread_sensitive=False)(value, *args, **kwargs)

    async def aparse(self, text: str | bytes | bytearray, *args: Any, **kwargs: Any) -> Any:
        return await sync_to_async(self.parse, thread_sensitive=False)(text, *args, **kwargs)

    async def aprepare(self, value: Any) -> Any:
        return await sync_to_async(self.prepare, thread_sensitive=False)(value)

    async def arestore(self, value: Any) -> Any:
        return await sync_to_async(self.restore, thread_sensitive=False)(value)

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} marker={self._format.marker!r} "
            f"delimiter={self._format.delimiter!r} types={list(self._registry.keys())!r}>"
        )
