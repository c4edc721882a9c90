# jsonmark/registry/base.py


import logging
from collections.abc import Mapping
from threading import RLock
from types import MappingProxyType
from typing import Any, Callable, Generic, Iterator, TypeVar

from asgiref.sync import sync_to_async

from ..exceptions.registry_exceptions import (
    RegistryDuplicateError,
    RegistryFrozenError,
    RegistryLookupError,
)

logger = logging.getLogger(__name__)

K = TypeVar("K")
T = TypeVar("T")


class BaseRegistry(Mapping, Generic[K, T]):
    """Insertion-ordered registry keyed by K storing values of T.

    All mutations and snapshots go through a re-entrant lock, so a registry
    may be populated from several threads. Reads during encode/decode should
    work on a `snapshot()` taken once per call rather than on the live store.
    """

    def __init__(self, *, coerce_key: Callable[[Any], K] | None = None) -> None:
        self._coerce: Callable[[Any], K] = coerce_key or (lambda key: key)
        self._lock = RLock()
        self._store: dict[K, T] = {}
        self._frozen = False

    def _register(self, key: K, value: T) -> None:
        """Internal: store `value` under an already coerced key."""
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError("Registry is frozen")
            if key in self._store:
                raise RegistryDuplicateError(f"Key already registered: {key!r}")
            self._store[key] = value

    # --- registration ---

    def register(self, key: Any, value: T) -> None:
        """
        Register `value` under `key`.

        :raises RegistryFrozenError: if the registry has been frozen.
        :raises RegistryDuplicateError: if `key` is already registered.
        """
        self._register(self._coerce(key), value)
        logger.debug("registry.register key=%r registry=%s", key, type(self).__name__)

    async def aregister(self, *args: Any, **kwargs: Any) -> None:
        """Asynchronously register; thin wrapper around `register`."""
        return await sync_to_async(self.register)(*args, **kwargs)

    def unregister(self, key: Any) -> T:
        """Remove and return the value registered under `key`."""
        k = self._coerce(key)
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError("Registry is frozen")
            try:
                return self._store.pop(k)
            except KeyError as err:
                raise RegistryLookupError(f"{k!r} is not registered") from err

    # --- retrieval ---

    def get(self, key: Any, default: Any = None) -> T | Any:
        """
        Return the value registered under `key`, or `default` when absent.

        Mirrors `Mapping.get`; use `[key]` or `require` for a raising lookup.
        """
        return self.try_get(key, default)

    def require(self, key: Any) -> T:
        """
        Return the value registered under `key`.

        :raises RegistryLookupError: if nothing is registered under `key`.
        """
        k = self._coerce(key)
        with self._lock:
            try:
                return self._store[k]
            except KeyError as err:
                raise RegistryLookupError(f"{key!r} not found or not registered") from err

    async def arequire(self, key: Any) -> T:
        """Async wrapper around `require`."""
        return await sync_to_async(self.require)(key)

    def try_get(self, key: Any, default: Any = None) -> T | Any:
        """Return the value for `key` or `default` without raising."""
        try:
            return self.require(key)
        except RegistryLookupError:
            return default

    async def atry_get(self, key: Any, default: Any = None) -> T | Any:
        """Async wrapper around `try_get`."""
        return await sync_to_async(self.try_get)(key, default)

    # --- Mapping protocol ---

    def __getitem__(self, key: Any) -> T:
        return self.require(key)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return self._coerce(key) in self._store

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __len__(self) -> int:
        return self.count()

    # --- enumeration (ordered snapshots) ---

    def count(self) -> int:
        """Count the registered entries."""
        with self._lock:
            return len(self._store)

    def keys(self) -> tuple[K, ...]:  # type: ignore[override]
        with self._lock:
            return tuple(self._store.keys())

    def values(self) -> tuple[T, ...]:  # type: ignore[override]
        with self._lock:
            return tuple(self._store.values())

    def items(self) -> tuple[tuple[K, T], ...]:  # type: ignore[override]
        with self._lock:
            return tuple(self._store.items())

    def snapshot(self) -> Mapping[K, T]:
        """Return a read-only, ordered copy of the current entries."""
        with self._lock:
            return MappingProxyType(dict(self._store))

    # --- mutation / control ---

    @property
    def frozen(self) -> bool:
        return self._frozen

    def clear(self) -> None:
        """
        Clear the registry if not frozen.
        """
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError("Registry is frozen")
            self._store.clear()

    def freeze(self) -> None:
        """
        Mark the registry as frozen (no further mutations).
        """
        with self._lock:
            self._frozen = True
        logger.debug("registry.freeze registry=%s entries=%d", type(self).__name__, self.count())

    async def afreeze(self) -> None:
        """
        Async: mark the registry as frozen (no further mutations).
        """
        return await sync_to_async(self.freeze)()

    def __repr__(self) -> str:
        state = " frozen" if self._frozen else ""
        return f"<{type(self).__name__}{state} keys={list(self.keys())!r}>"
