# jsonmark/registry/type_registry.py
"""
Type registry (ordered identifier -> JSONType).

Ordering
--------
Entries keep registration order. The encoder offers every value to the
definitions in that order and the first matching `test` wins. Overlapping
predicates are NOT detected; the order chosen by the caller is the contract.

Identifier rules
----------------
An identifier must be a non-empty `str` without whitespace or control
characters. It may not contain a forbidden fragment, nor end in a way that
lets the fragment start inside it (a codec forbids its delimiter, since the
identifier/payload split happens at the first delimiter: with ``"::"`` the
identifier ``"a:"`` would split as ``"a"``), may not be a reserved identifier (the escape identifier
``"string"``), and must satisfy `identifier_check` when one is configured,
e.g. `is_private_use_marker` for single-character private-use identifiers.

Public API
----------
    TypeRegistry.register(definition) -> None
    TypeRegistry.lookup(identifier) -> JSONType | None
    TypeRegistry.iterate() -> tuple[(identifier, JSONType), ...]
    TypeRegistry.forbid(*fragments) -> None
    TypeRegistry.copy() -> TypeRegistry
"""

from __future__ import annotations

import logging
import unicodedata
from typing import Any, Callable, Iterable

from .base import BaseRegistry
from ..constants import ESCAPE_IDENTIFIER
from ..exceptions.registry_exceptions import (
    DuplicateIdentifierError,
    InvalidIdentifierError,
    RegistryDuplicateError,
)
from ..types import JSONType

logger = logging.getLogger(__name__)

__all__ = ["TypeRegistry"]


class TypeRegistry(BaseRegistry[str, JSONType]):
    """Ordered registry of encodable types keyed by identifier."""

    def __init__(
        self,
        types: Iterable[JSONType] = (),
        *,
        identifier_check: Callable[[str], bool] | None = None,
        forbidden: Iterable[str] = (),
        reserved: Iterable[str] = (ESCAPE_IDENTIFIER,),
    ) -> None:
        super().__init__()
        self._identifier_check = identifier_check
        self._forbidden: tuple[str, ...] = tuple(dict.fromkeys(f for f in forbidden if f))
        self._reserved: frozenset[str] = frozenset(reserved)
        for definition in types:
            self.register(definition)

    # --- validation ---

    def validate_identifier(self, identifier: Any) -> str:
        """Return `identifier` if it is acceptable, else raise `InvalidIdentifierError`."""
        if not isinstance(identifier, str):
            raise InvalidIdentifierError(identifier, "identifier must be a str")
        if not identifier:
            raise InvalidIdentifierError(identifier, "identifier must not be empty")
        if identifier in self._reserved:
            raise InvalidIdentifierError(identifier, "identifier is reserved")
        for ch in identifier:
            if ch.isspace() or unicodedata.category(ch) == "Cc":
                raise InvalidIdentifierError(identifier, "whitespace and control characters are not allowed")
        for fragment in self._forbidden:
            _check_fragment(identifier, fragment)
        if self._identifier_check is not None and not self._identifier_check(identifier):
            raise InvalidIdentifierError(identifier, "identifier is outside the permitted identifier space")
        return identifier

    # --- registration ---

    def register(self, definition: JSONType) -> None:  # type: ignore[override]
        """
        Register an encodable type under its identifier.

        :raises InvalidIdentifierError: identifier outside the permitted space.
        :raises DuplicateIdentifierError: identifier already registered.
        :raises RegistryFrozenError: registry is frozen.
        """
        if not isinstance(definition, JSONType):
            raise TypeError(f"expected JSONType, got {type(definition).__name__}")
        identifier = self.validate_identifier(definition.identifier)
        try:
            self._register(identifier, definition)
        except RegistryDuplicateError as err:
            raise DuplicateIdentifierError(identifier) from err
        logger.debug("type.register identifier=%r position=%d", identifier, self.count())

    def forbid(self, *fragments: str) -> None:
        """Forbid `fragments` inside identifiers, including already registered ones."""
        with self._lock:
            added = tuple(f for f in fragments if f and f not in self._forbidden)
            for identifier in self._store:
                for fragment in added:
                    _check_fragment(identifier, fragment)
            self._forbidden += added

    # --- lookup / iteration ---

    def lookup(self, identifier: str) -> JSONType | None:
        """Exact-match lookup; `None` when the identifier is unknown."""
        return self.try_get(identifier)

    def iterate(self) -> tuple[tuple[str, JSONType], ...]:
        """Ordered `(identifier, definition)` pairs, in registration order."""
        return self.items()

    def copy(self) -> "TypeRegistry":
        """Return an unfrozen registry with the same entries and rules."""
        with self._lock:
            clone = TypeRegistry(
                identifier_check=self._identifier_check,
                forbidden=self._forbidden,
                reserved=self._reserved,
            )
            clone._store = dict(self._store)
        return clone


def _check_fragment(identifier: str, fragment: str) -> None:
    # The first occurrence of `fragment` after the identifier must be the one appended.
    if (identifier + fragment).find(fragment) != len(identifier):
        raise InvalidIdentifierError(identifier, f"identifier must not contain or run into {fragment!r}")
