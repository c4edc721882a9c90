# jsonmark/exceptions/registry_exceptions.py
"""Registry exceptions"""
from .base import JSONMarkError


# ----------------------------------------------------------------------------
# Registry errors
# ----------------------------------------------------------------------------
class RegistryError(JSONMarkError): ...


class RegistryDuplicateError(RegistryError): ...


class RegistryLookupError(RegistryError, KeyError):
    def __str__(self) -> str:
        # KeyError repr()s its argument; keep the plain message instead.
        return str(self.args[0]) if self.args else ""


class RegistryFrozenError(RuntimeError, RegistryError): ...


# ----------------------------------------------------------------------------
# Type registry errors
# ----------------------------------------------------------------------------
class InvalidIdentifierError(RegistryError, ValueError):
    """Identifier falls outside the permitted identifier space."""

    def __init__(self, identifier: object, reason: str) -> None:
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Invalid type identifier {identifier!r}: {reason}")


class DuplicateIdentifierError(RegistryDuplicateError):
    """Identifier is already registered in this registry."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"JSON value type with identifier {identifier!r} already registered")
