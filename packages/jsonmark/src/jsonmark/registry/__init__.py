# jsonmark/registry/__init__.py
from .base import BaseRegistry
from .type_registry import TypeRegistry

__all__ = (
    "BaseRegistry",
    "TypeRegistry",
)
