"""Layered codec settings.

Lookup order, first hit wins:

1. values set directly on the `Settings` object (``settings["MARKER"] = "="``);
2. layers passed to the constructor, in order;
3. `DEFAULTS`.

`Settings.from_environ()` fills the top layer from the environment: the
module named by ``JSONMARK_CONFIG_MODULE`` (its ``JSONMARK_*`` names) and
then individual ``JSONMARK_<KEY>`` variables for the keys in `DEFAULTS`.
"""


import importlib
import logging
import os
from collections import ChainMap
from typing import Any, Iterator, Mapping, MutableMapping

from .defaults import DEFAULTS

logger = logging.getLogger(__name__)

ENV_PREFIX = "JSONMARK"
CONFIG_MODULE_ENVVAR = f"{ENV_PREFIX}_CONFIG_MODULE"

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


class Settings(MutableMapping[str, Any]):
    """Layered settings with defaults and optional overlays."""

    def __init__(self, *layers: Mapping[str, Any]) -> None:
        self._storage = ChainMap({}, *(dict(layer) for layer in layers), dict(DEFAULTS))

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from a config module and ``JSONMARK_*`` variables."""
        environ = os.environ if environ is None else environ
        settings = cls()
        module_name = environ.get(CONFIG_MODULE_ENVVAR)
        if module_name:
            settings.update_from_object(module_name, namespace=ENV_PREFIX)
        settings.update_from_envvars(environ)
        return settings

    # Mapping protocol -------------------------------------------------
    def __getitem__(self, key: str) -> Any:
        return self._storage[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._storage.maps[0][key] = value

    def __delitem__(self, key: str) -> None:
        del self._storage.maps[0][key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._storage)

    def __len__(self) -> int:
        return len(self._storage)

    # Helpers ----------------------------------------------------------
    def update_from_object(self, obj: str, *, namespace: str | None = None) -> None:
        module = importlib.import_module(obj)
        self.update_from_mapping(vars(module), namespace=namespace)

    def update_from_mapping(self, mapping: Mapping[str, Any], *, namespace: str | None = None) -> None:
        self._storage.maps[0].update(_filter_by_namespace(mapping, namespace))

    def update_from_envvars(self, environ: Mapping[str, str]) -> None:
        """Apply ``JSONMARK_<KEY>`` variables for every key known to DEFAULTS."""
        for key, default in DEFAULTS.items():
            raw = environ.get(f"{ENV_PREFIX}_{key}")
            if raw is None:
                continue
            self[key] = _coerce(key, raw, default)
            logger.debug("settings.env key=%s", key)

    def as_dict(self) -> dict[str, Any]:
        return dict(self._storage)


def _coerce(key: str, raw: str, default: Any) -> Any:
    if not isinstance(default, bool):
        return raw
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"{ENV_PREFIX}_{key} must be a boolean (got {raw!r})")


def _filter_by_namespace(mapping: Mapping[str, Any], namespace: str | None) -> dict[str, Any]:
    if namespace is None:
        return {k: v for k, v in mapping.items() if k.isupper()}

    prefix = f"{namespace}_"
    return {k[len(prefix):]: v for k, v in mapping.items() if k.startswith(prefix) and k.isupper()}
