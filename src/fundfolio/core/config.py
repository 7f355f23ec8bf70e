"""
Layered configuration for FundFolio.

Three layers are merged, later ones winning:

    built-in defaults  <  config file (YAML or JSON)  <  FUNDFOLIO_* env vars

Usage:
    config = Config(config_file="~/.fundfolio/config.yaml")

    config.get("currency.default")     # "AUD"
    config.get("paths.storage_dir")    # <data_dir>/storage unless set
    settings = config.validated()      # typed FundFolioConfig

Derived paths (``storage_dir``, ``log_dir``) follow whatever ``data_dir``
ends up as after the merge, so pointing ``paths.data_dir`` somewhere else
in a config file moves the collections with it.
"""

from __future__ import annotations

import copy
import json
import os
from typing import TYPE_CHECKING, Any

import yaml

if TYPE_CHECKING:
    from .config_schema import FundFolioConfig

_DEFAULT_ENV_PREFIX = "FUNDFOLIO_"
_DEFAULT_DATA_DIR_NAME = ".fundfolio-data"

# Sub-directories of data_dir filled in when not configured explicitly.
_DERIVED_PATHS = {"storage_dir": "storage", "log_dir": "logs"}

_DEFAULTS: dict[str, Any] = {
    "paths": {
        "data_dir": None,
        "storage_dir": None,
        "log_dir": None,
    },
    "currency": {
        "default": "AUD",
        "fallback_rate": 1.0,
        "strict": False,
        "rates": {},
    },
    "bootstrap": {
        "sample_data": True,
    },
    "loans": {
        "allow_unresolved_link": False,
    },
    "logging": {
        "level": "WARNING",
        "file": None,
    },
}


def _merge(target: dict, source: dict) -> None:
    """Deep-merge *source* into *target*, section by section."""
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _merge(target[key], value)
        else:
            target[key] = value


def _read_file(path: str) -> dict[str, Any]:
    ext = os.path.splitext(path)[1].lower()
    with open(path) as f:
        if ext in (".yaml", ".yml"):
            return yaml.safe_load(f) or {}
        if ext == ".json":
            return json.load(f)
    return {}


class Config:
    """
    Merged view of defaults, a config file, and environment variables.

    Nested keys are spelled with ``__`` in env vars:
    ``FUNDFOLIO_LOANS__ALLOW_UNRESOLVED_LINK=true`` sets
    ``config["loans"]["allow_unresolved_link"]``. Env values stay strings;
    :meth:`validated` coerces them.
    """

    def __init__(
        self,
        config_file: str | None = None,
        env_prefix: str = _DEFAULT_ENV_PREFIX,
        data_dir: str | None = None,
        defaults: dict[str, Any] | None = None,
    ):
        """
        Args:
            config_file: YAML or JSON file. A missing file is not an error.
            env_prefix: Prefix for environment overrides. Empty disables them.
            data_dir: Default ``paths.data_dir`` (``~/.fundfolio-data``).
            defaults: Extra defaults merged over the built-in ones.
        """
        self.config_file = os.path.expanduser(config_file) if config_file else None
        self.env_prefix = env_prefix or ""
        self._data_dir = data_dir or os.path.join("~", _DEFAULT_DATA_DIR_NAME)
        self._extra_defaults = defaults or {}
        self.config_data: dict[str, Any] = {}
        self.reload()

    def reload(self) -> None:
        """Rebuild ``config_data`` from every layer."""
        data = copy.deepcopy(_DEFAULTS)
        data["paths"]["data_dir"] = self._data_dir
        _merge(data, self._extra_defaults)

        if self.config_file and os.path.exists(self.config_file):
            _merge(data, _read_file(self.config_file))

        self.config_data = data
        self._apply_env()
        self._resolve_paths()

    def _apply_env(self) -> None:
        if not self.env_prefix:
            return
        for name, value in os.environ.items():
            if name.startswith(self.env_prefix):
                key_path = name[len(self.env_prefix) :].lower().replace("__", ".")
                self.set(key_path, value)

    def _resolve_paths(self) -> None:
        paths = self.config_data.setdefault("paths", {})
        data_dir = os.path.expanduser(paths.get("data_dir") or self._data_dir)
        paths["data_dir"] = data_dir
        for key, subdir in _DERIVED_PATHS.items():
            if not paths.get(key):
                paths[key] = os.path.join(data_dir, subdir)

    def get(self, key_path: str, default: Any = None) -> Any:
        """Look up a dot-separated key such as ``"currency.default"``."""
        node: Any = self.config_data
        for part in key_path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def set(self, key_path: str, value: Any) -> None:
        """Assign a dot-separated key, creating sections as needed."""
        *sections, leaf = key_path.split(".")
        node = self.config_data
        for part in sections:
            node = node.setdefault(part, {})
        node[leaf] = value

    def get_data_dir(self) -> str:
        return os.path.expanduser(self.get("paths.data_dir", self._data_dir))

    def ensure_directories(self) -> None:
        """Create every configured directory under ``paths``."""
        for path_value in self.config_data.get("paths", {}).values():
            if isinstance(path_value, str):
                os.makedirs(os.path.expanduser(path_value), exist_ok=True)

    def validated(self) -> FundFolioConfig:
        """Return a typed, validated view of the merged configuration.

        Raises:
            ConfigurationError: if any section fails validation.
        """
        from pydantic import ValidationError as PydanticValidationError

        from .config_schema import FundFolioConfig
        from .exceptions import ConfigurationError

        try:
            return FundFolioConfig.model_validate(self.config_data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e


# Module-level singleton
_config_instance: Config | None = None


def get_config(
    config_file: str | None = None,
    env_prefix: str = _DEFAULT_ENV_PREFIX,
    data_dir: str | None = None,
) -> Config:
    """Get or create the process-wide Config."""
    global _config_instance
    if _config_instance is None:
        _config_instance = Config(config_file=config_file, env_prefix=env_prefix, data_dir=data_dir)
    return _config_instance


def reset_config() -> None:
    """Drop the process-wide Config (tests use this)."""
    global _config_instance
    _config_instance = None
