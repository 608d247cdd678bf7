"""Loading of the YAML configuration file."""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "showdeps_config.yaml"

DEFAULTS: Dict[str, Any] = {
    "resolver": {
        "backend": "go",
        "go_command": "go",
        "index_path": None,
    },
    "defaults": {
        "no_test_deps": False,
        "all": False,
        "stdlib": False,
        "from": False,
        "files": False,
    },
    "log_level": "WARNING",
}

BACKENDS = {"go", "index"}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration, merging the YAML file over the built-in defaults.

    Args:
        config_path: Explicit config file. If omitted, the bundled
            config/showdeps_config.yaml is used when present.

    Returns:
        The merged configuration dictionary.

    Raises:
        ConfigError: if an explicit path does not exist, the YAML is
            malformed, or the resolver backend is unknown.
    """
    if config_path is None:
        path = DEFAULT_CONFIG_PATH
        if not path.exists():
            return copy.deepcopy(DEFAULTS)
    else:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Configuration file not found at {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Cannot parse configuration file {path}: {e}") from e
    if not isinstance(loaded, dict):
        raise ConfigError(f"Configuration file {path} must contain a mapping")

    config = _merge(DEFAULTS, loaded)
    backend = (config.get("resolver") or {}).get("backend")
    if backend not in BACKENDS:
        raise ConfigError(f"Unsupported resolver backend '{backend}'. Supported: {', '.join(sorted(BACKENDS))}")
    logger.debug("Loaded configuration from %s", path)
    return config
