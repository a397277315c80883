"""YAML Configuration Loader

This module loads defaults.yaml and provides access functions.
It has no dependencies on other config modules to avoid circular imports.

Usage:
    from blockgrid.config.yaml_loader import get_default, get_defaults
    n_blocks = get_default('axis.n_blocks')
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml


def _get_yaml_path() -> Path:
    """Get the path to defaults.yaml.

    The YAML file is searched for in the following order:
    1. Environment variable BLOCKGRID_DEFAULTS_PATH
    2. defaults.yaml relative to this module's directory

    Raises:
        FileNotFoundError: If defaults.yaml cannot be found.
    """
    env_path = os.getenv("BLOCKGRID_DEFAULTS_PATH")
    if env_path and Path(env_path).exists():
        return Path(env_path)

    yaml_path = Path(__file__).parent / "defaults.yaml"
    if not yaml_path.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {yaml_path}\n"
            f"Set BLOCKGRID_DEFAULTS_PATH environment variable if file is relocated."
        )
    return yaml_path


def load_yaml(path: str | Path) -> dict[str, Any]:
    """Load a YAML mapping from disk.

    Raises:
        ValueError: If the document is not a mapping.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at top level of {path}, got {type(data).__name__}")
    return data


# Cache the loaded configuration
_CONFIG_CACHE: dict[str, Any] | None = None


def _get_config() -> dict[str, Any]:
    """Get the cached configuration, loading if necessary."""
    global _CONFIG_CACHE
    if _CONFIG_CACHE is None:
        _CONFIG_CACHE = load_yaml(_get_yaml_path())
    return _CONFIG_CACHE


def get_defaults() -> dict[str, Any]:
    """Get the full configuration dictionary from defaults.yaml.

    Example:
        >>> cfg = get_defaults()
        >>> cfg['mesh']['cells_per_block']
        16
    """
    return _get_config().copy()


def get_default(key_path: str, default: Any = None) -> Any:
    """Get a configuration value by dotted key path from defaults.yaml.

    Args:
        key_path: Dotted path to the value (e.g., 'axis.n_blocks')
        default: Default value if key is not found

    Example:
        >>> get_default('axis.end')
        1.0
        >>> get_default('nonexistent.key', 'fallback')
        'fallback'
    """
    value = _get_config()
    for key in key_path.split("."):
        if isinstance(value, dict):
            value = value.get(key)
            if value is None:
                return default
        else:
            return default
    return value if value is not None else default


def reload_defaults() -> None:
    """Reload defaults.yaml from disk."""
    global _CONFIG_CACHE
    _CONFIG_CACHE = load_yaml(_get_yaml_path())
