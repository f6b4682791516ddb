"""Shared configuration utilities for the storefront API and admin shell.

Both components read from a single config file: `storefront.config.yaml`,
discovered from the working directory upward.

Configuration priority (highest to lowest):
1. Explicit kwargs passed to load functions
2. Environment variables (STOREFRONT_*)
3. storefront.config.yaml section
4. Default values

Example storefront.config.yaml:
```yaml
api:
  port: 8000
  debug: false
  cors_origins:
    - http://localhost:5173

admin:
  page_title: Admin Dashboard - Brantech Electronics
  narrow_offset: ml-16
```
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

CONFIG_FILENAME = "storefront.config.yaml"

TRUTHY = ("true", "1", "yes")


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Find storefront.config.yaml by searching from start_path up to root.

    Args:
        start_path: Directory to start search from (default: cwd).

    Returns:
        Path to config file if found, None otherwise.
    """
    current = Path(start_path) if start_path else Path.cwd()

    for parent in [current, *current.parents]:
        config_path = parent / CONFIG_FILENAME
        if config_path.exists():
            return config_path

    return None


def load_yaml_file(config_file: str | Path) -> dict[str, Any]:
    """Load a YAML file, returning an empty dict if it doesn't exist."""
    path = Path(config_file)
    if not path.exists():
        return {}

    with open(path) as f:
        return yaml.safe_load(f) or {}


def get_section(config: dict[str, Any], section: str) -> dict[str, Any]:
    """Extract a section ('api' or 'admin') from a config dict."""
    return config.get(section, {}) if isinstance(config.get(section), dict) else {}


def load_layered(
    section: str,
    env_mapping: Mapping[str, str],
    config_file: str | Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Merge one config section from YAML, environment and explicit overrides.

    Type conversion is left to the caller since only it knows its fields.

    Args:
        section: Section name inside the YAML file.
        env_mapping: Field name -> environment variable name.
        config_file: Explicit YAML path. When omitted, storefront.config.yaml
            is discovered from the working directory.
        overrides: Direct overrides (highest priority). None values are ignored.

    Returns:
        Raw field dict, not yet converted.
    """
    config: dict[str, Any] = {}

    path = Path(config_file) if config_file else find_config_file()
    if path is not None:
        config.update(get_section(load_yaml_file(path), section))

    for key, env_var in env_mapping.items():
        if env_val := os.getenv(env_var):
            config[key] = env_val

    if overrides:
        config.update({k: v for k, v in overrides.items() if v is not None})

    return config


def to_bool(value: Any) -> bool:
    """Coerce a config value that may arrive as a string from the environment."""
    return value if isinstance(value, bool) else str(value).lower() in TRUTHY
