"""Admin shell configuration with support for environment variables and YAML files.

Configuration priority (highest to lowest):
1. Explicit kwargs passed to load_config()
2. Environment variables (STOREFRONT_ADMIN_*)
3. `admin` section of the YAML config file
4. Default values
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

from shared.config import load_layered

DEFAULT_PAGE_TITLE = "Admin Dashboard - Brantech Electronics"


@dataclass
class AdminConfig:
    """Admin shell configuration.

    Attributes:
        page_title: Document title declared once per layout mount.
        wide_offset: Content inset class while the sidebar is expanded.
        narrow_offset: Content inset class while the sidebar is collapsed.
        store_url: Target of the sidebar's "Back to Store" link.
    """

    page_title: str = DEFAULT_PAGE_TITLE
    wide_offset: str = "ml-64"
    narrow_offset: str = "ml-16"
    store_url: str = "/"


def load_config(
    config_file: str | Path | None = None,
    **overrides: Any,
) -> AdminConfig:
    """Load admin configuration with priority: overrides > env vars > yaml > defaults.

    Args:
        config_file: Optional path to YAML config file.
        **overrides: Direct config overrides (highest priority).

    Returns:
        AdminConfig instance.
    """
    env_mapping = {
        "page_title": "STOREFRONT_ADMIN_PAGE_TITLE",
        "wide_offset": "STOREFRONT_ADMIN_WIDE_OFFSET",
        "narrow_offset": "STOREFRONT_ADMIN_NARROW_OFFSET",
        "store_url": "STOREFRONT_ADMIN_STORE_URL",
    }
    config = load_layered("admin", env_mapping, config_file, overrides)
    return AdminConfig(**{k: str(v) for k, v in config.items()})


@lru_cache
def get_admin_config() -> AdminConfig:
    """Process-wide admin config (FastAPI dependency)."""
    return load_config()
