"""API server configuration with support for environment variables and YAML files.

Configuration priority (highest to lowest):
1. Explicit kwargs passed to load_config()
2. Environment variables (STOREFRONT_*)
3. `api` section of the YAML config file
4. Default values
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from shared.config import load_layered, to_bool

DEFAULT_CORS_ORIGINS = [
    "http://localhost:8080",
    "http://localhost:5173",
    "https://brantecheshop.vercel.app",
]


@dataclass
class APIConfig:
    """API server configuration.

    Attributes:
        host: Server bind address (default: 0.0.0.0).
        port: Server port (default: 8000).
        debug: Enable debug mode and DEBUG logging (default: False).
        cors_origins: Origins allowed to call the JSON API.
    """

    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    cors_origins: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))


def load_config(
    config_file: str | Path | None = None,
    **overrides: Any,
) -> APIConfig:
    """Load API configuration with priority: overrides > env vars > yaml > defaults.

    Args:
        config_file: Optional path to YAML config file.
        **overrides: Direct config overrides (highest priority).

    Returns:
        APIConfig instance.

    Example:
        # From environment variables
        config = load_config()

        # From YAML file
        config = load_config("storefront.config.yaml")

        # For local development
        config = load_config(host="127.0.0.1", debug=True)
    """
    env_mapping = {
        "host": "STOREFRONT_HOST",
        "port": "STOREFRONT_PORT",
        "debug": "STOREFRONT_DEBUG",
        "cors_origins": "STOREFRONT_CORS_ORIGINS",
    }
    config = load_layered("api", env_mapping, config_file, overrides)

    # Type conversions
    if "port" in config:
        config["port"] = int(config["port"])
    if "debug" in config:
        config["debug"] = to_bool(config["debug"])
    if isinstance(config.get("cors_origins"), str):
        config["cors_origins"] = [
            origin.strip() for origin in config["cors_origins"].split(",") if origin.strip()
        ]

    return APIConfig(**config)
