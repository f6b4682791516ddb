"""Brantech storefront API backend."""

from .config import APIConfig, load_config
from .main import app, create_app
from .routes import router
from .schemas import (
    BrandListResponse,
    BrandSchema,
    CategoryListResponse,
    CategorySchema,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    # Configuration
    "APIConfig",
    "load_config",
    # Application
    "app",
    "create_app",
    "router",
    # Schemas
    "CategorySchema",
    "BrandSchema",
    "CategoryListResponse",
    "BrandListResponse",
    "ErrorResponse",
    "HealthResponse",
]
