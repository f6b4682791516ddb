"""Shared types, catalog configuration and config helpers for the storefront."""

from .catalog import CATALOG, CATALOG_VERSION, Catalog, get_catalog
from .types import Brand, Category, SidebarState

__all__ = [
    "Brand",
    "Category",
    "SidebarState",
    "Catalog",
    "CATALOG",
    "CATALOG_VERSION",
    "get_catalog",
]
