"""Versioned catalog configuration: the fixed category and brand tables.

The storefront has no datastore. Categories and brands are configuration,
published as a `Catalog` keyed by id/name so a persistent backend can replace
`get_catalog()` without touching the API layer.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .types import Brand, Category

CATALOG_VERSION = "2024.1"


def _index(items: Iterable, key: str, kind: str) -> Mapping:
    table: dict = {}
    for item in items:
        k = getattr(item, key)
        if k in table:
            raise ValueError(f"Duplicate {kind} {key}: {k!r}")
        table[k] = item
    return MappingProxyType(table)


@dataclass(frozen=True)
class Catalog:
    """Immutable catalog table.

    Insertion order of the source lists is preserved, so listings are stable.

    Attributes:
        version: Configuration version string.
        categories: Category id -> Category.
        brands: Brand name -> Brand.
    """

    version: str
    categories: Mapping[str, Category] = field(default_factory=dict)
    brands: Mapping[str, Brand] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        version: str,
        categories: Iterable[Category],
        brands: Iterable[Brand],
    ) -> Catalog:
        """Build a catalog, rejecting duplicate category ids or brand names."""
        return cls(
            version=version,
            categories=_index(categories, "id", "category"),
            brands=_index(brands, "name", "brand"),
        )

    def list_categories(self) -> list[Category]:
        return list(self.categories.values())

    def list_brands(self) -> list[Brand]:
        return list(self.brands.values())

    def get_category(self, category_id: str) -> Category | None:
        return self.categories.get(category_id)


CATALOG = Catalog.build(
    version=CATALOG_VERSION,
    categories=[
        Category(id="smartphones", name="Smartphones", icon="smartphone"),
        Category(id="laptops", name="Laptops", icon="laptop"),
        Category(id="audio", name="Audio", icon="headphones"),
        Category(id="gaming", name="Gaming", icon="gamepad"),
        Category(id="accessories", name="Accessories", icon="cable"),
        Category(id="wearables", name="Wearables", icon="watch"),
    ],
    brands=[
        Brand(name="Apple", logo="🍎"),
        Brand(name="Samsung", logo="📱"),
        Brand(name="Sony", logo="🎮"),
        Brand(name="Dell", logo="💻"),
        Brand(name="HP", logo="🖥️"),
        Brand(name="Lenovo", logo="⌨️"),
        Brand(name="Asus", logo="🎯"),
        Brand(name="Microsoft", logo="🪟"),
    ],
)


def get_catalog() -> Catalog:
    """Return the active catalog (FastAPI dependency)."""
    return CATALOG
