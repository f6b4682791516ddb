"""Tests for the catalog configuration tables."""

import pytest

from shared.catalog import CATALOG, CATALOG_VERSION, Catalog, get_catalog
from shared.types import Brand, Category, SidebarState


class TestCategory:
    """Tests for Category records."""

    def test_rejects_non_slug_id(self) -> None:
        with pytest.raises(ValueError):
            Category(id="Smart Phones", name="Smartphones", icon="smartphone")

    def test_accepts_hyphenated_slug(self) -> None:
        assert Category(id="smart-home", name="Smart Home", icon="house").id == "smart-home"

    def test_is_immutable(self) -> None:
        category = Category(id="audio", name="Audio", icon="headphones")
        with pytest.raises(AttributeError):
            category.name = "Sound"

    def test_to_dict(self) -> None:
        category = Category(id="audio", name="Audio", icon="headphones")
        assert category.to_dict() == {"id": "audio", "name": "Audio", "icon": "headphones"}


class TestCatalog:
    """Tests for the Catalog table."""

    def test_fixed_categories(self) -> None:
        """The storefront ships six categories, smartphones first."""
        ids = [c.id for c in CATALOG.list_categories()]
        assert ids == ["smartphones", "laptops", "audio", "gaming", "accessories", "wearables"]

    def test_fixed_brands(self) -> None:
        names = [b.name for b in CATALOG.list_brands()]
        assert names[0] == "Apple"
        assert len(names) == len(set(names)) == 8

    def test_version(self) -> None:
        assert CATALOG.version == CATALOG_VERSION

    def test_get_category(self) -> None:
        assert CATALOG.get_category("gaming").icon == "gamepad"
        assert CATALOG.get_category("unknown") is None

    def test_duplicate_category_id_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate category"):
            Catalog.build(
                version="test",
                categories=[
                    Category(id="audio", name="Audio", icon="headphones"),
                    Category(id="audio", name="Sound", icon="speaker"),
                ],
                brands=[],
            )

    def test_duplicate_brand_name_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate brand"):
            Catalog.build(
                version="test",
                categories=[],
                brands=[Brand(name="HP", logo="a"), Brand(name="HP", logo="b")],
            )

    def test_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            CATALOG.categories["tablets"] = Category(id="tablets", name="Tablets", icon="tablet")

    def test_get_catalog_returns_active_table(self) -> None:
        assert get_catalog() is CATALOG


class TestSidebarState:
    """Tests for SidebarState."""

    def test_from_flag(self) -> None:
        assert SidebarState.from_flag(True) is SidebarState.collapsed
        assert SidebarState.from_flag(False) is SidebarState.expanded

    def test_json_value(self) -> None:
        assert SidebarState.collapsed.value == "collapsed"
