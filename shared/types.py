"""Shared type definitions for the storefront API and admin shell.

Enums inherit from both `str` and `Enum` so they serialize to JSON directly,
and records are frozen dataclasses since the catalog is static configuration.
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


class SidebarState(str, Enum):
    """Width state of the admin sidebar.

    Lifecycle: expanded <-> collapsed (toggled by the sidebar only)
    """

    expanded = "expanded"
    collapsed = "collapsed"

    @classmethod
    def from_flag(cls, collapsed: bool) -> SidebarState:
        return cls.collapsed if collapsed else cls.expanded


@dataclass(frozen=True)
class Category:
    """A storefront product category.

    Attributes:
        id: Lowercase slug, unique within the catalog.
        name: Display name.
        icon: Icon identifier used by the UI.
    """

    id: str
    name: str
    icon: str

    def __post_init__(self) -> None:
        if not SLUG_PATTERN.match(self.id):
            raise ValueError(f"Category id must be a lowercase slug: {self.id!r}")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Brand:
    """A brand carried by the store."""

    name: str
    logo: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
