"""Navigation sidebar for the admin shell."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .outlet import ADMIN_PREFIX
from .templating import render_partial

logger = logging.getLogger(__name__)

# Query parameter carrying the sidebar state between page loads
SIDEBAR_PARAM = "sidebar"


@dataclass(frozen=True)
class NavItem:
    """A sidebar menu entry. `icon` is a lucide icon name."""

    label: str
    path: str
    icon: str


MENU_ITEMS: tuple[NavItem, ...] = (
    NavItem("Dashboard", ADMIN_PREFIX, "layout-dashboard"),
    NavItem("Products", f"{ADMIN_PREFIX}/products", "package"),
    NavItem("Categories", f"{ADMIN_PREFIX}/categories", "tags"),
    NavItem("Brands", f"{ADMIN_PREFIX}/brands", "award"),
    NavItem("Orders", f"{ADMIN_PREFIX}/orders", "shopping-cart"),
    NavItem("Customers", f"{ADMIN_PREFIX}/customers", "users"),
    NavItem("Analytics", f"{ADMIN_PREFIX}/analytics", "bar-chart-3"),
    NavItem("Settings", f"{ADMIN_PREFIX}/settings", "settings"),
)


class Sidebar:
    """Sidebar collaborator of AdminShellLayout.

    Called with `(collapsed, on_toggle)` it renders the menu. Labels and the
    brand are hidden while collapsed, and the item whose path equals the
    current path is marked active. Links carry the sidebar state so the
    chrome survives navigation; the toggle control links to the opposite
    state.
    """

    def __init__(
        self,
        current_path: str,
        items: Sequence[NavItem] = MENU_ITEMS,
        store_url: str = "/",
    ) -> None:
        self._current_path = current_path.rstrip("/") or "/"
        self._items = tuple(items)
        self._store_url = store_url

    @property
    def items(self) -> tuple[NavItem, ...]:
        return self._items

    def is_active(self, item: NavItem) -> bool:
        return self._current_path == item.path

    def href(self, path: str, collapsed: bool) -> str:
        return f"{path}?{SIDEBAR_PARAM}=collapsed" if collapsed else path

    def toggle_href(self, collapsed: bool) -> str:
        target = "expanded" if collapsed else "collapsed"
        return f"{self._current_path}?{SIDEBAR_PARAM}={target}"

    def click_toggle(self, on_toggle: Callable[[], None]) -> None:
        """Handle a click on the toggle control."""
        logger.debug("Sidebar toggle clicked on %s", self._current_path)
        on_toggle()

    def __call__(self, collapsed: bool, on_toggle: Callable[[], None]) -> str:
        links = [
            {
                "label": item.label,
                "icon": item.icon,
                "href": self.href(item.path, collapsed),
                "active": self.is_active(item),
            }
            for item in self._items
        ]
        return render_partial(
            "sidebar.html",
            collapsed=collapsed,
            links=links,
            toggle_href=self.toggle_href(collapsed),
            store_url=self._store_url,
        )
