"""Admin shell: collapsible sidebar layout with routed content."""

from .config import AdminConfig, get_admin_config, load_config
from .layout import (
    AdminShellLayout,
    HeadEffect,
    LayoutFrame,
    LayoutNotMounted,
)
from .outlet import ContentRouter, Route, ViewNotFound
from .pages import build_content_router
from .sidebar import MENU_ITEMS, NavItem, Sidebar
from .views import router

__all__ = [
    # Configuration
    "AdminConfig",
    "get_admin_config",
    "load_config",
    # Layout
    "AdminShellLayout",
    "HeadEffect",
    "LayoutFrame",
    "LayoutNotMounted",
    # Collaborators
    "ContentRouter",
    "Route",
    "ViewNotFound",
    "Sidebar",
    "NavItem",
    "MENU_ITEMS",
    "build_content_router",
    # Application
    "router",
]
