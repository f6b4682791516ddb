"""FastAPI route handlers for the admin pages.

Each page request mounts a fresh AdminShellLayout, so the collapse state
never leaks between requests. When the request asks for the collapsed
chrome, the sidebar dispatches a single toggle before rendering.
"""

from __future__ import annotations

import logging
from typing import Literal

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse

from shared.catalog import Catalog, get_catalog

from .config import AdminConfig, get_admin_config
from .layout import AdminShellLayout
from .outlet import ADMIN_PREFIX, Route, ViewNotFound
from .pages import build_content_router
from .sidebar import Sidebar
from .templating import templates

logger = logging.getLogger(__name__)

router = APIRouter(prefix=ADMIN_PREFIX)


SidebarParam = Literal["expanded", "collapsed"]


@router.get("", response_class=HTMLResponse)
@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def admin_index(
    request: Request,
    sidebar: SidebarParam = Query("expanded"),
    catalog: Catalog = Depends(get_catalog),
    config: AdminConfig = Depends(get_admin_config),
) -> HTMLResponse:
    """Render the dashboard inside the shell."""
    return _render_page(request, Route(), sidebar, catalog, config)


@router.get("/{child:path}", response_class=HTMLResponse)
async def admin_page(
    request: Request,
    child: str,
    sidebar: SidebarParam = Query("expanded"),
    catalog: Catalog = Depends(get_catalog),
    config: AdminConfig = Depends(get_admin_config),
) -> HTMLResponse:
    """Render an admin child page inside the shell.

    Args:
        request: Incoming request
        child: Child path under /admin
        sidebar: Requested sidebar state for this page load
        catalog: Catalog configuration (injected)
        config: Admin shell configuration (injected)

    Returns:
        The full HTML document, or a 404 page when no child view matches.
    """
    route = Route(path=child, query=dict(request.query_params))
    return _render_page(request, route, sidebar, catalog, config)


def _render_page(
    request: Request,
    route: Route,
    sidebar: SidebarParam,
    catalog: Catalog,
    config: AdminConfig,
) -> HTMLResponse:
    nav = Sidebar(route.full_path, store_url=config.store_url)
    layout = AdminShellLayout.from_config(
        config,
        sidebar=nav,
        content=build_content_router(catalog, config),
    )

    layout.mount()
    try:
        if sidebar == "collapsed":
            nav.click_toggle(layout.toggle)
        frame = layout.render(route)
    except ViewNotFound:
        logger.info("Admin page not found: %s", route.full_path)
        return templates.TemplateResponse(
            request,
            "not_found.html",
            {"path": route.full_path},
            status_code=404,
        )
    finally:
        layout.unmount()

    return templates.TemplateResponse(request, "shell.html", {"frame": frame})
