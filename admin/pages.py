"""Child views rendered inside the admin shell's content region."""

from __future__ import annotations

from shared.catalog import Catalog

from .config import AdminConfig
from .outlet import ContentRouter, Route
from .templating import render_partial

# Sections with no backing data yet render an empty state
EMPTY_SECTIONS = {
    "orders": ("Orders", "No orders have been placed yet."),
    "customers": ("Customers", "No customers have registered yet."),
    "analytics": ("Analytics", "Analytics will appear once orders come in."),
}


def build_content_router(catalog: Catalog, config: AdminConfig) -> ContentRouter:
    """Register every admin child view against the given catalog and config."""
    outlet = ContentRouter()

    @outlet.view("")
    def dashboard(route: Route) -> str:
        return render_partial(
            "dashboard.html",
            version=catalog.version,
            category_count=len(catalog.categories),
            brand_count=len(catalog.brands),
        )

    @outlet.view("products")
    def products(route: Route) -> str:
        return render_partial(
            "products.html",
            categories=catalog.list_categories(),
            brands=catalog.list_brands(),
        )

    @outlet.view("categories")
    def categories(route: Route) -> str:
        return render_partial("categories.html", categories=catalog.list_categories())

    @outlet.view("brands")
    def brands(route: Route) -> str:
        return render_partial("brands.html", brands=catalog.list_brands())

    @outlet.view("settings")
    def settings(route: Route) -> str:
        return render_partial("settings.html", config=config, version=catalog.version)

    for path, (heading, message) in EMPTY_SECTIONS.items():
        outlet.register(path, _empty_section(heading, message))

    return outlet


def _empty_section(heading: str, message: str):
    def view(route: Route) -> str:
        return render_partial("empty.html", heading=heading, message=message)

    return view
