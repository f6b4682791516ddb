"""Routed content outlet for the admin shell.

The layout never decides which child page to show. It hands a `Route` to a
`ContentRouter`, which looks up the registered view for the child path and
returns its markup.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

ADMIN_PREFIX = "/admin"


@dataclass(frozen=True)
class Route:
    """Routing context for one admin page request.

    Attributes:
        path: Child path relative to the admin prefix ("" for the index).
        query: Query parameters of the request.
    """

    path: str = ""
    query: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", self.path.strip("/"))

    @property
    def full_path(self) -> str:
        return f"{ADMIN_PREFIX}/{self.path}" if self.path else ADMIN_PREFIX


View = Callable[[Route], str]


class ViewNotFound(LookupError):
    """No child view is registered for the requested route."""

    def __init__(self, route: Route) -> None:
        super().__init__(f"No admin view for {route.full_path}")
        self.route = route


class ContentRouter:
    """Maps child paths to views and renders the matched one.

    Example:
        outlet = ContentRouter()

        @outlet.view("orders")
        def orders(route: Route) -> str:
            return "<h1>Orders</h1>"

        outlet(Route("orders"))
    """

    def __init__(self) -> None:
        self._views: dict[str, View] = {}

    @property
    def paths(self) -> list[str]:
        return list(self._views)

    def register(self, path: str, view: View) -> None:
        key = path.strip("/")
        if key in self._views:
            raise ValueError(f"View already registered for {key!r}")
        self._views[key] = view

    def view(self, path: str) -> Callable[[View], View]:
        """Decorator form of register()."""

        def decorator(func: View) -> View:
            self.register(path, func)
            return func

        return decorator

    def matches(self, route: Route) -> bool:
        return route.path in self._views

    def resolve(self, route: Route) -> str:
        """Render the child view registered for route.path.

        Raises:
            ViewNotFound: If no view is registered for the path.
        """
        view = self._views.get(route.path)
        if view is None:
            logger.debug("Unresolved admin route %s", route.full_path)
            raise ViewNotFound(route)
        return view(route)

    __call__ = resolve
