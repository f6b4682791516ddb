"""Tests for the routed content outlet."""

import pytest

from admin.outlet import ContentRouter, Route, ViewNotFound


class TestRoute:
    """Tests for Route."""

    def test_index_full_path(self) -> None:
        assert Route().full_path == "/admin"

    def test_strips_slashes(self) -> None:
        """Child paths are normalized without surrounding slashes."""
        route = Route("/orders/")
        assert route.path == "orders"
        assert route.full_path == "/admin/orders"


class TestContentRouter:
    """Tests for ContentRouter."""

    def test_resolves_registered_view(self) -> None:
        outlet = ContentRouter()
        outlet.register("orders", lambda route: "orders page")
        assert outlet.resolve(Route("orders")) == "orders page"

    def test_decorator_registration(self) -> None:
        outlet = ContentRouter()

        @outlet.view("")
        def index(route: Route) -> str:
            return "index"

        assert outlet(Route()) == "index"
        assert outlet.paths == [""]

    def test_unknown_path_raises(self) -> None:
        """Unregistered paths raise ViewNotFound carrying the route."""
        outlet = ContentRouter()
        with pytest.raises(ViewNotFound) as exc_info:
            outlet.resolve(Route("nope"))
        assert exc_info.value.route.full_path == "/admin/nope"

    def test_duplicate_registration_rejected(self) -> None:
        outlet = ContentRouter()
        outlet.register("orders", lambda route: "")
        with pytest.raises(ValueError):
            outlet.register("/orders", lambda route: "")

    def test_matches(self) -> None:
        outlet = ContentRouter()
        outlet.register("brands", lambda route: "")
        assert outlet.matches(Route("brands"))
        assert not outlet.matches(Route("orders"))
