"""Tests for admin page routes."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from admin.config import AdminConfig, get_admin_config
from admin.views import router


@pytest.fixture
def client():
    """Create a test client serving only the admin pages."""
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_admin_config] = lambda: AdminConfig()

    with TestClient(app) as c:
        yield c


class TestAdminShellPage:
    """Tests for the rendered shell."""

    def test_dashboard_renders_expanded(self, client):
        """First load shows the expanded sidebar and wide inset."""
        response = client.get("/admin")
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        body = response.text
        assert 'data-sidebar="expanded"' in body
        assert "ml-64" in body
        assert "ml-16" not in body

    def test_title_declared_once(self, client):
        """The page head carries exactly one title."""
        for state in ("expanded", "collapsed"):
            body = client.get("/admin", params={"sidebar": state}).text
            assert body.count("<title>") == 1
            assert "<title>Admin Dashboard - Brantech Electronics</title>" in body

    def test_collapsed_request_uses_narrow_inset(self, client):
        """Requesting the collapsed chrome toggles once before rendering."""
        body = client.get("/admin/orders", params={"sidebar": "collapsed"}).text
        assert 'data-sidebar="collapsed"' in body
        assert "ml-16" in body
        assert 'href="/admin/orders?sidebar=expanded"' in body

    def test_state_not_shared_between_requests(self, client):
        """Each request mounts its own layout."""
        client.get("/admin", params={"sidebar": "collapsed"})
        body = client.get("/admin").text
        assert 'data-sidebar="expanded"' in body

    def test_dashboard_shows_catalog_counts(self, client):
        body = client.get("/admin").text
        assert '<p class="text-3xl font-bold" id="category-count">6</p>' in body
        assert '<p class="text-3xl font-bold" id="brand-count">8</p>' in body

    def test_invalid_sidebar_value_rejected(self, client):
        response = client.get("/admin", params={"sidebar": "sideways"})
        assert response.status_code == 422


class TestAdminChildPages:
    """Tests for routed child views."""

    @pytest.mark.parametrize(
        "path,marker",
        [
            ("/admin/categories", 'data-category="smartphones"'),
            ("/admin/brands", 'data-brand="Lenovo"'),
            ("/admin/products", "Browse by category"),
            ("/admin/orders", "No orders have been placed yet."),
            ("/admin/customers", "No customers have registered yet."),
            ("/admin/analytics", "Analytics will appear"),
            ("/admin/settings", "ml-16</dd>"),
        ],
    )
    def test_child_view_rendered_in_shell(self, client, path, marker):
        response = client.get(path)
        assert response.status_code == 200
        assert marker in response.text
        assert "<aside" in response.text

    def test_unknown_child_returns_404(self, client):
        response = client.get("/admin/nowhere")
        assert response.status_code == 404
        assert "No admin page at /admin/nowhere." in response.text

    def test_config_title_used(self, client):
        client.app.dependency_overrides[get_admin_config] = lambda: AdminConfig(
            page_title="Back Office"
        )
        body = client.get("/admin").text
        assert "<title>Back Office</title>" in body
