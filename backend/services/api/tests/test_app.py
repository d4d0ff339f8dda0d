"""Tests for service-level endpoints, error envelopes and settings."""

from types import SimpleNamespace

import pytest
from starlette.requests import Request

from backend.shared.config.settings import get_settings, load_settings, reset_settings
from backend.services.api.src.middleware.metrics import _endpoint_label


def _routed_request(path, route_path):
    scope = {
        "type": "http",
        "method": "GET",
        "scheme": "http",
        "server": ("testserver", 80),
        "root_path": "",
        "path": path,
        "query_string": b"",
        "headers": [],
    }
    if route_path is not None:
        scope["route"] = SimpleNamespace(path=route_path)
    return Request(scope)


class TestEndpointLabel:
    """Tests for the route template used as the metrics label."""

    @pytest.mark.parametrize("path,route_path,expected", [
        ("/api/vehicles", "/api/vehicles", "/api/vehicles"),
        ("/api/vehicles", "/vehicles", "/api/vehicles"),
        ("/api/vehicles", "", "/api/vehicles"),
        ("/api/vehicles/42", "/api/vehicles/{vehicle_id}", "/api/vehicles/{vehicle_id}"),
        ("/api/vehicles/42", "/vehicles/{vehicle_id}", "/api/vehicles/{vehicle_id}"),
        ("/api/vehicles/42", "/{vehicle_id}", "/api/vehicles/{vehicle_id}"),
        ("/api/materials/7/availability", "/materials/{material_id}/availability",
         "/api/materials/{material_id}/availability"),
        ("/health", "/health", "/health"),
        ("/", "/", "/"),
    ])
    def test_full_template_regardless_of_router_nesting(self, path, route_path, expected):
        assert _endpoint_label(_routed_request(path, route_path)) == expected

    def test_unmatched(self):
        assert _endpoint_label(_routed_request("/api/boats", None)) == "unmatched"


class TestServiceEndpoints:
    """Tests for health, liveness, metrics and unknown routes."""

    def test_health_reports_database(self, client):
        body = client.get("/health").json()

        assert body["status"] == "ok"
        assert body["dependencies"]["database"]["status"] == "ok"

    def test_live(self, client):
        assert client.get("/live").json() == {"success": True, "status": "alive"}

    def test_metrics_exposition(self, client):
        client.get("/api/vehicles")

        response = client.get("/metrics")

        assert response.status_code == 200
        assert "marketplace_api_request_count" in response.text
        assert 'endpoint="/api/vehicles"' in response.text

    def test_metrics_label_item_route_template(self, client):
        client.get("/api/vehicles/987654")

        text = client.get("/metrics").text

        assert 'endpoint="/api/vehicles/{vehicle_id}"' in text

    def test_unknown_route_uses_envelope(self, client):
        response = client.get("/api/boats")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Not Found"}


class TestSettings:
    """Tests for settings loading."""

    def test_defaults(self, tmp_path):
        settings = load_settings(str(tmp_path / "missing.yaml"))

        assert settings.api.api_prefix == "/api"
        assert settings.catalog.categories_include_unavailable is True

    def test_yaml_file(self, tmp_path):
        config_file = tmp_path / "staging.yaml"
        config_file.write_text(
            "environment: staging\n"
            "catalog:\n"
            "  categories_include_unavailable: false\n"
            "api:\n"
            "  allow_origins: https://a.example, https://b.example\n"
        )

        settings = load_settings(str(config_file))

        assert settings.environment == "staging"
        assert settings.catalog.categories_include_unavailable is False
        assert settings.api.allow_origins == ["https://a.example", "https://b.example"]

    def test_nested_environment_variable(self, tmp_path, monkeypatch):
        monkeypatch.setenv("APP_CATALOG__CATEGORIES_INCLUDE_UNAVAILABLE", "false")
        monkeypatch.setenv("APP_AUTH__ACCESS_TOKEN_EXPIRE_MINUTES", "15")

        settings = load_settings(str(tmp_path / "missing.yaml"))

        assert settings.catalog.categories_include_unavailable is False
        assert settings.auth.access_token_expire_minutes == 15

    def test_reset_reloads_cached_settings(self):
        first = get_settings()

        reset_settings()

        assert get_settings() is not first
        assert get_settings() is get_settings()
