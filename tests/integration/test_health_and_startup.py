import pytest
from fastapi.testclient import TestClient

from backend.app_setup.factory import create_app
from backend.config import ConfigurationError


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    assert res.json() == {"ok": True}


def test_health_rate_limit_disabled_in_tests(client):
    res = client.get("/api/health/rate-limit")
    assert res.status_code == 200
    assert res.json()["enabled"] is False


def test_security_headers(client):
    res = client.get("/api/health")
    assert res.headers["X-Frame-Options"] == "DENY"
    assert "default-src 'self'" in res.headers["Content-Security-Policy"]


def test_cors_preflight_allows_frontend(client):
    res = client.options(
        "/api/create-checkout-session",
        headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "POST"},
    )
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == "http://localhost:3000"


def test_startup_refused_without_stripe_secret(monkeypatch):
    monkeypatch.setattr("backend.config.STRIPE_SECRET_KEY", "")
    with pytest.raises(ConfigurationError):
        with TestClient(create_app()):
            pass
