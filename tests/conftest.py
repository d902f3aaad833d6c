import os
import pytest
from typing import Any, Dict, Generator, List
from fastapi.testclient import TestClient

# Pas de Redis en tests: le lifespan désactive fastapi-limiter
os.environ.setdefault("DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS", "1")

from backend.app_setup.factory import create_app

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)

# Neutralise la nécessité d’une vraie clé Stripe (vérifiée au démarrage)
@pytest.fixture(autouse=True)
def _stripe_secret(monkeypatch):
    monkeypatch.setattr("backend.config.STRIPE_SECRET_KEY", "sk_test_dummy")
    monkeypatch.setattr("backend.config.DOMAIN", "https://gym.example.test")

@pytest.fixture()
def app():
    return create_app()

@pytest.fixture()
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c

@pytest.fixture()
def stripe_calls(monkeypatch) -> List[Dict[str, Any]]:
    """
    Remplace l’appel Stripe par un faux qui enregistre les paramètres
    et renvoie une session avec une URL fixe.
    """
    calls: List[Dict[str, Any]] = []

    def _fake_create_session(**kwargs):
        calls.append(kwargs)
        return {"id": f"cs_test_{len(calls)}", "url": f"https://checkout.stripe.test/cs_test_{len(calls)}"}

    monkeypatch.setattr("backend.payments.service.stripe_client.create_session", _fake_create_session)
    return calls

@pytest.fixture()
def booking_fields() -> Dict[str, Any]:
    return {
        "classId": "boxfit",
        "className": "BoxFit Fundamentals",
        "dateISO": "2025-03-14",
        "time": "18:30",
        "qty": 2,
        "email": "jo@example.com",
        "name": "Jo Bloggs",
    }
