import hashlib
import hmac
import json
import time
from typing import Generator, Dict, Any

import pytest
from fastapi.testclient import TestClient

from checkout_server.app import create_app
from checkout_server.config import Settings

WEBHOOK_SECRET = "whsec_test_secret"
CLIENT_URL = "https://shop.example.test"

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)

@pytest.fixture
def settings() -> Settings:
    return Settings(
        stripe_secret_key="sk_test_123",
        stripe_webhook_secret=WEBHOOK_SECRET,
        client_url=CLIENT_URL,
        port=3000,
    )

@pytest.fixture
def app(settings):
    return create_app(settings)

@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c

def _sign_payload(payload: str, secret: str = WEBHOOK_SECRET, timestamp: int = None) -> str:
    """En-tête Stripe-Signature (schéma v1: HMAC-SHA256 de "<t>.<payload>")."""
    ts = int(timestamp if timestamp is not None else time.time())
    signature = hmac.new(secret.encode("utf-8"), f"{ts}.{payload}".encode("utf-8"), hashlib.sha256).hexdigest()
    return f"t={ts},v1={signature}"

def _make_event(event_type: str, obj: Dict[str, Any] = None) -> str:
    return json.dumps({
        "id": "evt_test_1",
        "object": "event",
        "type": event_type,
        "data": {"object": obj or {"id": "cs_test_123", "object": "checkout.session"}},
    })

@pytest.fixture
def sign_payload():
    return _sign_payload

@pytest.fixture
def make_event():
    return _make_event
