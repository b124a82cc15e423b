import logging
from unittest.mock import patch

import pytest

from checkout_server.payments import webhooks


@pytest.fixture
def spy_handlers():
    """Remplace les handlers par des espions pour vérifier le dispatch."""
    calls = []
    saved = dict(webhooks._HANDLERS)
    for event_type in list(webhooks._HANDLERS):
        webhooks._HANDLERS[event_type] = lambda event, t=event_type: calls.append(t)
    yield calls
    webhooks._HANDLERS.clear()
    webhooks._HANDLERS.update(saved)


def test_webhook_valid_signature_known_type(client, sign_payload, make_event, spy_handlers):
    payload = make_event("checkout.session.completed")
    resp = client.post("/webhook", content=payload, headers={"stripe-signature": sign_payload(payload)})
    assert resp.status_code == 200
    assert resp.json() == {"received": True}
    assert spy_handlers == ["checkout.session.completed"]


def test_webhook_subscription_created(client, sign_payload, make_event, spy_handlers):
    payload = make_event("customer.subscription.created", {"id": "sub_1", "object": "subscription"})
    resp = client.post("/webhook", content=payload, headers={"stripe-signature": sign_payload(payload)})
    assert resp.status_code == 200
    assert spy_handlers == ["customer.subscription.created"]


def test_webhook_unknown_type_acknowledged_and_logged(client, sign_payload, make_event, caplog):
    caplog.set_level(logging.INFO, logger="checkout_server.payments.webhooks")
    payload = make_event("invoice.payment_failed", {"id": "in_1", "object": "invoice"})
    resp = client.post("/webhook", content=payload, headers={"stripe-signature": sign_payload(payload)})
    assert resp.status_code == 200
    assert resp.json() == {"received": True}
    assert "Unhandled event type invoice.payment_failed" in caplog.text


def test_webhook_invalid_signature_returns_400(client, sign_payload, make_event, spy_handlers):
    payload = make_event("checkout.session.completed")
    bad = sign_payload(payload, secret="whsec_wrong")
    with patch("stripe.checkout.Session.create") as mock_create:
        resp = client.post("/webhook", content=payload, headers={"stripe-signature": bad})
    assert resp.status_code == 400
    assert resp.text.startswith("Webhook Error:")
    assert spy_handlers == []
    mock_create.assert_not_called()


def test_webhook_tampered_payload_returns_400(client, sign_payload, make_event, spy_handlers):
    payload = make_event("checkout.session.completed")
    header = sign_payload(payload)
    tampered = payload.replace("cs_test_123", "cs_test_999")
    resp = client.post("/webhook", content=tampered, headers={"stripe-signature": header})
    assert resp.status_code == 400
    assert spy_handlers == []


def test_webhook_missing_signature_returns_400(client, make_event, spy_handlers):
    resp = client.post("/webhook", content=make_event("checkout.session.completed"))
    assert resp.status_code == 400
    assert "Webhook Error" in resp.text
    assert spy_handlers == []


def test_webhook_malformed_signature_returns_400(client, make_event, spy_handlers):
    resp = client.post(
        "/webhook",
        content=make_event("checkout.session.completed"),
        headers={"stripe-signature": "garbage"},
    )
    assert resp.status_code == 400
    assert spy_handlers == []


def test_webhook_without_configured_secret_fails_closed(settings, sign_payload, make_event):
    from dataclasses import replace
    from fastapi.testclient import TestClient
    from checkout_server.app import create_app

    app = create_app(replace(settings, stripe_webhook_secret=""))
    payload = make_event("checkout.session.completed")
    # Signé avec une clé vide: ne doit jamais être accepté
    header = sign_payload(payload, secret="")
    with TestClient(app) as c:
        resp = c.post("/webhook", content=payload, headers={"stripe-signature": header})
    assert resp.status_code == 400


def test_webhook_handler_error_still_acknowledged(client, sign_payload, make_event):
    saved = dict(webhooks._HANDLERS)

    def boom(event):
        raise RuntimeError("handler failed")

    webhooks.register_event_handler("checkout.session.completed", boom)
    try:
        payload = make_event("checkout.session.completed")
        resp = client.post("/webhook", content=payload, headers={"stripe-signature": sign_payload(payload)})
    finally:
        webhooks._HANDLERS.clear()
        webhooks._HANDLERS.update(saved)
    assert resp.status_code == 200
    assert resp.json() == {"received": True}
