"""
Cas d'usage 'payments': orchestre cart, discounts, stripe_client et webhooks.
"""
import logging
from typing import Any, Dict, List, Optional

from checkout_server.config import Settings
from . import cart
from . import stripe_client
from . import webhooks
from .discounts import resolve_coupon

logger = logging.getLogger(__name__)


def create_checkout_session(price_ids: List[str], settings: Settings) -> Dict[str, Any]:
    """
    Prépare les paramètres (palier inclus) puis délègue la création à Stripe.
    Retour: {"sessionId": ..., "url": ...}
    """
    coupon_id = resolve_coupon(len(price_ids))
    params = cart.build_session_params(
        price_ids,
        success_url=settings.success_url,
        cancel_url=settings.cancel_url,
        coupon_id=coupon_id,
    )
    logger.info("payments.checkout items=%s coupon=%s", len(price_ids), coupon_id)
    session = stripe_client.create_session(params, api_key=settings.stripe_secret_key)
    return {"sessionId": session.get("id"), "url": session.get("url")}


def verify_webhook(payload: bytes, sig_header: Optional[str], settings: Settings) -> Dict[str, Any]:
    """
    Vérifie la signature et retourne l'événement.
    Les erreurs de vérification remontent à la vue (400, rien n'est traité).
    """
    event = stripe_client.construct_event(payload, sig_header, settings.stripe_webhook_secret)
    logger.info("payments.webhook event=%s type=%s", event.get("id"), event.get("type"))
    return event


def handle_event(event: Dict[str, Any]) -> bool:
    """Dispatch d'un événement authentifié; True si le type est reconnu."""
    return webhooks.dispatch_event(event)
