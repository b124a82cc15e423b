"""
Adaptateur Stripe: centralise les appels au SDK.
La clé secrète est passée explicitement à chaque appel (pas de stripe.api_key global).
"""
import stripe
from typing import Any, Dict, Optional

# module checkout_server.payments.stripe_client
def create_session(params: Dict[str, Any], *, api_key: str) -> Dict[str, Any]:
    """
    Crée une session Stripe Checkout.
    - params: voir payments.cart.build_session_params
    - api_key: STRIPE_SECRET_KEY issu des Settings
    Retour: {"id": "cs_test_...", "url": "https://checkout.stripe.com/..."}
    Les erreurs du SDK (réseau, prix inconnu, compte mal configuré) remontent telles quelles.
    """
    session = stripe.checkout.Session.create(api_key=api_key or None, **params)
    return {"id": session.id, "url": session.url}


def construct_event(payload: bytes, sig_header: Optional[str], secret: str):
    """
    Valide la signature Stripe-Signature du body brut et retourne l'événement.
    - Secret vide ou en-tête absent: rejet (jamais de parsing non signé).
    - Soulève stripe.SignatureVerificationError ou ValueError (JSON invalide).
    Retour: l'événement sous forme de dict.
    """
    if not secret:
        raise stripe.SignatureVerificationError("Webhook secret not configured", sig_header, payload)
    if not sig_header:
        raise stripe.SignatureVerificationError("Missing Stripe-Signature header", sig_header, payload)
    event = stripe.Webhook.construct_event(payload, sig_header, secret)
    return event.to_dict() if hasattr(event, "to_dict") else dict(event)
