"""
Module 'payments' (feature-first): point d'entrée public.
Réunit paliers de réduction, logique panier, client Stripe, dispatch webhook et services.
"""

from .discounts import COUPON_TIERS, resolve_coupon, discount_params
from .cart import parse_price_ids, to_line_items, build_session_params
from .stripe_client import create_session, construct_event
from .webhooks import register_event_handler, dispatch_event
from .service import create_checkout_session, verify_webhook, handle_event

__all__ = [
    # discounts
    "COUPON_TIERS",
    "resolve_coupon",
    "discount_params",
    # cart
    "parse_price_ids",
    "to_line_items",
    "build_session_params",
    # stripe
    "create_session",
    "construct_event",
    # webhooks
    "register_event_handler",
    "dispatch_event",
    # services
    "create_checkout_session",
    "verify_webhook",
    "handle_event",
]
