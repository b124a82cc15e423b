"""
Dispatch des événements Stripe déjà authentifiés.

Aucun type d'événement ne déclenche d'action métier pour l'instant: les
handlers enregistrés se contentent de journaliser. register_event_handler
est le point d'extension pour brancher un traitement (ex: accès client).
"""
import logging
from typing import Any, Callable, Dict

logger = logging.getLogger(__name__)

EventHandler = Callable[[Dict[str, Any]], None]

CHECKOUT_SESSION_COMPLETED = "checkout.session.completed"
SUBSCRIPTION_CREATED = "customer.subscription.created"


def _event_object(event: Dict[str, Any]) -> Dict[str, Any]:
    return ((event or {}).get("data") or {}).get("object") or {}


def on_checkout_session_completed(event: Dict[str, Any]) -> None:
    session = _event_object(event)
    logger.info("Checkout session completed: id=%s customer=%s", session.get("id"), session.get("customer"))


def on_subscription_created(event: Dict[str, Any]) -> None:
    subscription = _event_object(event)
    logger.info("Subscription created: id=%s status=%s", subscription.get("id"), subscription.get("status"))


_HANDLERS: Dict[str, EventHandler] = {
    CHECKOUT_SESSION_COMPLETED: on_checkout_session_completed,
    SUBSCRIPTION_CREATED: on_subscription_created,
}


def register_event_handler(event_type: str, handler: EventHandler) -> None:
    """Ajoute ou remplace le handler d'un type d'événement."""
    _HANDLERS[event_type] = handler


def dispatch_event(event: Dict[str, Any]) -> bool:
    """
    Appelle le handler du type déclaré par l'événement.
    Retourne True si le type est reconnu, False sinon (journalisé comme non géré).
    """
    event_type = (event or {}).get("type")
    handler = _HANDLERS.get(event_type)
    if handler is None:
        logger.info("Unhandled event type %s", event_type)
        return False
    handler(event)
    return True
