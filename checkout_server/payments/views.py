import logging

from fastapi import APIRouter, Request, Depends, HTTPException
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, PlainTextResponse

from checkout_server.config import Settings, get_settings
from checkout_server.payments import cart as payments_cart
from checkout_server.payments import service as payments_service

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Payments"])

# module checkout_server.payments.views
@router.post("/create-checkout-session")
async def create_checkout_session(request: Request, settings: Settings = Depends(get_settings)):
    """
    Crée une session Checkout Stripe (abonnement) pour une liste de prix.
    - Entrée JSON: { "priceIds": ["price_...", ...] }
    - Palier de réduction appliqué automatiquement selon le nombre d'articles
    - Réponse: { "sessionId": "cs_...", "url": "https://checkout.stripe.com/..." }
    - Erreurs: 400 si priceIds absent/vide/pas une liste, 500 si Stripe échoue
    """
    try:
        body = await request.json()
    except ValueError:
        body = None
    try:
        price_ids = payments_cart.parse_price_ids(body)
    except HTTPException as e:
        logger.warning("create_checkout_session rejetée: %s", e.detail)
        raise

    try:
        # Appel SDK bloquant: exécuté hors de la boucle d'événements
        result = await run_in_threadpool(payments_service.create_checkout_session, price_ids, settings)
    except Exception as e:
        logger.exception("Error creating checkout session")
        return JSONResponse(status_code=500, content={"error": str(getattr(e, "user_message", None) or e)})
    return JSONResponse(result)


@router.post("/webhook", include_in_schema=False)
async def webhook_stripe(request: Request, settings: Settings = Depends(get_settings)):
    """
    Webhook Stripe: body brut + en-tête Stripe-Signature.
    - Signature invalide (ou secret absent): 400 texte, événement non traité
    - Signature valide: dispatch par type puis {"received": true}, même si le type est inconnu
    """
    payload = await request.body()
    sig_header = request.headers.get("stripe-signature")
    try:
        event = payments_service.verify_webhook(payload, sig_header, settings)
    except Exception as e:
        logger.exception("Webhook error")
        return PlainTextResponse(f"Webhook Error: {e}", status_code=400)

    # Authentifié: on acquitte toujours pour que Stripe ne relivre pas
    try:
        payments_service.handle_event(event)
    except Exception:
        logger.exception("Webhook handler failed type=%s", event.get("type"))
    return JSONResponse({"received": True})
