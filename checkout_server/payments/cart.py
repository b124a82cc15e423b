"""
Logique panier pure (pas d'appel Stripe): validation du corps de requête
et construction des paramètres de session Checkout.
"""
from typing import Any, Dict, List, Optional
from fastapi import HTTPException

from .discounts import discount_params

PRICE_IDS_REQUIRED = "priceIds array is required"

# module checkout_server.payments.cart
def parse_price_ids(body: Any) -> List[str]:
    """
    Extrait la liste priceIds du corps JSON.
    - Soulève HTTPException(400) si le corps n'est pas un objet, si la clé est
      absente, si la valeur n'est pas une liste ou si la liste est vide.
    - Les identifiants restent opaques: aucune vérification de format.
    """
    price_ids = body.get("priceIds") if isinstance(body, dict) else None
    if not isinstance(price_ids, list) or not price_ids:
        raise HTTPException(status_code=400, detail=PRICE_IDS_REQUIRED)
    return price_ids


def to_line_items(price_ids: List[str]) -> List[Dict[str, Any]]:
    """
    Une ligne par identifiant, quantité fixe de 1 (N articles distincts,
    pas N unités d'un même article). L'ordre du panier est conservé.
    """
    return [{"price": price_id, "quantity": 1} for price_id in price_ids]


def build_session_params(
    price_ids: List[str],
    *,
    success_url: str,
    cancel_url: str,
    coupon_id: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Paramètres de stripe.checkout.Session.create.
    - mode abonnement, carte uniquement
    - allow_promotion_codes toujours False: les réductions sont uniquement
      celles appliquées par le serveur
    - discounts ajouté seulement si un palier est atteint
    """
    params: Dict[str, Any] = {
        "payment_method_types": ["card"],
        "line_items": to_line_items(price_ids),
        "mode": "subscription",
        "success_url": success_url,
        "cancel_url": cancel_url,
        "allow_promotion_codes": False,
    }
    discounts = discount_params(coupon_id)
    if discounts:
        params["discounts"] = discounts
    return params

