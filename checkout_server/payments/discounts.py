"""
Paliers de réduction par quantité (logique pure, pas de Stripe).

Les paliers sont cumulatifs: une quantité qui en satisfait plusieurs reçoit
le plus élevé. La table est donc triée par seuil décroissant et le premier
seuil atteint l'emporte.
"""
from typing import Any, Dict, List, Optional, Tuple

# module checkout_server.payments.discounts
# (seuil minimal d'articles, identifiant du coupon Stripe)
COUPON_TIERS: Tuple[Tuple[int, str], ...] = (
    (22, "BGI8HqEn"),  # 30% pour les 22 articles
    (7, "4kCkHlm0"),   # 20% dès 7 articles
    (5, "91SAvN7y"),   # 15% dès 5 articles
    (3, "gX002Orj"),   # 10% dès 3 articles
)


def resolve_coupon(item_count: int, tiers: Tuple[Tuple[int, str], ...] = COUPON_TIERS) -> Optional[str]:
    """Retourne le coupon du palier le plus élevé atteint, ou None (1-2 articles)."""
    for threshold, coupon_id in tiers:
        if item_count >= threshold:
            return coupon_id
    return None


def discount_params(coupon_id: Optional[str]) -> Optional[List[Dict[str, Any]]]:
    if not coupon_id:
        return None
    return [{"coupon": coupon_id}]
