"""
Adaptateur Stripe: centralise les appels et la configuration Stripe.
"""
import stripe
from typing import Any, Dict, List, Optional

from backend import config

# module backend.payments.stripe_client
def require_stripe() -> stripe:
    """
    Prépare et retourne le module stripe prêt à l’emploi.
    - Configure stripe.api_key via STRIPE_SECRET_KEY si disponible.
    - La présence de la clé est vérifiée au démarrage (lifespan), pas ici.
    """
    if config.STRIPE_SECRET_KEY:
        stripe.api_key = config.STRIPE_SECRET_KEY
    return stripe

def create_session(
    *,
    line_items: List[Dict[str, Any]],
    mode: str,
    success_url: str,
    cancel_url: str,
    metadata: Dict[str, str],
    customer_email: Optional[str] = None,
    payment_method_types: Optional[List[str]] = None,
    allow_promotion_codes: bool = True,
    idempotency_key: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Crée une session Stripe Checkout.
    - line_items: lignes Stripe (price_data + quantity)
    - mode: généralement "payment"
    - success_url / cancel_url: URLs de redirection ({CHECKOUT_SESSION_ID} résolu par Stripe)
    - metadata: intention de réservation {name, className, classId, dateISO, time}
    - idempotency_key: transmis tel quel à Stripe si fourni (anti double débit)
    Retour: dict session (ex: {"id": "cs_test_...", "url": "https://..."})
    """
    require_stripe()
    params: Dict[str, Any] = {
        "line_items": line_items,
        "mode": mode,
        "success_url": success_url,
        "cancel_url": cancel_url,
        "metadata": metadata,
        "payment_method_types": payment_method_types or ["card"],
        "allow_promotion_codes": allow_promotion_codes,
    }
    if customer_email:
        params["customer_email"] = customer_email
    if idempotency_key:
        params["idempotency_key"] = idempotency_key
    session = stripe.checkout.Session.create(**params)
    return _session_fields(session)

def _session_fields(session: Any) -> Dict[str, Any]:
    # StripeObject n'hérite plus de dict dans les versions récentes du SDK
    if isinstance(session, dict):
        return dict(session)
    return {"id": getattr(session, "id", None), "url": getattr(session, "url", None)}
