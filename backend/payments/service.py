"""
Cas d'usage 'payments': valide la demande, construit la ligne Stripe et crée la session.
- Aucune persistance: Stripe reste la source de vérité de la session.
- Pas de retry: un échec Stripe remonte immédiatement à l'appelant.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional

from backend import config
from backend.bookings import builder
from backend.bookings.models import CheckoutSessionRequest

from . import stripe_client
from .errors import InvalidRequest, ProviderError

logger = logging.getLogger(__name__)

# module backend.payments.service
def to_line_items(request: CheckoutSessionRequest) -> List[Dict[str, Any]]:
    """Une seule ligne: le cours, à son prix catalogue, pour la quantité demandée."""
    return [{
        "quantity": request.quantity,
        "price_data": {
            "currency": request.currency,
            "unit_amount": request.unit_amount,
            "product_data": {
                "name": request.offering_name,
                "description": request.description,
            },
        },
    }]

def create_checkout_session(fields: Mapping[str, Any], idempotency_key: Optional[str] = None) -> str:
    """
    Crée une session Checkout et retourne l'URL de redirection.
    - InvalidRequest si des champs obligatoires manquent ou sont mal formés (aucun appel Stripe)
    - ProviderError si Stripe échoue ou ne renvoie pas d'URL
    """
    missing = builder.missing_fields(fields)
    if missing:
        logger.info("payments.checkout rejected missing=%s", missing)
        raise InvalidRequest(missing=missing)
    invalid = builder.invalid_fields(fields)
    if invalid:
        logger.info("payments.checkout rejected invalid=%s", invalid)
        raise InvalidRequest(invalid=invalid)

    request = builder.build_checkout_request(fields)
    try:
        session = stripe_client.create_session(
            line_items=to_line_items(request),
            mode="payment",
            success_url=config.checkout_success_url(),
            cancel_url=config.checkout_cancel_url(),
            metadata=request.metadata,
            customer_email=request.customer_email,
            payment_method_types=list(config.PAYMENT_METHOD_TYPES),
            allow_promotion_codes=True,
            idempotency_key=idempotency_key,
        )
    except Exception as e:
        logger.exception("payments.checkout stripe error class=%s", request.offering_id)
        raise ProviderError(str(e)) from e

    url = (session or {}).get("url")
    if not url:
        raise ProviderError("Stripe session without url")
    logger.info(
        "payments.checkout created session=%s class=%s qty=%s",
        session.get("id"), request.offering_id, request.quantity,
    )
    return url
