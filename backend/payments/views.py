import logging
from typing import Any, Dict

from fastapi import APIRouter, Request, Depends
from fastapi.responses import JSONResponse

from backend.utils.rate_limit import optional_rate_limit
from backend.payments import service as payments_service
from backend.payments.errors import InvalidRequest, ProviderError

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Payments API"])

IDEMPOTENCY_HEADER = "Idempotency-Key"

# module backend.payments.views
@router.post("/create-checkout-session", dependencies=[Depends(optional_rate_limit(times=10, seconds=60))])
async def create_checkout_session(request: Request):
    """
    Crée une session Stripe Checkout pour une réservation de cours.
    - Entrée JSON: { className|classId, dateISO, time, qty?, email, name, phone?, notes?, promo? }
      unit_amount / currency éventuels sont ignorés (prix recalculé côté serveur).
    - En-tête optionnel Idempotency-Key transmis à Stripe.
    - Réponses:
      200 {"url": ...}
      400 {"error": "Missing required fields", "missing": [...]}
      400 {"error": "Invalid booking fields", "invalid": [...]}
      500 {"error": "Unable to create checkout session"} (détail Stripe seulement dans les logs)
    """
    try:
        body = await request.json()
    except Exception:
        body = None
    fields: Dict[str, Any] = body if isinstance(body, dict) else {}
    idempotency_key = request.headers.get(IDEMPOTENCY_HEADER) or None

    try:
        url = payments_service.create_checkout_session(fields, idempotency_key=idempotency_key)
    except InvalidRequest as e:
        if e.missing:
            return JSONResponse(status_code=400, content={"error": "Missing required fields", "missing": e.missing})
        return JSONResponse(status_code=400, content={"error": "Invalid booking fields", "invalid": e.invalid})
    except ProviderError:
        return JSONResponse(status_code=500, content={"error": "Unable to create checkout session"})
    except Exception:
        logger.exception("Erreur create_checkout_session")
        return JSONResponse(status_code=500, content={"error": "Unable to create checkout session"})
    return JSONResponse({"url": url})
