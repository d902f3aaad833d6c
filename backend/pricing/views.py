import logging
from typing import Any, Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict

from backend.catalog.repository import resolve_offering
from .service import clamp_quantity, compute_price

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Pricing API"])


class QuoteRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    classId: Optional[str] = None
    className: Optional[str] = None
    qty: Any = None
    promo: Optional[str] = None


# module backend.pricing.views
@router.post("/quote")
def quote(req: QuoteRequest):
    """
    Devis affiché dans le récapitulatif (étape 4 du parcours).
    - Entrée JSON: { "classId" | "className", "qty"?, "promo"? }
    - Quantité bornée à la capacité du cours, promo inconnue => remise 0.
    - Erreurs: 404 si le cours est introuvable.
    """
    offering = resolve_offering(req.classId, req.className)
    if offering is None:
        return JSONResponse(status_code=404, content={"error": "Unknown class"})
    qty = clamp_quantity(req.qty, offering.capacity)
    price = compute_price(offering, qty, req.promo)
    return {"classId": offering.id, "qty": qty, **price.model_dump()}
