from typing import Any, Dict

from fastapi import APIRouter

from backend import config
from .repository import TIME_SLOTS, DEFAULT_TIME_SLOT, list_offerings, upcoming_days

router = APIRouter(prefix="/api", tags=["Catalog API"])

# module backend.catalog.views
@router.get("/classes")
def get_classes() -> Dict[str, Any]:
    """
    Catalogue pour hydrater le parcours de réservation.
    - classes: offres (prix en unités mineures, capacité indicative)
    - time_slots: créneaux fixes, dates: aujourd'hui + 13 jours (ISO)
    """
    return {
        "classes": [o.model_dump(exclude={"payment_link"}) for o in list_offerings()],
        "time_slots": list(TIME_SLOTS),
        "default_time": DEFAULT_TIME_SLOT,
        "dates": [d.isoformat() for d in upcoming_days()],
        "currency": config.CHECKOUT_CURRENCY.upper(),
    }
