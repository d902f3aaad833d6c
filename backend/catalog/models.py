# module backend.catalog.models
"""Offre réservable (cours) et code promo, définis une fois au démarrage."""
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field


class Offering(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    coach: str = ""
    duration_min: int = Field(gt=0)
    # Prix unitaire en unités mineures (pence)
    base_price: int = Field(ge=0)
    capacity: int = Field(gt=0)
    emoji: str = ""
    # Payment Link Stripe optionnel (fallback sans serveur)
    payment_link: str = ""


class PromoCode(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    fraction: Decimal = Field(gt=0, lt=1)
