# module backend.pricing.service
"""
Calcul du prix d'une réservation (fonctions pures, pas de Stripe, pas d'I/O).
- Montants en unités mineures (pence), toujours des entiers >= 0.
- Un code promo inconnu ou absent donne une remise nulle (jamais d'erreur).
"""
from decimal import Decimal, ROUND_FLOOR
from typing import Any, Optional

from pydantic import BaseModel

from backend.catalog.models import Offering
from backend.catalog.repository import get_promo

_CURRENCY_SYMBOLS = {"GBP": "£", "EUR": "€", "USD": "$"}


class PriceBreakdown(BaseModel):
    subtotal: int
    discount: int
    total: int
    promo_applied: Optional[str] = None


def clamp_quantity(value: Any, capacity: int) -> int:
    """
    Ramène une quantité brute dans [1, capacity].
    - None, chaîne vide ou non numérique => 1
    - "2.7" => 2 (troncature), hors bornes => borne la plus proche
    """
    if isinstance(value, bool):
        value = None
    try:
        qty = int(float(str(value).strip()))
    except (TypeError, ValueError, OverflowError):
        qty = 1
    return max(1, min(int(capacity), qty))


def resolve_promo(code: Optional[str]) -> Decimal:
    promo = get_promo(code)
    return promo.fraction if promo else Decimal(0)


def compute_price(offering: Offering, quantity: int, promo_code: Optional[str] = None) -> PriceBreakdown:
    """
    subtotal = base_price * quantity
    discount = floor(subtotal * fraction)
    total    = max(0, subtotal - discount)
    La quantité doit déjà être bornée par l'appelant (clamp_quantity).
    """
    subtotal = offering.base_price * int(quantity)
    fraction = resolve_promo(promo_code)
    discount = int((Decimal(subtotal) * fraction).to_integral_value(rounding=ROUND_FLOOR))
    total = max(0, subtotal - discount)
    promo = get_promo(promo_code) if fraction else None
    return PriceBreakdown(
        subtotal=subtotal,
        discount=discount,
        total=total,
        promo_applied=promo.code if promo else None,
    )


def format_money(minor: Optional[int], currency: str = "GBP") -> str:
    """Affichage: 1275 -> '£12.75' (symbole connu) ou '12.75 CHF'."""
    amount = Decimal(int(minor or 0)) / 100
    code = (currency or "").upper()
    symbol = _CURRENCY_SYMBOLS.get(code)
    if symbol:
        return f"{symbol}{amount:,.2f}"
    return f"{amount:,.2f} {code}"
