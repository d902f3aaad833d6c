# module backend.bookings.presenter
"""
Interprétation du retour Checkout (?success=1&ref=... / ?canceled=1).
Simple confort d'affichage: la référence n'est pas vérifiée auprès de Stripe.
"""
from typing import Any, Mapping, Optional

from pydantic import BaseModel

from backend import config
from backend.pricing.service import format_money

from .models import BookingSelection

REFERENCE_PLACEHOLDER = "demo-ref"


class ConfirmationView(BaseModel):
    class_name: str
    emoji: str = ""
    date_iso: str = ""
    date_pretty: str = ""
    time: str = ""
    quantity: int
    total: int
    total_display: str
    reference: str
    email: str = ""


def _first(query_params: Mapping[str, Any], key: str) -> str:
    value = (query_params or {}).get(key)
    # parse_qs renvoie des listes
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    return "" if value is None else str(value)


def was_canceled(query_params: Mapping[str, Any]) -> bool:
    return bool(_first(query_params, "canceled"))


def interpret_return(query_params: Mapping[str, Any], last_selection: Optional[BookingSelection]) -> Optional[ConfirmationView]:
    if not _first(query_params, "success"):
        return None
    selection = last_selection or BookingSelection()
    offering = selection.offering
    price = selection.price()
    total = price.total if price else 0
    return ConfirmationView(
        class_name=offering.name if offering else "",
        emoji=offering.emoji if offering else "",
        date_iso=selection.date.isoformat() if selection.date else "",
        # ex: "Fri 14 Mar"
        date_pretty=f"{selection.date:%a} {selection.date.day} {selection.date:%b}" if selection.date else "",
        time=selection.time or "",
        quantity=selection.quantity,
        total=total,
        total_display=format_money(total, config.CHECKOUT_CURRENCY),
        reference=_first(query_params, "ref") or REFERENCE_PLACEHOLDER,
        email=selection.email,
    )
