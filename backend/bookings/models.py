# module backend.bookings.models
"""
Modèles du parcours de réservation.
- BookingSelection: sélection en cours, modifiée champ par champ (stepper).
- CheckoutSessionRequest: demande dérivée, envoyée une seule fois vers Stripe.
"""
import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from backend.catalog.models import Offering
from backend.catalog.repository import TIME_SLOTS, DEFAULT_TIME_SLOT, get_offering
from backend.pricing.service import PriceBreakdown, clamp_quantity, compute_price


class BookingSelection(BaseModel):
    offering_id: Optional[str] = None
    date: Optional[datetime.date] = None
    time: Optional[str] = DEFAULT_TIME_SLOT
    quantity: int = 1
    name: str = ""
    email: str = ""
    phone: str = ""
    notes: str = ""
    promo: str = ""

    @property
    def offering(self) -> Optional[Offering]:
        return get_offering(self.offering_id)

    def set_offering(self, offering_id: str) -> None:
        offering = get_offering(offering_id)
        if offering is None:
            raise ValueError(f"Unknown class: {offering_id}")
        self.offering_id = offering.id
        # La capacité peut être plus faible que celle du cours précédent
        self.quantity = clamp_quantity(self.quantity, offering.capacity)

    def set_time(self, slot: str) -> None:
        if slot not in TIME_SLOTS:
            raise ValueError(f"Unknown time slot: {slot}")
        self.time = slot

    def set_quantity(self, value: Any) -> int:
        offering = self.offering
        capacity = offering.capacity if offering else 1
        self.quantity = clamp_quantity(value, capacity)
        return self.quantity

    def price(self) -> Optional[PriceBreakdown]:
        offering = self.offering
        if offering is None:
            return None
        return compute_price(offering, clamp_quantity(self.quantity, offering.capacity), self.promo)

    def reset(self) -> None:
        """Recommencer le parcours: nouvelle sélection vide."""
        for field_name, field in type(self).model_fields.items():
            setattr(self, field_name, field.get_default())

    def to_payload(self) -> Dict[str, Any]:
        """Corps JSON envoyé à POST /api/create-checkout-session."""
        offering = self.offering
        return {
            "classId": offering.id if offering else None,
            "className": offering.name if offering else None,
            "dateISO": self.date.isoformat() if self.date else None,
            "time": self.time,
            "qty": self.quantity,
            "email": self.email,
            "name": self.name,
            "phone": self.phone,
            "notes": self.notes,
            "promo": self.promo,
        }


class CheckoutSessionRequest(BaseModel):
    offering_id: str
    offering_name: str
    date_iso: str
    time: str
    quantity: int = Field(ge=1)
    # Prix unitaire issu du catalogue, jamais du client
    unit_amount: int = Field(ge=0)
    currency: str
    customer_email: str
    customer_name: str
    metadata: Dict[str, str] = Field(default_factory=dict)
    price: PriceBreakdown

    @property
    def description(self) -> str:
        return f"Session: {self.date_iso} {self.time}"
