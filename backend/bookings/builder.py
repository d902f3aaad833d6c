# module backend.bookings.builder
"""
Construction de la demande de session Checkout à partir des champs saisis.
- Ordre de vérification fixe (celui du stepper): className, dateISO, time, email, name.
- Le prix et la devise viennent du catalogue/config: unit_amount et currency du client sont ignorés.
- Quantité absente ou invalide => 1, hors bornes => ramenée dans [1, capacité].
"""
from typing import Any, Dict, List, Mapping, Optional

from backend import config
from backend.catalog.models import Offering
from backend.catalog.repository import TIME_SLOTS, resolve_offering
from backend.pricing.service import clamp_quantity, compute_price
from backend.utils.validators import is_plausible_email, parse_iso_date

from .errors import InvalidFieldError, MissingFieldError
from .models import CheckoutSessionRequest

REQUIRED_FIELDS = ("className", "dateISO", "time", "email", "name")

# Limite Stripe par valeur de metadata
METADATA_VALUE_MAX = 500


def _text(v: Any) -> str:
    return "" if v is None else str(v)


def _offering_from(fields: Mapping[str, Any]) -> Optional[Offering]:
    return resolve_offering(fields.get("classId"), fields.get("className"))


def missing_fields(fields: Mapping[str, Any]) -> List[str]:
    """
    Liste ordonnée des champs obligatoires absents.
    className est considéré absent si ni classId ni className ne résolvent une offre.
    """
    fields = fields or {}
    missing: List[str] = []
    for name in REQUIRED_FIELDS:
        if name == "className":
            if _offering_from(fields) is None:
                missing.append(name)
        elif not _text(fields.get(name)).strip():
            missing.append(name)
    return missing


def invalid_fields(fields: Mapping[str, Any]) -> List[str]:
    """Champs présents mais mal formés (date non ISO, créneau inconnu, email invalide, nom trop long)."""
    fields = fields or {}
    invalid: List[str] = []
    date_iso = _text(fields.get("dateISO"))
    if date_iso.strip() and parse_iso_date(date_iso) is None:
        invalid.append("dateISO")
    time = _text(fields.get("time"))
    if time.strip() and time not in TIME_SLOTS:
        invalid.append("time")
    email = _text(fields.get("email"))
    if email.strip() and not is_plausible_email(email):
        invalid.append("email")
    if len(_text(fields.get("name"))) > METADATA_VALUE_MAX:
        invalid.append("name")
    return invalid


def make_metadata(fields: Mapping[str, Any], offering: Offering) -> Dict[str, str]:
    """
    Intention de réservation d'origine, pour le rapprochement côté dashboard Stripe.
    Valeurs recopiées telles quelles (chaînes), notes/phone seulement si fournis.
    """
    metadata = {
        "name": _text(fields.get("name")),
        "className": offering.name,
        "classId": offering.id,
        "dateISO": _text(fields.get("dateISO")),
        "time": _text(fields.get("time")),
    }
    for extra in ("phone", "notes"):
        value = _text(fields.get(extra)).strip()
        if value:
            metadata[extra] = value[:METADATA_VALUE_MAX]
    return metadata


def build_checkout_request(fields: Mapping[str, Any]) -> CheckoutSessionRequest:
    """
    Transforme les champs bruts (corps JSON ou BookingSelection.to_payload()) en
    CheckoutSessionRequest.
    Lève MissingFieldError (premier champ absent) ou InvalidFieldError (premier champ invalide).
    """
    fields = fields or {}
    missing = missing_fields(fields)
    if missing:
        raise MissingFieldError(missing[0])
    invalid = invalid_fields(fields)
    if invalid:
        raise InvalidFieldError(invalid[0])

    offering = _offering_from(fields)
    quantity = clamp_quantity(fields.get("qty"), offering.capacity)
    price = compute_price(offering, quantity, fields.get("promo"))
    return CheckoutSessionRequest(
        offering_id=offering.id,
        offering_name=offering.name,
        date_iso=_text(fields.get("dateISO")),
        time=_text(fields.get("time")),
        quantity=quantity,
        unit_amount=offering.base_price,
        currency=config.CHECKOUT_CURRENCY,
        customer_email=_text(fields.get("email")).strip(),
        customer_name=_text(fields.get("name")),
        metadata=make_metadata(fields, offering),
        price=price,
    )
