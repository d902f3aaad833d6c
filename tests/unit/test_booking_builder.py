import pytest

from backend.bookings.builder import build_checkout_request, missing_fields, invalid_fields
from backend.bookings.errors import MissingFieldError, InvalidFieldError
from backend.bookings.models import BookingSelection


def test_build_request_from_fields(booking_fields):
    req = build_checkout_request(booking_fields)
    assert req.offering_id == "boxfit"
    assert req.offering_name == "BoxFit Fundamentals"
    assert req.quantity == 2
    assert req.unit_amount == 1000
    assert req.currency == "gbp"
    assert req.customer_email == "jo@example.com"
    assert req.customer_name == "Jo Bloggs"
    assert req.description == "Session: 2025-03-14 18:30"
    assert req.price.total == 2000


def test_missing_email_is_named(booking_fields):
    booking_fields.pop("email")
    with pytest.raises(MissingFieldError) as exc:
        build_checkout_request(booking_fields)
    assert exc.value.field == "email"


def test_missing_name_and_email_reports_email_first(booking_fields):
    booking_fields["email"] = ""
    booking_fields["name"] = "   "
    with pytest.raises(MissingFieldError) as exc:
        build_checkout_request(booking_fields)
    assert exc.value.field == "email"
    assert missing_fields(booking_fields) == ["email", "name"]


def test_missing_order_is_fixed():
    assert missing_fields({}) == ["className", "dateISO", "time", "email", "name"]


def test_unknown_class_counts_as_missing(booking_fields):
    booking_fields["classId"] = "yoga"
    booking_fields["className"] = "Yoga"
    with pytest.raises(MissingFieldError) as exc:
        build_checkout_request(booking_fields)
    assert exc.value.field == "className"


def test_class_name_alone_resolves(booking_fields):
    booking_fields.pop("classId")
    booking_fields["className"] = "technical sparring"
    req = build_checkout_request(booking_fields)
    assert req.offering_id == "sparring"
    assert req.unit_amount == 1500


@pytest.mark.parametrize("field, value", [
    ("dateISO", "14/03/2025"),
    ("time", "18:45"),
    ("dateISO", "2025-W11-5"),
    ("dateISO", "20250314"),
    ("email", "not-an-email"),
    ("email", "jo@..com"),
    ("email", "['jo@example.com']"),
    ("name", "x" * 900),
])
def test_malformed_fields_are_invalid(booking_fields, field, value):
    booking_fields[field] = value
    assert invalid_fields(booking_fields) == [field]
    with pytest.raises(InvalidFieldError) as exc:
        build_checkout_request(booking_fields)
    assert exc.value.field == field


@pytest.mark.parametrize("qty, expected", [(None, 1), ("lots", 1), (0, 1), ("3", 3), (40, 16)])
def test_quantity_is_corrected_not_rejected(booking_fields, qty, expected):
    booking_fields["qty"] = qty
    assert build_checkout_request(booking_fields).quantity == expected


def test_client_price_fields_are_ignored(booking_fields):
    booking_fields["unit_amount"] = 1
    booking_fields["currency"] = "usd"
    req = build_checkout_request(booking_fields)
    assert req.unit_amount == 1000
    assert req.currency == "gbp"


def test_promo_is_reflected_in_price(booking_fields):
    booking_fields["promo"] = "test10"
    req = build_checkout_request(booking_fields)
    assert req.price.discount == 200
    assert req.price.total == 1800
    # Le montant unitaire envoyé à Stripe reste le prix catalogue
    assert req.unit_amount == 1000


def test_metadata_round_trip_from_selection():
    from datetime import date
    selection = BookingSelection(name="Zoë O'Brien", email="zoe@example.com")
    selection.set_offering("hiit")
    selection.date = date(2025, 6, 1)
    selection.set_time("07:30")

    req = build_checkout_request(selection.to_payload())

    assert req.metadata["name"] == "Zoë O'Brien"
    assert req.metadata["dateISO"] == "2025-06-01"
    assert req.metadata["time"] == "07:30"
    assert req.metadata["className"] == "FightCamp HIIT"
    assert all(isinstance(v, str) for v in req.metadata.values())


def test_metadata_carries_optional_contact_fields(booking_fields):
    booking_fields["phone"] = " 07700 900123 "
    booking_fields["notes"] = "x" * 800
    req = build_checkout_request(booking_fields)
    assert req.metadata["phone"] == "07700 900123"
    assert len(req.metadata["notes"]) == 500
    booking_fields.pop("phone")
    booking_fields.pop("notes")
    assert "phone" not in build_checkout_request(booking_fields).metadata
