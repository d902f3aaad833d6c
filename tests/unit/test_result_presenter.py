from datetime import date
from urllib.parse import parse_qs

from backend.bookings.models import BookingSelection
from backend.bookings.presenter import interpret_return, was_canceled, REFERENCE_PLACEHOLDER


def _selection() -> BookingSelection:
    selection = BookingSelection(name="Jo", email="jo@example.com", promo="STUDENT15")
    selection.set_offering("sparring")
    selection.date = date(2025, 3, 14)
    selection.set_time("19:30")
    selection.set_quantity(2)
    return selection


def test_no_success_marker_returns_none():
    assert interpret_return({}, _selection()) is None
    assert interpret_return({"canceled": "1"}, _selection()) is None
    assert interpret_return({"success": ""}, _selection()) is None


def test_success_builds_confirmation_view():
    view = interpret_return({"success": "1", "ref": "cs_test_abc"}, _selection())
    assert view.class_name == "Technical Sparring"
    assert view.date_iso == "2025-03-14"
    assert view.date_pretty == "Fri 14 Mar"
    assert view.time == "19:30"
    assert view.quantity == 2
    # 3000 - floor(3000 * 0.15)
    assert view.total == 2550
    assert view.total_display == "£25.50"
    assert view.reference == "cs_test_abc"


def test_missing_reference_uses_placeholder():
    view = interpret_return({"success": "1"}, _selection())
    assert view.reference == REFERENCE_PLACEHOLDER


def test_accepts_parse_qs_lists():
    view = interpret_return(parse_qs("success=1&ref=r42"), _selection())
    assert view.reference == "r42"


def test_success_without_selection_still_renders():
    view = interpret_return({"success": "1", "ref": "x"}, None)
    assert view.class_name == ""
    assert view.total == 0


def test_was_canceled():
    assert was_canceled({"canceled": "1"}) is True
    assert was_canceled({"success": "1"}) is False
