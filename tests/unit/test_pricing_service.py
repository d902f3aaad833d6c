import pytest

from backend.catalog.repository import get_offering
from backend.catalog.models import Offering
from backend.pricing.service import clamp_quantity, compute_price, resolve_promo, format_money


@pytest.mark.parametrize("raw, expected", [
    (None, 1),
    ("", 1),
    ("abc", 1),
    (0, 1),
    (-4, 1),
    (3, 3),
    ("5", 5),
    ("2.7", 2),
    (99, 16),
    (True, 1),
])
def test_clamp_quantity_bounds(raw, expected):
    assert clamp_quantity(raw, 16) == expected


def test_clamp_quantity_idempotent():
    for raw in (-10, 0, 1, 7, 12, 13, 500, "x"):
        once = clamp_quantity(raw, 12)
        assert 1 <= once <= 12
        assert clamp_quantity(once, 12) == once


def test_scenario_no_promo():
    # BoxFit: 1000 pence, 2 personnes, sans code
    price = compute_price(get_offering("boxfit"), 2, None)
    assert (price.subtotal, price.discount, price.total) == (2000, 0, 2000)
    assert price.promo_applied is None


def test_scenario_student15():
    price = compute_price(get_offering("sparring"), 1, "STUDENT15")
    assert (price.subtotal, price.discount, price.total) == (1500, 225, 1275)
    assert price.promo_applied == "STUDENT15"


def test_unknown_promo_is_same_as_no_promo():
    offering = get_offering("hiit")
    assert compute_price(offering, 3, "FOOBAR") == compute_price(offering, 3, None)


def test_promo_is_case_insensitive():
    assert resolve_promo("test10") == resolve_promo("TEST10") == resolve_promo("  Test10 ")
    assert float(resolve_promo("test10")) == pytest.approx(0.10)


def test_discount_is_floored():
    # 999 * 0.15 = 149.85 => 149
    offering = Offering(id="odd", name="Odd", duration_min=30, base_price=999, capacity=4)
    price = compute_price(offering, 1, "student15")
    assert price.discount == 149
    assert price.total == 850


def test_amounts_are_non_negative_ints():
    for offering_id in ("boxfit", "sparring", "hiit"):
        offering = get_offering(offering_id)
        for qty in range(1, offering.capacity + 1):
            for code in (None, "TEST10", "STUDENT15", "nope"):
                price = compute_price(offering, qty, code)
                assert isinstance(price.total, int) and isinstance(price.discount, int)
                assert 0 <= price.discount <= price.subtotal
                assert 0 <= price.total <= price.subtotal


def test_free_offering_total_zero():
    offering = Offering(id="free", name="Open Gym", duration_min=60, base_price=0, capacity=10)
    price = compute_price(offering, 4, "TEST10")
    assert (price.subtotal, price.discount, price.total) == (0, 0, 0)


def test_format_money():
    assert format_money(1275) == "£12.75"
    assert format_money(0, "gbp") == "£0.00"
    assert format_money(123456, "EUR") == "€1,234.56"
    assert format_money(500, "chf") == "5.00 CHF"
