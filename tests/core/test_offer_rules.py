"""Offer Rules — discount bounds, validity window and liveness.

Tests:
    - Percentage accepts 0 and 100, rejects outside; fixed amount must be > 0
    - valid_from must be strictly before valid_until (naive values treated as UTC)
    - is_live needs the flag AND now inside the window
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from sh_pizza.core.domain_types import DiscountType
from sh_pizza.core.errors import InvalidInputError
from sh_pizza.core.offer_rules import (
    check_discount_type, check_discount_value, check_offer,
    check_validity_window, is_expired, is_live,
)

NOW = datetime(2026, 3, 15, 12, 0, tzinfo=timezone.utc)


def test_discount_type_parsed():
    assert check_discount_type("percentage") is DiscountType.PERCENTAGE


def test_unknown_discount_type():
    with pytest.raises(InvalidInputError, match="percentage"):
        check_discount_type("bogof")


@pytest.mark.parametrize("value", ["0", "50", "100"])
def test_percentage_bounds_inclusive(value):
    check_discount_value("percentage", Decimal(value))


@pytest.mark.parametrize("value", ["-1", "100.01"])
def test_percentage_out_of_bounds(value):
    with pytest.raises(InvalidInputError, match="between 0 and 100"):
        check_discount_value("percentage", Decimal(value))


def test_fixed_amount_must_be_positive():
    check_discount_value("fixed_amount", Decimal("0.01"))
    with pytest.raises(InvalidInputError, match="greater than 0"):
        check_discount_value("fixed_amount", Decimal("0"))


def test_fixed_amount_has_no_upper_bound():
    check_discount_value("fixed_amount", Decimal("500"))


def test_window_must_be_ordered():
    with pytest.raises(InvalidInputError, match="before valid until"):
        check_validity_window(NOW, NOW)


def test_window_mixes_naive_and_aware():
    naive_later = (NOW + timedelta(hours=1)).replace(tzinfo=None)
    check_validity_window(NOW, naive_later)


def test_check_offer_reports_value_before_window():
    with pytest.raises(InvalidInputError, match="between 0 and 100"):
        check_offer("percentage", Decimal("200"), NOW, NOW - timedelta(days=1))


def test_is_expired():
    assert is_expired(NOW - timedelta(seconds=1), NOW)
    assert not is_expired(NOW, NOW)


def test_is_live():
    start, end = NOW - timedelta(days=1), NOW + timedelta(days=1)
    assert is_live(True, start, end, NOW)
    assert not is_live(False, start, end, NOW)
    assert not is_live(True, NOW + timedelta(hours=1), end, NOW)
