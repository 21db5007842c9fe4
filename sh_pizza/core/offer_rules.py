"""Offer Rules — discount and validity-window checks for promotional offers.

Invariants:
    - All functions are PURE: no IO, no async, no DB
    - percentage discounts lie in [0, 100]; fixed_amount discounts are > 0
    - valid_from is strictly before valid_until
    - Checks run on the merged offer (stored values + incoming changes), so a
      partial update cannot produce an offer that create would reject

Design Decisions:
    - Raise InvalidInputError (not return dicts): services propagate it untouched
      to the global error handler
"""

from datetime import datetime
from decimal import Decimal

from sh_pizza.core.clock import as_utc
from sh_pizza.core.domain_types import DiscountType
from sh_pizza.core.errors import InvalidInputError


def check_discount_type(discount_type: str) -> DiscountType:
    try:
        return DiscountType(discount_type)
    except ValueError:
        raise InvalidInputError(
            'Discount type must be "percentage" or "fixed_amount"',
            field="discountType",
        ) from None


def check_discount_value(discount_type: str, value: Decimal) -> None:
    """Bound the discount value by its type."""
    kind = check_discount_type(discount_type)
    if kind == DiscountType.PERCENTAGE and (value < 0 or value > 100):
        raise InvalidInputError(
            "Percentage discount must be between 0 and 100",
            field="discountValue",
        )
    if kind == DiscountType.FIXED_AMOUNT and value <= 0:
        raise InvalidInputError(
            "Fixed amount discount must be greater than 0",
            field="discountValue",
        )


def check_validity_window(valid_from: datetime, valid_until: datetime) -> None:
    if as_utc(valid_from) >= as_utc(valid_until):
        raise InvalidInputError(
            "Valid from date must be before valid until date",
            field="validFrom",
        )


def check_offer(
    discount_type: str,
    discount_value: Decimal,
    valid_from: datetime,
    valid_until: datetime,
) -> None:
    """Run every offer rule; first violation wins."""
    check_discount_value(discount_type, discount_value)
    check_validity_window(valid_from, valid_until)


def is_expired(valid_until: datetime, now: datetime) -> bool:
    return as_utc(valid_until) < as_utc(now)


def is_live(
    is_active: bool, valid_from: datetime, valid_until: datetime, now: datetime,
) -> bool:
    """Offer is switched on and `now` falls inside its window."""
    return is_active and as_utc(valid_from) <= as_utc(now) <= as_utc(valid_until)
