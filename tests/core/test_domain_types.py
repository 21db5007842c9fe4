"""Domain Types — verifies enum members and their persisted string values.

Tests:
    - Exactly five roles, upper-case as stored
    - Order statuses cover the whole lifecycle
    - Enums compare equal to their raw strings (str Enum)
"""

from sh_pizza.core.domain_types import (
    DiscountType, MenuItemType, OfferStatusFilter, OrderStatus, UserRole,
)


def test_user_role_has_five_roles():
    assert {r.value for r in UserRole} == {
        "ADMIN", "MANAGER", "STAFF", "CASHIER", "CUSTOMER",
    }


def test_order_status_lifecycle():
    assert [s.value for s in OrderStatus] == [
        "pending", "preparing", "ready", "out_for_delivery", "delivered", "cancelled",
    ]


def test_str_enums_compare_to_raw_strings():
    assert UserRole.ADMIN == "ADMIN"
    assert DiscountType.FIXED_AMOUNT == "fixed_amount"
    assert MenuItemType("topping") is MenuItemType.TOPPING


def test_offer_status_filter_values():
    assert {f.value for f in OfferStatusFilter} == {"active", "inactive", "expired"}
