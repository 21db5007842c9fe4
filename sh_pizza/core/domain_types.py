"""Domain Types — enums that replace bare strings across the codebase.

Invariants:
    - All valid roles, statuses and discount kinds encoded as Enums — no raw string matching
    - Enum values are the exact strings persisted in the database

Design Decisions:
    - str Enums: serialize to JSON and compare against DB text columns without custom encoders
"""

from enum import Enum


class UserRole(str, Enum):
    """User roles — gate route access."""
    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    STAFF = "STAFF"
    CASHIER = "CASHIER"
    CUSTOMER = "CUSTOMER"


class AccessArea(str, Enum):
    """Console areas, each restricted to a set of roles."""
    ADMIN = "admin"
    MANAGER = "manager"
    STAFF = "staff"
    CASHIER = "cashier"
    CUSTOMER = "customer"


class OrderStatus(str, Enum):
    """Order lifecycle — maps to DB `status` column."""
    PENDING = "pending"
    PREPARING = "preparing"
    READY = "ready"
    OUT_FOR_DELIVERY = "out_for_delivery"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class DiscountType(str, Enum):
    """How an offer's discount_value is applied."""
    PERCENTAGE = "percentage"
    FIXED_AMOUNT = "fixed_amount"


class OfferStatusFilter(str, Enum):
    """Listing filter for offers."""
    ACTIVE = "active"
    INACTIVE = "inactive"
    EXPIRED = "expired"


class MenuItemType(str, Enum):
    """Menu item kinds managed by the admin menu endpoint."""
    PIZZA = "pizza"
    TOPPING = "topping"
