"""Role Access Rules — which roles may enter which console area.

Invariants:
    - All functions are PURE: no IO, no async, no DB
    - ADMIN reaches every staff area but not the customer area
    - Unknown roles reach nothing and are sent to the sign-in page

Design Decisions:
    - Table-driven (AREA_ROLES) over if-chains: one place to audit access
"""

from sh_pizza.core.domain_types import AccessArea, UserRole

SIGN_IN_PATH = "/auth/signin"

AREA_ROLES: dict[AccessArea, frozenset[UserRole]] = {
    AccessArea.ADMIN: frozenset({UserRole.ADMIN}),
    AccessArea.MANAGER: frozenset({UserRole.MANAGER, UserRole.ADMIN}),
    AccessArea.STAFF: frozenset({UserRole.STAFF, UserRole.MANAGER, UserRole.ADMIN}),
    AccessArea.CASHIER: frozenset({UserRole.CASHIER, UserRole.MANAGER, UserRole.ADMIN}),
    AccessArea.CUSTOMER: frozenset({UserRole.CUSTOMER}),
}

_HOME_AREA: dict[UserRole, AccessArea] = {
    UserRole.ADMIN: AccessArea.ADMIN,
    UserRole.MANAGER: AccessArea.MANAGER,
    UserRole.STAFF: AccessArea.STAFF,
    UserRole.CASHIER: AccessArea.CASHIER,
    UserRole.CUSTOMER: AccessArea.CUSTOMER,
}


def parse_role(value: str | None) -> UserRole | None:
    """Map a stored/claimed role string to UserRole, None if unknown."""
    try:
        return UserRole(value)
    except ValueError:
        return None


def can_access(role: str | None, area: AccessArea) -> bool:
    """True when the role is allowed into the area."""
    parsed = parse_role(role)
    return parsed is not None and parsed in AREA_ROLES[area]


def dashboard_path_for(role: str | None) -> str:
    """Landing page for a role after sign-in."""
    parsed = parse_role(role)
    if parsed is None:
        return SIGN_IN_PATH
    return f"/{_HOME_AREA[parsed].value}"
