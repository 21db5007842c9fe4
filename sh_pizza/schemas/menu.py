"""Menu Schemas — pizza and topping contracts for /api/admin/menu.

Invariants:
    - One body shape per verb, discriminated by `type` ("pizza" | "topping");
      fields that do not apply to the type are ignored
    - Money fields are Decimal (never float) end to end

Design Decisions:
    - `type` kept as plain str: an unknown type must yield the
      'Invalid type. Must be "pizza" or "topping"' message, not a schema error
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sh_pizza.schemas.common import CamelModel, StrippedModel


class MenuItemWrite(StrippedModel):
    """Create (POST) or partial update (PUT, requires id) of a pizza or topping."""
    type: str | None = None
    id: UUID | None = None

    # pizza and topping
    name: str | None = None
    is_available: bool | None = None

    # type == "pizza"
    description: str | None = None
    base_price: Decimal | None = None
    image_url: str | None = None
    branch_id: UUID | None = None
    topping_ids: list[UUID] | None = None

    # type == "topping"
    price: Decimal | None = None
    category: str | None = None


class PizzaResponse(CamelModel):
    id: UUID
    name: str
    description: str | None = None
    base_price: Decimal
    image_url: str | None = None
    is_available: bool
    branch_id: UUID | None = None
    branch_name: str | None = None
    topping_ids: list[UUID] = []
    created_at: datetime
    updated_at: datetime


class ToppingResponse(CamelModel):
    id: UUID
    name: str
    price: Decimal
    is_available: bool
    category: str
    created_at: datetime
    updated_at: datetime


class MenuListing(CamelModel):
    """GET /api/admin/menu — keys present depend on the requested type."""
    pizzas: list[PizzaResponse] | None = None
    toppings: list[ToppingResponse] | None = None


class PizzaEnvelope(CamelModel):
    message: str
    pizza: PizzaResponse


class ToppingEnvelope(CamelModel):
    message: str
    topping: ToppingResponse
