"""Menu Service — pizzas (per branch) and toppings (shared) for the admin console.

Invariants:
    - Pizza names are unique within a branch; topping names are unique globally
    - Prices are strictly positive
    - topping_ids must all reference existing toppings; when given on update they
      replace the pizza's topping set
    - Deleting a topping detaches it from every pizza first
    - Items referenced by past orders are never deleted

Design Decisions:
    - Dispatch on MenuItemType in the service, not the route: the route stays a
      single POST/PUT/DELETE per the admin console's contract
"""

import logging
from decimal import Decimal
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from sh_pizza.core.clock import utcnow
from sh_pizza.core.domain_types import MenuItemType
from sh_pizza.core.errors import (
    BusinessRuleError, DuplicateResourceError, InvalidInputError,
)
from sh_pizza.models import (
    Branch, OrderItem, OrderItemTopping, Pizza, PizzaTopping, Topping,
)
from sh_pizza.schemas.menu import MenuItemWrite
from sh_pizza.services.lookups import commit_unique, exists, get_or_404

logger = logging.getLogger(__name__)

INVALID_TYPE = 'Invalid type. Must be "pizza" or "topping"'
DUPLICATE_PIZZA = "Pizza with this name already exists in this branch"
DUPLICATE_TOPPING = "Topping with this name already exists"
IN_ORDERS = "{} appears in existing orders; mark it unavailable instead"


def parse_item_type(value: str | None) -> MenuItemType:
    try:
        return MenuItemType(value)
    except ValueError:
        raise InvalidInputError(INVALID_TYPE, field="type") from None


def _check_price(value: Decimal, field: str) -> None:
    if value <= 0:
        raise InvalidInputError("Price must be greater than 0", field=field)


class MenuService:
    """ADMIN-only menu management."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Reads ──────────────────────────────────────────────────

    async def list_pizzas(self, branch_id: UUID | None = None) -> list[Pizza]:
        query = select(Pizza).order_by(Pizza.created_at.desc())
        if branch_id is not None:
            query = query.where(Pizza.branch_id == branch_id)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def list_toppings(self) -> list[Topping]:
        result = await self.db.execute(
            select(Topping).order_by(Topping.created_at.desc()),
        )
        return list(result.scalars().all())

    # ─── Writes ─────────────────────────────────────────────────

    async def create_item(self, body: MenuItemWrite) -> Pizza | Topping:
        if parse_item_type(body.type) == MenuItemType.PIZZA:
            return await self._create_pizza(body)
        return await self._create_topping(body)

    async def update_item(self, body: MenuItemWrite) -> Pizza | Topping:
        if body.id is None:
            raise InvalidInputError("ID is required", field="id")
        if parse_item_type(body.type) == MenuItemType.PIZZA:
            return await self._update_pizza(body)
        return await self._update_topping(body)

    async def delete_item(self, item_id: UUID | None, item_type: str | None) -> MenuItemType:
        if item_id is None or not item_type:
            raise InvalidInputError("ID and type are required")
        kind = parse_item_type(item_type)
        if kind == MenuItemType.PIZZA:
            pizza = await get_or_404(self.db, Pizza, item_id, "Pizza")
            if await exists(self.db, OrderItem, OrderItem.pizza_id == item_id):
                raise BusinessRuleError(IN_ORDERS.format("Pizza"), "MENU_ITEM_IN_USE")
            await self.db.delete(pizza)
        else:
            topping = await get_or_404(self.db, Topping, item_id, "Topping")
            if await exists(
                self.db, OrderItemTopping, OrderItemTopping.topping_id == item_id,
            ):
                raise BusinessRuleError(IN_ORDERS.format("Topping"), "MENU_ITEM_IN_USE")
            await self.db.execute(
                delete(PizzaTopping).where(PizzaTopping.topping_id == item_id),
            )
            await self.db.delete(topping)
        await self.db.commit()
        logger.info(f"{kind.value.capitalize()} deleted", extra={"entity_id": item_id})
        return kind

    # ─── Pizza ──────────────────────────────────────────────────

    async def _create_pizza(self, body: MenuItemWrite) -> Pizza:
        if not body.name or body.base_price is None or body.branch_id is None:
            raise InvalidInputError("Name, base price, and branch are required")
        _check_price(body.base_price, "basePrice")
        await get_or_404(self.db, Branch, body.branch_id, "Branch")
        if await self._pizza_name_taken(body.name, body.branch_id):
            raise DuplicateResourceError(DUPLICATE_PIZZA)
        topping_ids = await self._checked_topping_ids(body.topping_ids or [])

        pizza = Pizza(
            name=body.name,
            description=body.description,
            base_price=body.base_price,
            image_url=body.image_url,
            branch_id=body.branch_id,
            is_available=True,
            topping_links=[PizzaTopping(topping_id=tid) for tid in topping_ids],
        )
        self.db.add(pizza)
        await commit_unique(self.db, DUPLICATE_PIZZA)
        await self.db.refresh(pizza, ["branch", "topping_links"])
        logger.info(f"Pizza created: {pizza.name}", extra={"entity_id": pizza.id})
        return pizza

    async def _update_pizza(self, body: MenuItemWrite) -> Pizza:
        pizza = await get_or_404(self.db, Pizza, body.id, "Pizza")
        changes = body.model_fields_set

        target_branch = body.branch_id or pizza.branch_id
        if body.branch_id and body.branch_id != pizza.branch_id:
            await get_or_404(self.db, Branch, body.branch_id, "Branch")
        target_name = body.name or pizza.name
        if (target_name, target_branch) != (pizza.name, pizza.branch_id):
            if await self._pizza_name_taken(target_name, target_branch):
                raise DuplicateResourceError(DUPLICATE_PIZZA)

        pizza.name = target_name
        pizza.branch_id = target_branch
        if body.base_price is not None:
            _check_price(body.base_price, "basePrice")
            pizza.base_price = body.base_price
        if "description" in changes:
            pizza.description = body.description
        if "image_url" in changes:
            pizza.image_url = body.image_url
        if body.is_available is not None:
            pizza.is_available = body.is_available
        if body.topping_ids is not None:
            topping_ids = await self._checked_topping_ids(body.topping_ids)
            pizza.topping_links = [PizzaTopping(topping_id=tid) for tid in topping_ids]
        # topping-only changes never touch the pizzas row, so onupdate would not fire
        pizza.updated_at = utcnow()

        await commit_unique(self.db, DUPLICATE_PIZZA)
        await self.db.refresh(pizza, ["branch", "topping_links"])
        logger.info("Pizza updated", extra={"entity_id": pizza.id})
        return pizza

    async def _pizza_name_taken(self, name: str, branch_id: UUID | None) -> bool:
        return await exists(
            self.db, Pizza, Pizza.name == name, Pizza.branch_id == branch_id,
        )

    async def _checked_topping_ids(self, topping_ids: list[UUID]) -> list[UUID]:
        """De-duplicate and verify every id exists."""
        unique = list(dict.fromkeys(topping_ids))
        if not unique:
            return []
        found = await self.db.scalar(
            select(func.count()).select_from(Topping).where(Topping.id.in_(unique)),
        )
        if found != len(unique):
            raise InvalidInputError("One or more toppings do not exist", field="toppingIds")
        return unique

    # ─── Topping ────────────────────────────────────────────────

    async def _create_topping(self, body: MenuItemWrite) -> Topping:
        if not body.name or body.price is None or not body.category:
            raise InvalidInputError("Name, price, and category are required")
        _check_price(body.price, "price")
        if await exists(self.db, Topping, Topping.name == body.name):
            raise DuplicateResourceError(DUPLICATE_TOPPING)

        topping = Topping(
            name=body.name,
            price=body.price,
            category=body.category,
            is_available=True,
        )
        self.db.add(topping)
        await commit_unique(self.db, DUPLICATE_TOPPING)
        await self.db.refresh(topping)
        logger.info(f"Topping created: {topping.name}", extra={"entity_id": topping.id})
        return topping

    async def _update_topping(self, body: MenuItemWrite) -> Topping:
        topping = await get_or_404(self.db, Topping, body.id, "Topping")

        if body.name and body.name != topping.name:
            if await exists(self.db, Topping, Topping.name == body.name):
                raise DuplicateResourceError(DUPLICATE_TOPPING)
            topping.name = body.name
        if body.price is not None:
            _check_price(body.price, "price")
            topping.price = body.price
        if body.category:
            topping.category = body.category
        if body.is_available is not None:
            topping.is_available = body.is_available

        await commit_unique(self.db, DUPLICATE_TOPPING)
        await self.db.refresh(topping)
        logger.info("Topping updated", extra={"entity_id": topping.id})
        return topping
