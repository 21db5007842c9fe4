"""Admin Menu Routes — pizzas and toppings behind one resource (ADMIN only).

Invariants:
    - GET returns only the requested collection(s): {pizzas}, {toppings} or both
    - Write bodies carry `type`; the envelope key follows it ("pizza" / "topping")
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from sh_pizza.api.dependencies import require_admin
from sh_pizza.core.domain_types import MenuItemType
from sh_pizza.infrastructure.database import get_db
from sh_pizza.models import Pizza
from sh_pizza.schemas.common import MessageResponse
from sh_pizza.schemas.menu import (
    MenuItemWrite, MenuListing, PizzaEnvelope, ToppingEnvelope,
)
from sh_pizza.services.menu import MenuService

router = APIRouter(
    prefix="/api/admin/menu", tags=["admin"],
    dependencies=[Depends(require_admin)],
)


def _envelope(item, verb: str) -> PizzaEnvelope | ToppingEnvelope:
    if isinstance(item, Pizza):
        return PizzaEnvelope(message=f"Pizza {verb} successfully", pizza=item)
    return ToppingEnvelope(message=f"Topping {verb} successfully", topping=item)


@router.get("", response_model=MenuListing, response_model_exclude_unset=True)
async def list_menu(
    item_type: str | None = Query(None, alias="type"),
    branch_id: UUID | None = Query(None, alias="branchId"),
    db: AsyncSession = Depends(get_db),
):
    """?type=pizzas|toppings narrows the listing; anything else returns both."""
    service = MenuService(db)
    if item_type == "pizzas":
        return MenuListing(pizzas=await service.list_pizzas(branch_id))
    if item_type == "toppings":
        return MenuListing(toppings=await service.list_toppings())
    return MenuListing(
        pizzas=await service.list_pizzas(branch_id),
        toppings=await service.list_toppings(),
    )


@router.post(
    "", response_model=PizzaEnvelope | ToppingEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def create_item(body: MenuItemWrite, db: AsyncSession = Depends(get_db)):
    return _envelope(await MenuService(db).create_item(body), "created")


@router.put("", response_model=PizzaEnvelope | ToppingEnvelope)
async def update_item(body: MenuItemWrite, db: AsyncSession = Depends(get_db)):
    return _envelope(await MenuService(db).update_item(body), "updated")


@router.delete("", response_model=MessageResponse)
async def delete_item(
    id: UUID | None = Query(None),
    item_type: str | None = Query(None, alias="type"),
    db: AsyncSession = Depends(get_db),
):
    kind = await MenuService(db).delete_item(id, item_type)
    label = "Pizza" if kind == MenuItemType.PIZZA else "Topping"
    return {"message": f"{label} deleted successfully"}
