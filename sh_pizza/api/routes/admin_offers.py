"""Admin Offer Routes — promotional discounts (ADMIN only)."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from sh_pizza.api.dependencies import page_params, require_admin
from sh_pizza.core.domain_types import OfferStatusFilter
from sh_pizza.core.pagination import PageRequest, pagination_envelope
from sh_pizza.infrastructure.database import get_db
from sh_pizza.schemas.common import MessageResponse
from sh_pizza.schemas.offer import OfferCreate, OfferEnvelope, OfferList, OfferUpdate
from sh_pizza.services.offers import OfferService

router = APIRouter(
    prefix="/api/admin/offers", tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=OfferList)
async def list_offers(
    page: PageRequest = Depends(page_params),
    status_filter: OfferStatusFilter | None = Query(None, alias="status"),
    db: AsyncSession = Depends(get_db),
):
    offers, total = await OfferService(db).list_offers(page, status_filter)
    return {"offers": offers, "pagination": pagination_envelope(page, total)}


@router.post("", response_model=OfferEnvelope, status_code=status.HTTP_201_CREATED)
async def create_offer(body: OfferCreate, db: AsyncSession = Depends(get_db)):
    offer = await OfferService(db).create_offer(body)
    return {"message": "Offer created successfully", "offer": offer}


@router.put("", response_model=OfferEnvelope)
async def update_offer(body: OfferUpdate, db: AsyncSession = Depends(get_db)):
    offer = await OfferService(db).update_offer(body)
    return {"message": "Offer updated successfully", "offer": offer}


@router.delete("", response_model=MessageResponse)
async def delete_offer(
    id: UUID | None = Query(None), db: AsyncSession = Depends(get_db),
):
    await OfferService(db).delete_offer(id)
    return {"message": "Offer deleted successfully"}
