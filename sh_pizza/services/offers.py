"""Offer Service — CRUD over promotional offers.

Invariants:
    - Offer names are unique
    - Every write passes core/offer_rules.check_offer on the merged offer
    - Listing filters: active / inactive (is_active flag), expired (valid_until < now)
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sh_pizza.core.clock import utcnow
from sh_pizza.core.domain_types import OfferStatusFilter
from sh_pizza.core.errors import DuplicateResourceError, InvalidInputError
from sh_pizza.core.offer_rules import check_discount_type, check_offer
from sh_pizza.core.pagination import PageRequest
from sh_pizza.models import Offer
from sh_pizza.schemas.offer import OfferCreate, OfferUpdate
from sh_pizza.services.lookups import commit_unique, count_rows, exists, get_or_404

logger = logging.getLogger(__name__)

DUPLICATE_NAME = "Offer with this name already exists"


class OfferService:
    """ADMIN-only offer management."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_offers(
        self, page: PageRequest, status: OfferStatusFilter | None = None,
    ) -> tuple[list[Offer], int]:
        query = select(Offer)
        if status == OfferStatusFilter.ACTIVE:
            query = query.where(Offer.is_active.is_(True))
        elif status == OfferStatusFilter.INACTIVE:
            query = query.where(Offer.is_active.is_(False))
        elif status == OfferStatusFilter.EXPIRED:
            query = query.where(Offer.valid_until < utcnow())

        total = await count_rows(self.db, query)
        result = await self.db.execute(
            query.order_by(Offer.created_at.desc())
            .limit(page.limit).offset(page.offset),
        )
        return list(result.scalars().all()), total

    async def live_offers(self) -> list[Offer]:
        """Switched-on offers whose window contains now."""
        now = utcnow()
        result = await self.db.execute(
            select(Offer)
            .where(
                Offer.is_active.is_(True),
                Offer.valid_from <= now,
                Offer.valid_until >= now,
            )
            .order_by(Offer.valid_until),
        )
        return list(result.scalars().all())

    async def create_offer(self, body: OfferCreate) -> Offer:
        if (
            not body.name or not body.discount_type or body.discount_value is None
            or body.valid_from is None or body.valid_until is None
        ):
            raise InvalidInputError(
                "Name, discount type, discount value, valid from, "
                "and valid until are required",
            )
        discount_type = check_discount_type(body.discount_type)
        check_offer(
            discount_type.value, body.discount_value,
            body.valid_from, body.valid_until,
        )
        if await exists(self.db, Offer, Offer.name == body.name):
            raise DuplicateResourceError(DUPLICATE_NAME)

        offer = Offer(
            name=body.name,
            description=body.description,
            discount_type=discount_type.value,
            discount_value=body.discount_value,
            valid_from=body.valid_from,
            valid_until=body.valid_until,
            is_active=True,
        )
        self.db.add(offer)
        await commit_unique(self.db, DUPLICATE_NAME)
        await self.db.refresh(offer)
        logger.info(f"Offer created: {offer.name}", extra={"entity_id": offer.id})
        return offer

    async def update_offer(self, body: OfferUpdate) -> Offer:
        if body.id is None:
            raise InvalidInputError("Offer ID is required", field="id")
        offer = await get_or_404(self.db, Offer, body.id, "Offer")

        discount_type = (
            check_discount_type(body.discount_type).value
            if body.discount_type else offer.discount_type
        )
        discount_value = (
            body.discount_value if body.discount_value is not None
            else offer.discount_value
        )
        valid_from = body.valid_from or offer.valid_from
        valid_until = body.valid_until or offer.valid_until
        check_offer(discount_type, discount_value, valid_from, valid_until)

        if body.name and body.name != offer.name:
            if await exists(self.db, Offer, Offer.name == body.name):
                raise DuplicateResourceError(DUPLICATE_NAME)
            offer.name = body.name
        if "description" in body.model_fields_set:
            offer.description = body.description
        offer.discount_type = discount_type
        offer.discount_value = discount_value
        offer.valid_from = valid_from
        offer.valid_until = valid_until
        if body.is_active is not None:
            offer.is_active = body.is_active

        await commit_unique(self.db, DUPLICATE_NAME)
        await self.db.refresh(offer)
        logger.info("Offer updated", extra={"entity_id": offer.id})
        return offer

    async def delete_offer(self, offer_id: UUID | None) -> None:
        if offer_id is None:
            raise InvalidInputError("Offer ID is required", field="id")
        offer = await get_or_404(self.db, Offer, offer_id, "Offer")
        await self.db.delete(offer)
        await self.db.commit()
        logger.info(f"Offer deleted: {offer.name}", extra={"entity_id": offer_id})
