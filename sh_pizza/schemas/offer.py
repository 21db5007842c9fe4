"""Offer Schemas — promotional discount contracts for /api/admin/offers.

Invariants:
    - Dates are parsed by Pydantic (ISO 8601) and normalized to UTC, since
      SQLite stores them without an offset
    - Cross-field rules live in core/offer_rules.py
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import field_validator

from sh_pizza.core.clock import as_utc
from sh_pizza.schemas.common import CamelModel, Pagination, StrippedModel


class OfferCreate(StrippedModel):
    name: str | None = None
    description: str | None = None
    discount_type: str | None = None
    discount_value: Decimal | None = None
    valid_from: datetime | None = None
    valid_until: datetime | None = None

    @field_validator("valid_from", "valid_until")
    @classmethod
    def to_utc(cls, v: datetime | None) -> datetime | None:
        return as_utc(v) if v is not None else None


class OfferUpdate(OfferCreate):
    id: UUID | None = None
    is_active: bool | None = None


class OfferResponse(CamelModel):
    id: UUID
    name: str
    description: str | None = None
    discount_type: str
    discount_value: Decimal
    valid_from: datetime
    valid_until: datetime
    is_active: bool
    created_at: datetime
    updated_at: datetime


class OfferEnvelope(CamelModel):
    message: str
    offer: OfferResponse


class OfferList(CamelModel):
    offers: list[OfferResponse]
    pagination: Pagination
