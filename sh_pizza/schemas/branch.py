"""Branch Schemas — store location contracts for /api/admin/branches.

Invariants:
    - delivery_zones entries are trimmed and blank entries dropped
"""

from datetime import datetime
from uuid import UUID

from pydantic import field_validator

from sh_pizza.schemas.common import CamelModel, Pagination, StrippedModel


def _clean_zones(zones: list[str] | None) -> list[str] | None:
    if zones is None:
        return None
    return [z.strip() for z in zones if z and z.strip()]


class BranchCreate(StrippedModel):
    name: str | None = None
    address: str | None = None
    phone: str | None = None
    delivery_zones: list[str] | None = None

    @field_validator("delivery_zones")
    @classmethod
    def clean_zones(cls, v: list[str] | None) -> list[str] | None:
        return _clean_zones(v)


class BranchUpdate(StrippedModel):
    id: UUID | None = None
    name: str | None = None
    address: str | None = None
    phone: str | None = None
    delivery_zones: list[str] | None = None
    is_active: bool | None = None

    @field_validator("delivery_zones")
    @classmethod
    def clean_zones(cls, v: list[str] | None) -> list[str] | None:
        return _clean_zones(v)


class BranchResponse(CamelModel):
    id: UUID
    name: str
    address: str
    phone: str
    is_active: bool
    delivery_zones: list[str]
    created_at: datetime
    updated_at: datetime


class BranchEnvelope(CamelModel):
    message: str
    branch: BranchResponse


class BranchList(CamelModel):
    branches: list[BranchResponse]
    pagination: Pagination
