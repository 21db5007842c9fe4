"""User Admin Schemas — create/update bodies and listing rows for /api/admin/users."""

from datetime import datetime
from uuid import UUID

from sh_pizza.schemas.common import CamelModel, Pagination, StrippedModel


class UserCreate(StrippedModel):
    email: str | None = None
    password: str | None = None
    role: str | None = None
    branch_id: UUID | None = None


class UserUpdate(StrippedModel):
    """Partial update: only fields present in the body are applied."""
    id: UUID | None = None
    email: str | None = None
    password: str | None = None
    role: str | None = None
    branch_id: UUID | None = None


class UserRow(CamelModel):
    id: UUID
    email: str
    role: str
    branch_id: UUID | None = None
    branch_name: str | None = None
    created_at: datetime
    updated_at: datetime


class UserList(CamelModel):
    users: list[UserRow]
    pagination: Pagination
