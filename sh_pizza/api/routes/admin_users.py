"""Admin User Routes — account management for every role (ADMIN only)."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from sh_pizza.api.dependencies import page_params, require_admin
from sh_pizza.core.pagination import PageRequest, pagination_envelope
from sh_pizza.infrastructure.database import get_db
from sh_pizza.schemas.auth import UserEnvelope
from sh_pizza.schemas.common import MessageResponse
from sh_pizza.schemas.user import UserCreate, UserList, UserUpdate
from sh_pizza.services.users import UserAdminService

router = APIRouter(
    prefix="/api/admin/users", tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=UserList)
async def list_users(
    page: PageRequest = Depends(page_params),
    role: str | None = Query(None),
    search: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    users, total = await UserAdminService(db).list_users(page, role, search)
    return {"users": users, "pagination": pagination_envelope(page, total)}


@router.post("", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED)
async def create_user(body: UserCreate, db: AsyncSession = Depends(get_db)):
    user = await UserAdminService(db).create_user(body)
    return {"message": "User created successfully", "user": user}


@router.put("", response_model=UserEnvelope)
async def update_user(body: UserUpdate, db: AsyncSession = Depends(get_db)):
    user = await UserAdminService(db).update_user(body)
    return {"message": "User updated successfully", "user": user}


@router.delete("", response_model=MessageResponse)
async def delete_user(
    id: UUID | None = Query(None), db: AsyncSession = Depends(get_db),
):
    await UserAdminService(db).delete_user(id)
    return {"message": "User deleted successfully"}
