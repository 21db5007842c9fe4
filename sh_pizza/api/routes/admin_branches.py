"""Admin Branch Routes — store locations (ADMIN only)."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from sh_pizza.api.dependencies import page_params, require_admin
from sh_pizza.core.pagination import PageRequest, pagination_envelope
from sh_pizza.infrastructure.database import get_db
from sh_pizza.schemas.branch import (
    BranchCreate, BranchEnvelope, BranchList, BranchUpdate,
)
from sh_pizza.schemas.common import MessageResponse
from sh_pizza.services.branches import BranchService

router = APIRouter(
    prefix="/api/admin/branches", tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=BranchList)
async def list_branches(
    page: PageRequest = Depends(page_params),
    search: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    branches, total = await BranchService(db).list_branches(page, search)
    return {"branches": branches, "pagination": pagination_envelope(page, total)}


@router.post("", response_model=BranchEnvelope, status_code=status.HTTP_201_CREATED)
async def create_branch(body: BranchCreate, db: AsyncSession = Depends(get_db)):
    branch = await BranchService(db).create_branch(body)
    return {"message": "Branch created successfully", "branch": branch}


@router.put("", response_model=BranchEnvelope)
async def update_branch(body: BranchUpdate, db: AsyncSession = Depends(get_db)):
    branch = await BranchService(db).update_branch(body)
    return {"message": "Branch updated successfully", "branch": branch}


@router.delete("", response_model=MessageResponse)
async def delete_branch(
    id: UUID | None = Query(None), db: AsyncSession = Depends(get_db),
):
    await BranchService(db).delete_branch(id)
    return {"message": "Branch deleted successfully"}
