"""Branch Service — CRUD over store locations.

Invariants:
    - Branch names are unique (create and rename)
    - New branches are active with delivery_zones defaulting to []
    - A branch referenced by users, pizzas or orders is never deleted;
      the caller is told to deactivate it instead
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sh_pizza.core.errors import (
    BusinessRuleError, DuplicateResourceError, InvalidInputError,
)
from sh_pizza.core.pagination import PageRequest
from sh_pizza.models import Branch, Order, Pizza, User
from sh_pizza.schemas.branch import BranchCreate, BranchUpdate
from sh_pizza.services.lookups import commit_unique, count_rows, exists, get_or_404

logger = logging.getLogger(__name__)

DUPLICATE_NAME = "Branch with this name already exists"


class BranchService:
    """ADMIN-only branch management."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_branches(
        self, page: PageRequest, search: str | None = None,
    ) -> tuple[list[Branch], int]:
        query = select(Branch)
        if search:
            query = query.where(Branch.name == search)
        total = await count_rows(self.db, query)
        result = await self.db.execute(
            query.order_by(Branch.created_at.desc())
            .limit(page.limit).offset(page.offset),
        )
        return list(result.scalars().all()), total

    async def create_branch(self, body: BranchCreate) -> Branch:
        if not body.name or not body.address or not body.phone:
            raise InvalidInputError("Name, address, and phone are required")
        if await exists(self.db, Branch, Branch.name == body.name):
            raise DuplicateResourceError(DUPLICATE_NAME)

        branch = Branch(
            name=body.name,
            address=body.address,
            phone=body.phone,
            delivery_zones=body.delivery_zones or [],
            is_active=True,
        )
        self.db.add(branch)
        await commit_unique(self.db, DUPLICATE_NAME)
        await self.db.refresh(branch)
        logger.info(f"Branch created: {branch.name}", extra={"entity_id": branch.id})
        return branch

    async def update_branch(self, body: BranchUpdate) -> Branch:
        if body.id is None:
            raise InvalidInputError("Branch ID is required", field="id")
        branch = await get_or_404(self.db, Branch, body.id, "Branch")

        if body.name and body.name != branch.name:
            if await exists(self.db, Branch, Branch.name == body.name):
                raise DuplicateResourceError(DUPLICATE_NAME)
            branch.name = body.name
        if body.address:
            branch.address = body.address
        if body.phone:
            branch.phone = body.phone
        if body.delivery_zones is not None:
            branch.delivery_zones = body.delivery_zones
        if body.is_active is not None:
            branch.is_active = body.is_active

        await commit_unique(self.db, DUPLICATE_NAME)
        await self.db.refresh(branch)
        logger.info("Branch updated", extra={"entity_id": branch.id})
        return branch

    async def delete_branch(self, branch_id: UUID | None) -> None:
        if branch_id is None:
            raise InvalidInputError("Branch ID is required", field="id")
        branch = await get_or_404(self.db, Branch, branch_id, "Branch")
        if (
            await exists(self.db, User, User.branch_id == branch_id)
            or await exists(self.db, Pizza, Pizza.branch_id == branch_id)
            or await exists(self.db, Order, Order.branch_id == branch_id)
        ):
            raise BusinessRuleError(
                "Branch has associated users, pizzas or orders; deactivate it instead",
                "BRANCH_IN_USE",
            )
        await self.db.delete(branch)
        await self.db.commit()
        logger.info(f"Branch deleted: {branch.name}", extra={"entity_id": branch_id})
