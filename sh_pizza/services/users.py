"""User Admin Service — list, create, update and delete accounts of any role.

Invariants:
    - At least one ADMIN always remains: deleting or demoting the last one is refused
    - Emails stay unique across updates
    - Passwords are hashed here; responses never carry hashes
    - Listing totals count the filtered set, not the whole table
"""

import logging
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from sh_pizza.config import get_settings
from sh_pizza.core.credentials import check_password_length
from sh_pizza.core.domain_types import UserRole
from sh_pizza.core.errors import (
    BusinessRuleError, DuplicateResourceError, InvalidInputError,
)
from sh_pizza.core.pagination import PageRequest
from sh_pizza.core.roles import parse_role
from sh_pizza.infrastructure.security import hash_password
from sh_pizza.models import Branch, Order, User
from sh_pizza.schemas.user import UserCreate, UserUpdate
from sh_pizza.services.lookups import count_rows, exists, get_or_404

logger = logging.getLogger(__name__)


def _require_role(value: str) -> UserRole:
    role = parse_role(value)
    if role is None:
        raise InvalidInputError(
            f"Role must be one of: {', '.join(r.value for r in UserRole)}",
            field="role",
        )
    return role


class UserAdminService:
    """ADMIN-only account management."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.min_password_length = get_settings().password_min_length

    async def list_users(
        self, page: PageRequest, role: str | None = None, search: str | None = None,
    ) -> tuple[list[dict], int]:
        """Rows joined with their branch name, newest first, plus the filtered total."""
        query = select(User, Branch.name).outerjoin(Branch, User.branch_id == Branch.id)
        if role:
            query = query.where(User.role == role)
        if search:
            query = query.where(User.email == search)

        total = await count_rows(self.db, query)
        result = await self.db.execute(
            query.order_by(User.created_at.desc())
            .limit(page.limit).offset(page.offset),
        )
        rows = [
            {
                "id": user.id,
                "email": user.email,
                "role": user.role,
                "branch_id": user.branch_id,
                "branch_name": branch_name,
                "created_at": user.created_at,
                "updated_at": user.updated_at,
            }
            for user, branch_name in result.all()
        ]
        return rows, total

    async def create_user(self, body: UserCreate) -> User:
        if not body.email or not body.password or not body.role:
            raise InvalidInputError("Email, password, and role are required")
        check_password_length(body.password, self.min_password_length)
        role = _require_role(body.role)
        if await exists(self.db, User, User.email == body.email):
            raise DuplicateResourceError("User with this email already exists")
        if body.branch_id is not None:
            await get_or_404(self.db, Branch, body.branch_id, "Branch")

        user = User(
            email=body.email,
            password_hash=hash_password(body.password),
            role=role.value,
            branch_id=body.branch_id,
        )
        self.db.add(user)
        await self.db.commit()
        await self.db.refresh(user)
        logger.info(
            f"{role.value} user created: {user.email}",
            extra={"entity_id": user.id, "role": role.value},
        )
        return user

    async def update_user(self, body: UserUpdate) -> User:
        if body.id is None:
            raise InvalidInputError("User ID is required", field="id")
        user = await get_or_404(self.db, User, body.id, "User")
        changes = body.model_dump(exclude_unset=True, exclude={"id"})

        if changes.get("email") and changes["email"] != user.email:
            if await exists(self.db, User, User.email == changes["email"]):
                raise DuplicateResourceError("User with this email already exists")
            user.email = changes["email"]

        if changes.get("role"):
            role = _require_role(changes["role"])
            if user.role == UserRole.ADMIN.value and role != UserRole.ADMIN:
                await self._ensure_not_last_admin("Cannot demote the last admin user")
            user.role = role.value

        if "branch_id" in changes:
            if changes["branch_id"] is not None:
                await get_or_404(self.db, Branch, changes["branch_id"], "Branch")
            user.branch_id = changes["branch_id"]

        if changes.get("password"):
            check_password_length(changes["password"], self.min_password_length)
            user.password_hash = hash_password(changes["password"])

        await self.db.commit()
        await self.db.refresh(user)
        logger.info("User updated", extra={"entity_id": user.id})
        return user

    async def delete_user(self, user_id: UUID | None) -> None:
        if user_id is None:
            raise InvalidInputError("User ID is required", field="id")
        user = await get_or_404(self.db, User, user_id, "User")
        if user.role == UserRole.ADMIN.value:
            await self._ensure_not_last_admin("Cannot delete the last admin user")
        if await exists(self.db, Order, Order.customer_id == user.id):
            raise BusinessRuleError(
                "Cannot delete a user with orders", "USER_HAS_ORDERS",
            )
        await self.db.delete(user)
        await self.db.commit()
        logger.info("User deleted", extra={"entity_id": user_id})

    async def _ensure_not_last_admin(self, message: str) -> None:
        admins = await self.db.scalar(
            select(func.count()).select_from(User)
            .where(User.role == UserRole.ADMIN.value),
        )
        if (admins or 0) <= 1:
            raise BusinessRuleError(message, "LAST_ADMIN")
