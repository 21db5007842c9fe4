"""Lookup Helpers — fetch-or-404 and uniqueness checks shared by all services.

Invariants:
    - get_or_404 raises ResourceNotFoundError("<Label>") when the row is missing
    - exists() never loads full rows (SELECT 1 ... LIMIT 1)
    - commit_unique maps a lost uniqueness race to DuplicateResourceError (400)
"""

from typing import TypeVar
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from sh_pizza.core.errors import DuplicateResourceError, ResourceNotFoundError

ModelT = TypeVar("ModelT")


async def get_or_404(
    db: AsyncSession, model: type[ModelT], entity_id: UUID, label: str,
) -> ModelT:
    entity = await db.get(model, entity_id)
    if entity is None:
        raise ResourceNotFoundError(label)
    return entity


async def exists(db: AsyncSession, model: type, *conditions) -> bool:
    """True when any row of `model` matches all conditions."""
    result = await db.execute(
        select(1).select_from(model).where(*conditions).limit(1),
    )
    return result.first() is not None


async def count_rows(db: AsyncSession, query) -> int:
    """Row count of an arbitrary SELECT (used for pagination totals)."""
    total = await db.scalar(
        select(func.count()).select_from(query.order_by(None).subquery()),
    )
    return total or 0


async def commit_unique(db: AsyncSession, message: str) -> None:
    """Commit; a unique-constraint race surfaces as DuplicateResourceError."""
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise DuplicateResourceError(message) from None
