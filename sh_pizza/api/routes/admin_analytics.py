"""Admin Analytics Route — revenue and order rollups (ADMIN only)."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from sh_pizza.api.dependencies import require_admin
from sh_pizza.infrastructure.database import get_db
from sh_pizza.schemas.analytics import AnalyticsReport
from sh_pizza.services.analytics import build_analytics

router = APIRouter(
    prefix="/api/admin/analytics", tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=AnalyticsReport)
async def get_analytics(
    days: int = Query(30, ge=1, le=3650),
    db: AsyncSession = Depends(get_db),
):
    return await build_analytics(db, days)
