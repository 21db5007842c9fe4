"""Admin Dashboard Route — headline counters for the console home page (ADMIN only)."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sh_pizza.api.dependencies import require_admin
from sh_pizza.infrastructure.database import get_db
from sh_pizza.schemas.analytics import AdminStats
from sh_pizza.services.dashboard import admin_stats

router = APIRouter(
    prefix="/api/admin/dashboard", tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=AdminStats)
async def get_admin_dashboard(db: AsyncSession = Depends(get_db)):
    return await admin_stats(db)
