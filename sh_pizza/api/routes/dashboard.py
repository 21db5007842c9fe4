"""Dashboard Route — the signed-in user's home view, any role."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sh_pizza.api.dependencies import get_current_user
from sh_pizza.infrastructure.database import get_db
from sh_pizza.models import User
from sh_pizza.schemas.analytics import CustomerDashboard
from sh_pizza.services.dashboard import customer_dashboard

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("", response_model=CustomerDashboard)
async def get_dashboard(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await customer_dashboard(db, user)
