"""Admin Setup Route — bootstrap the first ADMIN account (public, one-shot)."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from sh_pizza.infrastructure.database import get_db
from sh_pizza.schemas.auth import Credentials, UserEnvelope
from sh_pizza.services.auth import AuthService

router = APIRouter(prefix="/api/admin/setup", tags=["admin"])


@router.post("", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED)
async def setup_admin(body: Credentials, db: AsyncSession = Depends(get_db)):
    user = await AuthService(db).setup_admin(body.email, body.password)
    return {"message": "Admin user created successfully", "user": user}
