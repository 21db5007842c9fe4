"""Auth Routes — sign-in, sign-up, current session and password reset.

Invariants:
    - All routes here are public except GET /me
    - Responses carry the SessionUser view only (never hashes or reset tokens)
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from sh_pizza.api.dependencies import get_current_user
from sh_pizza.infrastructure.database import get_db
from sh_pizza.models import User
from sh_pizza.schemas.auth import (
    Credentials, ForgotPasswordRequest, ResetPasswordRequest,
    SessionUser, TokenResponse, UserEnvelope,
)
from sh_pizza.schemas.common import MessageResponse
from sh_pizza.services.auth import AuthService, issue_token

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
async def login(body: Credentials, db: AsyncSession = Depends(get_db)):
    user = await AuthService(db).authenticate(body.email, body.password)
    return {"access_token": issue_token(user), "user": user}


@router.post(
    "/register", response_model=UserEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def register(body: Credentials, db: AsyncSession = Depends(get_db)):
    """Public customer sign-up."""
    user = await AuthService(db).register_customer(body.email, body.password)
    return {"message": "Account created successfully", "user": user}


@router.get("/me", response_model=SessionUser)
async def me(user: User = Depends(get_current_user)):
    return user


@router.post("/forgot-password", response_model=MessageResponse)
async def forgot_password(
    body: ForgotPasswordRequest, db: AsyncSession = Depends(get_db),
):
    message = await AuthService(db).request_password_reset(body.email)
    return {"message": message}


@router.post("/reset-password", response_model=MessageResponse)
async def reset_password(
    body: ResetPasswordRequest, db: AsyncSession = Depends(get_db),
):
    await AuthService(db).reset_password(body.token, body.password)
    return {"message": "Password has been reset successfully"}
