"""Auth Schemas — sign-in, sign-up, session user and password reset contracts.

Invariants:
    - Credentials fields are optional at the schema level; services raise the
      400 "X and Y are required" messages so clients get one readable sentence
    - SessionUser never exposes password_hash or reset_token
"""

from uuid import UUID

from sh_pizza.schemas.common import CamelModel, StrippedModel


class Credentials(StrippedModel):
    """Email + password pair (login, register, admin setup)."""
    email: str | None = None
    password: str | None = None


class ForgotPasswordRequest(StrippedModel):
    email: str | None = None


class ResetPasswordRequest(StrippedModel):
    token: str | None = None
    password: str | None = None


class SessionUser(CamelModel):
    """Public view of an account."""
    id: UUID
    email: str
    role: str
    branch_id: UUID | None = None


class TokenResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"
    user: SessionUser


class UserEnvelope(CamelModel):
    message: str
    user: SessionUser
