"""Auth Service — sign-in, customer sign-up, first-admin setup and password reset.

Invariants:
    - Unknown email and wrong password fail identically (no account enumeration)
    - request_password_reset answers the same way whether or not the email exists
    - Reset tokens are single-use and expire after settings.reset_token_expire_minutes
    - setup_admin succeeds only while no ADMIN exists

Design Decisions:
    - No mail provider: the reset link is written to the log for operators
    - Reset token kept on the users row (one outstanding reset per account)
"""

import logging
from datetime import timedelta

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sh_pizza.config import get_settings
from sh_pizza.core.clock import as_utc, utcnow
from sh_pizza.core.credentials import check_email_and_password, check_password_length
from sh_pizza.core.domain_types import UserRole
from sh_pizza.core.errors import (
    AuthenticationError, BusinessRuleError, DuplicateResourceError, InvalidInputError,
)
from sh_pizza.infrastructure.security import (
    create_access_token, generate_reset_token, hash_password, verify_password,
)
from sh_pizza.models import User
from sh_pizza.services.lookups import exists

logger = logging.getLogger(__name__)

RESET_REQUESTED_MESSAGE = (
    "If an account with that email exists, a reset link has been sent."
)


async def find_user_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


def issue_token(user: User) -> str:
    return create_access_token(
        str(user.id), user.role,
        str(user.branch_id) if user.branch_id else None,
    )


class AuthService:
    """Account-level operations that do not require an admin session."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.settings = get_settings()

    async def authenticate(self, email: str | None, password: str | None) -> User:
        if not email or not password:
            raise InvalidInputError("Email and password are required")
        user = await find_user_by_email(self.db, email)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Failed sign-in attempt", extra={"path": "/api/auth/login"})
            raise AuthenticationError("Invalid email or password")
        logger.info("User signed in", extra={"user_id": user.id, "role": user.role})
        return user

    async def register_customer(self, email: str | None, password: str | None) -> User:
        """Public sign-up; always creates a CUSTOMER."""
        email, password = check_email_and_password(
            email, password, self.settings.password_min_length,
        )
        return await self._create_user(email, password, UserRole.CUSTOMER)

    async def setup_admin(self, email: str | None, password: str | None) -> User:
        """Create the very first ADMIN account."""
        email, password = check_email_and_password(
            email, password, self.settings.password_min_length,
        )
        if await exists(self.db, User, User.role == UserRole.ADMIN.value):
            logger.info("Admin setup refused: admin already exists")
            raise BusinessRuleError("Admin user already exists", "ADMIN_EXISTS")
        user = await self._create_user(email, password, UserRole.ADMIN)
        logger.info(f"Admin user created: {user.email}", extra={"user_id": user.id})
        return user

    async def _create_user(self, email: str, password: str, role: UserRole) -> User:
        if await exists(self.db, User, User.email == email):
            raise DuplicateResourceError("User with this email already exists")
        user = User(
            email=email,
            password_hash=hash_password(password),
            role=role.value,
        )
        self.db.add(user)
        await self.db.commit()
        await self.db.refresh(user)
        return user

    async def request_password_reset(self, email: str | None) -> str:
        if not email:
            raise InvalidInputError("Email is required", field="email")
        user = await find_user_by_email(self.db, email)
        if user is None:
            return RESET_REQUESTED_MESSAGE

        token = generate_reset_token()
        user.reset_token = token
        user.reset_token_expires_at = utcnow() + timedelta(
            minutes=self.settings.reset_token_expire_minutes,
        )
        await self.db.commit()
        logger.info(
            f"Password reset link: {self.settings.password_reset_url}?token={token}",
            extra={"user_id": user.id},
        )
        return RESET_REQUESTED_MESSAGE

    async def reset_password(self, token: str | None, password: str | None) -> None:
        if not token or not password:
            raise InvalidInputError("Token and password are required")
        check_password_length(password, self.settings.password_min_length)

        result = await self.db.execute(
            select(User).where(User.reset_token == token),
        )
        user = result.scalar_one_or_none()
        if (
            user is None
            or user.reset_token_expires_at is None
            or as_utc(user.reset_token_expires_at) <= utcnow()
        ):
            raise BusinessRuleError(
                "Invalid or expired reset token", "INVALID_RESET_TOKEN",
            )

        user.password_hash = hash_password(password)
        user.reset_token = None
        user.reset_token_expires_at = None
        await self.db.commit()
        logger.info("Password reset completed", extra={"user_id": user.id})
