"""Security Primitives — bcrypt password hashing, JWT access tokens, reset tokens.

Invariants:
    - Plain passwords never leave this module (only hashes are returned)
    - Access tokens carry sub (user id), role, branch_id and exp; signed with settings.secret_key
    - decode_access_token returns None for any malformed, tampered or expired token
    - Reset tokens are URL-safe random strings (secrets.token_urlsafe)

Design Decisions:
    - passlib CryptContext with bcrypt: cost factor from settings so tests can run cheap
    - python-jose for JWT: HS256 by default, algorithm configurable
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from functools import lru_cache

from jose import JWTError, jwt
from passlib.context import CryptContext

from sh_pizza.config import get_settings

logger = logging.getLogger(__name__)


@lru_cache
def _pwd_context() -> CryptContext:
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=get_settings().password_hash_rounds,
    )


def hash_password(password: str) -> str:
    return _pwd_context().hash(password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    """Constant-time check of a password against its stored hash."""
    try:
        return _pwd_context().verify(plain_password, password_hash)
    except (ValueError, TypeError):
        logger.warning("Stored password hash is not a recognised bcrypt hash")
        return False


def create_access_token(
    user_id: str, role: str, branch_id: str | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """Sign a session token for the given user."""
    settings = get_settings()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    claims = {
        "sub": user_id,
        "role": role,
        "branch_id": branch_id,
        "exp": expire,
    }
    return jwt.encode(claims, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict | None:
    settings = get_settings()
    try:
        return jwt.decode(
            token, settings.secret_key, algorithms=[settings.jwt_algorithm],
        )
    except JWTError:
        return None


def generate_reset_token() -> str:
    return secrets.token_urlsafe(32)
