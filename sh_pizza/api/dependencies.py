"""Request Dependencies — bearer-token session, role gates and page parameters.

Invariants:
    - Missing, malformed, expired or orphaned tokens → AuthenticationError (401)
    - A valid session with the wrong role → AuthorizationError (401)
    - The user row is re-loaded on every request; token claims are never trusted
      for role checks

Design Decisions:
    - HTTPBearer(auto_error=False): absence of a token goes through our own error
      envelope instead of FastAPI's default 403
"""

import logging
from uuid import UUID

from fastapi import Depends, Query, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from sh_pizza.config import get_settings
from sh_pizza.core.domain_types import AccessArea
from sh_pizza.core.errors import AuthenticationError, AuthorizationError
from sh_pizza.core.pagination import PageRequest
from sh_pizza.core.roles import can_access
from sh_pizza.infrastructure.database import get_db
from sh_pizza.infrastructure.security import decode_access_token
from sh_pizza.models import User

logger = logging.getLogger(__name__)

_bearer = HTTPBearer(auto_error=False)


def _subject(claims: dict | None) -> UUID | None:
    if not claims or not claims.get("sub"):
        return None
    try:
        return UUID(str(claims["sub"]))
    except ValueError:
        return None


async def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Resolve the bearer token to a live user row."""
    if credentials is None:
        raise AuthenticationError()
    user_id = _subject(decode_access_token(credentials.credentials))
    if user_id is None:
        raise AuthenticationError()
    user = await db.get(User, user_id)
    if user is None:
        logger.warning(
            "Token for unknown user", extra={"path": request.url.path},
        )
        raise AuthenticationError()
    return user


def require_area(area: AccessArea):
    """Dependency factory: the session user must be allowed into `area`."""

    async def _check(
        request: Request, user: User = Depends(get_current_user),
    ) -> User:
        if not can_access(user.role, area):
            logger.warning(
                f"Role {user.role} denied on {area.value} area",
                extra={"user_id": user.id, "role": user.role, "path": request.url.path},
            )
            raise AuthorizationError(user.role)
        return user

    return _check


require_admin = require_area(AccessArea.ADMIN)


def page_params(
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1),
) -> PageRequest:
    """page >= 1; limit defaults to settings.default_page_size, capped at max_page_size."""
    settings = get_settings()
    if limit is None:
        limit = settings.default_page_size
    return PageRequest(page=page, limit=min(limit, settings.max_page_size))
