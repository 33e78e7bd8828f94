from typing import Optional

import structlog
from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from jose.exceptions import ExpiredSignatureError, JWTClaimsError, JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from services.auth_service.models import User
from services.auth_service.repository import UserRepository
from shared.config.database import get_db
from shared.errors import AuthError
from shared.observability.metrics import ecomm_auth_failures_total

from .jwt_handler import decode_access_token

logger = structlog.get_logger(__name__)

# Defines the expected header format (Bearer <token>)
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)


def _fail(reason: str, message: str) -> AuthError:
    ecomm_auth_failures_total.labels(reason=reason).inc()
    logger.info("auth_failed", reason=reason)
    return AuthError(message)


def extract_token(request: Request, bearer_token: Optional[str]) -> Optional[str]:
    """Header first, then the JWT cookie."""
    if bearer_token:
        return bearer_token
    cookie_name = request.app.state.settings.jwt_cookie_name
    return request.cookies.get(cookie_name) or None


async def get_current_user(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Dependency to validate the JWT and resolve the authenticated User."""
    token = extract_token(request, token)
    if not token:
        raise _fail("missing", "Not authorized, no token")

    try:
        payload = decode_access_token(token, request.app.state.settings)
    except ExpiredSignatureError:
        raise _fail("expired", "Not authorized, token expired")
    except JWTClaimsError:
        raise _fail("failed", "Not authorized, token failed")
    except JWTError:
        raise _fail("invalid", "Not authorized, invalid token")

    user_id = payload.get("sub")
    if not user_id:
        raise _fail("failed", "Not authorized, token failed")

    user = await UserRepository.get_by_id(db, str(user_id))
    if user is None:
        raise _fail("user_not_found", "Not authorized, user not found")

    # Store in request state for downstream use (like rate limiting)
    request.state.user = user
    return user


async def require_admin(user: User = Depends(get_current_user)) -> User:
    """Admin-only gate. Runs after get_current_user has populated request.state.user."""
    if user is None or not user.is_admin:
        raise _fail("not_admin", "Not authorized as an admin")
    return user
