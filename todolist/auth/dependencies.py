"""FastAPI dependencies for authentication."""

import logging
import uuid
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from todolist.auth.jwt import TokenIssuer
from todolist.auth.passwords import PasswordHasher

logger = logging.getLogger(__name__)

# HTTP Bearer token security scheme
security = HTTPBearer(auto_error=False)


def get_token_issuer(request: Request) -> TokenIssuer:
    """Token issuer created once at application startup."""
    return request.app.state.token_issuer


def get_password_hasher(request: Request) -> PasswordHasher:
    """Password hasher created once at application startup."""
    return request.app.state.password_hasher


def _unauthenticated(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def parse_user_id(claim: Optional[object]) -> Optional[str]:
    """Return the canonical user id from a `sub` claim, or None if it is not a UUID."""
    if not isinstance(claim, str) or not claim:
        return None
    try:
        return str(uuid.UUID(claim))
    except ValueError:
        return None


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> str:
    """Get the authenticated user's id from a bearer token.

    Args:
        credentials: HTTP Bearer token credentials
        token_issuer: Validates signature, expiry, issuer and audience

    Returns:
        User id taken from the token's `sub` claim

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired, or
            carries no usable subject
    """
    if not credentials or not credentials.credentials:
        raise _unauthenticated("Not authenticated")

    payload = token_issuer.decode(credentials.credentials)
    if payload is None:
        raise _unauthenticated("Invalid or expired token")

    user_id = parse_user_id(payload.get("sub"))
    if user_id is None:
        # A correctly signed token always carries a subject; reject anyway.
        logger.warning("Signed token without a valid subject claim")
        raise _unauthenticated("User ID not found in token")

    return user_id
