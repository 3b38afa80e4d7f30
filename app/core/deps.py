"""
FastAPI dependencies for authentication and authorization.

get_current_user never fails: an absent or invalid token simply yields no
user. The ensure_* dependencies then enforce what each route needs.
"""

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError

from app.core.exceptions import UnauthorizedError
from app.core.security import decode_token

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme (Authorization: Bearer <token>)
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[dict]:
    """
    Return the token payload ({"sub", "is_admin"}) if a valid token was sent.
    """
    if not credentials:
        return None

    try:
        payload = decode_token(credentials.credentials)
    except JWTError as e:
        logger.info(f"Rejected bearer token: {e}")
        return None

    if payload.get("sub") is None:
        return None
    return payload


def ensure_logged_in(user: Optional[dict] = Depends(get_current_user)) -> dict:
    """
    Require any authenticated user.

    Raises:
        UnauthorizedError: If no valid token was supplied
    """
    if user is None:
        raise UnauthorizedError()
    return user


def ensure_admin(user: dict = Depends(ensure_logged_in)) -> dict:
    """
    Require an authenticated admin.

    Raises:
        UnauthorizedError: If the user is missing or not an admin
    """
    if not user.get("is_admin"):
        raise UnauthorizedError()
    return user


def ensure_correct_user_or_admin(
    username: str,
    user: dict = Depends(ensure_logged_in),
) -> dict:
    """
    Require the user named in the path, or an admin.

    Raises:
        UnauthorizedError: If the token belongs to someone else
    """
    if not (user.get("is_admin") or user.get("sub") == username):
        raise UnauthorizedError()
    return user
