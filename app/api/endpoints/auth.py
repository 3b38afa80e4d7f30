"""
Authentication endpoints.

- POST /auth/token: Exchange username/password for a JWT
- POST /auth/register: Create a (non-admin) account and return a JWT
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import create_token
from app.crud import user as user_crud
from app.schemas.user import TokenResponse, UserAuthRequest, UserRegisterRequest

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)


@router.post("/token", response_model=TokenResponse)
def get_token(request: UserAuthRequest, db: Session = Depends(get_db)):
    """
    Authenticate and return a JWT usable as `Authorization: Bearer <token>`.
    """
    user = user_crud.authenticate(db, request.username, request.password)
    logger.info(f"Issued token for {user['username']}")
    return TokenResponse(token=create_token(user["username"], user["isAdmin"]))


@router.post("/register", status_code=201, response_model=TokenResponse)
def register(request: UserRegisterRequest, db: Session = Depends(get_db)):
    """
    Register a new user account and log them in.
    """
    new_user = user_crud.register(db, request)
    return TokenResponse(token=create_token(new_user["username"], new_user["isAdmin"]))
