"""
Authentication endpoints.

- POST /auth/token: Exchange username/password for a JWT
- POST /auth/register: Create a (non-admin) user and return a JWT
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.core.errors import UnauthorizedError
from jobboard.core.security import create_user_token
from jobboard.crud import user as user_crud
from jobboard.schemas.user import TokenRequest, TokenResponse, UserRegisterRequest

logger = logging.getLogger(__name__)


def create_router() -> APIRouter:
    router = APIRouter(prefix="/auth", tags=["Authentication"])

    @router.post("/token", response_model=TokenResponse)
    def login(request: TokenRequest, db: Session = Depends(get_db)):
        """
        Authenticate a user and return a JWT.

        The token carries the username and admin flag; send it back as
        "Authorization: Bearer <token>".
        """
        user = user_crud.authenticate(db, request.username, request.password)
        if user is None:
            logger.warning(f"Failed login for {request.username}")
            raise UnauthorizedError("Invalid username/password")

        return TokenResponse(token=create_user_token(user))

    @router.post("/register", status_code=201, response_model=TokenResponse)
    def register(request: UserRegisterRequest, db: Session = Depends(get_db)):
        """Register a new user. Registered users are never admins."""
        user = user_crud.register(db, request)
        return TokenResponse(token=create_user_token(user))

    return router
