"""
FastAPI dependencies for authentication and authorization.

get_admin_user is the admin gate: listed in a route's dependencies, it
fails the request before the handler body runs.
"""

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.core.errors import ForbiddenError, UnauthorizedError
from jobboard.core.security import decode_token
from jobboard.models.user import User

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme (Authorization: Bearer <token>)
# auto_error is off so a missing header goes through our own 401
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    """
    Extract and validate the current user from the bearer token.

    Raises:
        UnauthorizedError: Missing, invalid or expired token, or the user
            is unknown or inactive
    """
    if credentials is None:
        raise UnauthorizedError("Authentication required")

    try:
        payload = decode_token(credentials.credentials)
    except JWTError:
        logger.warning("Rejected invalid bearer token")
        raise UnauthorizedError("Could not validate credentials")

    username = payload.get("sub")
    if username is None:
        raise UnauthorizedError("Could not validate credentials")

    user = db.query(User).filter(User.username == username).first()
    if user is None or not user.is_active:
        raise UnauthorizedError("Could not validate credentials")

    return user


def get_admin_user(user: User = Depends(get_current_user)) -> User:
    """
    Require an authenticated user with the admin flag.

    Raises:
        ForbiddenError: The user is authenticated but not an admin
    """
    if not user.is_admin:
        logger.warning(f"Non-admin user {user.username} denied admin route")
        raise ForbiddenError("Admin privileges required")
    return user
