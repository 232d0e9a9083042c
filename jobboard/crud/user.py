"""
CRUD operations for User model.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from jobboard.core.errors import BadRequestError
from jobboard.core.security import get_password_hash, verify_password
from jobboard.models.user import User
from jobboard.schemas.user import UserRegisterRequest

logger = logging.getLogger(__name__)


def get_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def register(db: Session, user_data: UserRegisterRequest, is_admin: bool = False) -> User:
    """
    Create a user with a hashed password.

    Raises:
        BadRequestError: If the username is taken
    """
    if get_by_username(db, user_data.username):
        raise BadRequestError(f"Duplicate username: {user_data.username}")

    user = User(
        username=user_data.username,
        hashed_password=get_password_hash(user_data.password),
        first_name=user_data.first_name,
        last_name=user_data.last_name,
        email=user_data.email,
        is_admin=is_admin,
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info(f"New user registered: {user.username}")
    return user


def authenticate(db: Session, username: str, password: str) -> Optional[User]:
    """Return the active user matching these credentials, or None."""
    user = get_by_username(db, username)
    if not user or not user.is_active:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user
