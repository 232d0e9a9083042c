"""
User model for authentication.

The is_admin flag is what admin-gated routes check.
"""

from sqlalchemy import Column, String, Boolean, DateTime, Text, func
from jobboard.core.database import Base


class User(Base):
    __tablename__ = "users"

    username = Column(String(25), primary_key=True)
    hashed_password = Column(Text, nullable=False)

    # User profile
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)

    # Account status
    is_active = Column(Boolean, default=True, nullable=False)
    is_admin = Column(Boolean, default=False, nullable=False)  # Admin role for protected endpoints

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<User(username='{self.username}', is_admin={self.is_admin})>"
