"""
Pydantic schemas for user registration and token issue.
"""

from pydantic import BaseModel, EmailStr, Field


class UserRegisterRequest(BaseModel):
    """Request schema for user registration."""
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(
        ...,
        min_length=5,
        max_length=72,  # bcrypt limit
    )
    first_name: str = Field(..., alias="firstName", min_length=1, max_length=30)
    last_name: str = Field(..., alias="lastName", min_length=1, max_length=30)
    email: EmailStr

    class Config:
        extra = "forbid"


class TokenRequest(BaseModel):
    """Request schema for exchanging credentials for a token."""
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=1)

    class Config:
        extra = "forbid"


class TokenResponse(BaseModel):
    token: str
