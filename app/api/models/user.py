"""
Pydantic schemas for User and authentication API.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Request body for registering a user."""

    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6, max_length=128)


class UserResponse(BaseModel):
    """Response model for user."""

    user_id: int
    username: str
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class TokenRequest(BaseModel):
    """Request body for signing in."""

    username: str
    password: str


class TokenResponse(BaseModel):
    """Bearer token issued on sign-in."""

    access_token: str
    token_type: str = "bearer"
