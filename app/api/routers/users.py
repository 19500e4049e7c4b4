"""
User account and sign-in API endpoints.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.dependencies import get_current_user, get_db
from app.api.models.user import TokenRequest, TokenResponse, UserCreate, UserResponse
from app.api.security import (
    CredentialsException,
    create_access_token,
    hash_password,
    verify_password,
)
from app.database import crud
from app.database.models import User

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])
auth_router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(user_in: UserCreate, db: Session = Depends(get_db)):
    """Register a new user."""
    try:
        user = crud.create_user(
            db,
            username=user_in.username,
            password_hash=hash_password(user_in.password),
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    logger.info(f"Registered user {user.user_id} ({user.username})")
    return user


@router.get("/me", response_model=UserResponse)
def get_me(current_user: User = Depends(get_current_user)):
    """Get the authenticated user's profile."""
    return current_user


@auth_router.post("/token", response_model=TokenResponse)
def login(credentials: TokenRequest, db: Session = Depends(get_db)):
    """Exchange username and password for a bearer token."""
    user = crud.get_user_by_username(db, credentials.username.strip())
    if user is None or not verify_password(credentials.password, user.password_hash):
        raise CredentialsException("Incorrect username or password")
    return TokenResponse(access_token=create_access_token(user.user_id))
