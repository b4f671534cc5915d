"""
Authentication router with login, refresh, logout and profile endpoints.

Accounts are created by administrators through the worker API, so there is
no self-registration.
"""
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from canteen.core.deps import get_current_user
from canteen.core.exceptions import InvalidIdentifierError, UserNotFoundError
from canteen.core.security import (
    blacklist_token,
    create_access_token,
    create_refresh_token,
    decode_token,
    is_token_blacklisted,
    verify_password,
)
from canteen.db.session import get_db
from canteen.models.user import User
from canteen.repositories.user import UserRepository
from canteen.schemas.auth import Token, TokenRefresh, UserLogin, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def issue_tokens(user: User) -> Token:
    return Token(
        access_token=create_access_token(subject=str(user.id)),
        refresh_token=create_refresh_token(subject=str(user.id)),
    )


@router.post("/login", response_model=Token)
def login(user_data: UserLogin, db: Session = Depends(get_db)) -> Token:
    """
    Authenticate user and return tokens.
    """
    user = UserRepository(db).find_user_by_email(user_data.email)
    if not user or not verify_password(user_data.password, user.hashed_password):
        logger.warning(f"Rejected login for {user_data.email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    return issue_tokens(user)


@router.post("/refresh", response_model=Token)
def refresh(token_data: TokenRefresh, db: Session = Depends(get_db)) -> Token:
    """
    Exchange a refresh token for a new access and refresh token.

    The old refresh token is blacklisted, so each one works only once.
    """
    old_token = token_data.refresh_token
    payload = decode_token(old_token)

    if payload is None or payload.get("type") != "refresh":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired refresh token",
        )

    if is_token_blacklisted(old_token, db):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Refresh token has already been used. Please log in again.",
        )

    try:
        user = UserRepository(db).find_user_by_id(payload.get("sub"))
    except (InvalidIdentifierError, UserNotFoundError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )

    exp_timestamp = payload.get("exp")
    if exp_timestamp:
        expires_at = datetime.fromtimestamp(exp_timestamp, tz=timezone.utc)
        blacklist_token(old_token, expires_at, db)

    return issue_tokens(user)


@router.post("/logout", status_code=status.HTTP_200_OK)
def logout(current_user: User = Depends(get_current_user)) -> dict:
    """
    Logout user (stateless - just acknowledges the logout).
    Client should discard tokens.
    """
    return {"message": "Successfully logged out"}


@router.get("/me", response_model=UserResponse)
def get_me(current_user: User = Depends(get_current_user)) -> User:
    """
    Get the current authenticated user's profile.
    """
    return current_user
