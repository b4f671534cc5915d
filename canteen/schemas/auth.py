"""
Auth-related Pydantic schemas for request/response validation.
"""
from pydantic import BaseModel, ConfigDict, EmailStr
from uuid import UUID


class UserLogin(BaseModel):
    """Schema for user login request."""
    email: EmailStr
    password: str


class Token(BaseModel):
    """Schema for token response."""
    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class TokenRefresh(BaseModel):
    """Schema for token refresh request."""
    refresh_token: str


class UserResponse(BaseModel):
    """Schema for the authenticated user's profile."""
    id: UUID
    email: str
    first_name: str
    last_name: str
    admin: bool

    model_config = ConfigDict(from_attributes=True)
