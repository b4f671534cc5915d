"""
Schemas shared between the worker, menu and order APIs.
"""
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class UserView(BaseModel):
    """Public view of a user (never carries the password hash)."""
    id: UUID
    email: str
    first_name: str
    last_name: str

    model_config = ConfigDict(from_attributes=True)
