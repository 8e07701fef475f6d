"""User data model for todolist."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class User(BaseModel):
    """User model for todolist."""

    id: str = Field(..., description="Unique user identifier (UUID v4)")
    email: str = Field(..., description="User email address (unique)")
    password_hash: str = Field(..., repr=False, description="Opaque bcrypt password hash")
    full_name: str = Field(..., description="User display name")
    created_at: datetime = Field(..., description="User creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="User last update timestamp")
