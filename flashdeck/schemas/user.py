"""
User schemas.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class UserForm(BaseModel):
    """Create/update form for a user. Only provided fields are written on update."""
    name: Optional[str] = Field(None, max_length=100, description="Display name")
    email: Optional[str] = Field(None, max_length=100, description="Email address")


class UserResponse(BaseModel):
    """User response schema."""
    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
