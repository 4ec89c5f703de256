"""
User model for identity records owned by the auth layer.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class UserRole:
    """Role labels assigned by the auth layer."""
    USER = "user"
    ADMIN = "admin"


class User(BaseModel):
    """
    User document model for the directory ``user`` collection.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    name: str = Field("", description="Display name")
    email: str = Field(..., description="Unique email address")
    email_verified: bool = Field(False, alias="emailVerified")
    role: Optional[str] = Field(UserRole.USER, description="Role label")
    banned: bool = Field(False, description="Whether the account is banned")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    class Config:
        populate_by_name = True
