"""
Member model for the directory database.
"""
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


class Member(BaseModel):
    """
    Member document model for the ``tbl_members`` collection.

    A member is a role/department assignment for a user; the identity
    itself lives in the ``user`` collection and is referenced by ``userId``.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    user_id: str = Field(..., alias="userId", description="Referenced user ID")
    department_slug: Optional[str] = Field(
        None, alias="departmentSlug", description="Referenced department slug"
    )
    role: Optional[str] = Field(None, description="Free-form role label")
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Schema-less key/value data"
    )
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    class Config:
        populate_by_name = True
