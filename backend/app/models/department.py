"""
Department model for the directory database.
"""
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


class Department(BaseModel):
    """
    Department document model for the ``tbl_departments`` collection.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    name: str = Field(..., description="Department name")
    slug: str = Field(..., description="Unique slug, referenced by members")
    logo: Optional[str] = Field(None, description="Logo URL")
    metadata: Optional[dict[str, Any]] = Field(default_factory=dict)
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    class Config:
        populate_by_name = True
