"""
Department request/response schemas.
"""
from typing import Any, Optional, Union

from pydantic import BaseModel, Field

from app.models.department import Department


class DepartmentCreate(BaseModel):
    """Create department request."""
    name: str = Field(..., min_length=1, max_length=200, description="Department name")
    slug: str = Field(..., min_length=1, max_length=100, description="Unique slug")
    logo: Optional[str] = Field(None, description="Logo URL")
    metadata: Union[dict[str, Any], str, None] = Field(
        None,
        description="Metadata mapping, or the same mapping JSON-encoded"
    )


class DepartmentUpdate(BaseModel):
    """Partial department update."""
    name: Optional[str] = Field(None, description="New name (ignored when empty)")
    logo: Optional[str] = Field(None, description="New logo URL (ignored when empty)")
    metadata: Optional[dict[str, Any]] = Field(None, description="Metadata keys to set")


class DepartmentResponse(BaseModel):
    """Single department response."""
    department: Optional[Department] = None
    message: str


class DepartmentListResponse(BaseModel):
    """Department list response."""
    departments: list[Department]
    message: str
