"""
Member request/response schemas.
"""
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, Field

from app.core.pagination import DEFAULT_LIMIT, DEFAULT_PAGE
from app.models.member import Member


class MemberCreate(BaseModel):
    """Create member request."""
    user_id: str = Field(..., alias="userId", min_length=1, description="Referenced user ID")
    department_slug: Optional[str] = Field(
        None, alias="departmentSlug", description="Department slug"
    )
    role: Optional[str] = Field(None, description="Role label")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Free-form metadata")

    class Config:
        populate_by_name = True


class MemberUpdate(BaseModel):
    """
    Partial member update.

    Empty strings for ``department``/``role`` leave the stored value alone.
    ``metadata`` keys are merged into the stored mapping.
    """
    department_slug: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("department", "departmentSlug", "department_slug"),
        description="New department slug",
    )
    role: Optional[str] = Field(None, description="New role label")
    metadata: Optional[dict[str, Any]] = Field(None, description="Metadata keys to set")


class MemberFilterParams(BaseModel):
    """Filters and pagination for listing members."""
    department: Optional[str] = None
    role: Optional[str] = None
    page: int = Field(DEFAULT_PAGE, ge=1)
    limit: int = Field(DEFAULT_LIMIT, ge=1)


class UserSummary(BaseModel):
    """User fields joined onto member responses."""
    id: Optional[str] = Field(None, alias="_id")
    name: Optional[str] = None
    email: Optional[str] = None
    email_verified: Optional[bool] = Field(None, alias="emailVerified")
    role: Optional[str] = None

    class Config:
        populate_by_name = True


class MemberWithUser(Member):
    """
    Member joined with its user record.

    Every member field is optional: a lookup by user id returns the user
    even when no member record exists.
    """
    user_id: Optional[str] = Field(None, alias="userId")
    metadata: Optional[dict[str, Any]] = None
    user: Optional[UserSummary] = None


class MemberResponse(BaseModel):
    """Single member response."""
    member: Optional[MemberWithUser] = None
    message: str


class MemberListResponse(BaseModel):
    """Paginated member list response."""
    docs: list[MemberWithUser] = Field(..., description="Members of the current page")
    total: int = Field(..., description="Members matching the filter")
    page: int = Field(..., description="Current page")
    limit: int = Field(..., description="Items per page")
    total_pages: int = Field(..., alias="totalPages")
    has_next_page: bool = Field(..., alias="hasNextPage")
    has_previous_page: bool = Field(..., alias="hasPreviousPage")
    message: str

    class Config:
        populate_by_name = True
