"""
Request and response schemas for API endpoints.
"""
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    TokenRefreshResponse,
    UserInfoResponse,
)
from app.schemas.member import (
    MemberCreate,
    MemberUpdate,
    MemberFilterParams,
    MemberWithUser,
    MemberResponse,
    MemberListResponse,
    UserSummary,
)
from app.schemas.department import (
    DepartmentCreate,
    DepartmentUpdate,
    DepartmentResponse,
    DepartmentListResponse,
)

__all__ = [
    # Auth
    "LoginRequest",
    "LoginResponse",
    "TokenRefreshResponse",
    "UserInfoResponse",
    # Member
    "MemberCreate",
    "MemberUpdate",
    "MemberFilterParams",
    "MemberWithUser",
    "MemberResponse",
    "MemberListResponse",
    "UserSummary",
    # Department
    "DepartmentCreate",
    "DepartmentUpdate",
    "DepartmentResponse",
    "DepartmentListResponse",
]
