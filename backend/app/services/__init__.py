"""
Service layer for business logic.
"""
from app.services.auth_service import AuthService
from app.services.member_service import MemberService
from app.services.department_service import DepartmentService

__all__ = [
    "AuthService",
    "MemberService",
    "DepartmentService",
]
