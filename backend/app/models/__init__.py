"""
Pydantic models for database documents.
"""
from app.models.user import User, UserRole
from app.models.member import Member
from app.models.department import Department

__all__ = [
    "User",
    "UserRole",
    "Member",
    "Department",
]
