"""
Dependencies for dependency injection in routes.
"""
from app.dependencies.auth import CurrentUser, get_current_user, get_current_active_user

__all__ = [
    "CurrentUser",
    "get_current_user",
    "get_current_active_user",
]
