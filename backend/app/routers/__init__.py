"""
API Routers module.
"""
from app.routers import auth, health, members, departments

__all__ = ["auth", "health", "members", "departments"]
