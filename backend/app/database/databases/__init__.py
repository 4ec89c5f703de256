"""
Database definitions and collection constants.
"""
from app.database.databases import directory_db

__all__ = ["directory_db"]
