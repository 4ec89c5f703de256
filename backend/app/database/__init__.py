"""
Database module - MongoDB connection and database definitions.
"""
from app.database.connections import (
    get_mongo_client,
    close_connections,
    get_database,
)
from app.database.databases import directory_db

__all__ = [
    "get_mongo_client",
    "close_connections",
    "get_database",
    "directory_db",
]
