"""
Directory database configuration.
Stores members, departments and the auth layer's user/account records.

Structure:
- tbl_members: Role/department assignment per user
- tbl_departments: Organizational units keyed by slug
- user: Identity records (owned by the auth layer)
- account: Credential accounts linked to users (owned by the auth layer)
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import OperationFailure

logger = logging.getLogger(__name__)

DB_NAME = "kpiv2"


class Collections:
    """Collection names in the directory database."""
    MEMBERS = "tbl_members"
    DEPARTMENTS = "tbl_departments"
    USERS = "user"
    ACCOUNTS = "account"

    # Index definitions for each collection
    INDEXES = {
        "tbl_members": [
            {"keys": [("userId", 1)]},
            {"keys": [("departmentSlug", 1)]},
        ],
        "tbl_departments": [
            {"keys": [("slug", 1)], "unique": True},
        ],
        "user": [
            {"keys": [("email", 1)], "unique": True},
        ],
        "account": [
            {"keys": [("userId", 1)]},
        ],
    }


async def create_directory_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create indexes for directory database collections."""
    for collection_name, indexes in Collections.INDEXES.items():
        collection = db[collection_name]
        for index_def in indexes:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            try:
                await collection.create_index(keys, **kwargs)
            except OperationFailure as e:
                # Index might already exist with different options
                logger.debug(f"Index on {collection_name} not created: {e}")
