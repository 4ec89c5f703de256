"""
Member service: filtered listing joined with users, lookups and merge updates.
"""
import asyncio
import logging
import re
from datetime import datetime, timezone
from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from app.core.pagination import build_page, compute_skip
from app.database.databases import directory_db
from app.schemas.member import MemberCreate, MemberFilterParams, MemberUpdate

logger = logging.getLogger(__name__)


def to_object_id(value: Any) -> ObjectId:
    """
    Parse an identifier into an ObjectId.

    Raises:
        ValueError: If the value is not a valid 24-hex-character id
    """
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Invalid identifier: {value!r}")
    try:
        return ObjectId(value)
    except InvalidId:
        raise ValueError(f"Invalid identifier: {value!r}")


def serialize_doc(doc: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
    """Copy a document with its ``_id`` rendered as a string."""
    if doc is None:
        return None
    result = dict(doc)
    if "_id" in result:
        result["_id"] = str(result["_id"])
    return result


class MemberService:
    """Service for member operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the directory database."""
        self.db = db
        self.members = db[directory_db.Collections.MEMBERS]
        self.users = db[directory_db.Collections.USERS]

    # ==================== Listing ====================

    @staticmethod
    def build_query(department: Optional[str] = None, role: Optional[str] = None) -> dict:
        """Equality filter on the provided fields only."""
        query: dict[str, Any] = {}
        if department:
            query["departmentSlug"] = department
        if role:
            query["role"] = role
        return query

    async def get_members(self, filters: Optional[MemberFilterParams] = None) -> dict[str, Any]:
        """
        Get a page of members, each joined with its user record.

        Records come back in the collection's natural order; no sort is applied.

        Args:
            filters: Department/role filters and pagination

        Returns:
            dict with docs, total, page, limit, totalPages, hasNextPage, hasPreviousPage
        """
        filters = filters or MemberFilterParams()
        query = self.build_query(filters.department, filters.role)
        skip = compute_skip(filters.page, filters.limit)

        cursor = self.members.find(query).skip(skip).limit(filters.limit)
        members, total = await asyncio.gather(
            cursor.to_list(length=filters.limit),
            self.members.count_documents(query),
        )

        # gather keeps input order regardless of completion order
        docs = await asyncio.gather(*(self._with_user(m) for m in members))

        return build_page(list(docs), total, filters.page, filters.limit)

    async def _with_user(self, member: dict[str, Any]) -> dict[str, Any]:
        """Attach the member's user; a failed lookup yields ``user: None``."""
        user_id = member.get("userId")
        try:
            user = await self.users.find_one({"_id": to_object_id(user_id)})
        except (ValueError, PyMongoError) as e:
            logger.warning(f"Failed to fetch user for member {user_id}: {e}")
            user = None

        return {**serialize_doc(member), "user": serialize_doc(user)}

    # ==================== Single Lookups ====================

    async def get_member_by_user_id(self, user_id: str) -> dict[str, Any]:
        """
        Get the member for a user, merged with the user record.

        A missing member is not an error: the result then only holds ``user``.

        Raises:
            ValueError: If ``user_id`` is not a valid identifier
        """
        user_oid = to_object_id(user_id)

        member, user = await asyncio.gather(
            self.members.find_one({"userId": user_id}),
            self.users.find_one({"_id": user_oid}),
        )

        return {**(serialize_doc(member) or {}), "user": serialize_doc(user)}

    async def get_member_by_name(self, name: str) -> dict[str, Any]:
        """
        Get a member by a case-insensitive substring of the user's name.

        Only the first matching user (natural order) is used; with several
        matching users the result depends on storage order.
        """
        user = await self.users.find_one(
            {"name": {"$regex": re.escape(name), "$options": "i"}}
        )
        if user is None:
            return {"user": None}

        member = await self.members.find_one({"userId": str(user["_id"])})
        return {**(serialize_doc(member) or {}), "user": serialize_doc(user)}

    # ==================== Mutations ====================

    async def create_member(self, request: MemberCreate) -> dict[str, Any]:
        """Create a member record."""
        now = datetime.now(timezone.utc)
        member_doc = {
            "userId": request.user_id,
            "departmentSlug": request.department_slug,
            "role": request.role,
            "metadata": request.metadata,
            "createdAt": now,
            "updatedAt": now,
        }

        result = await self.members.insert_one(member_doc)
        member_doc["_id"] = result.inserted_id
        return serialize_doc(member_doc)

    @staticmethod
    def build_update(update: MemberUpdate) -> dict[str, Any]:
        """
        Build the ``$set`` document for a partial update.

        ``departmentSlug`` and ``role`` are only set when non-empty. Metadata
        keys are set one by one with dot notation so unspecified keys survive.
        """
        fields: dict[str, Any] = {}
        if update.department_slug:
            fields["departmentSlug"] = update.department_slug
        if update.role:
            fields["role"] = update.role

        if update.metadata is not None:
            for key, value in update.metadata.items():
                fields[f"metadata.{key}"] = value

        fields["updatedAt"] = datetime.now(timezone.utc)
        return fields

    async def update_member(self, user_id: str, update: MemberUpdate) -> Optional[dict[str, Any]]:
        """
        Apply a partial update to the member whose ``userId`` matches.

        Returns:
            The updated member, or None if no member matches
        """
        updated = await self.members.find_one_and_update(
            {"userId": user_id},
            {"$set": self.build_update(update)},
            return_document=ReturnDocument.AFTER,
        )
        return serialize_doc(updated)

    async def delete_member(self, member_id: str) -> Optional[dict[str, Any]]:
        """
        Delete a member by its own id.

        Returns:
            The deleted member, or None if nothing matched

        Raises:
            ValueError: If ``member_id`` is not a valid identifier
        """
        deleted = await self.members.find_one_and_delete({"_id": to_object_id(member_id)})
        return serialize_doc(deleted)
