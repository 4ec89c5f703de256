"""
Department service for department management.
"""
import json
from datetime import datetime, timezone
from typing import Any, Optional, Union

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from app.database.databases import directory_db
from app.schemas.department import DepartmentCreate, DepartmentUpdate
from app.services.member_service import serialize_doc


class DepartmentExistsError(ValueError):
    """Raised when creating a department whose slug is taken."""


def parse_metadata(value: Union[dict[str, Any], str, None]) -> Optional[dict[str, Any]]:
    """
    Normalize department metadata.

    Metadata may arrive JSON-encoded; it is always stored as a mapping.

    Raises:
        ValueError: If a string value is not valid JSON
    """
    if isinstance(value, str):
        value = json.loads(value)
        if not isinstance(value, dict):
            raise ValueError("metadata must encode a JSON object")
    return value


class DepartmentService:
    """Service for department operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the directory database."""
        self.db = db
        self.departments = db[directory_db.Collections.DEPARTMENTS]

    async def list_departments(self) -> list[dict[str, Any]]:
        """List all departments in natural order."""
        cursor = self.departments.find({})
        departments = await cursor.to_list(length=None)
        return [serialize_doc(d) for d in departments]

    async def get_department(self, slug: str) -> Optional[dict[str, Any]]:
        """Get a department by slug."""
        department = await self.departments.find_one({"slug": slug})
        return serialize_doc(department)

    async def create_department(self, request: DepartmentCreate) -> dict[str, Any]:
        """
        Create a department.

        Raises:
            DepartmentExistsError: If the slug already exists
            ValueError: If metadata is not valid JSON
        """
        existing = await self.departments.find_one({"slug": request.slug})
        if existing:
            raise DepartmentExistsError(f"Department '{request.slug}' already exists")

        now = datetime.now(timezone.utc)
        department_doc = {
            "name": request.name,
            "slug": request.slug,
            "logo": request.logo,
            "metadata": parse_metadata(request.metadata) or {},
            "createdAt": now,
            "updatedAt": now,
        }

        try:
            result = await self.departments.insert_one(department_doc)
        except DuplicateKeyError:
            raise DepartmentExistsError(f"Department '{request.slug}' already exists")

        department_doc["_id"] = result.inserted_id
        return serialize_doc(department_doc)

    async def update_department(
        self, slug: str, request: DepartmentUpdate
    ) -> Optional[dict[str, Any]]:
        """
        Update a department; metadata keys are merged into the stored mapping.

        Returns:
            The updated department, or None if the slug is unknown
        """
        fields: dict[str, Any] = {}
        if request.name:
            fields["name"] = request.name
        if request.logo:
            fields["logo"] = request.logo
        if request.metadata is not None:
            for key, value in request.metadata.items():
                fields[f"metadata.{key}"] = value
        fields["updatedAt"] = datetime.now(timezone.utc)

        updated = await self.departments.find_one_and_update(
            {"slug": slug},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )
        return serialize_doc(updated)

    async def delete_department(self, slug: str) -> bool:
        """Delete a department by slug."""
        result = await self.departments.delete_one({"slug": slug})
        return result.deleted_count > 0
