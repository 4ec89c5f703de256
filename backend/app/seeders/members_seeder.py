"""
Members seeder.

Loads the kpiv2 fixture exports (MongoDB Extended JSON) into the directory
database. Every import wipes its collection before inserting, so a crash
between the two steps leaves that collection empty.
"""
import asyncio
import logging
from pathlib import Path
from typing import Any

from bson import ObjectId, json_util
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase

from app.database.databases import directory_db
from app.services.department_service import parse_metadata

logger = logging.getLogger(__name__)

Collections = directory_db.Collections


class FixtureFiles:
    """Fixture file names inside the seed data directory."""
    MEMBERS = "kpiv2.tbl_members.json"
    USERS = "kpiv2.user.json"
    ACCOUNTS = "kpiv2.account.json"
    DEPARTMENTS = "kpiv2.tbl_departments.json"


def _copy_identity(raw: dict[str, Any], transformed: dict[str, Any]) -> dict[str, Any]:
    """Carry over ``_id`` and timestamps when the export has them."""
    for key in ("_id", "createdAt", "updatedAt"):
        if raw.get(key) is not None:
            transformed[key] = raw[key]
    return transformed


def transform_member(raw: dict[str, Any]) -> dict[str, Any]:
    user_id = raw.get("userId")
    # Member.userId is stored as a plain string
    if isinstance(user_id, ObjectId):
        user_id = str(user_id)
    return _copy_identity(raw, {
        "userId": user_id,
        "departmentSlug": raw.get("departmentSlug"),
        "role": raw.get("role"),
        "metadata": raw.get("metadata") or {},
    })


def transform_user(raw: dict[str, Any]) -> dict[str, Any]:
    return _copy_identity(raw, {
        "name": raw.get("name"),
        "email": raw.get("email"),
        "emailVerified": raw.get("emailVerified"),
        "role": raw.get("role"),
    })


def transform_account(raw: dict[str, Any]) -> dict[str, Any]:
    return _copy_identity(raw, {
        "accountId": raw.get("accountId"),
        "providerId": raw.get("providerId"),
        "userId": raw.get("userId"),
        "password": raw.get("password"),
    })


def transform_department(raw: dict[str, Any]) -> dict[str, Any]:
    return _copy_identity(raw, {
        "name": raw.get("name"),
        "slug": raw.get("slug"),
        "logo": raw.get("logo"),
        "metadata": parse_metadata(raw.get("metadata")) or {},
    })


class MembersSeeder:
    """Seeds departments, users, accounts and members from fixture files."""

    def __init__(self, db: AsyncIOMotorDatabase, data_dir: Path):
        self.db = db
        self.data_dir = Path(data_dir)
        self.members = db[Collections.MEMBERS]
        self.users = db[Collections.USERS]
        self.accounts = db[Collections.ACCOUNTS]
        self.departments = db[Collections.DEPARTMENTS]

    async def load_fixture(self, filename: str) -> list[dict[str, Any]]:
        """
        Read an Extended JSON export.

        ``$oid`` and ``$date`` wrappers are decoded to ObjectId and datetime.
        """
        path = self.data_dir / filename
        text = await asyncio.to_thread(path.read_text, encoding="utf-8")
        return json_util.loads(text)

    async def _replace_collection(
        self,
        collection: AsyncIOMotorCollection,
        docs: list[dict[str, Any]],
        label: str,
    ) -> int:
        await collection.delete_many({})
        logger.info(f"🗑️  Cleared existing {label}")

        if not docs:
            logger.info(f"No {label} to insert")
            return 0

        result = await collection.insert_many(docs)
        count = len(result.inserted_ids)
        logger.info(f"✅ Successfully seeded {count} {label}")
        return count

    async def _import(self, filename: str, transform, collection, label: str) -> int:
        try:
            logger.info(f"🌱 Starting {label} seeding...")
            docs = [transform(raw) for raw in await self.load_fixture(filename)]
            return await self._replace_collection(collection, docs, label)
        except Exception as e:
            logger.error(f"❌ Failed to seed {label}: {e}")
            raise

    async def import_departments(self) -> int:
        return await self._import(
            FixtureFiles.DEPARTMENTS, transform_department, self.departments, "departments"
        )

    async def import_users(self) -> int:
        return await self._import(FixtureFiles.USERS, transform_user, self.users, "users")

    async def import_accounts(self) -> int:
        return await self._import(
            FixtureFiles.ACCOUNTS, transform_account, self.accounts, "accounts"
        )

    async def import_members(self) -> int:
        return await self._import(
            FixtureFiles.MEMBERS, transform_member, self.members, "members"
        )

    async def seed(self) -> None:
        """
        Seed all four collections.

        Runs in reference order: departments, users, accounts, members.
        Earlier steps are not rolled back if a later one fails.
        """
        logger.info("🚀 Starting comprehensive seeding...")
        await self.import_departments()
        await self.import_users()
        await self.import_accounts()
        await self.import_members()
        logger.info("🎉 All seeding completed successfully!")

    async def clear(self) -> None:
        """Wipe all four seeded collections."""
        logger.info("🗑️  Clearing all seeded data...")
        try:
            await asyncio.gather(
                self.members.delete_many({}),
                self.users.delete_many({}),
                self.accounts.delete_many({}),
                self.departments.delete_many({}),
            )
        except Exception as e:
            logger.error(f"❌ Failed to clear seeded data: {e}")
            raise
        logger.info("✅ All seeded data cleared successfully")
