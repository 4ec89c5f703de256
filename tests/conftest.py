"""
Global test fixtures for the Members API.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Directory database with sample users, members and departments
- FastAPI test clients
"""

import shutil
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Generator
from unittest.mock import patch

import pytest
import pytest_asyncio
from bson import ObjectId
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


SEED_DATA_DIR = Path(__file__).parent.parent / "backend" / "app" / "seeders" / "data"


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
        client = AsyncMongoMockClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock-motor not installed")


@pytest_asyncio.fixture
async def mock_directory_db(mock_async_mongo_client):
    """Provide mock directory database with indexes like the real app."""
    from app.database.databases import directory_db

    db = mock_async_mongo_client[directory_db.DB_NAME]
    await directory_db.create_directory_indexes(db)
    yield db


# =============================================================================
# Sample Documents
# =============================================================================

USER_IDS = [
    "507f1f77bcf86cd799439011",
    "507f1f77bcf86cd799439012",
    "507f1f77bcf86cd799439013",
]


@pytest.fixture
def sample_users() -> list[dict]:
    """User documents as stored by the auth layer."""
    now = datetime.now(timezone.utc)
    return [
        {
            "_id": ObjectId(USER_IDS[0]),
            "name": "Alice Johnson",
            "email": "alice@example.com",
            "emailVerified": True,
            "role": "admin",
            "createdAt": now,
            "updatedAt": now,
        },
        {
            "_id": ObjectId(USER_IDS[1]),
            "name": "Bob Smith",
            "email": "bob@example.com",
            "emailVerified": False,
            "role": "user",
            "createdAt": now,
            "updatedAt": now,
        },
        {
            "_id": ObjectId(USER_IDS[2]),
            "name": "Carol Alvarez",
            "email": "carol@example.com",
            "emailVerified": True,
            "role": "user",
            "createdAt": now,
            "updatedAt": now,
        },
    ]


@pytest.fixture
def sample_members() -> list[dict]:
    """Member documents referencing the sample users."""
    now = datetime.now(timezone.utc)
    return [
        {
            "userId": USER_IDS[0],
            "departmentSlug": "engineering",
            "role": "head",
            "metadata": {"a": 0, "b": 2},
            "createdAt": now,
            "updatedAt": now,
        },
        {
            "userId": USER_IDS[1],
            "departmentSlug": "engineering",
            "role": "staff",
            "metadata": {},
            "createdAt": now,
            "updatedAt": now,
        },
        {
            "userId": USER_IDS[2],
            "departmentSlug": "marketing",
            "role": "staff",
            "metadata": {"floor": 2},
            "createdAt": now,
            "updatedAt": now,
        },
    ]


@pytest_asyncio.fixture
async def populated_directory_db(mock_directory_db, sample_users, sample_members):
    """Directory database holding the sample users and members."""
    await mock_directory_db["user"].insert_many(sample_users)
    await mock_directory_db["tbl_members"].insert_many(sample_members)
    yield mock_directory_db


@pytest.fixture
def seed_data_dir(tmp_path) -> Path:
    """Writable copy of the packaged seed fixtures."""
    target = tmp_path / "seed_data"
    shutil.copytree(SEED_DATA_DIR, target)
    return target


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app():
    """
    FastAPI app whose startup uses a mock MongoDB client.

    Routes get their services through ``dependency_overrides``.
    """
    mongomock_motor = pytest.importorskip("mongomock_motor")
    from app.main import app as fastapi_app

    mock_client = mongomock_motor.AsyncMongoMockClient()

    async def _get_mock_client():
        return mock_client

    with patch("app.main.get_mongo_client", _get_mock_client):
        yield fastapi_app

    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.
    """
    with TestClient(app) as c:
        yield c
