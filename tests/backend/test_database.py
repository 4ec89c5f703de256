"""
Tests for database connections and initialization.

These tests cover:
- MongoDB connection initialization and cleanup
- Index creation on the directory collections
"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from pymongo.errors import OperationFailure


class TestMongoDBConnection:
    """Tests for MongoDB connection handling."""

    @pytest.mark.asyncio
    async def test_get_mongo_client_creates_connection(self):
        """get_mongo_client should create connection on first call."""
        import app.database.connections as conn_module

        with patch("app.database.connections.AsyncIOMotorClient") as mock_client, \
             patch("app.database.connections.get_settings") as mock_settings:

            mock_settings.return_value.mongo_uri = "mongodb://test:27017"
            mock_instance = MagicMock()
            mock_client.return_value = mock_instance
            conn_module._mongo_client = None

            client = await conn_module.get_mongo_client()
            again = await conn_module.get_mongo_client()

            mock_client.assert_called_once_with("mongodb://test:27017")
            assert client is mock_instance
            assert again is client

        conn_module._mongo_client = None

    @pytest.mark.asyncio
    async def test_close_connections_cleans_up(self):
        """close_connections should close and forget the client."""
        import app.database.connections as conn_module

        mock_mongo = MagicMock()
        conn_module._mongo_client = mock_mongo

        await conn_module.close_connections()

        mock_mongo.close.assert_called_once()
        assert conn_module._mongo_client is None

    @pytest.mark.asyncio
    async def test_close_connections_without_client_is_noop(self):
        import app.database.connections as conn_module

        conn_module._mongo_client = None

        await conn_module.close_connections()

        assert conn_module._mongo_client is None

    @pytest.mark.asyncio
    async def test_get_database_defaults_to_directory_db(self):
        import app.database.connections as conn_module

        mock_client = MagicMock()
        with patch("app.database.connections.get_mongo_client", AsyncMock(return_value=mock_client)):
            await conn_module.get_database()

        mock_client.__getitem__.assert_called_once_with("kpiv2")


class TestIndexCreation:
    """Tests for index creation on directory collections."""

    @pytest.mark.asyncio
    async def test_member_indexes(self, mock_directory_db):
        indexes = await mock_directory_db.tbl_members.index_information()

        assert any("userId" in str(idx) for idx in indexes.values())
        assert any("departmentSlug" in str(idx) for idx in indexes.values())

    @pytest.mark.asyncio
    async def test_department_slug_is_unique(self, mock_directory_db):
        indexes = await mock_directory_db.tbl_departments.index_information()

        slug_indexes = [idx for idx in indexes.values() if "slug" in str(idx["key"])]
        assert slug_indexes
        assert slug_indexes[0].get("unique") is True

    @pytest.mark.asyncio
    async def test_user_email_index(self, mock_directory_db):
        indexes = await mock_directory_db.user.index_information()

        assert any("email" in str(idx) for idx in indexes.values())

    @pytest.mark.asyncio
    async def test_index_conflicts_are_tolerated(self):
        """Existing indexes with other options must not abort startup."""
        from app.database.databases import directory_db

        collection = MagicMock()
        collection.create_index = AsyncMock(side_effect=OperationFailure("conflict"))
        db = MagicMock()
        db.__getitem__.return_value = collection

        await directory_db.create_directory_indexes(db)

        assert collection.create_index.await_count == sum(
            len(specs) for specs in directory_db.Collections.INDEXES.values()
        )
