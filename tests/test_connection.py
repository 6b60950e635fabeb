"""
MongoStore tests - client options and startup work, with the driver mocked out
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from adoptme.database import connection
from adoptme.database.connection import MongoStore, USERS_COLLECTION


@pytest.fixture
def mongo_client(monkeypatch):
    client = MagicMock()
    client.admin.command = AsyncMock(return_value={"ok": 1})
    client.close = AsyncMock()

    db = MagicMock()
    db.name = "adoptme_test"
    users = MagicMock()
    users.create_index = AsyncMock()
    db.__getitem__.return_value = users
    client.get_default_database.return_value = db

    factory = MagicMock(return_value=client)
    monkeypatch.setattr(connection, "AsyncMongoClient", factory)
    return factory, client, db, users


class TestMongoStore:

    @pytest.mark.asyncio
    async def test_connect_uses_tz_aware_client(self, mongo_client):
        factory, client, db, users = mongo_client
        store = MongoStore("mongodb://localhost:27017/adoptme_test", "adoptme", timeout_ms=1500)

        await store.connect()

        factory.assert_called_once_with(
            "mongodb://localhost:27017/adoptme_test", serverSelectionTimeoutMS=1500, tz_aware=True
        )
        client.get_default_database.assert_called_once_with(default="adoptme")
        client.admin.command.assert_awaited_once_with("ping")
        db.__getitem__.assert_called_with(USERS_COLLECTION)
        users.create_index.assert_awaited_once_with("email", unique=True)

    @pytest.mark.asyncio
    async def test_close_releases_client(self, mongo_client):
        _, client, _, _ = mongo_client
        store = MongoStore("mongodb://localhost:27017", "adoptme")
        await store.connect()

        await store.close()

        client.close.assert_awaited_once()
        assert await store.ping() is False

    def test_repository_requires_connection(self):
        store = MongoStore("mongodb://localhost:27017", "adoptme")

        with pytest.raises(RuntimeError, match="connect"):
            store.repository("users")
