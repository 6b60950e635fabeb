"""
Database connection management
"""

import logging
from typing import Dict, Optional

from pymongo import AsyncMongoClient

from adoptme.config.settings import Settings
from adoptme.database.repository import MongoRepository

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
PETS_COLLECTION = "pets"


class MongoStore:
    """Process-wide handle on the MongoDB database.

    Created once by the application lifespan and handed to the services
    through ``app.state``; no module keeps a reference to it.
    """

    def __init__(self, url: str, database_name: str, timeout_ms: int = 5000):
        self.url = url
        self.database_name = database_name
        self.timeout_ms = timeout_ms
        self.client: Optional[AsyncMongoClient] = None
        self.db = None
        self._repositories: Dict[str, MongoRepository] = {}

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoStore":
        return cls(settings.mongodb_url, settings.mongodb_database, settings.mongodb_timeout_ms)

    async def connect(self):
        """Open the client, verify connectivity and ensure indexes"""
        self.client = AsyncMongoClient(self.url, serverSelectionTimeoutMS=self.timeout_ms, tz_aware=True)
        self.db = self.client.get_default_database(default=self.database_name)

        # Test connection
        await self.client.admin.command("ping")

        await self.db[USERS_COLLECTION].create_index("email", unique=True)

        logger.info(f"Database initialized successfully: {self.db.name}")

    async def close(self):
        """Close the client"""
        if self.client is not None:
            await self.client.close()
            self.client = None
            self.db = None
            self._repositories.clear()
        logger.info("Database connections closed")

    async def ping(self) -> bool:
        if self.client is None:
            return False
        await self.client.admin.command("ping")
        return True

    def repository(self, collection_name: str) -> MongoRepository:
        """Get the repository for a collection"""
        if self.db is None:
            raise RuntimeError("Database not initialized - call connect() first")
        if collection_name not in self._repositories:
            self._repositories[collection_name] = MongoRepository(self.db[collection_name])
        return self._repositories[collection_name]
