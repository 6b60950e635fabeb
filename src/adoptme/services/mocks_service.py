"""
Mocks service - synthetic data generation and seeding
"""

import logging

from pymongo.errors import PyMongoError

from adoptme.database.connection import PETS_COLLECTION, USERS_COLLECTION
from adoptme.services.base_service import ServiceResult, store_failure
from adoptme.utils.helpers import serialize_document
from adoptme.utils.mocking import generate_mock_pets, generate_mock_users

logger = logging.getLogger(__name__)


class MocksService:
    """Generates mock records; only ``generate_data`` persists them"""

    def __init__(self, users_repository, pets_repository):
        self.users_repository = users_repository
        self.pets_repository = pets_repository

    def mock_pets(self, count: int) -> ServiceResult:
        return ServiceResult.ok(generate_mock_pets(count))

    def mock_users(self, count: int) -> ServiceResult:
        return ServiceResult.ok(generate_mock_users(count))

    async def generate_data(self, users: int, pets: int) -> ServiceResult:
        """
        Generate and insert mock users and pets

        Users are inserted before pets and nothing is rolled back: when the pets
        insert fails, the failure details report how many users were kept.

        Returns:
            ServiceResult whose single row holds the inserted users and pets
        """
        try:
            inserted_users = await self.users_repository.insert_many(generate_mock_users(users))
        except PyMongoError as e:
            return store_failure("user", "Seed", e)

        try:
            inserted_pets = await self.pets_repository.insert_many(generate_mock_pets(pets))
        except PyMongoError as e:
            result = store_failure("pet", "Seed", e)
            result.details = {"inserted_users": len(inserted_users), "inserted_pets": 0, "error": result.details}
            return result

        logger.info(f"Seeded {len(inserted_users)} users and {len(inserted_pets)} pets")
        summary = {
            "users": serialize_document(inserted_users),
            "pets": serialize_document(inserted_pets),
        }
        return ServiceResult(success=True, data=[summary], count=len(inserted_users) + len(inserted_pets))


def build_mocks_service(store) -> MocksService:
    return MocksService(store.repository(USERS_COLLECTION), store.repository(PETS_COLLECTION))
