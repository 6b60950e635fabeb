"""
Service layer tests - result classification without HTTP
"""

import pytest
from bson import ObjectId

from adoptme.services.base_service import (
    CONFLICT_ERROR, CONSTRAINT_VIOLATION, INVALID_ID, MISSING_FIELD, RESOURCE_NOT_FOUND,
)
from adoptme.services.users_service import build_users_service
from adoptme.services.pets_service import build_pets_service

from fakes import InMemoryStore


@pytest.fixture
def users_service():
    return build_users_service(InMemoryStore())


class TestUsersService:

    @pytest.mark.asyncio
    async def test_create_serializes_ids(self, users_service, user_payload):
        result = await users_service.create(user_payload)

        assert result.success
        assert result.count == 1
        assert isinstance(result.first["_id"], str)
        assert result.first["role"] == "user"

    @pytest.mark.asyncio
    async def test_duplicate_is_conflict(self, users_service, user_payload):
        await users_service.create(user_payload)

        result = await users_service.create(user_payload)

        assert not result.success
        assert result.error_type == CONFLICT_ERROR

    @pytest.mark.asyncio
    async def test_missing_beats_constraint(self, users_service):
        result = await users_service.create({"first_name": "", "last_name": "Doe"})

        assert result.error_type == MISSING_FIELD
        fields = {detail["field"] for detail in result.details}
        assert {"email", "age", "password"} <= fields

    @pytest.mark.asyncio
    async def test_constraint_only(self, users_service, user_payload):
        result = await users_service.create({**user_payload, "age": [1]})

        assert result.error_type == CONSTRAINT_VIOLATION

    @pytest.mark.asyncio
    async def test_invalid_id_short_circuits(self, users_service):
        result = await users_service.get_by_id("abc")

        assert result.error_type == INVALID_ID

    @pytest.mark.asyncio
    async def test_not_found(self, users_service):
        result = await users_service.delete(str(ObjectId()))

        assert result.error_type == RESOURCE_NOT_FOUND

    @pytest.mark.asyncio
    async def test_empty_update_returns_document_unchanged(self, users_service, user_payload):
        created = (await users_service.create(user_payload)).first

        result = await users_service.update(created["_id"], {})

        assert result.success
        assert result.first == created


class TestPetsService:

    @pytest.mark.asyncio
    async def test_birth_date_alias(self):
        service = build_pets_service(InMemoryStore())

        result = await service.create({"name": "Tom", "species": "cat", "birthDate": "2019-01-01T00:00:00"})

        assert result.first["birthDate"] == "2019-01-01T00:00:00"
        assert "birth_date" not in result.first
