"""
Mock generator tests
"""

from datetime import datetime, timezone

import pytest
from bson import ObjectId

from adoptme.utils.mocking import generate_mock_pets, generate_mock_users


class TestGenerateMockPets:

    def test_returns_requested_count_with_unique_ids(self):
        pets = generate_mock_pets(5)

        assert len(pets) == 5
        assert len({pet["_id"] for pet in pets}) == 5
        for pet in pets:
            assert isinstance(pet["_id"], ObjectId)
            assert pet["name"]
            assert pet["species"]

    def test_birth_dates_are_in_the_past(self):
        now = datetime.now(timezone.utc)
        for pet in generate_mock_pets(20):
            assert datetime.fromisoformat(pet["birthDate"]) < now

    def test_zero_count(self):
        assert generate_mock_pets(0) == []

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            generate_mock_pets(-1)


class TestGenerateMockUsers:

    def test_users_have_required_fields(self):
        users = generate_mock_users(10)

        assert len(users) == 10
        assert len({user["email"] for user in users}) == 10
        for user in users:
            assert user["first_name"] and user["last_name"] and user["password"]
            assert user["role"] in ("user", "admin")
            assert user["pets"] == []
            assert 18 <= user["age"] <= 80
