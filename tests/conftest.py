"""
pytest configuration and fixtures
Every app is built over an in-memory store, no MongoDB required
"""

import pytest
from fastapi.testclient import TestClient

from adoptme.app import create_app
from adoptme.config.settings import Settings

from fakes import InMemoryStore


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def settings():
    return Settings(mongodb_url="mongodb://localhost:27017/adoptme_test", auto_listen=False)


@pytest.fixture
def app(settings, store):
    return create_app(settings, store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def user_payload():
    return {
        "first_name": "Test",
        "last_name": "User",
        "email": "test.user@example.com",
        "age": 25,
        "password": "testPassword123",
        "role": "user",
    }


@pytest.fixture
def pet_payload():
    return {"name": "Firulais", "species": "dog", "birthDate": "2020-03-14T00:00:00+00:00"}
