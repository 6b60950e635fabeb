"""
FastAPI dependencies that hand the shared store to each service
"""

from fastapi import Request

from adoptme.services.mocks_service import MocksService, build_mocks_service
from adoptme.services.pets_service import PetsService, build_pets_service
from adoptme.services.users_service import UsersService, build_users_service


def get_store(request: Request):
    """Store handle created by the application lifespan"""
    return request.app.state.store


def get_users_service(request: Request) -> UsersService:
    return build_users_service(get_store(request))


def get_pets_service(request: Request) -> PetsService:
    return build_pets_service(get_store(request))


def get_mocks_service(request: Request) -> MocksService:
    return build_mocks_service(get_store(request))
