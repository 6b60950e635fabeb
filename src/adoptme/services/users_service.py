"""
Users service - user record management
"""

from adoptme.database.connection import USERS_COLLECTION
from adoptme.models.user import UserCreateRequest, UserUpdateRequest
from adoptme.services.base_service import BaseService


class UsersService(BaseService):
    """Service for user operations"""

    create_model = UserCreateRequest
    update_model = UserUpdateRequest

    def __init__(self, repository):
        super().__init__("user", repository)


def build_users_service(store) -> UsersService:
    return UsersService(store.repository(USERS_COLLECTION))
