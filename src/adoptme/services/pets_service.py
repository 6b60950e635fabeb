"""
Pets service - pet record management
"""

from adoptme.database.connection import PETS_COLLECTION
from adoptme.models.pet import PetCreateRequest, PetUpdateRequest
from adoptme.services.base_service import BaseService


class PetsService(BaseService):
    """Service for pet operations"""

    create_model = PetCreateRequest
    update_model = PetUpdateRequest

    def __init__(self, repository):
        super().__init__("pet", repository)


def build_pets_service(store) -> PetsService:
    return PetsService(store.repository(PETS_COLLECTION))
