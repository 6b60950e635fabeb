"""
Pet management API routes
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Path

from adoptme.api.dependencies import get_pets_service
from adoptme.api.routes.responses import OperationMessages, raise_for_result
from adoptme.services.pets_service import PetsService

router = APIRouter()

PET_ID = Path(..., description="MongoDB ObjectId of the pet", examples=["507f1f77bcf86cd799439011"])
PET_BODY = Body(None, examples=[{"name": "Firulais", "species": "dog", "birthDate": "2020-03-14T00:00:00Z"}])

LIST_MESSAGES = OperationMessages(failure="Error al obtener mascotas.", include_details=False)
GET_MESSAGES = OperationMessages(
    failure="Error al obtener la mascota.",
    not_found="Mascota no encontrada.",
)
CREATE_MESSAGES = OperationMessages(
    failure="Error al crear la mascota.",
    success="Mascota creada con éxito",
)
UPDATE_MESSAGES = OperationMessages(
    failure="Error al actualizar la mascota.",
    not_found="Mascota no encontrada para actualizar.",
    success="Mascota actualizada con éxito",
)
DELETE_MESSAGES = OperationMessages(
    failure="Error al eliminar la mascota.",
    not_found="Mascota no encontrada para eliminar.",
    success="Mascota eliminada con éxito",
)


@router.get("")
async def list_pets(service: PetsService = Depends(get_pets_service)):
    """Get all pets"""
    result = await service.list()
    raise_for_result(result, LIST_MESSAGES)
    return result.data


@router.get("/{pet_id}")
async def get_pet(pet_id: str = PET_ID, service: PetsService = Depends(get_pets_service)):
    result = await service.get_by_id(pet_id)
    raise_for_result(result, GET_MESSAGES)
    return result.first


@router.post("", status_code=201)
async def create_pet(payload: Any = PET_BODY, service: PetsService = Depends(get_pets_service)):
    result = await service.create(payload)
    raise_for_result(result, CREATE_MESSAGES)
    return {"message": CREATE_MESSAGES.success, "pet": result.first}


@router.put("/{pet_id}")
async def update_pet(
    pet_id: str = PET_ID,
    payload: Any = PET_BODY,
    service: PetsService = Depends(get_pets_service)
):
    result = await service.update(pet_id, payload)
    raise_for_result(result, UPDATE_MESSAGES)
    return {"message": UPDATE_MESSAGES.success, "pet": result.first}


@router.delete("/{pet_id}")
async def delete_pet(pet_id: str = PET_ID, service: PetsService = Depends(get_pets_service)):
    result = await service.delete(pet_id)
    raise_for_result(result, DELETE_MESSAGES)
    return {"message": DELETE_MESSAGES.success, "pet": result.first}
