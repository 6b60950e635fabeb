"""
User management API routes
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Path

from adoptme.api.dependencies import get_users_service
from adoptme.api.routes.responses import OperationMessages, raise_for_result
from adoptme.services.users_service import UsersService

router = APIRouter()

USER_ID = Path(..., description="MongoDB ObjectId of the user", examples=["507f1f77bcf86cd799439011"])
USER_BODY = Body(
    None,
    examples=[{
        "first_name": "John",
        "last_name": "Doe",
        "email": "john.doe@example.com",
        "age": 30,
        "password": "securePassword123",
        "role": "user",
    }],
)

LIST_MESSAGES = OperationMessages(failure="Error al obtener usuarios.", include_details=False)
GET_MESSAGES = OperationMessages(
    failure="Error al obtener el usuario.",
    not_found="Usuario no encontrado.",
)
CREATE_MESSAGES = OperationMessages(
    failure="Error al crear el usuario.",
    success="Usuario creado con éxito",
)
UPDATE_MESSAGES = OperationMessages(
    failure="Error al actualizar el usuario.",
    not_found="Usuario no encontrado para actualizar.",
    success="Usuario actualizado con éxito",
)
DELETE_MESSAGES = OperationMessages(
    failure="Error al eliminar el usuario.",
    not_found="Usuario no encontrado para eliminar.",
    success="Usuario eliminado con éxito",
)


@router.get("")
async def list_users(service: UsersService = Depends(get_users_service)):
    """Get all users"""
    result = await service.list()
    raise_for_result(result, LIST_MESSAGES)
    return result.data


@router.get("/{user_id}")
async def get_user(user_id: str = USER_ID, service: UsersService = Depends(get_users_service)):
    """Get a user by ObjectId"""
    result = await service.get_by_id(user_id)
    raise_for_result(result, GET_MESSAGES)
    return result.first


@router.post("", status_code=201)
async def create_user(
    payload: Any = USER_BODY,
    service: UsersService = Depends(get_users_service)
):
    """Create a new user. ``role`` defaults to ``user`` and ``pets`` to an empty list."""
    result = await service.create(payload)
    raise_for_result(result, CREATE_MESSAGES)
    return {"message": CREATE_MESSAGES.success, "user": result.first}


@router.put("/{user_id}")
async def update_user(
    user_id: str = USER_ID,
    payload: Any = USER_BODY,
    service: UsersService = Depends(get_users_service)
):
    """Update the supplied fields of a user; other fields are left as they are"""
    result = await service.update(user_id, payload)
    raise_for_result(result, UPDATE_MESSAGES)
    return {"message": UPDATE_MESSAGES.success, "user": result.first}


@router.delete("/{user_id}")
async def delete_user(user_id: str = USER_ID, service: UsersService = Depends(get_users_service)):
    """Delete a user, returning the deleted document"""
    result = await service.delete(user_id)
    raise_for_result(result, DELETE_MESSAGES)
    return {"message": DELETE_MESSAGES.success, "user": result.first}
