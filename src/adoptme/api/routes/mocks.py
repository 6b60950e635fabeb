"""
Mock data API routes - synthetic records for testing and seeding
"""

from fastapi import APIRouter, Depends, Query

from adoptme.api.dependencies import get_mocks_service
from adoptme.api.routes.responses import OperationMessages, raise_for_result
from adoptme.models.mock import GenerateDataRequest
from adoptme.services.mocks_service import MocksService

router = APIRouter()

SEED_MESSAGES = OperationMessages(
    failure="Error al generar los datos.",
    success="Datos generados e insertados con éxito",
)


@router.get("/mockingpets")
async def mocking_pets(
    count: int = Query(100, ge=0, le=1000, description="Number of pets to generate"),
    service: MocksService = Depends(get_mocks_service)
):
    """Generate pets without persisting them"""
    return service.mock_pets(count).data


@router.get("/mockingusers")
async def mocking_users(
    count: int = Query(50, ge=0, le=1000, description="Number of users to generate"),
    service: MocksService = Depends(get_mocks_service)
):
    """Generate users without persisting them"""
    return service.mock_users(count).data


@router.post("/generateData", status_code=201)
async def generate_data(request: GenerateDataRequest, service: MocksService = Depends(get_mocks_service)):
    """Generate and insert the requested number of users and pets"""
    result = await service.generate_data(users=request.users, pets=request.pets)
    raise_for_result(result, SEED_MESSAGES)

    summary = result.first
    return {
        "message": SEED_MESSAGES.success,
        "inserted": {"users": len(summary["users"]), "pets": len(summary["pets"])},
        "users": summary["users"],
        "pets": summary["pets"],
    }
