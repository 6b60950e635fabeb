"""
Mapping from service results to HTTP errors, shared by the resource routers
"""

from dataclasses import dataclass

from adoptme.services.base_service import INVALID_ID, RESOURCE_NOT_FOUND, ServiceResult
from adoptme.utils.error_handling import ApiError

INVALID_ID_MESSAGE = "El ID proporcionado no es un ObjectId válido."


@dataclass(frozen=True)
class OperationMessages:
    """Client-facing wording for one operation on one resource"""
    failure: str
    not_found: str = ""
    success: str = ""
    include_details: bool = True


def raise_for_result(result: ServiceResult, messages: OperationMessages):
    """Raise the ApiError matching a failed service result"""
    if result.success:
        return
    if result.error_type == INVALID_ID:
        raise ApiError(400, message=INVALID_ID_MESSAGE)
    if result.error_type == RESOURCE_NOT_FOUND:
        raise ApiError(404, message=messages.not_found)
    # Duplicates, validation and store failures all stay 500; error_type tells them apart
    raise ApiError(
        500,
        error=messages.failure,
        details=result.details if messages.include_details else None,
        error_type=result.error_type,
    )
