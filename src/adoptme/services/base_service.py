"""
Base service layer for unified document operations
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ValidationError
from pymongo.errors import ConnectionFailure, DuplicateKeyError, PyMongoError

from adoptme.utils.helpers import parse_object_id, serialize_document

logger = logging.getLogger(__name__)

INVALID_ID = "INVALID_ID"
RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
MISSING_FIELD = "MISSING_FIELD"
CONSTRAINT_VIOLATION = "CONSTRAINT_VIOLATION"
CONFLICT_ERROR = "CONFLICT_ERROR"
STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
DATABASE_ERROR = "DATABASE_ERROR"


@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[List[Dict[str, Any]]] = None
    count: int = 0
    error: Optional[str] = None
    error_type: Optional[str] = None
    details: Optional[Any] = None

    @classmethod
    def ok(cls, documents: List[Dict[str, Any]]) -> "ServiceResult":
        data = [serialize_document(document) for document in documents]
        return cls(success=True, data=data, count=len(data))

    @classmethod
    def failure(cls, error: str, error_type: str, details: Optional[Any] = None) -> "ServiceResult":
        return cls(success=False, error=error, error_type=error_type, details=details)

    @property
    def first(self) -> Optional[Dict[str, Any]]:
        return self.data[0] if self.data else None


def validation_failure(exc: ValidationError) -> ServiceResult:
    """Classify a schema failure as a missing field or a constraint violation"""
    errors = exc.errors()
    details = [
        {
            "field": ".".join(str(loc) for loc in error.get("loc", [])),
            "message": error.get("msg", "Invalid value"),
        }
        for error in errors
    ]
    if any(error.get("type") == "missing" for error in errors):
        return ServiceResult.failure("Required field missing", MISSING_FIELD, details)
    return ServiceResult.failure("Field constraint violated", CONSTRAINT_VIOLATION, details)


def non_object_body(payload: Any) -> ServiceResult:
    return ServiceResult.failure(
        "Request body must be a JSON object",
        CONSTRAINT_VIOLATION,
        [{"field": "body", "message": f"Expected an object, got {type(payload).__name__}"}],
    )


def store_failure(resource_name: str, operation: str, exc: PyMongoError) -> ServiceResult:
    """Map a driver exception onto a service error type"""
    if isinstance(exc, DuplicateKeyError):
        logger.warning(f"{operation} on {resource_name} rejected as duplicate: {exc}")
        return ServiceResult.failure("Record already exists", CONFLICT_ERROR, str(exc))
    if isinstance(exc, ConnectionFailure):
        logger.error(f"{operation} on {resource_name} failed, store unavailable: {exc}")
        return ServiceResult.failure("Database unavailable", STORE_UNAVAILABLE, str(exc))
    logger.error(f"{operation} on {resource_name} failed: {exc}", exc_info=True)
    return ServiceResult.failure(f"Database operation failed: {exc}", DATABASE_ERROR, str(exc))


class BaseService:
    """CRUD over one collection: id check, body check, one store call"""

    create_model: Type[BaseModel]
    update_model: Type[BaseModel]

    def __init__(self, resource_name: str, repository):
        self.resource_name = resource_name
        self.repository = repository

    def _invalid_id(self, raw_id: str) -> ServiceResult:
        return ServiceResult.failure(f"Invalid ObjectId: {raw_id}", INVALID_ID)

    def _not_found(self, raw_id: str) -> ServiceResult:
        return ServiceResult.failure(f"{self.resource_name} not found: {raw_id}", RESOURCE_NOT_FOUND)

    async def list(self) -> ServiceResult:
        """Read every document in store order"""
        try:
            documents = await self.repository.find_all()
        except PyMongoError as e:
            return store_failure(self.resource_name, "List", e)
        return ServiceResult.ok(documents)

    async def get_by_id(self, raw_id: str) -> ServiceResult:
        object_id = parse_object_id(raw_id)
        if object_id is None:
            return self._invalid_id(raw_id)

        try:
            document = await self.repository.find_by_id(object_id)
        except PyMongoError as e:
            return store_failure(self.resource_name, "Read", e)

        if document is None:
            return self._not_found(raw_id)
        return ServiceResult.ok([document])

    async def create(self, payload: Any) -> ServiceResult:
        """
        Validate a request body and insert it

        Args:
            payload: Raw request body; a missing body counts as an empty object

        Returns:
            ServiceResult with the created document, including its ``_id``
        """
        if payload is None:
            payload = {}
        if not isinstance(payload, dict):
            return non_object_body(payload)

        try:
            request = self.create_model.model_validate(payload)
        except ValidationError as e:
            return validation_failure(e)

        try:
            document = await self.repository.insert(request.to_document())
        except PyMongoError as e:
            return store_failure(self.resource_name, "Create", e)

        logger.info(f"Created {self.resource_name} {document['_id']}")
        return ServiceResult.ok([document])

    async def update(self, raw_id: str, payload: Any) -> ServiceResult:
        """
        Overwrite the supplied fields of an existing document

        Args:
            raw_id: Identifier from the request path
            payload: Partial or full request body; a missing body updates nothing

        Returns:
            ServiceResult with the post-update document
        """
        object_id = parse_object_id(raw_id)
        if object_id is None:
            return self._invalid_id(raw_id)

        if payload is None:
            payload = {}
        if not isinstance(payload, dict):
            return non_object_body(payload)

        try:
            request = self.update_model.model_validate(payload)
        except ValidationError as e:
            return validation_failure(e)

        try:
            document = await self.repository.update_by_id(object_id, request.to_update())
        except PyMongoError as e:
            return store_failure(self.resource_name, "Update", e)

        if document is None:
            return self._not_found(raw_id)

        logger.info(f"Updated {self.resource_name} {raw_id}")
        return ServiceResult.ok([document])

    async def delete(self, raw_id: str) -> ServiceResult:
        """Remove a document, returning its prior contents"""
        object_id = parse_object_id(raw_id)
        if object_id is None:
            return self._invalid_id(raw_id)

        try:
            document = await self.repository.delete_by_id(object_id)
        except PyMongoError as e:
            return store_failure(self.resource_name, "Delete", e)

        if document is None:
            return self._not_found(raw_id)

        logger.info(f"Deleted {self.resource_name} {raw_id}")
        return ServiceResult.ok([document])
