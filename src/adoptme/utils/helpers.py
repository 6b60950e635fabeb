"""
Utility functions and helpers
"""

import logging
from datetime import datetime
from typing import Any, Optional

from bson import ObjectId

logger = logging.getLogger(__name__)


def parse_object_id(value: str) -> Optional[ObjectId]:
    """Return the ObjectId for a well-formed identifier, None otherwise"""
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


def serialize_document(value: Any) -> Any:
    """Convert BSON values in a stored document into JSON-safe values"""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: serialize_document(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_document(item) for item in value]
    return value
