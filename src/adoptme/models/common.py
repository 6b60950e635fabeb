"""
Shared validation helpers for document models
"""

from typing import Any, Iterable, List

from bson import ObjectId


def validate_object_ids(values: Iterable[Any]) -> List[str]:
    """Check that every reference is a well-formed ObjectId string"""
    checked = []
    for value in values:
        if not isinstance(value, str) or not ObjectId.is_valid(value):
            raise ValueError(f"'{value}' is not a valid ObjectId")
        checked.append(value)
    return checked


def reject_explicit_nulls(model, fields: Iterable[str]):
    """Required fields may be omitted from an update but never set to null"""
    for name in fields:
        if name in model.model_fields_set and getattr(model, name) is None:
            raise ValueError(f"{name} cannot be null")
    return model
