"""
User-related Pydantic models
"""

from typing import Any, Dict, List, Optional, Union

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from adoptme.models.common import reject_explicit_nulls, validate_object_ids
from adoptme.models.enums import UserRole

REQUIRED_USER_FIELDS = ("first_name", "last_name", "email", "age", "password")


class UserCreateRequest(BaseModel):
    # Unknown keys are dropped, never persisted. NaN/Infinity cannot be rendered back as JSON
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    age: Union[int, float]
    password: str = Field(..., min_length=1)
    role: UserRole = UserRole.USER
    pets: List[str] = Field(default_factory=list)

    @field_validator("pets")
    @classmethod
    def check_pet_ids(cls, value: List[str]) -> List[str]:
        return validate_object_ids(value)

    def to_document(self) -> Dict[str, Any]:
        document = self.model_dump()
        document["role"] = self.role.value
        document["pets"] = [ObjectId(pet_id) for pet_id in self.pets]
        return document


class UserUpdateRequest(BaseModel):
    """Partial update: only the keys present in the body are written"""
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = Field(None, min_length=1)
    age: Optional[Union[int, float]] = None
    password: Optional[str] = Field(None, min_length=1)
    role: Optional[UserRole] = None
    pets: Optional[List[str]] = None

    @field_validator("pets")
    @classmethod
    def check_pet_ids(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        if value is None:
            return value
        return validate_object_ids(value)

    @model_validator(mode="after")
    def check_required_not_null(self):
        return reject_explicit_nulls(self, REQUIRED_USER_FIELDS + ("role", "pets"))

    def to_update(self) -> Dict[str, Any]:
        fields = self.model_dump(exclude_unset=True)
        if "role" in fields:
            fields["role"] = self.role.value
        if "pets" in fields:
            fields["pets"] = [ObjectId(pet_id) for pet_id in self.pets]
        return fields
