"""
Pet-related Pydantic models
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from adoptme.models.common import reject_explicit_nulls


class PetCreateRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str = Field(..., min_length=1)
    species: str = Field(..., min_length=1)
    birth_date: Optional[datetime] = Field(None, alias="birthDate")

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class PetUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: Optional[str] = Field(None, min_length=1)
    species: Optional[str] = Field(None, min_length=1)
    birth_date: Optional[datetime] = Field(None, alias="birthDate")

    @model_validator(mode="after")
    def check_required_not_null(self):
        return reject_explicit_nulls(self, ("name", "species"))

    def to_update(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)
