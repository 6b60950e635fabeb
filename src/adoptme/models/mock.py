"""
Mock data request models
"""

from pydantic import BaseModel, Field


class GenerateDataRequest(BaseModel):
    users: int = Field(0, ge=0, le=1000, description="Number of users to generate and insert")
    pets: int = Field(0, ge=0, le=1000, description="Number of pets to generate and insert")
