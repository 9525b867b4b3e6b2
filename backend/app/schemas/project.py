"""
Pydantic schemas for Project model validation
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime
from uuid import UUID

from app.models.project import DEFAULT_PROJECT_STATUS

class ProjectCreate(BaseModel):
    """Schema for inserting a project"""

    name: str = Field(..., min_length=1, max_length=255, examples=["Site"])
    description: Optional[str] = Field(None, description="Free-form description", examples=["v1"])
    organization_id: UUID = Field(..., description="Owning organization")
    status: str = Field(DEFAULT_PROJECT_STATUS, max_length=50)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("Project name cannot be empty")
        return v.strip()

class ProjectResponse(BaseModel):
    """Schema for project rows"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: Optional[str] = None
    status: str
    organization_id: UUID
    created_at: datetime
    updated_at: datetime
