"""
Pydantic schemas for Organization and OrganizationMember validation
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, Dict, Any
from datetime import datetime
from uuid import UUID

from app.models.organization import DEFAULT_MEMBER_ROLE, MEMBER_ROLES

class OrganizationCreate(BaseModel):
    """Schema for inserting an organization"""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Display name of the organization",
        examples=["Acme"]
    )

    settings: Dict[str, Any] = Field(
        default_factory=dict,
        description="Opaque organization settings"
    )

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Reject blank names and strip surrounding whitespace"""
        if not v.strip():
            raise ValueError("Organization name cannot be empty")
        return v.strip()

class OrganizationResponse(BaseModel):
    """Schema for organization rows"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(..., description="Unique organization identifier")
    name: str
    settings: Dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime

class OrganizationMemberCreate(BaseModel):
    """Schema for adding a user to an organization"""

    user_id: UUID = Field(..., description="User to add")
    role: str = Field(DEFAULT_MEMBER_ROLE, description="Membership role")

    @field_validator('role')
    @classmethod
    def validate_role(cls, v):
        v = v.lower()
        if v not in MEMBER_ROLES:
            raise ValueError(f"Role must be one of: {', '.join(MEMBER_ROLES)}")
        return v

class OrganizationMemberResponse(BaseModel):
    """Schema for organization_members rows"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    organization_id: UUID
    user_id: UUID
    role: str
    created_at: datetime
    full_name: Optional[str] = None
