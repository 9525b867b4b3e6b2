"""
Pydantic schemas for Document model validation
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime
from uuid import UUID

class DocumentCreate(BaseModel):
    """Schema for inserting a document"""

    name: str = Field(..., min_length=1, max_length=255)
    content: Optional[str] = Field(None, description="Plaintext body")
    encrypted_content: Optional[str] = Field(None, description="Client-side ciphertext")
    project_id: UUID
    created_by: UUID = Field(..., description="Must be the authenticated user")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("Document name cannot be empty")
        return v.strip()

class DocumentResponse(BaseModel):
    """Schema for document rows"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    content: Optional[str] = None
    encrypted_content: Optional[str] = None
    project_id: UUID
    created_by: UUID
    created_at: datetime
    updated_at: datetime
