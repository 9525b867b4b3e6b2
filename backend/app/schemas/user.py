"""
Pydantic schemas for users and auth requests
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional
from datetime import datetime
from uuid import UUID

class SignUpRequest(BaseModel):
    """Schema for creating an account"""

    email: EmailStr = Field(..., examples=["owner@example.com"])
    password: str = Field(..., min_length=1, max_length=128)
    full_name: Optional[str] = Field(None, max_length=255)

class SignInRequest(BaseModel):
    """Schema for password sign-in"""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)

class UserResponse(BaseModel):
    """Schema for user rows (no credential fields)"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    full_name: Optional[str] = None
    role: str
    created_at: datetime
    updated_at: datetime

class SessionResponse(BaseModel):
    """Schema returned by sign-in and sign-up"""

    access_token: str
    token_type: str = "bearer"
    expires_at: datetime
    user: UserResponse
