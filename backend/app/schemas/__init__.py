"""
Pydantic schemas for API request/response validation
"""

from .organization import (
    OrganizationCreate, OrganizationResponse, OrganizationMemberCreate, OrganizationMemberResponse
)
from .project import ProjectCreate, ProjectResponse
from .document import DocumentCreate, DocumentResponse
from .user import SignUpRequest, SignInRequest, UserResponse, SessionResponse

__all__ = [
    # Organization schemas
    "OrganizationCreate", "OrganizationResponse", "OrganizationMemberCreate", "OrganizationMemberResponse",
    # Project schemas
    "ProjectCreate", "ProjectResponse",
    # Document schemas
    "DocumentCreate", "DocumentResponse",
    # User / auth schemas
    "SignUpRequest", "SignInRequest", "UserResponse", "SessionResponse"
]
