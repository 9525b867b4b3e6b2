"""
Database models package
"""

from .base import Base, BaseModel
from .user import User, AuthSession
from .organization import Organization, OrganizationMember
from .project import Project
from .document import Document

__all__ = [
    "Base", "BaseModel", "User", "AuthSession", "Organization", "OrganizationMember",
    "Project", "Document"
]
