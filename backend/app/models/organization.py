"""
Organization and membership models (the tenant boundary)
"""

from sqlalchemy import Column, ForeignKey, JSON, String, UniqueConstraint, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship, validates
from typing import Any

from app.models.base import BaseModel

DEFAULT_MEMBER_ROLE = "member"
MEMBER_ROLES = ("owner", "admin", "member")

class Organization(BaseModel):
    """
    Top-level tenant grouping users and projects
    """
    __tablename__ = "organizations"

    name = Column(
        String(255),
        nullable=False,
        index=True,
        comment="Display name of the organization"
    )

    settings = Column(
        JSON().with_variant(JSONB(), "postgresql"),
        default=lambda: {},
        nullable=False,
        comment="Opaque organization settings"
    )

    # Relationships
    members = relationship("OrganizationMember", back_populates="organization", cascade="all, delete-orphan")
    projects = relationship("Project", back_populates="organization", cascade="all, delete-orphan")

    @validates('name')
    def validate_name(self, key: str, name: str) -> str:
        """
        Organization names are stored trimmed and may not be blank
        """
        if not name or not name.strip():
            raise ValueError("Organization name cannot be empty")
        return name.strip()

    def get_setting(self, key: str, default: Any = None) -> Any:
        """
        Get a value from the settings JSON field
        """
        if not self.settings:
            return default
        return self.settings.get(key, default)

    def __repr__(self) -> str:
        return f"<Organization(name={self.name})>"


class OrganizationMember(BaseModel):
    """
    Links a user to an organization with a role
    """
    __tablename__ = "organization_members"
    __table_args__ = (
        UniqueConstraint("organization_id", "user_id", name="uq_organization_members_org_user"),
    )

    organization_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    role = Column(
        String(50),
        nullable=False,
        default=DEFAULT_MEMBER_ROLE,
        comment="Membership role (owner, admin, member)"
    )

    # Relationships
    organization = relationship("Organization", back_populates="members")
    user = relationship("User", back_populates="memberships")

    @validates('role')
    def validate_role(self, key: str, role: str) -> str:
        role = (role or DEFAULT_MEMBER_ROLE).lower()
        if role not in MEMBER_ROLES:
            raise ValueError(f"Role must be one of: {', '.join(MEMBER_ROLES)}")
        return role

    def can_manage_members(self) -> bool:
        return self.role in ("owner", "admin")

    def __repr__(self) -> str:
        return f"<OrganizationMember(org={self.organization_id}, user={self.user_id}, role={self.role})>"
