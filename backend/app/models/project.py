"""
Project model
"""

from sqlalchemy import Column, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import relationship, validates

from app.models.base import BaseModel

DEFAULT_PROJECT_STATUS = "active"

class Project(BaseModel):
    """
    Unit of work scoped to one organization
    """
    __tablename__ = "projects"

    name = Column(
        String(255),
        nullable=False,
        index=True
    )

    description = Column(
        Text,
        nullable=True
    )

    status = Column(
        String(50),
        nullable=False,
        default=DEFAULT_PROJECT_STATUS,
        index=True,
        comment="Project status (active, archived, ...)"
    )

    organization_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Relationships
    organization = relationship("Organization", back_populates="projects")
    documents = relationship("Document", back_populates="project", cascade="all, delete-orphan")

    @validates('name')
    def validate_name(self, key: str, name: str) -> str:
        if not name or not name.strip():
            raise ValueError("Project name cannot be empty")
        return name.strip()

    def __repr__(self) -> str:
        return f"<Project(name={self.name}, organization={self.organization_id})>"
