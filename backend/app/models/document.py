"""
Document model
"""

from sqlalchemy import Column, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import relationship, validates

from app.models.base import BaseModel

class Document(BaseModel):
    """
    Named content item scoped to one project

    content holds plaintext; encrypted_content holds a client-side
    ciphertext. The service never decrypts it.
    """
    __tablename__ = "documents"

    name = Column(
        String(255),
        nullable=False,
        index=True
    )

    content = Column(
        Text,
        nullable=True
    )

    encrypted_content = Column(
        Text,
        nullable=True,
        comment="Client-side encrypted document body"
    )

    project_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    created_by = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id"),
        nullable=False,
        index=True
    )

    # Relationships
    project = relationship("Project", back_populates="documents")
    creator = relationship("User")

    @validates('name')
    def validate_name(self, key: str, name: str) -> str:
        if not name or not name.strip():
            raise ValueError("Document name cannot be empty")
        return name.strip()

    @property
    def is_encrypted(self) -> bool:
        return self.encrypted_content is not None

    def __repr__(self) -> str:
        return f"<Document(name={self.name}, project={self.project_id})>"
