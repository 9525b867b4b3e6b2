"""
Base model class with common fields and functionality
"""

from sqlalchemy import Column, DateTime, Uuid, func
from sqlalchemy.orm import declarative_base, declared_attr
import re
import uuid
from datetime import datetime
from typing import Any

# Create the base class
Base = declarative_base()

class BaseModel(Base):
    """
    Base model class that provides common fields and functionality
    for all database models
    """
    __abstract__ = True

    # Hidden from to_dict() output
    __private_columns__: tuple = ()

    # Primary key
    id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        unique=True,
        nullable=False,
        index=True
    )

    # Timestamps
    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        index=True
    )

    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False
    )

    @declared_attr
    def __tablename__(cls) -> str:
        """
        Automatically generate table name from class name
        Convert CamelCase to snake_case
        """
        name = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', cls.__name__)
        return re.sub('([a-z0-9])([A-Z])', r'\1_\2', name).lower()

    def to_dict(self) -> dict[str, Any]:
        """
        Convert model instance to dictionary
        """
        result = {}
        for column in self.__table__.columns:
            if column.name in self.__private_columns__:
                continue
            value = getattr(self, column.name)
            if isinstance(value, datetime):
                value = value.isoformat()
            elif isinstance(value, uuid.UUID):
                value = str(value)
            result[column.name] = value
        return result

    def __repr__(self) -> str:
        """
        String representation of the model
        """
        return f"<{self.__class__.__name__}(id={self.id})>"
