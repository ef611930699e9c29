"""
SQLAlchemy ORM models for the property store.
"""

from datetime import datetime
import uuid

from sqlalchemy import Boolean, Column, DateTime, Float, JSON, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def generate_uuid():
    return str(uuid.uuid4())


class AuditMixin:
    """Mixin for audit fields on all models."""

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )
    is_deleted = Column(Boolean, default=False, nullable=False)


class Property(AuditMixin, Base):
    """A saved property and the inputs used to analyze it."""

    __tablename__ = "properties"

    id = Column(String, primary_key=True, default=generate_uuid)
    name = Column(String(255), nullable=False)
    address = Column(String(255))

    # Denormalized from the record for listing and filtering
    property_type = Column(String(50))
    purchase_price = Column(Float)

    # Full PropertyRecord as produced by model_dump(mode="json")
    record = Column(JSON, nullable=False, default=dict)
