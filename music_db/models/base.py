"""
Base model configuration for SQLAlchemy ORM.

This module defines the declarative base every model inherits from, along
with the timestamp columns shared by all catalog tables.

Usage:
    from music_db.models.base import Base, TimestampMixin

    class Label(TimestampMixin, Base):
        __tablename__ = "labels"

        id = Column(Integer, primary_key=True)
        name = Column(String)
"""

from sqlalchemy import Column, DateTime
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class TimestampMixin:
    """Adds created_at / updated_at columns maintained by the database."""

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
