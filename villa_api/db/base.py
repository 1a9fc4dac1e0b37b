"""
SQLAlchemy declarative base and metadata.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all ORM models. Metadata drives table creation at startup."""

    pass
