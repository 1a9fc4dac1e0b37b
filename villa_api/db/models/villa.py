"""
Villa model - the single persisted resource of the API.
"""

from datetime import datetime

from sqlalchemy import String, Text, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column

from villa_api.db.base import Base


class Villa(Base):
    """Villa entity. Id is generated by the store and never reassigned."""

    __tablename__ = "villas"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    # Uniqueness is checked case-insensitively on create, not by a constraint
    name: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    details: Mapped[str | None] = mapped_column(Text, nullable=True)
    rate: Mapped[float] = mapped_column(nullable=False, default=0.0)
    sqft: Mapped[int] = mapped_column(nullable=False, default=0)
    occupancy: Mapped[int] = mapped_column(nullable=False, default=0)
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    amenity: Mapped[str | None] = mapped_column(String(500), nullable=True)
    created_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<Villa(id={self.id}, name={self.name})>"
