"""Farm ORM model: land holding with its area breakdown.

Areas are stored in hectares.  ``vegetation_area + agricultural_area`` must
never exceed ``total_area``; the service layer enforces this on every write
and the table carries a matching CHECK constraint.
"""

from __future__ import annotations

import uuid

from sqlalchemy import CheckConstraint, Float, ForeignKey, Index, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class Farm(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A farm located in a city and owned by a producer."""

    __tablename__ = "farms"
    __table_args__ = (
        CheckConstraint(
            "vegetation_area + agricultural_area <= total_area",
            name="ck_farms_area_allocation",
        ),
        Index("ix_farms_city_id", "city_id"),
        Index("ix_farms_producer_id", "producer_id"),
    )

    farm_name: Mapped[str] = mapped_column(String(255), nullable=False)
    total_area: Mapped[float] = mapped_column(Float, nullable=False)
    vegetation_area: Mapped[float] = mapped_column(Float, nullable=False)
    agricultural_area: Mapped[float] = mapped_column(Float, nullable=False)
    city_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("cities.id", ondelete="RESTRICT"),
        nullable=False,
    )
    producer_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("producers.id", ondelete="RESTRICT"),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Farm id={self.id} name={self.farm_name!r} total={self.total_area}>"
