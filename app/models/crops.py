"""Crop, Harvest and Plantation ORM models.

A plantation records that a crop was planted on a farm for a given harvest.
The ``(farm_id, crop_id, harvest_id)`` triple is unique: a farm cannot
register the same crop twice within one harvest.
"""

from __future__ import annotations

import uuid

from sqlalchemy import ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class Crop(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A cultivated crop (soy, corn, coffee); unique by name."""

    __tablename__ = "crops"
    __table_args__ = (UniqueConstraint("name", name="uq_crops_name"),)

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Crop id={self.id} name={self.name!r}>"


class Harvest(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A harvest season, e.g. ``Safra 2024`` / 2024. Not unique."""

    __tablename__ = "harvests"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<Harvest id={self.id} name={self.name!r} year={self.year}>"


class Plantation(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """Association of a farm, a crop and a harvest."""

    __tablename__ = "plantations"
    __table_args__ = (
        UniqueConstraint(
            "farm_id",
            "crop_id",
            "harvest_id",
            name="uq_plantations_farm_crop_harvest",
        ),
        Index("ix_plantations_crop_id", "crop_id"),
        Index("ix_plantations_harvest_id", "harvest_id"),
    )

    farm_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("farms.id", ondelete="RESTRICT"),
        nullable=False,
    )
    crop_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("crops.id", ondelete="RESTRICT"),
        nullable=False,
    )
    harvest_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("harvests.id", ondelete="RESTRICT"),
        nullable=False,
    )

    def __repr__(self) -> str:
        return (
            f"<Plantation id={self.id} farm={self.farm_id} "
            f"crop={self.crop_id} harvest={self.harvest_id}>"
        )
