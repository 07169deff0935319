"""State and City ORM models: the geographic reference tables."""

from __future__ import annotations

import uuid

from sqlalchemy import ForeignKey, Index, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class State(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A federative unit. ``name`` and ``acronym`` are unique independently."""

    __tablename__ = "states"
    __table_args__ = (
        UniqueConstraint("name", name="uq_states_name"),
        UniqueConstraint("acronym", name="uq_states_acronym"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    acronym: Mapped[str] = mapped_column(String(2), nullable=False)

    def __repr__(self) -> str:
        return f"<State id={self.id} acronym={self.acronym!r}>"


class City(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A city inside a state; the same name may repeat across states."""

    __tablename__ = "cities"
    __table_args__ = (
        UniqueConstraint("name", "state_id", name="uq_cities_name_state_id"),
        Index("ix_cities_state_id", "state_id"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    state_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("states.id", ondelete="RESTRICT"),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<City id={self.id} name={self.name!r} state={self.state_id}>"
