"""Producer ORM model: the rural producer who owns farms."""

from __future__ import annotations

from sqlalchemy import Enum, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from app.models.enums import DocumentTypeEnum


class Producer(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A producer identified by a CPF or CNPJ ``document``."""

    __tablename__ = "producers"
    __table_args__ = (UniqueConstraint("document", name="uq_producers_document"),)

    document: Mapped[str] = mapped_column(String(14), nullable=False)
    document_type: Mapped[DocumentTypeEnum] = mapped_column(
        Enum(
            DocumentTypeEnum,
            name="document_type",
            create_constraint=False,
            native_enum=True,
        ),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return (
            f"<Producer id={self.id} document_type={self.document_type} "
            f"name={self.name!r}>"
        )
