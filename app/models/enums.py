"""PostgreSQL-backed enum types for the registry ORM models.

Each StrEnum maps 1:1 to a PostgreSQL CREATE TYPE ... AS ENUM.
"""

from enum import StrEnum


class DocumentTypeEnum(StrEnum):
    """Brazilian taxpayer document kinds accepted for producers."""

    CPF = "CPF"
    CNPJ = "CNPJ"
