"""initial_registry_schema

Revision ID: 3f1c9a7e2b10
Revises:
Create Date: 2026-10-17 00:00:00.000000

Creates the seven registry tables, the ``document_type`` enum and every
natural-key unique constraint.  Requires the uuid-ossp extension for
``uuid_generate_v4()``.
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "3f1c9a7e2b10"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

ENUM_DOCUMENT_TYPE = postgresql.ENUM(
    "CPF", "CNPJ", name="document_type", create_type=False
)


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        postgresql.UUID(as_uuid=True),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _timestamp_columns() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')
    ENUM_DOCUMENT_TYPE.create(op.get_bind(), checkfirst=True)

    # ── Geography ───────────────────────────────────────────────────────
    op.create_table(
        "states",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("acronym", sa.String(2), nullable=False),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_states_name"),
        sa.UniqueConstraint("acronym", name="uq_states_acronym"),
    )

    op.create_table(
        "cities",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("state_id", postgresql.UUID(as_uuid=True), nullable=False),
        *_timestamp_columns(),
        sa.ForeignKeyConstraint(["state_id"], ["states.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", "state_id", name="uq_cities_name_state_id"),
    )
    op.create_index("ix_cities_state_id", "cities", ["state_id"])

    # ── Producers & farms ───────────────────────────────────────────────
    op.create_table(
        "producers",
        _id_column(),
        sa.Column("document", sa.String(14), nullable=False),
        sa.Column("document_type", ENUM_DOCUMENT_TYPE, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("document", name="uq_producers_document"),
    )

    op.create_table(
        "farms",
        _id_column(),
        sa.Column("farm_name", sa.String(255), nullable=False),
        sa.Column("total_area", sa.Float(), nullable=False),
        sa.Column("vegetation_area", sa.Float(), nullable=False),
        sa.Column("agricultural_area", sa.Float(), nullable=False),
        sa.Column("city_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("producer_id", postgresql.UUID(as_uuid=True), nullable=False),
        *_timestamp_columns(),
        sa.CheckConstraint(
            "vegetation_area + agricultural_area <= total_area",
            name="ck_farms_area_allocation",
        ),
        sa.ForeignKeyConstraint(["city_id"], ["cities.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["producer_id"], ["producers.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_farms_city_id", "farms", ["city_id"])
    op.create_index("ix_farms_producer_id", "farms", ["producer_id"])

    # ── Crops, harvests, plantations ───────────────────────────────────
    op.create_table(
        "crops",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=False),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_crops_name"),
    )

    op.create_table(
        "harvests",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "plantations",
        _id_column(),
        sa.Column("farm_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("crop_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("harvest_id", postgresql.UUID(as_uuid=True), nullable=False),
        *_timestamp_columns(),
        sa.ForeignKeyConstraint(["farm_id"], ["farms.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["crop_id"], ["crops.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["harvest_id"], ["harvests.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "farm_id",
            "crop_id",
            "harvest_id",
            name="uq_plantations_farm_crop_harvest",
        ),
    )
    op.create_index("ix_plantations_crop_id", "plantations", ["crop_id"])
    op.create_index("ix_plantations_harvest_id", "plantations", ["harvest_id"])


def downgrade() -> None:
    # ── Drop tables in reverse dependency order ─────────────────────────
    op.drop_table("plantations")
    op.drop_table("harvests")
    op.drop_table("crops")
    op.drop_table("farms")
    op.drop_table("producers")
    op.drop_table("cities")
    op.drop_table("states")

    ENUM_DOCUMENT_TYPE.drop(op.get_bind(), checkfirst=True)
