"""initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "types",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=80), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_types"),
        sa.UniqueConstraint("name", name="uq_types_name"),
    )
    op.create_table(
        "specialties",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=80), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_specialties"),
        sa.UniqueConstraint("name", name="uq_specialties_name"),
    )
    op.create_table(
        "owners",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("first_name", sa.String(length=30), nullable=False),
        sa.Column("last_name", sa.String(length=30), nullable=False),
        sa.Column("address", sa.String(length=255), nullable=False),
        sa.Column("city", sa.String(length=80), nullable=False),
        sa.Column("telephone", sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_owners"),
    )
    op.create_index("ix_owners_last_name", "owners", ["last_name"])
    op.create_table(
        "vets",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("first_name", sa.String(length=30), nullable=False),
        sa.Column("last_name", sa.String(length=30), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_vets"),
    )
    op.create_index("ix_vets_last_name", "vets", ["last_name"])
    op.create_table(
        "vet_specialties",
        sa.Column("vet_id", sa.Integer(), nullable=False),
        sa.Column("specialty_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["vet_id"], ["vets.id"], name="fk_vet_specialties_vet_id_vets", ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["specialty_id"], ["specialties.id"],
            name="fk_vet_specialties_specialty_id_specialties", ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("vet_id", "specialty_id", name="pk_vet_specialties"),
    )
    op.create_table(
        "pets",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("owner_id", sa.Integer(), nullable=False),
        sa.Column("type_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=30), nullable=False),
        sa.Column("birth_date", sa.Date(), nullable=False),
        sa.ForeignKeyConstraint(["owner_id"], ["owners.id"], name="fk_pets_owner_id_owners", ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["type_id"], ["types.id"], name="fk_pets_type_id_types"),
        sa.PrimaryKeyConstraint("id", name="pk_pets"),
    )
    op.create_index("ix_pets_owner_id", "pets", ["owner_id"])
    op.create_table(
        "visits",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("pet_id", sa.Integer(), nullable=False),
        sa.Column("visit_date", sa.Date(), nullable=False),
        sa.Column("description", sa.String(length=255), nullable=False),
        sa.ForeignKeyConstraint(["pet_id"], ["pets.id"], name="fk_visits_pet_id_pets", ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id", name="pk_visits"),
    )
    op.create_index("ix_visits_pet_id", "visits", ["pet_id"])


def downgrade() -> None:
    op.drop_index("ix_visits_pet_id", table_name="visits")
    op.drop_table("visits")
    op.drop_index("ix_pets_owner_id", table_name="pets")
    op.drop_table("pets")
    op.drop_table("vet_specialties")
    op.drop_index("ix_vets_last_name", table_name="vets")
    op.drop_table("vets")
    op.drop_index("ix_owners_last_name", table_name="owners")
    op.drop_table("owners")
    op.drop_table("specialties")
    op.drop_table("types")
