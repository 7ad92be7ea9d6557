"""initial reloading schema

Revision ID: 001
Revises:
Create Date: 2025-09-15

Taxonomy tables (cartridge types, cartridges, primer types, powders, bullet
weights, bullets) with their cartridge-type join tables, primers, data
sources, accounts and reloading sessions.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "cartridge_types",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=64), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_table(
        "manufacturers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_table(
        "cartridges",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_table(
        "bullet_weights",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("weight", sa.Numeric(precision=7, scale=2), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("weight"),
    )
    op.create_table(
        "reloading_data_sources",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_table(
        "accounts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "primer_types",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("cartridge_type_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["cartridge_type_id"], ["cartridge_types.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "cartridge_type_id", "name", name="uq_primer_types_cartridge_type_name"
        ),
    )
    op.create_table(
        "powders",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("manufacturer_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["manufacturer_id"], ["manufacturers.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_table(
        "bullets",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("manufacturer_id", sa.Integer(), nullable=False),
        sa.Column("weight", sa.Numeric(precision=7, scale=2), nullable=False),
        sa.ForeignKeyConstraint(["manufacturer_id"], ["manufacturers.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "primers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("manufacturer_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["manufacturer_id"], ["manufacturers.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    for table, column, target in (
        ("cartridge_type_cartridges", "cartridge_id", "cartridges.id"),
        ("cartridge_type_powders", "powder_id", "powders.id"),
        ("cartridge_type_bullet_weights", "bullet_weight_id", "bullet_weights.id"),
    ):
        op.create_table(
            table,
            sa.Column("cartridge_type_id", sa.Integer(), nullable=False),
            sa.Column(column, sa.Integer(), nullable=False),
            sa.ForeignKeyConstraint(
                ["cartridge_type_id"], ["cartridge_types.id"], ondelete="CASCADE"
            ),
            sa.ForeignKeyConstraint([column], [target], ondelete="CASCADE"),
            sa.PrimaryKeyConstraint("cartridge_type_id", column),
        )
    op.create_table(
        "reloading_sessions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("account_id", sa.Integer(), nullable=False),
        sa.Column("loaded_at", sa.Date(), nullable=False),
        sa.Column("cartridge_type_id", sa.Integer(), nullable=False),
        sa.Column("cartridge_id", sa.Integer(), nullable=False),
        sa.Column("primer_type_id", sa.Integer(), nullable=False),
        sa.Column("primer_id", sa.Integer(), nullable=False),
        sa.Column("powder_id", sa.Integer(), nullable=False),
        sa.Column("bullet_weight_id", sa.Integer(), nullable=True),
        sa.Column("bullet_weight_other", sa.Numeric(precision=7, scale=2), nullable=True),
        sa.Column("bullet_id", sa.Integer(), nullable=False),
        sa.Column("reloading_data_source_id", sa.Integer(), nullable=False),
        sa.Column("custom_data_source_name", sa.String(length=255), nullable=True),
        sa.Column("bullet_type", sa.String(length=255), nullable=True),
        sa.Column("quantity", sa.Integer(), nullable=True),
        sa.Column(
            "cartridge_overall_length", sa.Numeric(precision=6, scale=3), nullable=True
        ),
        sa.Column("powder_weight", sa.Numeric(precision=6, scale=2), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["cartridge_type_id"], ["cartridge_types.id"]),
        sa.ForeignKeyConstraint(["cartridge_id"], ["cartridges.id"]),
        sa.ForeignKeyConstraint(["primer_type_id"], ["primer_types.id"]),
        sa.ForeignKeyConstraint(["primer_id"], ["primers.id"]),
        sa.ForeignKeyConstraint(["powder_id"], ["powders.id"]),
        sa.ForeignKeyConstraint(["bullet_weight_id"], ["bullet_weights.id"]),
        sa.ForeignKeyConstraint(["bullet_id"], ["bullets.id"]),
        sa.ForeignKeyConstraint(
            ["reloading_data_source_id"], ["reloading_data_sources.id"]
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_reloading_sessions_account_loaded_at",
        "reloading_sessions",
        ["account_id", "loaded_at"],
    )


def downgrade() -> None:
    op.drop_index(
        "ix_reloading_sessions_account_loaded_at",
        table_name="reloading_sessions",
        if_exists=True,
    )
    for table in (
        "reloading_sessions",
        "cartridge_type_bullet_weights",
        "cartridge_type_powders",
        "cartridge_type_cartridges",
        "primers",
        "bullets",
        "powders",
        "primer_types",
        "accounts",
        "reloading_data_sources",
        "bullet_weights",
        "cartridges",
        "manufacturers",
        "cartridge_types",
    ):
        op.drop_table(table, if_exists=True)
