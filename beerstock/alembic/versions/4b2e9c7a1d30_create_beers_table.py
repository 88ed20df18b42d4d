"""create beers table

Revision ID: 4b2e9c7a1d30
Revises:
Create Date: 2026-10-12
"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "4b2e9c7a1d30"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TABLE_NAME = "beers"

# noms des membres (comportement par défaut de sa.Enum côté modèle)
BEER_TYPE = sa.Enum(
    "lager",
    "malzbier",
    "witbier",
    "weiss",
    "ale",
    "ipa",
    "stout",
    name="beer_type",
)


def upgrade() -> None:
    op.create_table(
        TABLE_NAME,
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("brand", sa.String(length=200), nullable=False),
        sa.Column("max_capacity", sa.Integer(), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("type", BEER_TYPE, nullable=False),
        sa.UniqueConstraint("name", name="uq_beers_name"),
        sa.CheckConstraint("max_capacity >= 0", name="ck_beer_max_capacity_nonneg"),
        sa.CheckConstraint("quantity >= 0", name="ck_beer_quantity_nonneg"),
        sa.CheckConstraint("quantity <= max_capacity", name="ck_beer_quantity_le_max"),
    )


def downgrade() -> None:
    op.drop_table(TABLE_NAME)
    # Postgres garde le type enum après le DROP TABLE
    BEER_TYPE.drop(op.get_bind(), checkfirst=True)
