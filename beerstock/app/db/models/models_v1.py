from __future__ import annotations

from sqlalchemy import (
    String,
    Integer,
    BigInteger,
    Enum,
    CheckConstraint,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from beerstock.app.db.base import Base
from beerstock.app.db.models.core_types import BeerType

# BIGINT en Postgres, INTEGER en SQLite (seul type auto-incrémenté côté SQLite)
BigIntPK = BigInteger().with_variant(Integer(), "sqlite")


# ---------- STOCK ----------
class BeerModel(Base):
    __tablename__ = "beers"
    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    brand: Mapped[str] = mapped_column(String(200), nullable=False)
    max_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    type: Mapped[BeerType] = mapped_column(Enum(BeerType, name="beer_type"), nullable=False)

    __table_args__ = (
        UniqueConstraint("name", name="uq_beers_name"),
        CheckConstraint("max_capacity >= 0", name="ck_beer_max_capacity_nonneg"),
        CheckConstraint("quantity >= 0", name="ck_beer_quantity_nonneg"),
        CheckConstraint("quantity <= max_capacity", name="ck_beer_quantity_le_max"),
    )
