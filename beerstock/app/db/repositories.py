"""
Adaptateur SQLAlchemy du port BeerRepository.

Toute la partie schéma / ORM reste ici : le service ne voit que des Beer.
Pas de commit : la transaction appartient à la requête.
"""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from beerstock.app.db.models.models_v1 import BeerModel
from beerstock.services.exceptions import BeerAlreadyRegisteredError
from beerstock.services.repository import Beer


def _to_record(m: BeerModel) -> Beer:
    return Beer(
        id=int(m.id),
        name=m.name,
        brand=m.brand,
        max_capacity=m.max_capacity,
        quantity=m.quantity,
        type=m.type,
    )


class SqlAlchemyBeerRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_by_name(self, name: str) -> Beer | None:
        m = self.db.execute(select(BeerModel).where(BeerModel.name == name)).scalar_one_or_none()
        return _to_record(m) if m else None

    def find_by_id(self, beer_id: int, *, for_update: bool = False) -> Beer | None:
        m = self._get_model(beer_id, for_update=for_update)
        return _to_record(m) if m else None

    def save(self, beer: Beer) -> Beer:
        if beer.id is None:
            return self._insert(beer)

        m = self._get_model(beer.id, for_update=False)
        if m is None:
            m = BeerModel(id=beer.id)
            self.db.add(m)

        m.name = beer.name
        m.brand = beer.brand
        m.max_capacity = beer.max_capacity
        m.quantity = beer.quantity
        m.type = beer.type
        self.db.flush()
        return _to_record(m)

    def delete_by_id(self, beer_id: int) -> None:
        # idempotent : aucune erreur si la ligne n'existe plus
        self.db.execute(delete(BeerModel).where(BeerModel.id == beer_id))
        self.db.flush()

    def list_all(self) -> list[Beer]:
        rows = self.db.execute(select(BeerModel).order_by(BeerModel.id.asc())).scalars().all()
        return [_to_record(m) for m in rows]

    # ---------- Helpers ----------
    def _get_model(self, beer_id: int, *, for_update: bool) -> BeerModel | None:
        stmt = select(BeerModel).where(BeerModel.id == beer_id)
        if for_update:
            stmt = stmt.with_for_update()
        return self.db.execute(stmt).scalar_one_or_none()

    def _insert(self, beer: Beer) -> Beer:
        m = BeerModel(
            name=beer.name,
            brand=beer.brand,
            max_capacity=beer.max_capacity,
            quantity=beer.quantity,
            type=beer.type,
        )
        try:
            # savepoint : un échec n'annule pas le reste de la transaction de la requête
            with self.db.begin_nested():
                self.db.add(m)
                self.db.flush()
        except IntegrityError as exc:
            # UNIQUE(name) : création concurrente passée entre le check et l'insert.
            # Toute autre violation (CHECK...) remonte telle quelle.
            if self.find_by_name(beer.name) is not None:
                raise BeerAlreadyRegisteredError(beer.name) from exc
            raise
        return _to_record(m)
