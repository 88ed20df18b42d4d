"""
Port de persistance du stock.

Le service ne connaît que ce contrat ; l'implémentation SQLAlchemy vit dans
beerstock.app.db.repositories et les tests utilisent un faux en mémoire.
Une absence est renvoyée comme None : c'est le service qui décide que
c'est une erreur.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from beerstock.app.db.models.core_types import BeerType


@dataclass(frozen=True)
class Beer:
    name: str
    brand: str
    max_capacity: int
    quantity: int
    type: BeerType
    id: int | None = None


class BeerRepository(Protocol):
    def find_by_name(self, name: str) -> Beer | None:
        ...

    def find_by_id(self, beer_id: int, *, for_update: bool = False) -> Beer | None:
        ...

    def save(self, beer: Beer) -> Beer:
        ...

    def delete_by_id(self, beer_id: int) -> None:
        ...

    def list_all(self) -> list[Beer]:
        ...
