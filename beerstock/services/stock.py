from __future__ import annotations

from dataclasses import replace

from beerstock.app.core.logging import get_logger
from beerstock.services.exceptions import (
    BeerAlreadyRegisteredError,
    BeerNotFoundError,
    BeerStockExceededError,
    BeerStockUnderflowError,
    InvalidQuantityError,
)
from beerstock.services.repository import Beer, BeerRepository

logger = get_logger(__name__)


class BeerStockService:
    """
    Règles métier du stock de bières.

    Invariant : 0 <= quantity <= max_capacity, vérifié AVANT toute écriture.

    Le service ne commit pas : la transaction appartient à l'appelant
    (une requête HTTP = une unité de travail). Les lectures qui précèdent
    une modification passent par find_by_id(for_update=True) pour que
    l'adaptateur SQL pose un verrou de ligne jusqu'au commit.
    """

    def __init__(self, repository: BeerRepository):
        self.repository = repository

    def create_beer(self, beer: Beer) -> Beer:
        self._verify_if_is_already_registered(beer.name)
        if beer.max_capacity < 0:
            raise InvalidQuantityError(
                beer.max_capacity, f"Max capacity must not be negative (got {beer.max_capacity})."
            )
        if beer.quantity < 0:
            raise BeerStockUnderflowError(beer.quantity)
        if beer.quantity > beer.max_capacity:
            raise BeerStockExceededError(beer.quantity, beer.max_capacity)

        saved = self.repository.save(replace(beer, id=None))
        logger.info("Beer created: id=%s name=%s", saved.id, saved.name)
        return saved

    def find_by_name(self, name: str) -> Beer:
        beer = self.repository.find_by_name(name)
        if beer is None:
            raise BeerNotFoundError(name)
        return beer

    def list_all(self) -> list[Beer]:
        return list(self.repository.list_all())

    def delete_by_id(self, beer_id: int) -> None:
        # vérification puis suppression : deux appels distincts au store
        self._verify_if_exists(beer_id)
        self.repository.delete_by_id(beer_id)
        logger.info("Beer deleted: id=%s", beer_id)

    def increment(self, beer_id: int, quantity_to_increment: int) -> Beer:
        _require_positive(quantity_to_increment)
        beer = self._verify_if_exists(beer_id)

        # toujours contre le total, jamais contre l'incrément seul
        quantity_after_increment = beer.quantity + quantity_to_increment
        if quantity_after_increment > beer.max_capacity:
            logger.warning(
                "Increment rejected: id=%s total=%s max=%s",
                beer_id,
                quantity_after_increment,
                beer.max_capacity,
            )
            raise BeerStockExceededError(quantity_after_increment, beer.max_capacity)

        return self._save_quantity(beer, quantity_after_increment)

    def decrement(self, beer_id: int, quantity_to_decrement: int) -> Beer:
        _require_positive(quantity_to_decrement)
        beer = self._verify_if_exists(beer_id)

        quantity_after_decrement = beer.quantity - quantity_to_decrement
        if quantity_after_decrement < 0:
            logger.warning(
                "Decrement rejected: id=%s total=%s",
                beer_id,
                quantity_after_decrement,
            )
            raise BeerStockUnderflowError(quantity_after_decrement)

        return self._save_quantity(beer, quantity_after_decrement)

    # ---------- Helpers ----------
    def _verify_if_is_already_registered(self, name: str) -> None:
        if self.repository.find_by_name(name) is not None:
            raise BeerAlreadyRegisteredError(name)

    def _verify_if_exists(self, beer_id: int) -> Beer:
        beer = self.repository.find_by_id(beer_id, for_update=True)
        if beer is None:
            raise BeerNotFoundError(beer_id)
        return beer

    def _save_quantity(self, beer: Beer, quantity: int) -> Beer:
        saved = self.repository.save(replace(beer, quantity=quantity))
        logger.info("Stock updated: id=%s quantity %s -> %s", beer.id, beer.quantity, saved.quantity)
        return saved


def _require_positive(quantity: int) -> None:
    if quantity <= 0:
        raise InvalidQuantityError(quantity)
