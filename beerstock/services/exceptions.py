"""
Erreurs métier du stock.

Chaque erreur est typée pour que la couche HTTP puisse la traduire
sans ambiguïté (404 / 409 / 400). Aucune n'est retentée ni fatale :
elles restent limitées à la requête en cours.
"""

from __future__ import annotations


class BeerStockError(Exception):
    """Base de toutes les erreurs du service de stock."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class BeerAlreadyRegisteredError(BeerStockError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Beer with name {name} already registered in the system.")


class BeerNotFoundError(BeerStockError):
    def __init__(self, identifier: str | int):
        self.identifier = identifier
        if isinstance(identifier, int):
            detail = f"Beer with id {identifier} not found in the system."
        else:
            detail = f"Beer with name {identifier} not found in the system."
        super().__init__(detail)


class BeerStockExceededError(BeerStockError):
    def __init__(self, attempted_total: int, max_capacity: int):
        self.attempted_total = attempted_total
        self.max_capacity = max_capacity
        super().__init__(
            f"Stock of {attempted_total} exceeds the max stock capacity of {max_capacity}."
        )


class BeerStockUnderflowError(BeerStockError):
    def __init__(self, attempted_total: int):
        self.attempted_total = attempted_total
        super().__init__(f"Stock of {attempted_total} would be below zero.")


class InvalidQuantityError(BeerStockError):
    def __init__(self, quantity: int, detail: str | None = None):
        self.quantity = quantity
        super().__init__(detail or f"Quantity must be a positive integer (got {quantity}).")
