from __future__ import annotations

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError

from beerstock.services.exceptions import (
    BeerAlreadyRegisteredError,
    BeerNotFoundError,
    BeerStockError,
)


def to_http_exception(exc: BeerStockError) -> HTTPException:
    """Traduit une erreur métier en statut HTTP (mapping déterministe)."""
    if isinstance(exc, BeerNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.detail)
    if isinstance(exc, BeerAlreadyRegisteredError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=exc.detail)
    # stock dépassé / sous zéro / quantité invalide
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.detail)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    # même corps que FastAPI, mais 400 au lieu de 422
    response = await request_validation_exception_handler(request, exc)
    response.status_code = status.HTTP_400_BAD_REQUEST
    return response


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
