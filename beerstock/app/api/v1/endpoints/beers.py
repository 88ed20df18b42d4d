from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from beerstock.app.api.deps import get_db, get_stock_service
from beerstock.app.api.errors import to_http_exception
from beerstock.app.schemas.beer import BeerCreate, BeerRead, QuantityUpdate
from beerstock.services.exceptions import BeerStockError
from beerstock.services.repository import Beer
from beerstock.services.stock import BeerStockService

router = APIRouter(prefix="/beers")


@router.post("", response_model=BeerRead, status_code=status.HTTP_201_CREATED)
def create_beer(
    payload: BeerCreate,
    db: Session = Depends(get_db),
    service: BeerStockService = Depends(get_stock_service),
):
    try:
        beer = service.create_beer(Beer(**payload.model_dump()))
    except BeerStockError as exc:
        raise to_http_exception(exc) from exc

    db.commit()
    return beer


@router.get("", response_model=list[BeerRead])
def list_beers(service: BeerStockService = Depends(get_stock_service)):
    return service.list_all()


@router.get("/{name}", response_model=BeerRead)
def find_by_name(name: str, service: BeerStockService = Depends(get_stock_service)):
    try:
        return service.find_by_name(name)
    except BeerStockError as exc:
        raise to_http_exception(exc) from exc


@router.delete("/{beer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_by_id(
    beer_id: int,
    db: Session = Depends(get_db),
    service: BeerStockService = Depends(get_stock_service),
):
    try:
        service.delete_by_id(beer_id)
    except BeerStockError as exc:
        raise to_http_exception(exc) from exc

    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{beer_id}/increment", response_model=BeerRead)
def increment(
    beer_id: int,
    payload: QuantityUpdate,
    db: Session = Depends(get_db),
    service: BeerStockService = Depends(get_stock_service),
):
    try:
        beer = service.increment(beer_id, payload.quantity)
    except BeerStockError as exc:
        raise to_http_exception(exc) from exc

    db.commit()
    return beer


@router.patch("/{beer_id}/decrement", response_model=BeerRead)
def decrement(
    beer_id: int,
    payload: QuantityUpdate,
    db: Session = Depends(get_db),
    service: BeerStockService = Depends(get_stock_service),
):
    try:
        beer = service.decrement(beer_id, payload.quantity)
    except BeerStockError as exc:
        raise to_http_exception(exc) from exc

    db.commit()
    return beer
