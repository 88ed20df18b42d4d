from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from beerstock.app.db.repositories import SqlAlchemyBeerRepository
from beerstock.app.db.session import SessionLocal
from beerstock.services.stock import BeerStockService


def get_db() -> Generator:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_stock_service(db: Session = Depends(get_db)) -> BeerStockService:
    return BeerStockService(SqlAlchemyBeerRepository(db))
