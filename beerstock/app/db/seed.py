from __future__ import annotations

from sqlalchemy.orm import Session

from beerstock.app.core.logging import get_logger
from beerstock.app.db.base import Base
from beerstock.app.db.models.core_types import BeerType
from beerstock.app.db.repositories import SqlAlchemyBeerRepository
from beerstock.app.db.session import SessionLocal, engine
from beerstock.services.repository import Beer
from beerstock.services.stock import BeerStockService

logger = get_logger(__name__)

SAMPLE_BEERS = [
    Beer(name="Brahma", brand="Ambev", max_capacity=50, quantity=10, type=BeerType.lager),
    Beer(name="Colorado Indica", brand="Colorado", max_capacity=30, quantity=5, type=BeerType.ipa),
    Beer(name="Guinness Draught", brand="Guinness", max_capacity=20, quantity=0, type=BeerType.stout),
]


def run_seed(db: Session | None = None) -> int:
    """Insère les bières d'exemple absentes. Retourne le nombre de créations."""
    owns_session = db is None
    if owns_session:
        Base.metadata.create_all(bind=engine)
        db = SessionLocal()

    try:
        repository = SqlAlchemyBeerRepository(db)
        service = BeerStockService(repository)

        created = 0
        for beer in SAMPLE_BEERS:
            # déjà là : on ne touche pas au stock existant
            if repository.find_by_name(beer.name) is not None:
                continue
            service.create_beer(beer)
            created += 1

        db.commit()
        logger.info("SEED OK: %s beer(s) created", created)
        return created
    finally:
        if owns_session:
            db.close()


if __name__ == "__main__":
    run_seed()
