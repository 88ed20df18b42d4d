import os

# Base SQLite mémoire : pas besoin de Postgres pour la suite de tests
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

import pytest  # noqa: E402
from dataclasses import replace  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from beerstock.app.api.deps import get_db  # noqa: E402
from beerstock.app.db.base import Base  # noqa: E402
from beerstock.app.db.models import models_v1  # noqa: F401,E402
from beerstock.app.db.models.core_types import BeerType  # noqa: E402
from beerstock.app.db.session import make_engine  # noqa: E402
from beerstock.app.main import app  # noqa: E402
from beerstock.services.repository import Beer  # noqa: E402
from beerstock.services.stock import BeerStockService  # noqa: E402


class InMemoryBeerRepository:
    """
    Faux store en mémoire, même contrat que SqlAlchemyBeerRepository.

    Compte les écritures pour vérifier qu'un refus n'a rien persisté.
    """

    def __init__(self):
        self.rows: dict[int, Beer] = {}
        self.next_id = 1
        self.saves = 0
        self.deletes = 0

    def find_by_name(self, name):
        return next((b for b in self.rows.values() if b.name == name), None)

    def find_by_id(self, beer_id, *, for_update=False):
        return self.rows.get(beer_id)

    def save(self, beer):
        self.saves += 1
        if beer.id is None:
            beer = replace(beer, id=self.next_id)
            self.next_id += 1
        self.rows[beer.id] = beer
        return beer

    def delete_by_id(self, beer_id):
        self.deletes += 1
        self.rows.pop(beer_id, None)

    def list_all(self):
        return [self.rows[k] for k in sorted(self.rows)]


def make_beer(**overrides) -> Beer:
    data = dict(
        name="Brahma",
        brand="Ambev",
        max_capacity=50,
        quantity=10,
        type=BeerType.lager,
    )
    data.update(overrides)
    return Beer(**data)


@pytest.fixture
def repository() -> InMemoryBeerRepository:
    return InMemoryBeerRepository()


@pytest.fixture
def service(repository) -> BeerStockService:
    return BeerStockService(repository)


@pytest.fixture(scope="function")
def db_session() -> Session:
    """
    Session DB isolée par test.

    Base SQLite mémoire neuve à chaque test : rien ne fuit d'un test à l'autre,
    même après commit().
    """

    engine = make_engine("sqlite+pysqlite://")
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db_session) -> TestClient:
    app.dependency_overrides[get_db] = lambda: db_session
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
