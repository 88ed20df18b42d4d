import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from beerstock.app.db.models.core_types import BeerType
from beerstock.app.db.models.models_v1 import BeerModel
from beerstock.app.db.repositories import SqlAlchemyBeerRepository
from beerstock.services.exceptions import (
    BeerAlreadyRegisteredError,
    BeerNotFoundError,
    BeerStockUnderflowError,
)
from beerstock.services.stock import BeerStockService
from conftest import make_beer


def test_save_assigns_id_and_round_trips(db_session):
    repo = SqlAlchemyBeerRepository(db_session)

    saved = repo.save(make_beer(type=BeerType.stout))
    db_session.commit()

    assert saved.id is not None
    assert repo.find_by_id(saved.id) == saved
    assert repo.find_by_name("Brahma") == saved
    assert saved.type is BeerType.stout


def test_find_returns_none_when_absent(db_session):
    repo = SqlAlchemyBeerRepository(db_session)

    assert repo.find_by_name("Brahma") is None
    assert repo.find_by_id(42) is None
    assert repo.find_by_id(42, for_update=True) is None


def test_save_updates_existing_row(db_session):
    repo = SqlAlchemyBeerRepository(db_session)
    saved = repo.save(make_beer())

    updated = repo.save(make_beer(id=saved.id, quantity=30))
    db_session.commit()

    assert updated.id == saved.id
    row = db_session.execute(select(BeerModel).where(BeerModel.id == saved.id)).scalar_one()
    assert row.quantity == 30


def test_list_all_in_insertion_order(db_session):
    repo = SqlAlchemyBeerRepository(db_session)
    for name in ["Skol", "Brahma", "Antarctica"]:
        repo.save(make_beer(name=name))
    db_session.commit()

    assert [b.name for b in repo.list_all()] == ["Skol", "Brahma", "Antarctica"]


def test_delete_by_id_is_idempotent(db_session):
    repo = SqlAlchemyBeerRepository(db_session)
    saved = repo.save(make_beer())

    repo.delete_by_id(saved.id)
    repo.delete_by_id(saved.id)
    db_session.commit()

    assert repo.list_all() == []


def test_unique_name_backstop_reports_already_registered(db_session):
    """
    Simule la course : deux créations passent le check avant l'insert.
    Le UNIQUE(name) rejette la seconde, traduite en erreur métier.
    """
    repo = SqlAlchemyBeerRepository(db_session)
    repo.save(make_beer())
    db_session.commit()

    with pytest.raises(BeerAlreadyRegisteredError):
        repo.save(make_beer(brand="Other"))

    assert [b.brand for b in repo.list_all()] == ["Ambev"]


@pytest.mark.parametrize(
    "overrides",
    [
        {"quantity": -1},
        {"max_capacity": -1, "quantity": 0},
        {"max_capacity": 5, "quantity": 6},
    ],
)
def test_check_constraint_violation_is_not_reported_as_already_registered(db_session, overrides):
    repo = SqlAlchemyBeerRepository(db_session)

    with pytest.raises(IntegrityError) as exc_info:
        repo.save(make_beer(**overrides))

    assert not isinstance(exc_info.value, BeerAlreadyRegisteredError)
    assert repo.find_by_name("Brahma") is None


def test_duplicate_insert_keeps_earlier_uncommitted_work(db_session):
    """
    Le doublon n'annule que son savepoint : la bière déjà flushée
    dans la même transaction reste là et se commit normalement.
    """
    repo = SqlAlchemyBeerRepository(db_session)
    first = repo.save(make_beer(name="Skol"))
    repo.save(make_beer())

    with pytest.raises(BeerAlreadyRegisteredError):
        repo.save(make_beer(brand="Other"))

    assert repo.find_by_id(first.id) == first
    db_session.commit()

    assert [b.name for b in repo.list_all()] == ["Skol", "Brahma"]


def test_service_over_sqlalchemy_adapter(db_session):
    service = BeerStockService(SqlAlchemyBeerRepository(db_session))

    created = service.create_beer(make_beer())
    service.increment(created.id, 10)
    db_session.commit()

    assert service.find_by_name("Brahma").quantity == 20

    service.delete_by_id(created.id)
    db_session.commit()

    with pytest.raises(BeerNotFoundError):
        service.find_by_name("Brahma")


def test_service_rejects_negative_stock_before_reaching_the_store(db_session):
    service = BeerStockService(SqlAlchemyBeerRepository(db_session))

    with pytest.raises(BeerStockUnderflowError):
        service.create_beer(make_beer(quantity=-1))

    assert service.list_all() == []
