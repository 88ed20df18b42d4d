from beerstock.app.db.repositories import SqlAlchemyBeerRepository
from beerstock.app.db.seed import SAMPLE_BEERS, run_seed


def test_run_seed_is_idempotent(db_session):
    assert run_seed(db_session) == len(SAMPLE_BEERS)
    assert run_seed(db_session) == 0

    beers = SqlAlchemyBeerRepository(db_session).list_all()
    assert [b.name for b in beers] == [b.name for b in SAMPLE_BEERS]
