from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from beerstock.app.core.config import settings

DATABASE_URL = settings.database_url


def _engine_kwargs(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True}

    kwargs: dict = {"connect_args": {"check_same_thread": False}}
    # SQLite mémoire : une seule connexion partagée, sinon chaque connexion a sa propre base
    if ":memory:" in url or url.rstrip("/") in ("sqlite:", "sqlite+pysqlite:"):
        kwargs["poolclass"] = StaticPool
    return kwargs


def _enable_sqlite_savepoints(engine: Engine) -> None:
    # pysqlite gère BEGIN lui-même et casse les SAVEPOINT : on émet BEGIN nous-mêmes
    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")


def make_engine(url: str, echo: bool = False) -> Engine:
    eng = create_engine(url, echo=echo, **_engine_kwargs(url))
    if eng.dialect.name == "sqlite":
        _enable_sqlite_savepoints(eng)
    return eng


engine = make_engine(DATABASE_URL, echo=settings.database_echo)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
