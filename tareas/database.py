"""SQLite engine, connection pool, session factory and startup bootstrap."""

import logging
from typing import Iterable, Optional

from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool
from sqlmodel import Session, SQLModel, create_engine

from tareas import settings
from tareas.models import Categoria

logger = logging.getLogger(__name__)


def make_engine(url: str = settings.DATABASE_URL) -> Engine:
    """Create an engine backed by a fixed-size connection pool.

    Only SQLite URLs are supported: seeding relies on SQLite's
    ``ON CONFLICT DO NOTHING``. Connections are shared across the server's
    worker threads, so SQLite's same-thread check is disabled; the pool hands
    each connection to one request at a time.
    """
    return create_engine(
        url,
        echo=settings.SQL_ECHO,
        poolclass=QueuePool,
        pool_size=settings.POOL_SIZE,
        max_overflow=0,
        pool_timeout=settings.POOL_TIMEOUT,
        connect_args={"check_same_thread": False},
    )


engine = make_engine()


def seed_categorias(
    session: Session, nombres: Iterable[str] = settings.DEFAULT_CATEGORIAS
) -> None:
    """Insert the default categories that are not present yet.

    Existing rows are matched on the unique ``nombre`` column and left as they
    are, so running this on every startup is safe.
    """
    for nombre in nombres:
        statement = (
            sqlite_insert(Categoria)
            .values(nombre=nombre)
            .on_conflict_do_nothing(index_elements=["nombre"])
        )
        session.exec(statement)
    session.commit()


def create_db_and_tables(bind: Optional[Engine] = None) -> None:
    """Create the tables if missing and seed the default categories.

    Errors are not caught: a store that cannot be prepared must abort startup.
    """
    bind = bind if bind is not None else engine
    SQLModel.metadata.create_all(bind)
    with Session(bind) as session:
        seed_categorias(session)
    logger.info(
        "Database ready at %s with categories %s",
        bind.url.render_as_string(hide_password=True),
        ", ".join(settings.DEFAULT_CATEGORIAS),
    )


def get_session():
    """Yield a database session for FastAPI dependency injection.

    The session returns its connection to the pool when the request ends,
    whether the handler succeeded or raised.
    """
    with Session(engine) as session:
        yield session
