# backend/core/database.py

from typing import Generator, Optional

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import Settings, get_settings
from .query_logger import setup_query_logging

Base = declarative_base()


def create_db_engine(
    database_url: Optional[str] = None, settings: Optional[Settings] = None
) -> Engine:
    """
    Build an engine for the given URL.

    SQLite engines get ``check_same_thread`` disabled (requests may be served
    from a thread pool) and in-memory URLs share one connection so every
    session sees the same database.
    """
    settings = settings or get_settings()
    database_url = database_url or settings.database_url

    engine_kwargs = {
        "echo": settings.log_sql_queries,
        "pool_pre_ping": True,
    }

    if database_url.startswith("sqlite"):
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in {"sqlite://", "sqlite:///:memory:"}:
            engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs["pool_size"] = settings.db_pool_size
        engine_kwargs["max_overflow"] = settings.db_max_overflow

    engine = create_engine(database_url, **engine_kwargs)
    setup_query_logging(engine, settings)
    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    """Create every table registered on ``Base.metadata``."""
    # Model modules register themselves on import
    import modules.tables.models.table_models  # noqa: F401
    import modules.menu.models.menu_models  # noqa: F401
    import modules.staff.models.staff_models  # noqa: F401
    import modules.orders.models.order_models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def get_db(request: Request) -> Generator[Session, None, None]:
    """Yield a session from the factory attached to the running app."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
