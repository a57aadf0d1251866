"""
Pytest configuration file for backend testing.

Every test gets its own in-memory SQLite database, a session on it and,
when asked for, a TestClient over an application built by the factory
around that same engine.
"""
import sys
from pathlib import Path

# Add the backend directory to Python path so imports work correctly
backend_dir = Path(__file__).parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

import pytest
from fastapi.testclient import TestClient

from core.config import Settings
from core.database import create_db_engine, create_session_factory, init_db
from app.app_factory import create_app
from tests.factories import bind_session


@pytest.fixture
def test_settings():
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        environment="testing",
        debug=False,
        create_schema_on_startup=True,
        seed_on_startup=False,
        log_sql_queries=False,
    )


@pytest.fixture
def engine(test_settings):
    """Fresh in-memory database for each test."""
    engine = create_db_engine(settings=test_settings)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Create a fresh database session for each test."""
    db = create_session_factory(engine)()
    bind_session(db)
    try:
        yield db
    finally:
        bind_session(None)
        db.close()


@pytest.fixture
def app(test_settings, engine):
    return create_app(test_settings, engine=engine)


@pytest.fixture
def client(app, db_session):
    """Test client sharing the test database with ``db_session``."""
    with TestClient(app) as test_client:
        yield test_client
