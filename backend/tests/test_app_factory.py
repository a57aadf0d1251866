import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError

from app.app_factory import create_app
from app.startup import StartupValidator, run_startup_checks
from core.config import Settings
from core.database import create_db_engine


class TestApplication:

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"
        assert response.json()["environment"] == "testing"

    def test_session_factory_is_on_app_state(self, app, engine):
        assert app.state.engine is engine
        session = app.state.session_factory()
        try:
            assert session.get_bind() is engine
        finally:
            session.close()

    def test_cors_preflight(self, client):
        response = client.options("/tables", headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
        })

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"

    def test_unexpected_error_is_hidden(self, app, db_session):
        @app.get("/boom")
        def boom():
            raise RuntimeError("database password is hunter2")

        client = TestClient(app, raise_server_exceptions=False)
        response = client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {
            "detail": "Internal server error",
            "error_code": "INTERNAL_ERROR",
            "path": "/boom",
        }

    def test_integrity_error_is_conflict(self, app, db_session):
        @app.get("/clash")
        def clash():
            raise IntegrityError("INSERT ...", {}, Exception("UNIQUE failed"))

        response = TestClient(app).get("/clash")

        assert response.status_code == 409
        assert response.json()["error_code"] == "CONFLICT"

    def test_seed_on_startup(self, test_settings):
        settings = test_settings.model_copy(update={"seed_on_startup": True})
        engine = create_db_engine(settings=settings)
        try:
            with TestClient(create_app(settings, engine=engine)) as client:
                assert len(client.get("/tables").json()) == 12
                assert len(client.get("/menu").json()) == 12
                staff = client.get("/staff").json()
                assert len(staff) == 6
                on_shift = client.get(
                    "/staff", params={"status": "On Shift"}).json()
                assert len(on_shift) == 5
        finally:
            engine.dispose()


class TestStartupValidator:

    def test_all_checks_pass(self, engine, test_settings):
        passed, errors, warnings = StartupValidator(
            engine, test_settings).validate_all()

        assert passed is True
        assert errors == []
        assert warnings == []

    def test_missing_tables_are_a_warning(self, test_settings):
        empty = create_db_engine(settings=test_settings)
        try:
            passed, errors, warnings = StartupValidator(
                empty, test_settings).validate_all()
        finally:
            empty.dispose()

        assert passed is True
        assert any("Missing database tables" in w for w in warnings)

    def test_production_refuses_unreachable_database(self):
        settings = Settings(
            _env_file=None,
            environment="production",
            database_url="sqlite:////nonexistent-dir/pos.sqlite",
        )
        engine = create_db_engine(settings=settings)
        try:
            with pytest.raises(RuntimeError):
                run_startup_checks(engine, settings)
        finally:
            engine.dispose()
