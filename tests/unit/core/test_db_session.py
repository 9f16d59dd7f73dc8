"""Unit tests for the database session service."""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError
from sqlmodel import Session, create_engine, select

from src.product_api.core.services import DbManageService, DbSessionService
from src.product_api.core.services.database.db_session import build_engine
from src.product_api.entities.service.product import ProductTable
from src.product_api.runtime.config.config_data import ConfigData, DatabaseConfig


class TestDbSessionService:
    def test_health_check_healthy(self, database_service: DbSessionService):
        assert database_service.health_check() is True

    def test_health_check_unreachable_database(self, tmp_path):
        missing_dir = tmp_path / "missing" / "products.db"
        service = DbSessionService(create_engine(f"sqlite:///{missing_dir}"))

        assert service.health_check() is False

    def test_session_scope_commits(self, database_service: DbSessionService, engine):
        with database_service.session_scope() as db:
            db.add(ProductTable(name="Pen", price=1.5, quantity=100))

        with Session(engine) as other:
            assert len(other.exec(select(ProductTable)).all()) == 1

    def test_session_scope_rolls_back_on_error(self, database_service: DbSessionService, engine):
        with pytest.raises(OperationalError):
            with database_service.session_scope() as db:
                db.add(ProductTable(name="Pen", price=1.5, quantity=100))
                db.flush()
                db.execute(text("SELECT * FROM no_such_table"))

        with Session(engine) as other:
            assert other.exec(select(ProductTable)).all() == []

    def test_pool_status_keys(self, database_service: DbSessionService):
        assert set(database_service.get_pool_status()) == {
            "size",
            "checked_in",
            "checked_out",
            "overflow",
        }

    def test_pool_status_in_memory_sqlite(self):
        """`sqlite://` gets a SingletonThreadPool, whose `size` is not callable."""
        service = DbSessionService(create_engine("sqlite://"))

        try:
            assert service.get_pool_status() == {
                "size": 0,
                "checked_in": 0,
                "checked_out": 0,
                "overflow": 0,
            }
        finally:
            service.dispose()


class TestBuildEngine:
    def test_sqlite_engine_skips_pool_sizing(self):
        config = ConfigData(database=DatabaseConfig(url="sqlite://"))

        engine = build_engine(config)

        assert engine.url.get_backend_name() == "sqlite"
        engine.dispose()

    def test_create_all_creates_product_table(self):
        engine = build_engine(ConfigData(database=DatabaseConfig(url="sqlite://")))
        DbManageService(engine).create_all()

        with engine.connect() as connection:
            tables = connection.execute(
                text("SELECT name FROM sqlite_master WHERE type='table'")
            ).scalars().all()

        assert "product" in tables
        engine.dispose()
