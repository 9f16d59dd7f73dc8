"""Integration tests for application lifecycle and startup behavior."""

import asyncio

from sqlalchemy import inspect

from src.product_api.api.http import app as application
from src.product_api.api.http.app_data import ApplicationDependencies
from src.product_api.runtime.config.config_data import ConfigData, DatabaseConfig
from src.product_api.runtime.context import with_context


class TestApplicationStartup:
    def test_startup_creates_tables_and_dependencies(self, tmp_path):
        """Startup wires the database service and creates the product table."""
        db_file = tmp_path / "startup.db"
        test_config = ConfigData(database=DatabaseConfig(url=f"sqlite:///{db_file}"))

        with with_context(test_config):
            asyncio.run(application.startup())

        try:
            deps = application.app.state.app_dependencies
            assert isinstance(deps, ApplicationDependencies)
            assert "product" in inspect(deps.database_service.engine).get_table_names()
        finally:
            asyncio.run(application.shutdown())

    def test_startup_can_skip_table_creation(self, tmp_path):
        db_file = tmp_path / "bare.db"
        test_config = ConfigData(
            database=DatabaseConfig(url=f"sqlite:///{db_file}", create_tables=False)
        )

        with with_context(test_config):
            asyncio.run(application.startup())

        try:
            engine = application.app.state.app_dependencies.database_service.engine
            assert inspect(engine).get_table_names() == []
        finally:
            asyncio.run(application.shutdown())

    def test_routes_are_mounted_under_api_prefix(self):
        paths = set(application.app.openapi()["paths"])

        assert {
            "/api/v1/product",
            "/api/v1/products",
            "/api/v1/product/{id}",
            "/health",
            "/health/ready",
            "/health/database",
        } <= paths
