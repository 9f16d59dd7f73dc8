"""Schema management for the product database."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from src.product_api.core.services.database.db_session import build_engine
from src.product_api.runtime.context import get_config


class DbManageService:
    def __init__(self, engine: Engine | None = None):
        self._engine = engine if engine is not None else build_engine(get_config())

    def create_all(self) -> None:
        """Create every table that does not exist yet."""
        # Registers ProductTable on SQLModel.metadata
        from src.product_api.entities.service.product import ProductTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables: {}", sorted(SQLModel.metadata.tables))
