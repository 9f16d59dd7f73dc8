"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, create_engine

from src.product_api.runtime.config.config_data import ConfigData
from src.product_api.runtime.context import get_config


def build_engine(main_config: ConfigData) -> Engine:
    """Create the SQLAlchemy engine described by ``main_config.database``."""
    db_config = main_config.database

    engine_kwargs: dict[str, Any] = {
        "pool_pre_ping": True,
        "echo": False,
        "connect_args": _get_connect_args(main_config),
    }

    # SQLite uses its own single-connection pools that reject sizing arguments
    if not db_config.is_sqlite:
        engine_kwargs.update(
            {
                "pool_size": db_config.pool_size,
                "max_overflow": db_config.max_overflow,
                "pool_timeout": db_config.pool_timeout,
                "pool_recycle": db_config.pool_recycle,
            }
        )

    logger.info(
        "Initializing database engine for {} ({} environment)",
        "sqlite" if db_config.is_sqlite else "server database",
        main_config.app.environment,
    )
    return create_engine(db_config.connection_string, **engine_kwargs)


def _get_connect_args(config: ConfigData) -> dict:
    connect_args: dict[str, Any] = {}

    if "postgresql" in config.database.url:
        connect_args.update(
            {
                "application_name": f"{config.app.environment}_product_api",
                "connect_timeout": 30,
            }
        )
    elif config.database.is_sqlite:
        connect_args.update(
            {
                "check_same_thread": False,  # sessions cross FastAPI's threadpool
                "timeout": 20,
            }
        )
        if config.app.environment == "production":
            logger.warning(
                "SQLite is not recommended for production use. "
                "Consider PostgreSQL for better performance and reliability."
            )

    return connect_args


def _pool_counter(pool: Any, name: str) -> int:
    # SingletonThreadPool exposes `size` as an int, not a method
    counter = getattr(pool, name, None)
    return counter() if callable(counter) else 0


class DbSessionService:
    def __init__(self, engine: Engine | None = None):
        """Initialize the shared database engine and session factory."""
        self._engine = engine if engine is not None else build_engine(get_config())

    @property
    def engine(self) -> Engine:
        return self._engine

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(self._engine, expire_on_commit=False, autoflush=True)

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Yield a session that commits on success and rolls back on error."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(
                "Database transaction failed: {}: {}", type(e).__name__, e
            )
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except SQLAlchemyError as e:
            logger.error("Database health check failed: {}: {}", type(e).__name__, e)
            return False

    def get_pool_status(self) -> dict:
        """Get current connection pool status for monitoring."""
        pool = self._engine.pool
        return {
            "size": _pool_counter(pool, "size"),
            "checked_in": _pool_counter(pool, "checkedin"),
            "checked_out": _pool_counter(pool, "checkedout"),
            "overflow": _pool_counter(pool, "overflow"),
        }

    def dispose(self) -> None:
        self._engine.dispose()
