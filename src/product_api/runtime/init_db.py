"""Database initialization script."""

from src.product_api.core.services.database.db_manage import DbManageService


def init_db() -> None:
    """Create all database tables."""
    DbManageService().create_all()


if __name__ == "__main__":
    init_db()
