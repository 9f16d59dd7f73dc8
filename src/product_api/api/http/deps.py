"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.product_api.api.http.app_data import ApplicationDependencies
from src.product_api.core.services import DbSessionService, ProductService


def get_database_service(request: Request) -> DbSessionService:
    """Get the shared database service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Yield a database session scoped to the current request."""
    session = database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_product_service(session: Session = Depends(get_db_session)) -> ProductService:
    """Get a product service bound to the request's session."""
    return ProductService(session)
