"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from src.product_api.api.http.deps import get_database_service
from src.product_api.core.services import DbSessionService
from src.product_api.runtime.context import get_config

router = APIRouter(prefix="/health", tags=["health"])


def _database_type() -> str:
    return "sqlite" if get_config().database.is_sqlite else "postgresql"


@router.get("")
async def health() -> dict[str, str]:
    """Liveness probe: 200 as long as the process is running."""
    return {"status": "healthy", "service": "api"}


@router.get("/ready", response_model=None)
def readiness(
    database_service: DbSessionService = Depends(get_database_service),
) -> dict[str, Any] | JSONResponse:
    """Readiness probe: 200 when the database answers, 503 otherwise."""
    db_healthy = database_service.health_check()
    response = {
        "status": "ready" if db_healthy else "not_ready",
        "environment": get_config().app.environment,
        "checks": {
            "database": {
                "status": "healthy" if db_healthy else "unhealthy",
                "type": _database_type(),
            }
        },
    }

    if not db_healthy:
        return JSONResponse(status_code=503, content=response)
    return response


@router.get("/database", response_model=None)
def health_database(
    database_service: DbSessionService = Depends(get_database_service),
) -> dict[str, Any] | JSONResponse:
    """Database-specific health check with connection pool status."""
    healthy = database_service.health_check()
    content = {
        "status": "healthy" if healthy else "unhealthy",
        "type": _database_type(),
        "pool": database_service.get_pool_status(),
    }
    if not healthy:
        return JSONResponse(status_code=503, content=content)
    return content
