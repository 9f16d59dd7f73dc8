"""FastAPI application setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from src.product_api.api.http.app_data import ApplicationDependencies
from src.product_api.api.http.routers.health import router as health_router
from src.product_api.api.http.routers.service.product import router as product_router
from src.product_api.api.utils.app_startup import configure_logging
from src.product_api.core.exceptions import PersistenceError
from src.product_api.core.services import DbManageService, DbSessionService
from src.product_api.runtime.context import get_config

main_config = get_config()

configure_logging()


# --- Security middleware ---
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault(
            "Referrer-Policy", "strict-origin-when-cross-origin"
        )
        if get_config().app.environment == "production":
            response.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )
        return response


# --- FastAPI app setup ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup()
    try:
        yield
    finally:
        await shutdown()


app = FastAPI(
    title="Product API",
    lifespan=lifespan,
    docs_url=None if main_config.app.environment == "production" else "/docs",
    redoc_url=None if main_config.app.environment == "production" else "/redoc",
)

app.add_middleware(SecurityHeadersMiddleware)

# expose startup for tests
__all__ = ["app", "startup", "shutdown"]

# --- CORS configuration ---
if main_config.app.environment == "production" and "*" in main_config.app.cors.origins:
    raise RuntimeError(
        "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=main_config.app.cors.origins,
    allow_credentials=main_config.app.cors.allow_credentials,
    allow_methods=main_config.app.cors.allow_methods,
    allow_headers=main_config.app.cors.allow_headers,
)


# --- Request logging middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": request.client.host if request.client else "unknown",
    }

    start = time.perf_counter()

    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal Server Error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )


# --- Error mapping ---
@app.exception_handler(PersistenceError)
async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={
            "detail": str(exc),
            "request_id": getattr(request.state, "request_id", None),
        },
    )


# --- Router registration ---
app.include_router(health_router)
app.include_router(product_router, prefix=main_config.app.api_prefix, tags=["products"])


# --- Lifecycle hooks ---
async def startup() -> None:
    config = get_config()
    logger.info("Starting up application in {} environment", config.app.environment)

    database_service = DbSessionService()
    if config.database.create_tables:
        DbManageService(database_service.engine).create_all()

    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service,
    )


async def shutdown() -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies | None = getattr(
        app.state, "app_dependencies", None
    )
    if app_dependencies is not None:
        app_dependencies.database_service.dispose()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=main_config.app.host,
        port=main_config.app.port,
        access_log=False,  # request logging middleware covers access logs
    )
