"""
NutriScan Admin API
Entry point wiring settings, logging, database bootstrap, middleware,
error handlers and the admin / nutrition routers.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio

from api.routes import subscriptions, transactions, subscription_plans, food_ingredients, health

import domain.models as db_models

from app.config import settings
from app.exceptions import ServiceError

from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    service_exception_handler,
    general_exception_handler,
)

logging.basicConfig(level=settings.log_level, format=settings.log_format)
_logger = logging.getLogger("nutriscan.main")

ROUTERS = (
    subscriptions.router,
    transactions.router,
    subscription_plans.router,
    food_ingredients.router,
    health.router,
)


async def bootstrap_database() -> None:
    """
    Create the schema, retrying while the database server is still starting.

    Raises the last error once settings.db_init_attempts is exhausted.
    """
    attempts = settings.db_init_attempts
    for attempt in range(1, attempts + 1):
        try:
            # create_all is blocking; keep it off the event loop
            await anyio.to_thread.run_sync(db_models.init_database)
        except Exception as exc:
            if attempt == attempts:
                _logger.error("Database unavailable after %d attempts", attempts)
                raise
            _logger.warning(
                "Database init attempt %d/%d failed: %s; retrying in %.1fs",
                attempt,
                attempts,
                exc,
                settings.db_init_delay_sec,
            )
            await anyio.sleep(settings.db_init_delay_sec)
        else:
            _logger.info("Database ready after %d attempt(s)", attempt)
            return


@asynccontextmanager
async def lifespan(app: FastAPI):
    _logger.info(
        "Starting %s %s (%s)",
        settings.app_name,
        settings.app_version,
        settings.environment.value,
    )
    await bootstrap_database()
    try:
        yield
    finally:
        db_models.engine.dispose()
        _logger.info("%s stopped", settings.app_name)


def _docs_path(suffix: str):
    """API docs are only served outside production"""
    if settings.is_production():
        return None
    return f"{settings.api_prefix}{suffix}"


app = FastAPI(
    title=settings.api_title,
    version=settings.app_version,
    description=settings.api_description,
    lifespan=lifespan,
    debug=settings.debug,
    openapi_url=_docs_path("/openapi.json"),
    docs_url=_docs_path("/docs"),
    redoc_url=_docs_path("/redoc"),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)
app.add_middleware(RequestLoggingMiddleware)

# Every error leaves the API in the {status, code, message, details} envelope
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(ServiceError, service_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

for router in ROUTERS:
    app.include_router(router, prefix=settings.api_prefix)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
