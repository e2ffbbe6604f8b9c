"""
Consolidated middleware and exception handlers for the NutriScan Admin API
"""

import time
import logging
from uuid import uuid4
from decimal import Decimal
from datetime import date, datetime
from uuid import UUID

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.exceptions import ServiceError
from api.responses import error_response

logger = logging.getLogger("nutriscan.middleware")


# ============================================================================
# Helper Functions
# ============================================================================


def make_serializable(obj):
    """Convert objects to JSON-serializable format"""
    if isinstance(obj, Decimal):
        return float(obj)
    if isinstance(obj, (UUID, datetime, date)):
        return str(obj)
    if isinstance(obj, dict):
        return {str(k): make_serializable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [make_serializable(item) for item in obj]
    if obj is None or isinstance(obj, (str, int, float, bool)):
        return obj
    # pydantic puts exception instances under ctx["error"]
    return str(obj)


def request_id_of(request: Request) -> str:
    """Request id assigned by RequestLoggingMiddleware, or a fresh short one"""
    rid = getattr(request.state, "request_id", None)
    return rid or f"req-{uuid4().hex[:8]}"


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests and responses"""

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid4())
        request.state.request_id = request_id
        client = request.client.host if request.client else None

        logger.info(
            "Request started %s %s",
            request.method,
            request.url.path,
            extra={"request_id": request_id, "client": client},
        )
        start_time = time.perf_counter()

        try:
            response: Response = await call_next(request)
        except Exception:
            process_time = time.perf_counter() - start_time
            logger.error(
                "Request failed %s %s after %.4fs",
                request.method,
                request.url.path,
                process_time,
                extra={"request_id": request_id},
                exc_info=True,
            )
            raise

        process_time = time.perf_counter() - start_time
        logger.info(
            "Request completed %s %s -> %d in %.4fs",
            request.method,
            request.url.path,
            response.status_code,
            process_time,
            extra={"request_id": request_id},
        )
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.4f}"
        return response


# ============================================================================
# Error Handlers
# ============================================================================


def _validation_message(errors) -> str:
    sources = {e.get("loc", ("body",))[0] for e in errors}
    if "body" in sources:
        return "Invalid request body"
    if "path" in sources:
        return "Invalid path parameters"
    return "Invalid query parameters"


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request parsing errors (body, query and path) as 400"""
    errors = make_serializable(exc.errors())
    logger.warning("Validation error on %s: %s", request.url.path, errors)

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_response(
            status.HTTP_400_BAD_REQUEST, _validation_message(errors), errors
        ),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning("HTTP %d on %s: %s", exc.status_code, request.url.path, exc.detail)

    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(exc.status_code, str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def service_exception_handler(request: Request, exc: ServiceError):
    """Handle errors raised by the service layer using their http_status"""
    if exc.http_status >= 500:
        logger.error("Service error on %s: %s", request.url.path, exc, exc_info=exc)
    else:
        logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc)

    return JSONResponse(
        status_code=exc.http_status,
        content=error_response(
            exc.http_status, exc.message, make_serializable(exc.details)
        ),
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception("Unexpected error on %s: %s", request.url.path, exc)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred"
        ),
    )
