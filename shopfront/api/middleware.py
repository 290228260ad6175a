"""Request context middleware for the listing API.

Every request gets a correlation ID and, for listing requests, the
catalog query it asked for. Both are bound into structlog's context so
the handler logs and the completion line carry them.
"""

import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"

# Query parameters worth seeing next to a listing request's log lines.
CATALOG_QUERY_KEYS = ("search", "category", "brand", "minPrice", "maxPrice", "page", "limit")


def catalog_query(request: Request) -> dict[str, str]:
    """Pick the catalog filters out of a request's query string."""
    params = request.query_params
    return {key: params[key] for key in CATALOG_QUERY_KEYS if key in params}


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind request ID and catalog query into the log context.

    The request ID is taken from ``X-Request-ID`` when the caller sends
    one and echoed back on the response. An exception escaping the
    handlers is logged with that context and answered with the common
    500 ``INTERNAL_ERROR`` body.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id
        query = catalog_query(request)

        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=request.url.path,
            **query,
        )
        start_time = time.perf_counter()
        try:
            try:
                response = await call_next(request)
            except Exception as e:
                logger.exception("Unhandled exception", method=request.method, error=str(e))
                response = JSONResponse(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    content={
                        "error_code": "INTERNAL_ERROR",
                        "message": "An internal error occurred",
                        "details": [],
                        "request_id": request_id,
                    },
                )

            logger.info(
                "Request completed",
                method=request.method,
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
        finally:
            structlog.contextvars.unbind_contextvars("request_id", "path", *query)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def setup_middleware(app: FastAPI) -> None:
    """Install the request context middleware.

    Starlette runs the middleware added last first, so adding this after
    CORS keeps preflight responses inside the request context.
    """
    app.add_middleware(RequestContextMiddleware)
