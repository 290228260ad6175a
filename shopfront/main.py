"""Listing API main application module.

Initializes the FastAPI application serving the product, category and
brand listings, and configures middleware and error handlers.

Run with:
    uvicorn shopfront.main:app --port 8000
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shopfront.api.catalog import get_store
from shopfront.api.catalog import router as catalog_router
from shopfront.api.health import router as health_router
from shopfront.api.middleware import setup_middleware
from shopfront.infrastructure.config import settings
from shopfront.infrastructure.logging import configure_logging

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    configure_logging(settings.log_level)
    store = get_store()
    logger.info(
        "Starting listing API",
        version=settings.api_version,
        products=store.product_count,
    )

    yield

    logger.info("Shutting down listing API")


app = FastAPI(
    title="Shopfront Catalog API",
    description="Product, category and brand listings for the catalog view",
    version=settings.api_version,
    debug=settings.debug,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS is added first so the request context middleware wraps it
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

setup_middleware(app)

app.include_router(health_router)
app.include_router(catalog_router)


# ============================================================================
# Error Handlers
# ============================================================================


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions with consistent format."""
    detail = exc.detail
    if isinstance(detail, dict):
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error_code": detail.get("error_code", "ERROR"),
                "message": detail.get("message", str(detail)),
                "details": detail.get("details", []),
            },
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error_code": "ERROR",
            "message": str(detail),
            "details": [],
        },
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report invalid query parameters in the common error format."""
    return JSONResponse(
        status_code=422,
        content={
            "error_code": "VALIDATION_ERROR",
            "message": "Invalid request parameters",
            "details": [
                {"loc": list(error["loc"]), "msg": error["msg"]}
                for error in exc.errors()
            ],
        },
    )
