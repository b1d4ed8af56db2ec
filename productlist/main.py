"""Product list API main application module.

This module initializes the FastAPI application and configures
core middleware, routers, and startup/shutdown events.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from productlist.api.health import router as health_router
from productlist.api.middleware import error_body, setup_middleware
from productlist.api.products import router as products_router
from productlist.domain.exceptions import ProductValidationError
from productlist.infrastructure.config import settings
from productlist.infrastructure.database import create_tables, engine

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(message)s",
    stream=sys.stderr,
)
structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    logger.info(
        "Starting product list API",
        version=settings.api_version,
        debug=settings.debug,
        repository_backend=settings.repository_backend,
    )

    if settings.repository_backend == "sql" and settings.create_tables_on_startup:
        await create_tables()
        logger.info("Database tables ready")

    yield

    logger.info("Shutting down product list API")
    await engine.dispose()


app = FastAPI(
    title="Product List API",
    description="Catalog query API: list, fetch, create and delete products",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Setup custom middleware (request ID, error handling)
setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(products_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Render HTTP exceptions in the standard error format."""
    detail = exc.detail if isinstance(exc.detail, dict) else {"message": str(exc.detail)}

    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(
            detail.get("error_code", "ERROR"),
            detail.get("message", ""),
            getattr(request.state, "request_id", None),
            detail.get("details"),
        ),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed requests (e.g. unparseable JSON) as 400 with field details."""
    details = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body") or "body",
            "message": error.get("msg", "Invalid value"),
        }
        for error in exc.errors()
    ]

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(
            ProductValidationError.error_code,
            "Request is missing or has invalid fields",
            getattr(request.state, "request_id", None),
            details,
        ),
    )

