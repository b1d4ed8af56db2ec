"""Health check endpoints.

``/health`` reports that the process is serving; ``/ready`` also checks
that the product store answers a query.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from productlist.api.products import get_product_store
from productlist.catalog.repository import ProductStore
from productlist.domain.exceptions import RepositoryError
from productlist.infrastructure.config import settings

logger = structlog.get_logger()

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response schema."""

    status: str
    repository_backend: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    return HealthResponse(
        status="healthy",
        service="productlist-api",
        version=settings.api_version,
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"model": ReadinessResponse}},
)
async def readiness_check(
    store: Annotated[ProductStore, Depends(get_product_store)],
) -> ReadinessResponse | JSONResponse:
    """Check that the product store is reachable.

    Returns:
        200 when a count query succeeds, 503 otherwise.
    """
    try:
        await store.count()
    except RepositoryError as e:
        logger.warning("Product store not ready", error=e.details.get("reason"))
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable", "repository_backend": settings.repository_backend},
        )

    return ReadinessResponse(status="ready", repository_backend=settings.repository_backend)
