"""FastAPI route handlers for the storefront API.

Listing endpoints read from the injected catalog. Any failure while building
a listing is fatal to that request only: it is logged and reported as a 500
with the error's message, without retries or partial data.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from shared.catalog import Catalog, get_catalog

from .schemas import (
    BrandListResponse,
    BrandSchema,
    CategoryListResponse,
    CategorySchema,
    ErrorResponse,
    HealthResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def _internal_error(error: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(message=str(error)).model_dump(),
    )


@router.get(
    "/categories",
    response_model=CategoryListResponse,
    responses={500: {"model": ErrorResponse}},
)
async def list_categories(
    catalog: Catalog = Depends(get_catalog),
) -> CategoryListResponse | JSONResponse:
    """List the fixed storefront categories.

    Args:
        catalog: Catalog configuration (injected)

    Returns:
        CategoryListResponse with every category in catalog order, or a
        500 ErrorResponse if the catalog could not be read.
    """
    try:
        categories = [CategorySchema.model_validate(c) for c in catalog.list_categories()]
    except Exception as e:
        logger.exception("Error listing categories")
        return _internal_error(e)

    return CategoryListResponse(success=True, data=categories)


@router.get(
    "/brands",
    response_model=BrandListResponse,
    responses={500: {"model": ErrorResponse}},
)
async def list_brands(
    catalog: Catalog = Depends(get_catalog),
) -> BrandListResponse | JSONResponse:
    """List the brands carried by the store, same envelope as categories."""
    try:
        brands = [BrandSchema.model_validate(b) for b in catalog.list_brands()]
    except Exception as e:
        logger.exception("Error listing brands")
        return _internal_error(e)

    return BrandListResponse(success=True, data=brands)


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", message="Server is running")
