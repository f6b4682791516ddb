"""Pydantic schemas for API responses.

Listing endpoints share one envelope: `{"success": true, "data": [...]}` on
success, `{"message": "..."}` with a 500 status on failure.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


# =============================================================================
# Catalog Records
# =============================================================================


class CategorySchema(BaseModel):
    """A storefront category as exposed over the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    icon: str


class BrandSchema(BaseModel):
    """A brand as exposed over the API."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    logo: str


# =============================================================================
# Response Schemas
# =============================================================================


class CategoryListResponse(BaseModel):
    """Response for GET /api/categories."""

    success: bool = True
    data: list[CategorySchema]


class BrandListResponse(BaseModel):
    """Response for GET /api/brands."""

    success: bool = True
    data: list[BrandSchema]


class ErrorResponse(BaseModel):
    """Body returned with a 500 status when a listing fails.

    Carries only the failure description, never partial data.
    """

    message: str


class HealthResponse(BaseModel):
    """Response for GET /api/health."""

    status: str
    message: str
