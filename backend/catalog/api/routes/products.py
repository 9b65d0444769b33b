"""Product Routes — REST surface over ProductCatalogService.

Invariants:
    - Routes never query the store directly (delegate to ProductCatalogService)
    - PATCH forwards only the keys the client sent (exclude_unset), so {} is
      rejected by the service and {"id": n} is a no-op update
    - Failures surface as CatalogError and are rendered by api/error_handlers.py

Design Decisions:
    - DELETE returns the soft-deleted row (200), not 204: callers read available=False
    - /validate declared before /{product_id} so the literal path wins
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.config import get_settings
from catalog.infrastructure.database import get_db
from catalog.schemas.product import (
    ProductCreate, ProductPage, ProductResponse, ProductUpdate,
    ValidateProductsRequest,
)
from catalog.services.product_catalog import ProductCatalogService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/products", tags=["products"])


def get_catalog_service(
    db: AsyncSession = Depends(get_db),
) -> ProductCatalogService:
    return ProductCatalogService(db)


@router.post(
    "", response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_product(
    body: ProductCreate,
    service: ProductCatalogService = Depends(get_catalog_service),
):
    """Create a new product."""
    return await service.create(body.model_dump())


@router.get("", response_model=ProductPage)
async def list_products(
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1),
    service: ProductCatalogService = Depends(get_catalog_service),
):
    """List available products with pagination (order not guaranteed)."""
    limit = limit or get_settings().default_page_limit
    return await service.find_all(page, limit)


@router.post("/validate", response_model=list[ProductResponse])
async def validate_products(
    body: ValidateProductsRequest,
    service: ProductCatalogService = Depends(get_catalog_service),
):
    """Check that every id exists, regardless of availability."""
    return await service.validate_products(body.ids)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int,
    service: ProductCatalogService = Depends(get_catalog_service),
):
    return await service.find_one(product_id)


@router.patch("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    body: ProductUpdate,
    service: ProductCatalogService = Depends(get_catalog_service),
):
    """Partially update a product. A body id is ignored."""
    return await service.update(product_id, body.model_dump(exclude_unset=True))


@router.delete("/{product_id}", response_model=ProductResponse)
async def delete_product(
    product_id: int,
    service: ProductCatalogService = Depends(get_catalog_service),
):
    """Soft delete: marks the product unavailable."""
    return await service.remove(product_id)
