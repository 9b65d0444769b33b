"""Product Catalog Service — CRUD, soft delete and batch validation over the products table.

Invariants:
    - find_all / find_one only ever return rows with available = True
    - remove never deletes a row; it flips available to False (no precondition on current value)
    - validate_products checks existence only, it does NOT filter by availability
    - update rejects only a patch with zero keys; a supplied id is stripped, never written
    - Every failure raised here is a CatalogError with status 400; other store errors
      propagate unchanged (update, create)

Design Decisions:
    - Holds an AsyncSession (composition): engine lifecycle belongs to
      infrastructure/database.py, not to the service
    - find_all issues count and page as two independent queries: a concurrent write
      between them can make total/last_page disagree with data (accepted)
    - Result order of find_all / validate_products is store-defined, not guaranteed
    - remove rewraps EVERY SQLAlchemyError as not-found, keeping only the message text.
      Kept for caller compatibility, although a transient store failure is then
      misreported as "not found"
"""

import logging

from sqlalchemy import func, select, update
from sqlalchemy.exc import NoResultFound, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.errors import (
    BatchMismatchError, EmptyUpdateError, ProductNotFoundError,
)
from catalog.core.pagination import build_page_meta, compute_offset
from catalog.models.product import Product

logger = logging.getLogger(__name__)


class ProductCatalogService:
    """Façade mapping the six catalog operations onto store queries."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create(self, fields: dict) -> Product:
        """Insert a product with the given fields verbatim."""
        product = Product(**fields)
        self._db.add(product)
        await self._db.commit()
        await self._db.refresh(product)
        logger.info(
            f"Product {product.id} created", extra={"product_id": product.id},
        )
        return product

    async def find_all(self, page: int, limit: int) -> dict:
        """Return one page of available products and pagination meta."""
        total = await self._db.scalar(
            select(func.count())
            .select_from(Product)
            .where(Product.available.is_(True)),
        )
        result = await self._db.scalars(
            select(Product)
            .where(Product.available.is_(True))
            .limit(limit)
            .offset(compute_offset(page, limit)),
        )
        return {
            "data": list(result.all()),
            "meta": build_page_meta(total or 0, page, limit),
        }

    async def find_one(self, product_id: int) -> Product:
        result = await self._db.execute(
            select(Product).where(
                Product.id == product_id, Product.available.is_(True),
            ),
        )
        product = result.scalar_one_or_none()
        if not product:
            logger.warning(
                f"Product {product_id} not found",
                extra={"product_id": product_id},
            )
            raise ProductNotFoundError(product_id)
        return product

    async def update(self, product_id: int, patch: dict) -> Product:
        """Apply a partial update.

        The emptiness check runs on the raw patch: ``{"id": 5}`` passes it,
        then updates nothing and returns the row unchanged.
        """
        if len(patch) == 0:
            raise EmptyUpdateError(product_id)
        data = {key: value for key, value in patch.items() if key != "id"}

        try:
            result = await self._db.execute(
                select(Product).where(Product.id == product_id),
            )
            product = result.scalar_one()
        except NoResultFound:
            logger.warning(
                f"Update of missing product {product_id}",
                extra={"product_id": product_id},
            )
            raise ProductNotFoundError(
                product_id,
                f"Product with id #{product_id} not found, update failed",
            )

        # Keys that are not columns raise from the store; refresh below reloads the row
        if data:
            await self._db.execute(
                update(Product)
                .where(Product.id == product_id)
                .values(**data)
                .execution_options(synchronize_session=False),
            )
        await self._db.commit()
        await self._db.refresh(product)
        return product

    async def remove(self, product_id: int) -> Product:
        """Soft delete: set available = False and return the row."""
        try:
            result = await self._db.execute(
                select(Product).where(Product.id == product_id),
            )
            product = result.scalar_one()
            product.available = False
            await self._db.commit()
            await self._db.refresh(product)
        except SQLAlchemyError as e:
            logger.warning(
                f"Delete of product {product_id} failed: {e}",
                extra={"product_id": product_id},
            )
            raise ProductNotFoundError(
                product_id,
                f"Product with id #{product_id} not found, delete failed, {e}",
            ) from e
        return product

    async def validate_products(self, ids: list[int]) -> list[Product]:
        """Check every distinct id exists (available or not) and return the rows."""
        unique_ids = list(set(ids))
        result = await self._db.scalars(
            select(Product).where(Product.id.in_(unique_ids)),
        )
        products = list(result.all())

        if len(products) != len(unique_ids):
            missing = sorted(set(unique_ids) - {p.id for p in products})
            logger.warning(
                f"Batch validation failed, missing ids: {missing}",
            )
            raise BatchMismatchError(missing)
        return products
