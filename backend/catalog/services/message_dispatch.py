"""Message Dispatch — explicit routing from message pattern to catalog operation.

Invariants:
    - Every pattern->handler mapping is visible — no getattr magic, no auto-discovery
    - Unknown patterns return UNKNOWN_PATTERN error (never raises)
    - CatalogError becomes {"status": "error", "error": {message, status}}
    - Payloads validated with the same DTOs as the HTTP routes
    - Raw store errors are NOT caught here; they propagate to the caller

Design Decisions:
    - Pattern names match the existing products microservice contract
      (create_product, find_all_products, ...) so upstream gateways keep working
    - update_product passes the whole payload as the patch: the embedded id is
      stripped by the service, not here
"""

import logging

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.errors import CatalogError
from catalog.schemas.product import (
    PaginationParams, ProductCreate, ProductIdPayload, ProductPage,
    ProductResponse, ProductUpdate, ValidateProductsRequest,
)
from catalog.services.product_catalog import ProductCatalogService

logger = logging.getLogger(__name__)


class ProductMessageDispatch:
    """Routes message pattern -> handler. Explicit registration, no auto-discovery."""

    def __init__(self, db: AsyncSession):
        self._service = ProductCatalogService(db)

        # ADR: every mapping explicit; adding a pattern requires editing this dict
        self._handlers = {
            "create_product": self._create_product,
            "find_all_products": self._find_all_products,
            "find_one_product": self._find_one_product,
            "update_product": self._update_product,
            "delete_product": self._delete_product,
            "validate_products": self._validate_products,
        }

    @property
    def patterns(self) -> frozenset[str]:
        return frozenset(self._handlers)

    async def execute(self, pattern: str, payload) -> dict:
        """Route pattern to handler. Returns {"status": "ok", "data": ...} or an error payload."""
        handler = self._handlers.get(pattern)
        if not handler:
            logger.warning(
                f"Unknown message pattern '{pattern}'", extra={"pattern": pattern},
            )
            return {
                "status": "error",
                "error_code": "UNKNOWN_PATTERN",
                "error": {
                    "message": f"Pattern '{pattern}' does not exist.",
                    "status": 400,
                },
            }
        try:
            data = await handler(payload)
        except ValidationError as e:
            logger.warning(
                f"Invalid payload for '{pattern}': {e.errors()}",
                extra={"pattern": pattern},
            )
            return {
                "status": "error",
                "error_code": "VALIDATION_ERROR",
                "error": {"message": "Invalid payload", "status": 400},
            }
        except CatalogError as e:
            logger.warning(
                f"{pattern} failed: {e.message}",
                extra={"pattern": pattern, "error_code": e.code},
            )
            return {
                "status": "error",
                "error_code": e.code,
                "error": e.to_rpc_payload(),
            }
        return {"status": "ok", "data": data}

    # ─── Handlers ───────────────────────────────────────────────

    async def _create_product(self, payload: dict) -> dict:
        body = ProductCreate.model_validate(payload)
        product = await self._service.create(body.model_dump())
        return _dump(product)

    async def _find_all_products(self, payload: dict | None) -> dict:
        params = PaginationParams.model_validate(payload or {})
        page = await self._service.find_all(params.page, params.limit)
        return ProductPage.model_validate(
            page, from_attributes=True,
        ).model_dump(mode="json")

    async def _find_one_product(self, payload: dict) -> dict:
        product_id = ProductIdPayload.model_validate(payload or {}).id
        return _dump(await self._service.find_one(product_id))

    async def _update_product(self, payload: dict) -> dict:
        product_id = ProductIdPayload.model_validate(payload or {}).id
        body = ProductUpdate.model_validate(payload)
        patch = body.model_dump(exclude_unset=True)
        return _dump(await self._service.update(product_id, patch))

    async def _delete_product(self, payload: dict) -> dict:
        product_id = ProductIdPayload.model_validate(payload or {}).id
        return _dump(await self._service.remove(product_id))

    async def _validate_products(self, payload) -> list[dict]:
        if isinstance(payload, dict):
            ids = ValidateProductsRequest.model_validate(payload).ids
        else:
            ids = ValidateProductsRequest.model_validate({"ids": payload}).ids
        products = await self._service.validate_products(ids)
        return [_dump(p) for p in products]


def _dump(product) -> dict:
    return ProductResponse.model_validate(product).model_dump(mode="json")
