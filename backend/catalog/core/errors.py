"""Error Hierarchy — typed, tagged exceptions for every catalog failure mode.

Invariants:
    - Every error has a code (str), kind (ErrorKind) and http_status
    - Every failure raised by ProductCatalogService is status 400 (bad request)
    - to_response() produces REST envelope; to_rpc_payload() produces {message, status}
    - STORE_PASSTHROUGH is only built at the boundary, never by the service

Design Decisions:
    - Single hierarchy with CatalogError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - Not-found maps to 400, not 404: kept for interface compatibility with
      existing callers of the products microservice
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Failure classification carried by every CatalogError."""
    NOT_FOUND = "not_found"
    BAD_INPUT = "bad_input"
    BATCH_MISMATCH = "batch_mismatch"
    STORE_PASSTHROUGH = "store_passthrough"


@dataclass
class ErrorContext:
    """Extra context for logs and error envelopes."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    product_id: int | None = None
    product_ids: list[int] | None = None
    debug_info: dict[str, Any] | None = None


class CatalogError(Exception):
    """Base exception for all catalog errors."""

    def __init__(
        self,
        message: str,
        code: str,
        kind: ErrorKind,
        http_status: int = 400,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.kind = kind
        self.http_status = http_status
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "kind": self.kind.value,
                "status": self.http_status,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "product_id": self.context.product_id,
                    "product_ids": self.context.product_ids,
                },
            }
        }

    def to_rpc_payload(self) -> dict:
        """Convert to the {message, status} payload used on the message channel."""
        return {"message": self.message, "status": self.http_status}


# ─── Domain Errors (400-level) ──────────────────────────────────

class ProductNotFoundError(CatalogError):
    """Product id absent, filtered out by availability, or store lookup failed."""
    def __init__(
        self, product_id: int, message: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.product_id = product_id
        super().__init__(
            message or f"Product with id #{product_id} not found",
            "PRODUCT_NOT_FOUND", ErrorKind.NOT_FOUND, 400, ctx,
        )
        self.product_id = product_id


class EmptyUpdateError(CatalogError):
    """Update payload carried no keys at all."""
    def __init__(self, product_id: int | None = None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.product_id = product_id
        super().__init__(
            "No data to update", "EMPTY_UPDATE", ErrorKind.BAD_INPUT, 400, ctx,
        )


class BatchMismatchError(CatalogError):
    """At least one id of a validation batch has no matching row."""
    def __init__(self, product_ids: list[int], context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.product_ids = product_ids
        super().__init__(
            "some products not found", "PRODUCTS_NOT_FOUND",
            ErrorKind.BATCH_MISMATCH, 400, ctx,
        )
        self.product_ids = product_ids


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorePassthroughError(CatalogError):
    """Raw store failure reported at the API boundary."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "STORE_ERROR", ErrorKind.STORE_PASSTHROUGH, 500, context,
        )

    @classmethod
    def from_exception(cls, exc: Exception) -> "StorePassthroughError":
        # Only the exception type is exposed; driver messages may carry SQL.
        return cls(
            f"Store operation failed ({type(exc).__name__})",
            ErrorContext(debug_info={"exception_type": type(exc).__name__}),
        )
