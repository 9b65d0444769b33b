"""Product ORM — persists catalog entries with a soft-delete flag.

Invariants:
    - id is an autoincrement integer primary key (store-generated)
    - name and price are non-nullable
    - available defaults to True; False means logically deleted, row is retained
    - Rows are never physically deleted by the service layer

Design Decisions:
    - Index on available: every list/count query filters on it
    - price as Float: non-negative is enforced by ProductCreate, not the column
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Float, Integer, String, true
from sqlalchemy.orm import Mapped, mapped_column

from catalog.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Product(Base):
    """Catalog product."""
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    available: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=true(), index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r} available={self.available}>"
