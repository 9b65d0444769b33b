"""Product Schemas — Pydantic DTOs for the HTTP and message boundaries.

Invariants:
    - ProductCreate.name: 1-255 chars, stripped, non-empty
    - ProductCreate.price: >= 0
    - ProductUpdate: name and price optional but never null; available is not
      patchable (only remove changes it); emptiness is judged on the keys the
      caller actually sent (model_dump(exclude_unset=True))
    - PaginationParams.page / limit: positive integers

Design Decisions:
    - ProductUpdate accepts an optional id: the message channel sends the
      identifier inside the patch and the service strips it
    - ProductResponse built from ORM rows via from_attributes
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProductCreate(BaseModel):
    """Product creation — required fields."""
    name: str = Field(min_length=1, max_length=255)
    price: float = Field(ge=0)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class ProductUpdate(BaseModel):
    """Partial product update."""
    id: int | None = None
    name: str | None = Field(None, min_length=1, max_length=255)
    price: float | None = Field(None, ge=0)

    @field_validator("name", "price")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("field cannot be null")
        return v


class PaginationParams(BaseModel):
    """Page selection for list queries."""
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1)


class ValidateProductsRequest(BaseModel):
    """Batch of ids to check for existence."""
    ids: list[int]


class ProductResponse(BaseModel):
    """Public-facing product data."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    price: float
    available: bool
    created_at: datetime
    updated_at: datetime


class PageMeta(BaseModel):
    total: int
    page: int
    last_page: int


class ProductPage(BaseModel):
    """One page of available products plus pagination meta."""
    data: list[ProductResponse]
    meta: PageMeta


class ProductIdPayload(BaseModel):
    """Message payload addressing a single product."""
    id: int
