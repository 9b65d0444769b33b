"""Product Schemas — DTO validation at the API boundary."""

import pytest
from pydantic import ValidationError

from catalog.schemas.product import (
    PaginationParams, ProductCreate, ProductUpdate,
)


def test_create_strips_name():
    assert ProductCreate(name="  Lamp  ", price=10).name == "Lamp"


def test_create_rejects_whitespace_name():
    with pytest.raises(ValidationError):
        ProductCreate(name="   ", price=10)


def test_create_rejects_negative_price():
    with pytest.raises(ValidationError):
        ProductCreate(name="Lamp", price=-0.01)


def test_create_requires_price():
    with pytest.raises(ValidationError):
        ProductCreate(name="Lamp")


def test_update_dump_keeps_only_sent_keys():
    assert ProductUpdate().model_dump(exclude_unset=True) == {}
    assert ProductUpdate(id=5).model_dump(exclude_unset=True) == {"id": 5}
    assert ProductUpdate(price=3).model_dump(exclude_unset=True) == {"price": 3}


def test_pagination_defaults():
    params = PaginationParams()
    assert params.page == 1
    assert params.limit == 10


@pytest.mark.parametrize("field", ["page", "limit"])
def test_pagination_rejects_non_positive(field):
    with pytest.raises(ValidationError):
        PaginationParams(**{field: 0})


@pytest.mark.parametrize("field", ["name", "price"])
def test_update_rejects_explicit_null(field):
    with pytest.raises(ValidationError):
        ProductUpdate(**{field: None})


def test_update_ignores_available():
    assert ProductUpdate(available=True).model_dump(exclude_unset=True) == {}
