"""Tests for boundary parsing of Product and Draft helpers."""

import pytest
from pydantic import ValidationError

from helpers import product_json
from product_board.schemas.product import Draft, Product, ProductPayload, format_number


def test_product_accepts_mongo_keys():
    product = Product.model_validate({**product_json("x1"), "__v": 0})
    assert product.id == "x1"
    assert product.created_at.tzinfo is not None


@pytest.mark.parametrize(
    "override",
    [{"weight": 0}, {"price": "abc"}, {"createdAt": "yesterday"}, {"_id": True}],
)
def test_product_rejects_bad_fields(override):
    with pytest.raises(ValidationError):
        Product.model_validate({**product_json(), **override})


@pytest.mark.parametrize("value,expected", [(2.0, "2"), (9.99, "9.99"), (0.5, "0.5"), (100, "100")])
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_draft_from_product_round_trips(make_product):
    draft = Draft.from_product(make_product("Widget", 2, 9.99))
    assert draft == Draft(name="Widget", weight="2", price="9.99")
    assert not draft.is_empty()
    assert Draft().is_empty()


def test_payload_requires_positive_numbers():
    with pytest.raises(ValidationError):
        ProductPayload(name="Widget", weight=-1, price=1)
