"""Unit tests for the Product aggregate and its invariants."""

import math
from datetime import datetime, timezone

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import NewProduct, Product

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _product(**overrides) -> Product:
    """Helper to build a stored product."""
    fields = dict(
        id="p-1", name="Widget", description=None, price=15.0, stock=10,
        created_at=T0, updated_at=T0,
    )
    fields.update(overrides)
    return Product(**fields)


class TestProductCreation:

    def test_happy_path(self):
        new = Product.create(name="Widget", price=15.0, description="Blue", stock=4)
        assert new == NewProduct(name="Widget", description="Blue", price=15.0, stock=4)

    def test_defaults(self):
        new = Product.create(name="Widget", price=0)
        assert new.description is None
        assert new.stock == 0

    def test_name_of_255_chars_accepted(self):
        assert Product.create(name="x" * 255, price=1).name == "x" * 255

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValidationError, match="Product name cannot be empty"):
            Product.create(name=name, price=1)

    def test_long_name_rejected(self):
        with pytest.raises(ValidationError, match="cannot exceed 255 characters"):
            Product.create(name="x" * 256, price=1)

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="Product price cannot be negative"):
            Product.create(name="Widget", price=-0.01)

    @pytest.mark.parametrize("price", [math.nan, math.inf, "10", None, True])
    def test_non_numeric_price_rejected(self, price):
        with pytest.raises(ValidationError, match="Product price must be a valid number"):
            Product.create(name="Widget", price=price)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="Product stock cannot be negative"):
            Product.create(name="Widget", price=1, stock=-1)

    def test_fractional_stock_rejected(self):
        with pytest.raises(ValidationError, match="Product stock must be an integer"):
            Product.create(name="Widget", price=1, stock=2.5)

    def test_price_too_large_for_a_float_rejected(self):
        with pytest.raises(ValidationError, match="Product price must be a valid number"):
            Product.create(name="Widget", price=10**400)


class TestProductReconstitute:

    def test_rebuilds_from_record(self):
        product = Product.reconstitute({
            "id": "p-1", "name": "Widget", "description": "Blue",
            "price": 15.0, "stock": 3, "created_at": T0, "updated_at": T0,
        })
        assert product == _product(description="Blue", stock=3)

    def test_corrupted_record_fails_loudly(self):
        with pytest.raises(ValidationError):
            Product.reconstitute({
                "id": "p-1", "name": "Widget", "description": None,
                "price": -5.0, "stock": 3, "created_at": T0, "updated_at": T0,
            })


class TestUpdateStock:

    def test_adds_units(self):
        assert _product(stock=10).update_stock(5).stock == 15

    def test_removes_units(self):
        assert _product(stock=10).update_stock(-10).stock == 0

    def test_refreshes_updated_at(self):
        assert _product().update_stock(1).updated_at > T0

    def test_original_is_unchanged(self):
        product = _product(stock=10)
        product.update_stock(5)
        assert product.stock == 10

    def test_cannot_go_below_zero(self):
        with pytest.raises(ValidationError, match="Product stock cannot be negative"):
            _product(stock=2).update_stock(-3)

    def test_fractional_delta_rejected(self):
        with pytest.raises(ValidationError, match="Product stock must be an integer"):
            _product(stock=2).update_stock(0.5)


class TestWithChanges:

    def test_replaces_only_given_fields(self):
        changed = _product().with_changes(price=20.0)
        assert changed.price == 20.0
        assert changed.name == "Widget"
        assert changed.stock == 10

    def test_description_can_be_cleared(self):
        assert _product(description="Blue").with_changes(description=None).description is None

    def test_invalid_value_rejected(self):
        with pytest.raises(ValidationError, match="Product name cannot be empty"):
            _product().with_changes(name=" ")

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError, match="Cannot change product field"):
            _product().with_changes(id="other")
