"""Tests for the product lookup used by the order side."""

import pytest

from storefront.application.product_service import ProductLookup, ProductService
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from tests.fakes import FakeProductRepository


class TestProductService:

    def test_is_a_product_lookup(self):
        assert isinstance(ProductService(FakeProductRepository()), ProductLookup)

    async def test_returns_current_product_data(self):
        repo = FakeProductRepository()
        product = await repo.create(Product.create(name="Widget", price=15.0))
        await repo.update(product.id, {"price": 17.5})

        dto = await ProductService(repo).get_product_by_id(product.id)

        assert dto.id == product.id
        assert dto.price == 17.5

    async def test_missing_product(self):
        service = ProductService(FakeProductRepository())
        with pytest.raises(EntityNotFoundError) as exc_info:
            await service.get_product_by_id("nope")
        assert exc_info.value.entity == "Product"
        assert exc_info.value.entity_id == "nope"
