"""Integration tests for catalog and stock administration use cases."""

import pytest

from shopstock.application.add_product import AddProductHandler
from shopstock.application.set_stock import SetStockHandler
from shopstock.application.show_stock import ShowStockHandler
from shopstock.domain.exceptions import ProductNotFoundError, ValidationError
from tests.application.helpers import make_shop

pytestmark = pytest.mark.asyncio


class TestAddProduct:

    async def test_assigns_next_id(self):
        shop = make_shop()
        product = await AddProductHandler(shop.products).handle(
            "Berry Blast", "500", category="liquids", qty_available=20
        )
        assert product.id == 4
        assert (await shop.products.get_by_id(4)).qty_available == 20

    async def test_first_product_gets_id_one(self):
        shop = make_shop(products=[])
        product = await AddProductHandler(shop.products).handle("Pod", "900")
        assert product.id == 1

    async def test_duplicate_title_rejected(self):
        shop = make_shop()
        with pytest.raises(ValidationError, match="already exists"):
            await AddProductHandler(shop.products).handle("mango ice", "100")

    async def test_blank_title_rejected(self):
        shop = make_shop()
        with pytest.raises(ValidationError, match="title is required"):
            await AddProductHandler(shop.products).handle("  ", "100")


class TestSetStock:

    async def test_overwrites_quantity(self):
        shop = make_shop()
        await SetStockHandler(shop.products).handle(1, 25)
        assert shop.products.qty(1) == 25

    async def test_negative_rejected(self):
        shop = make_shop()
        with pytest.raises(ValidationError, match="cannot be negative"):
            await SetStockHandler(shop.products).handle(1, -1)
        assert shop.products.qty(1) == 10

    async def test_unknown_product(self):
        shop = make_shop()
        with pytest.raises(ProductNotFoundError):
            await SetStockHandler(shop.products).handle(42, 1)


class TestShowStock:

    async def test_reports_reserved_and_free(self):
        shop = make_shop()
        await shop.place(100, (1, 4))

        lines = await ShowStockHandler(shop.products, shop.engine).handle()

        by_id = {line.product_id: line for line in lines}
        assert (by_id[1].available, by_id[1].reserved, by_id[1].free) == (10, 4, 6)
        assert (by_id[2].available, by_id[2].reserved, by_id[2].free) == (3, 0, 3)
        assert by_id[3].active is False
