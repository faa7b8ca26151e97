"""Integration tests for the QuoteCart and ShowCatalog use cases."""

import pytest

from ordersys.application.dto import OrderItemSpec
from ordersys.application.quote_cart import QuoteCartHandler
from ordersys.application.show_catalog import ShowCatalogHandler
from ordersys.domain.exceptions import InsufficientStockError
from ordersys.domain.model.catalog import ProductCatalog
from tests.fakes import make_catalog


class TestQuoteCart:

    def test_quote_freeship_with_bulk(self):
        handler = QuoteCartHandler(make_catalog())
        dto = handler.handle([OrderItemSpec("P003", 6)], "FREESHIP")
        assert dto.subtotal == "$450.00"
        assert dto.bulk_discount == "$22.50"
        assert dto.coupon_discount == "$0.00"
        assert dto.shipping == "$0.00"
        assert dto.total == "$427.50"

    def test_quote_without_coupon(self):
        handler = QuoteCartHandler(make_catalog())
        dto = handler.handle([OrderItemSpec("P005", 5)])
        assert dto.total == "$57.50"
        assert dto.total_items == 5

    def test_quote_does_not_reserve_stock(self):
        catalog = make_catalog()
        before = catalog.stock_levels()
        QuoteCartHandler(catalog).handle([OrderItemSpec("P004", 5)], "SAVE10")
        assert catalog.stock_levels() == before

    def test_quote_over_stock_rejected(self):
        handler = QuoteCartHandler(make_catalog())
        with pytest.raises(InsufficientStockError):
            handler.handle([OrderItemSpec("P004", 6)])


class TestShowCatalog:

    def test_lists_every_product(self):
        products = ShowCatalogHandler(make_catalog()).handle()
        assert [p.id for p in products] == ["P001", "P002", "P003", "P004", "P005"]
        assert products[1].name == "Mouse"
        assert products[1].price == "$25.00"
        assert products[1].stock == 50

    def test_empty_catalog(self):
        assert ShowCatalogHandler(ProductCatalog([])).handle() == []
