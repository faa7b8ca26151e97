"""Application service: Place Order use case.

Builds a cart from the requested items and hands it to the
OrderService, which validates, prices and reserves stock.  The
returned OrderDTO also reports the stock left for each ordered product.
"""

from __future__ import annotations

from ordersys.application.dto import OrderDTO, OrderItemSpec, OrderLineDTO
from ordersys.application.quote_cart import build_cart, to_pricing_dto
from ordersys.domain.model.catalog import ProductCatalog
from ordersys.domain.model.order import OrderResult
from ordersys.domain.service.order_service import OrderService


class PlaceOrderHandler:

    def __init__(self, catalog: ProductCatalog, order_service: OrderService) -> None:
        self._catalog = catalog
        self._order_service = order_service

    def handle(self, item_specs: list[OrderItemSpec], coupon_code: str | None = None) -> OrderDTO:
        cart = build_cart(self._catalog, item_specs)
        order = self._order_service.create_order(cart, coupon_code)
        return self._to_dto(order)

    # --- Mapping --------------------------------------------------------------

    def _to_dto(self, order: OrderResult) -> OrderDTO:
        lines = []
        for product_id, qty in order.items.items():
            product = self._catalog.get_product(product_id)
            lines.append(
                OrderLineDTO(
                    product_id=product.id,
                    product_name=product.name,
                    quantity=qty,
                    remaining_stock=product.stock,
                )
            )
        return OrderDTO(
            total=str(order.total),
            lines=lines,
            pricing=to_pricing_dto(order.pricing, order.total_items),
        )
