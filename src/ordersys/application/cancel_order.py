"""Application service: Cancel Order use case.

Releases the stock a previously placed order reserved.  Nothing is
persisted, so the caller passes the OrderResult it got back when the
order was placed.
"""

from __future__ import annotations

from ordersys.domain.model.order import OrderResult
from ordersys.domain.service.order_service import OrderService


class CancelOrderHandler:

    def __init__(self, order_service: OrderService) -> None:
        self._order_service = order_service

    def handle(self, order: OrderResult) -> None:
        self._order_service.cancel_order(order)
