"""Order lifecycle — processing, completion and cancellation."""

from collections.abc import Callable

from protean.exceptions import ObjectNotFoundError

from storefront.ordering.domain import logger
from storefront.ordering.order.order import Order
from storefront.ordering.order.queries import get_order
from storefront.ordering.storage.store import OrderStore


async def _transition(store: OrderStore, order_number: str, change: Callable[[Order], None]) -> Order:
    order = await get_order(store, order_number)
    previous = order.status
    change(order)

    if not await store.update_status(order_number, order.status):
        raise ObjectNotFoundError(f"Order not found: {order_number}")

    logger.info("order_status_changed", order_number=order_number, previous=previous, status=order.status)
    return order


async def mark_processing(store: OrderStore, order_number: str) -> Order:
    return await _transition(store, order_number, Order.mark_processing)


async def complete_order(store: OrderStore, order_number: str) -> Order:
    return await _transition(store, order_number, Order.complete)


async def cancel_order(store: OrderStore, order_number: str) -> Order:
    return await _transition(store, order_number, Order.cancel)
