"""Read API — order listing and lookup by order number or email."""

from protean.exceptions import ObjectNotFoundError

from storefront.ordering.order.order import Order
from storefront.ordering.storage.store import OrderStore


async def list_orders(store: OrderStore) -> list[Order]:
    """Every order, newest first."""
    return await store.list_all()


async def find_order(store: OrderStore, order_number: str) -> Order | None:
    return await store.find_by_number(order_number)


async def find_orders_by_email(store: OrderStore, email: str) -> list[Order]:
    """Case-insensitive exact match on email, newest first."""
    return await store.find_by_email(email.strip())


async def get_order(store: OrderStore, order_number: str) -> Order:
    order = await store.find_by_number(order_number)
    if order is None:
        raise ObjectNotFoundError(f"Order not found: {order_number}")
    return order


def is_email(identifier: str) -> bool:
    return "@" in identifier


async def lookup_orders(store: OrderStore, identifier: str) -> Order | list[Order]:
    """An identifier containing ``@`` is an email (list result); otherwise an order number."""
    if is_email(identifier):
        orders = await find_orders_by_email(store, identifier)
        if not orders:
            raise ObjectNotFoundError("No orders found for that email")
        return orders

    order = await find_order(store, identifier)
    if order is None:
        raise ObjectNotFoundError("Order not found")
    return order
