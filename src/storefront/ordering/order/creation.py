"""Batch order creation — normalize, validate, number and persist.

A request carries one order or an array of them. Validation is
all-or-nothing across the batch, and the batch is stored in a single
transaction, so callers only ever observe "all committed" or "none
committed".
"""

from dataclasses import dataclass
from typing import Any

from storefront.ordering.domain import logger
from storefront.ordering.order.normalization import normalize_payload
from storefront.ordering.order.numbering import OrderNumberGenerator
from storefront.ordering.order.order import Order, utc_timestamp
from storefront.ordering.order.validation import validate_batch
from storefront.ordering.storage.store import OrderStore


@dataclass(frozen=True)
class OrderCreationResult:
    orders: list[Order]

    @property
    def order_numbers(self) -> list[str]:
        return [order.order_number for order in self.orders]

    @property
    def order_number(self) -> str:
        """The first number of the batch, for single-order clients."""
        return self.order_numbers[0]


async def create_orders(store: OrderStore, body: Any, numbers: OrderNumberGenerator) -> OrderCreationResult:
    """Create every order in ``body``.

    Raises:
        ValidationError: any entry is missing required fields; nothing is stored.
        StorageError: the store rejected the batch; nothing is stored.
    """
    orders = normalize_payload(body)
    validate_batch(orders)

    for order in orders:
        order.assign_identity(numbers.next(), utc_timestamp())

    stored = await store.insert_many(orders)
    result = OrderCreationResult(orders=stored)

    logger.info("orders_created", order_numbers=result.order_numbers, count=len(stored))
    return result
