"""Startup maintenance — backfill orders that have no status.

Only null or blank statuses are set to the default. Explicit statuses,
including ``Cancelled`` and ``Completed``, survive restarts untouched.
"""

from storefront.ordering.domain import logger
from storefront.ordering.order.order import DEFAULT_STATUS
from storefront.ordering.storage.store import OrderStore


async def normalize_statuses(store: OrderStore) -> int:
    updated = await store.backfill_missing_statuses(DEFAULT_STATUS.value)
    if updated:
        logger.info("order_statuses_backfilled", count=updated, status=DEFAULT_STATUS.value)
    return updated
