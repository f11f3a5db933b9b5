"""Application tests for batch order creation against a real order store."""

import pytest
from protean.exceptions import ValidationError

from storefront.ordering.exceptions import StorageError
from storefront.ordering.order.creation import create_orders
from storefront.ordering.order.numbering import MonotonicOrderNumberGenerator, TimestampOrderNumberGenerator


def _frozen_clock():
    return 1735689600000


class TestCreateSingleOrder:
    async def test_returns_order_number_and_persists(self, store, numbers, order_payload):
        result = await create_orders(store, order_payload(), numbers)

        assert result.order_numbers == [result.order_number]
        stored = await store.find_by_number(result.order_number)
        assert stored.customer_name == "Avery Chen"
        assert stored.status == "Order Placed"
        assert stored.id is not None
        assert stored.created_at.endswith("Z")

    async def test_nested_values_round_trip(self, store, numbers, order_payload):
        result = await create_orders(store, order_payload(), numbers)

        stored = await store.find_by_number(result.order_number)
        assert stored.payment_details == {"cardEnding": "1111"}
        assert stored.items[0].name == "Business Laptop"
        assert stored.items[0].quantity == 1

    async def test_derived_amounts_are_stored(self, store, numbers, order_payload):
        payload = order_payload(
            items='[{"name": "X", "sku": "S", "price": "10", "quantity": "2"}]',
            subtotal=None,
            total=None,
        )

        result = await create_orders(store, payload, numbers)

        stored = await store.find_by_number(result.order_number)
        assert stored.subtotal == 20.0
        assert stored.total == 20.0


class TestCreateBatch:
    async def test_every_order_is_stored(self, store, numbers, order_payload):
        batch = [order_payload(), order_payload(customerName="Jordan Patel"), order_payload(customerName="Morgan Lee")]

        result = await create_orders(store, batch, numbers)

        assert len(result.order_numbers) == 3
        assert len(set(result.order_numbers)) == 3
        assert await store.count() == 3
        for number in result.order_numbers:
            assert await store.find_by_number(number) is not None

    async def test_invalid_entry_stores_nothing(self, store, numbers, order_payload):
        batch = [order_payload(), order_payload(customerName=None)]

        with pytest.raises(ValidationError) as exc:
            await create_orders(store, batch, numbers)

        assert exc.value.messages == {"orders[1]": ["customerName is required"]}
        assert await store.count() == 0

    async def test_empty_batch_is_rejected(self, store, numbers):
        with pytest.raises(ValidationError):
            await create_orders(store, [], numbers)


class TestOrderNumberCollisions:
    async def test_duplicate_number_in_batch_stores_nothing(self, store, order_payload):
        numbers = TimestampOrderNumberGenerator(clock=_frozen_clock)

        with pytest.raises(StorageError):
            await create_orders(store, [order_payload(), order_payload()], numbers)

        assert await store.count() == 0

    async def test_duplicate_number_across_requests_keeps_first(self, store, order_payload):
        numbers = TimestampOrderNumberGenerator(clock=_frozen_clock)
        first = await create_orders(store, order_payload(), numbers)

        with pytest.raises(StorageError):
            await create_orders(store, order_payload(), numbers)

        assert await store.count() == 1
        assert await store.find_by_number(first.order_number) is not None

    async def test_monotonic_numbers_do_not_collide(self, store, order_payload):
        numbers = MonotonicOrderNumberGenerator(clock=_frozen_clock)

        result = await create_orders(store, [order_payload(), order_payload()], numbers)

        assert result.order_numbers == ["ORD-1735689600000", "ORD-1735689600001"]
        assert await store.count() == 2
