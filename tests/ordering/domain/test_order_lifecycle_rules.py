"""Domain tests for the Order status state machine."""

import re

import pytest
from protean.exceptions import ValidationError

from storefront.ordering.order.order import LineItem, Order, OrderStatus, utc_timestamp


class TestOrderDefaults:
    def test_new_order_is_placed(self):
        assert Order().status == OrderStatus.ORDER_PLACED.value

    def test_item_count(self):
        order = Order(items=[LineItem(name="A", sku="A", quantity=2), LineItem(name="B", sku="B")])

        assert order.item_count == 3

    def test_assign_identity(self):
        order = Order()
        order.assign_identity("ORD-1", "2025-01-01T00:00:00.000Z")

        assert order.order_number == "ORD-1"
        assert order.created_at == "2025-01-01T00:00:00.000Z"

    def test_timestamp_format(self):
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_timestamp())


class TestStatusParsing:
    def test_known_value(self):
        assert OrderStatus.parse("Cancelled") is OrderStatus.CANCELLED

    def test_legacy_value(self):
        assert OrderStatus.parse("Shipped") is None


class TestTransitions:
    def test_placed_to_processing_to_completed(self):
        order = Order()
        order.mark_processing()
        order.complete()

        assert order.status == "Completed"

    def test_cancel_placed(self):
        order = Order()
        order.cancel()

        assert order.status == "Cancelled"

    def test_cancel_processing(self):
        order = Order(status="Processing")
        order.cancel()

        assert order.status == "Cancelled"

    def test_complete_requires_processing(self):
        order = Order()

        with pytest.raises(ValidationError) as exc:
            order.complete()

        assert exc.value.messages == {"status": ["Cannot transition from Order Placed to Completed"]}
        assert order.status == "Order Placed"

    @pytest.mark.parametrize("terminal", ["Cancelled", "Completed"])
    def test_terminal_statuses_do_not_move(self, terminal):
        order = Order(status=terminal)

        with pytest.raises(ValidationError):
            order.cancel()
        assert order.status == terminal

    def test_missing_status_behaves_as_placed(self):
        order = Order(status=None)
        order.mark_processing()

        assert order.status == "Processing"

    def test_legacy_status_can_only_be_cancelled(self):
        order = Order(status="Shipped")

        with pytest.raises(ValidationError):
            order.mark_processing()

        order.cancel()
        assert order.status == "Cancelled"
