"""Order record and its lifecycle state machine.

An Order is the canonical, well-typed shape every submission is normalized
into. It carries a server-assigned row id and a generated ``order_number``
(unique, client-visible). Line items and payment details are structured
nested values, validated once at the boundary.

State Machine:
    ORDER_PLACED → PROCESSING → COMPLETED
    ORDER_PLACED / PROCESSING → CANCELLED
"""

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from protean.exceptions import ValidationError
from pydantic import BaseModel, Field

DEFAULT_SHIPPING_METHOD = "Standard"
DEFAULT_PAYMENT_METHOD = "Credit Card"


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    ORDER_PLACED = "Order Placed"
    PROCESSING = "Processing"
    CANCELLED = "Cancelled"
    COMPLETED = "Completed"

    @classmethod
    def parse(cls, value):
        """Return the matching status, or None for blank and legacy values."""
        try:
            return cls(value)
        except ValueError:
            return None


DEFAULT_STATUS = OrderStatus.ORDER_PLACED

# State machine transition map
_VALID_TRANSITIONS = {
    OrderStatus.ORDER_PLACED: {OrderStatus.PROCESSING, OrderStatus.CANCELLED},
    OrderStatus.PROCESSING: {OrderStatus.COMPLETED, OrderStatus.CANCELLED},
    OrderStatus.CANCELLED: set(),  # Terminal
    OrderStatus.COMPLETED: set(),  # Terminal
}

# Statuses written by older clients are tolerated, but can only be cancelled
_LEGACY_TRANSITIONS = {OrderStatus.CANCELLED}


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. ``2025-01-31T09:15:02.123Z``.

    Fixed width, so lexical order matches chronological order.
    """
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


# ---------------------------------------------------------------------------
# Nested types
# ---------------------------------------------------------------------------
class LineItem(BaseModel):
    """One purchased product line. Owned by its Order."""

    name: str | None = None
    sku: str | None = None
    price: float = 0.0
    quantity: int = Field(default=1, ge=1)

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


# ---------------------------------------------------------------------------
# Order
# ---------------------------------------------------------------------------
class Order(BaseModel):
    id: int | None = None
    order_number: str | None = None

    customer_name: str | None = None
    email: str | None = None
    street_address: str | None = None
    city: str | None = None
    zip_code: str | None = None

    shipping_method: str = DEFAULT_SHIPPING_METHOD
    payment_method: str = DEFAULT_PAYMENT_METHOD
    payment_details: dict[str, Any] = Field(default_factory=dict)

    items: list[LineItem] = Field(default_factory=list)
    subtotal: float = 0.0
    shipping: float = 0.0
    total: float = 0.0

    status: str | None = DEFAULT_STATUS.value
    created_at: str | None = None

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    def assign_identity(self, order_number: str, created_at: str | None = None) -> None:
        """Stamp the order with its number and creation time before it is stored."""
        self.order_number = order_number
        self.created_at = created_at or utc_timestamp()

    # -------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------
    def _transition_to(self, target: OrderStatus) -> None:
        current = OrderStatus.parse(self.status) if self.status else DEFAULT_STATUS
        allowed = _VALID_TRANSITIONS[current] if current else _LEGACY_TRANSITIONS
        if target not in allowed:
            raise ValidationError({"status": [f"Cannot transition from {self.status} to {target.value}"]})
        self.status = target.value

    def mark_processing(self) -> None:
        self._transition_to(OrderStatus.PROCESSING)

    def complete(self) -> None:
        self._transition_to(OrderStatus.COMPLETED)

    def cancel(self) -> None:
        self._transition_to(OrderStatus.CANCELLED)
