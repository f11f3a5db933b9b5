"""Shopping cart — the client-side pre-image of an Order.

A cart holds one entry per product (adding a product again raises its
quantity) and exposes the total quantity shown on the cart badge. It lives
only on the client until checkout converts its entries into line items.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class CartStatus(Enum):
    EMPTY = "Empty"
    POPULATED = "Populated"


class CartEntry(BaseModel):
    id: str  # Product id; unique within a cart
    name: str
    sku: str
    price: float = 0.0
    description: str | None = None
    quantity: int = Field(default=1, ge=1)

    @property
    def line_total(self) -> float:
        return self.price * self.quantity

    def to_line_item(self) -> dict[str, Any]:
        """The order line for this entry; product id and description are not sent."""
        return {
            "name": self.name,
            "sku": self.sku,
            "price": self.price,
            "quantity": self.quantity,
        }


class Cart(BaseModel):
    entries: list[CartEntry] = Field(default_factory=list)

    @property
    def status(self) -> CartStatus:
        return CartStatus.POPULATED if self.entries else CartStatus.EMPTY

    @property
    def quantity(self) -> int:
        """Total quantity across entries (the badge count)."""
        return sum(entry.quantity for entry in self.entries)

    @property
    def subtotal(self) -> float:
        return round(sum(entry.line_total for entry in self.entries), 2)

    def find(self, product_id: str) -> CartEntry | None:
        return next((entry for entry in self.entries if entry.id == product_id), None)

    def without(self, product_id: str) -> "Cart":
        return Cart(entries=[entry for entry in self.entries if entry.id != product_id])

    def to_line_items(self) -> list[dict[str, Any]]:
        return [entry.to_line_item() for entry in self.entries]
