"""Pydantic response schemas for the Ordering API.

These are external contracts: camelCase on the wire, kept separate from the
internal Order model.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from storefront.ordering.order.order import Order


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class LineItemSchema(_CamelModel):
    name: str | None = None
    sku: str | None = None
    price: float
    quantity: int = Field(ge=1)


class OrderResponse(_CamelModel):
    id: int | None = None
    order_number: str
    customer_name: str | None = None
    email: str | None = None
    street_address: str | None = None
    city: str | None = None
    zip_code: str | None = None
    shipping_method: str | None = None
    payment_method: str | None = None
    payment_details: dict[str, Any] = Field(default_factory=dict)
    items: list[LineItemSchema] = Field(default_factory=list)
    subtotal: float
    shipping: float
    total: float
    status: str | None = None
    created_at: str

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "id": 1,
                    "orderNumber": "ORD-1735689600000",
                    "customerName": "Avery Chen",
                    "email": "avery@example.com",
                    "streetAddress": "123 Market St",
                    "city": "San Francisco",
                    "zipCode": "94107",
                    "shippingMethod": "Standard (5-7 days) - Free",
                    "paymentMethod": "Credit Card",
                    "paymentDetails": {"cardEnding": "1111"},
                    "items": [{"name": "Business Laptop", "sku": "BL-01", "price": 899.99, "quantity": 1}],
                    "subtotal": 899.99,
                    "shipping": 0.0,
                    "total": 899.99,
                    "status": "Order Placed",
                    "createdAt": "2025-01-01T00:00:00.000Z",
                }
            ]
        },
    )

    @classmethod
    def from_order(cls, order: Order) -> "OrderResponse":
        return cls.model_validate(order.model_dump())


class OrderCreatedResponse(_CamelModel):
    message: str = "Order created"
    order_number: str
    order_numbers: list[str]


class OrderStatusResponse(_CamelModel):
    message: str
    order_number: str
    status: str


class ErrorResponse(BaseModel):
    error: str
    details: dict[str, list[str]] | None = None
