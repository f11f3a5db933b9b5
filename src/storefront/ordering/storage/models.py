"""SQLAlchemy mapping of the ``orders`` table.

Column names keep the camelCase spelling clients see on the wire. Line items
and payment details are JSON columns, re-validated into their structured
types whenever a row is read back.
"""

from typing import Any

from sqlalchemy import JSON, Float, Integer, String, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from storefront.ordering.order.order import DEFAULT_STATUS, LineItem, Order


class Base(DeclarativeBase):
    pass


class OrderRecord(Base):
    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_number: Mapped[str] = mapped_column("orderNumber", String(64), unique=True, nullable=False)

    customer_name: Mapped[str | None] = mapped_column("customerName", String(255))
    email: Mapped[str | None] = mapped_column(String(255), index=True)
    street_address: Mapped[str | None] = mapped_column("streetAddress", String(255))
    city: Mapped[str | None] = mapped_column(String(100))
    zip_code: Mapped[str | None] = mapped_column("zipCode", String(20))

    shipping_method: Mapped[str | None] = mapped_column("shippingMethod", String(100))
    payment_method: Mapped[str | None] = mapped_column("paymentMethod", String(100))
    payment_details: Mapped[dict[str, Any]] = mapped_column("paymentDetails", JSON, default=dict)
    items: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list)

    subtotal: Mapped[float] = mapped_column(Float, default=0.0)
    shipping: Mapped[float] = mapped_column(Float, default=0.0)
    total: Mapped[float] = mapped_column(Float, default=0.0)

    status: Mapped[str | None] = mapped_column(String(32), server_default=text(f"'{DEFAULT_STATUS.value}'"))
    created_at: Mapped[str] = mapped_column("createdAt", String(32), nullable=False, index=True)

    @classmethod
    def from_order(cls, order: Order) -> "OrderRecord":
        return cls(
            order_number=order.order_number,
            customer_name=order.customer_name,
            email=order.email,
            street_address=order.street_address,
            city=order.city,
            zip_code=order.zip_code,
            shipping_method=order.shipping_method,
            payment_method=order.payment_method,
            payment_details=dict(order.payment_details),
            items=[item.model_dump() for item in order.items],
            subtotal=order.subtotal,
            shipping=order.shipping,
            total=order.total,
            status=order.status,
            created_at=order.created_at,
        )

    def to_order(self) -> Order:
        return Order(
            id=self.id,
            order_number=self.order_number,
            customer_name=self.customer_name,
            email=self.email,
            street_address=self.street_address,
            city=self.city,
            zip_code=self.zip_code,
            shipping_method=self.shipping_method or "",
            payment_method=self.payment_method or "",
            payment_details=self.payment_details or {},
            items=[LineItem.model_validate(item) for item in self.items or []],
            subtotal=self.subtotal or 0.0,
            shipping=self.shipping or 0.0,
            total=self.total or 0.0,
            status=self.status,
            created_at=self.created_at,
        )
