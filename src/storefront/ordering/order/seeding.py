"""Deterministic demo orders, inserted when the ledger is empty."""

from storefront.ordering.domain import logger
from storefront.ordering.order.creation import create_orders
from storefront.ordering.order.numbering import OrderNumberGenerator
from storefront.ordering.storage.store import OrderStore

SAMPLE_ORDERS = [
    {
        "customerName": "Avery Chen",
        "email": "avery@example.com",
        "streetAddress": "123 Market St",
        "city": "San Francisco",
        "zipCode": "94107",
        "shippingMethod": "Standard (5-7 days) - Free",
        "paymentMethod": "Credit Card",
        "paymentDetails": {"cardEnding": "1111"},
        "items": [{"name": "Business Laptop", "price": 899.99, "quantity": 1, "sku": "BL-01"}],
        "subtotal": 899.99,
        "shipping": 0,
        "total": 899.99,
    },
    {
        "customerName": "Jordan Patel",
        "email": "jordan@example.com",
        "streetAddress": "78 Innovation Way",
        "city": "Austin",
        "zipCode": "73301",
        "shippingMethod": "Express (2-3 days) - $25.00",
        "paymentMethod": "PayPal (Test Mode)",
        "paymentDetails": {"transactionId": "PAY123456"},
        "items": [{"name": "4K Monitor", "price": 399.99, "quantity": 1, "sku": "4K-27"}],
        "subtotal": 399.99,
        "shipping": 25,
        "total": 424.99,
    },
    {
        "customerName": "Morgan Lee",
        "email": "morgan@example.com",
        "streetAddress": "56 Testing Ave",
        "city": "Seattle",
        "zipCode": "98101",
        "shippingMethod": "Standard (5-7 days) - Free",
        "paymentMethod": "Bank Transfer (Test Mode)",
        "paymentDetails": {"reference": "BANK-2025"},
        "items": [{"name": "Desk Lamp", "price": 54.99, "quantity": 2, "sku": "DL-10"}],
        "subtotal": 109.98,
        "shipping": 0,
        "total": 109.98,
    },
]


async def seed_orders_if_empty(store: OrderStore, numbers: OrderNumberGenerator) -> int:
    """Insert the sample orders unless the table already holds orders. Returns the number inserted."""
    if await store.count():
        return 0

    result = await create_orders(store, SAMPLE_ORDERS, numbers)
    logger.info("sample_orders_seeded", order_numbers=result.order_numbers)
    return len(result.orders)
