"""Payload normalization — raw checkout submissions into canonical Orders.

Clients submit loosely typed JSON: numbers may arrive as strings, ``items``
and ``paymentDetails`` may arrive JSON-encoded, and optional fields may be
missing entirely. Normalization never raises; every coercion degrades to a
safe default and the Validator decides what is acceptable.
"""

import json
import math
from collections.abc import Mapping
from typing import Any

from storefront.ordering.order.order import (
    DEFAULT_PAYMENT_METHOD,
    DEFAULT_SHIPPING_METHOD,
    DEFAULT_STATUS,
    LineItem,
    Order,
)


def to_number(value: Any, default: float) -> float:
    """Coerce a loosely typed value to a finite float, falling back to ``default``."""
    if value is None:
        return default
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, int | float):
        try:
            number = float(value)
        except OverflowError:
            return default
    elif isinstance(value, str):
        text = value.strip()
        # "1_000" is not a number
        if not text or "_" in text:
            return default
        try:
            number = float(text)
        except ValueError:
            return default
    else:
        return default

    if not math.isfinite(number):
        return default
    return number


def clean_text(value: Any) -> str | None:
    """Trim a string field; blank or absent values become None."""
    if value is None:
        return None
    if not isinstance(value, str):
        value = str(value)
    value = value.strip()
    return value or None


def _decode_json(value: Any) -> tuple[bool, Any]:
    if not isinstance(value, str):
        return True, value
    try:
        return True, json.loads(value)
    except ValueError:
        return False, None


def parse_items(value: Any) -> list[dict]:
    """Accept a list, a JSON-encoded list, or a single JSON-encoded item."""
    if value is None:
        return []

    was_string = isinstance(value, str)
    ok, decoded = _decode_json(value)
    if not ok or decoded is None:
        return []
    if isinstance(decoded, list):
        entries = decoded
    elif was_string:
        entries = [decoded]
    else:
        return []

    return [entry if isinstance(entry, Mapping) else {} for entry in entries]


def parse_payment_details(value: Any) -> dict:
    ok, decoded = _decode_json(value)
    if not ok or not isinstance(decoded, Mapping):
        return {}
    return dict(decoded)


def _finite_or_zero(amount: float) -> float:
    return amount if math.isfinite(amount) else 0.0


def normalize_item(raw: Mapping) -> LineItem:
    quantity = to_number(raw.get("quantity"), 1.0)
    return LineItem(
        name=clean_text(raw.get("name")),
        sku=clean_text(raw.get("sku")),
        price=to_number(raw.get("price"), 0.0),
        quantity=max(1, int(quantity)),
    )


def normalize_order(raw: Any) -> Order:
    """Convert one raw submission into an Order without number or timestamp."""
    if not isinstance(raw, Mapping):
        raw = {}

    items = [normalize_item(entry) for entry in parse_items(raw.get("items"))]

    if raw.get("subtotal") is not None:
        subtotal = to_number(raw.get("subtotal"), 0.0)
    else:
        subtotal = _finite_or_zero(round(sum(item.line_total for item in items), 2))

    shipping = to_number(raw.get("shipping"), 0.0)

    if raw.get("total") is not None:
        total = to_number(raw.get("total"), 0.0)
    else:
        total = _finite_or_zero(round(subtotal + shipping, 2))

    return Order(
        customer_name=clean_text(raw.get("customerName")),
        email=clean_text(raw.get("email")),
        street_address=clean_text(raw.get("streetAddress")),
        city=clean_text(raw.get("city")),
        zip_code=clean_text(raw.get("zipCode")),
        shipping_method=clean_text(raw.get("shippingMethod")) or DEFAULT_SHIPPING_METHOD,
        payment_method=clean_text(raw.get("paymentMethod")) or DEFAULT_PAYMENT_METHOD,
        payment_details=parse_payment_details(raw.get("paymentDetails")),
        items=items,
        subtotal=subtotal,
        shipping=shipping,
        total=total,
        status=clean_text(raw.get("status")) or DEFAULT_STATUS.value,
    )


def normalize_payload(body: Any) -> list[Order]:
    """A request body is one order object or an array of them."""
    entries = body if isinstance(body, list) else [body]
    return [normalize_order(entry) for entry in entries]
