"""Domain tests for building the order submission from a cart."""

import pydantic
import pytest

from storefront.ordering.cart.cart import Cart, CartEntry
from storefront.ordering.cart.checkout import (
    EXPRESS_SHIPPING,
    SHIPPING_OPTIONS,
    STANDARD_SHIPPING,
    CheckoutForm,
    build_order_payload,
    build_payment_details,
)


def _form(**overrides):
    values = {
        "customer_name": "Avery Chen",
        "email": "avery@example.com",
        "street_address": "123 Market St",
        "city": "San Francisco",
        "zip_code": "94107",
        "card_number": "4111 1111 1111 1234",
        "card_name": "Avery Chen",
    }
    values.update(overrides)
    return CheckoutForm(**values)


def _cart():
    return Cart(
        entries=[
            CartEntry(id="prod-2", name="Business Laptop", sku="BL-01", price=899.99, description="Laptop"),
            CartEntry(id="prod-4", name="Desk Lamp", sku="DL-10", price=54.99, quantity=2),
        ]
    )


class TestShippingOptions:
    def test_two_options(self):
        assert [option.cost for option in SHIPPING_OPTIONS] == [0.0, 25.0]


class TestPaymentDetails:
    def test_card_keeps_last_four_digits_only(self):
        assert build_payment_details(_form()) == {"cardEnding": "1234", "cardName": "Avery Chen"}

    def test_paypal(self):
        details = build_payment_details(_form(payment_method="PayPal (Test Mode)"))

        assert details == {"note": "PayPal sandbox authorization"}

    def test_bank_transfer(self):
        details = build_payment_details(_form(payment_method="Bank Transfer (Test Mode)"))

        assert details == {"reference": "Bank transfer placeholder"}


class TestOrderPayload:
    def test_standard_shipping(self):
        payload = build_order_payload(_form(), _cart())

        assert payload["customerName"] == "Avery Chen"
        assert payload["shippingMethod"] == STANDARD_SHIPPING.label
        assert payload["subtotal"] == 1009.97
        assert payload["shipping"] == 0.0
        assert payload["total"] == 1009.97

    def test_express_shipping(self):
        payload = build_order_payload(_form(shipping=EXPRESS_SHIPPING), _cart())

        assert payload["shipping"] == 25.0
        assert payload["total"] == 1034.97

    def test_line_items(self):
        payload = build_order_payload(_form(), _cart())

        assert payload["items"] == [
            {"name": "Business Laptop", "sku": "BL-01", "price": 899.99, "quantity": 1},
            {"name": "Desk Lamp", "sku": "DL-10", "price": 54.99, "quantity": 2},
        ]

    def test_invalid_email_is_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            _form(email="not-an-email")
