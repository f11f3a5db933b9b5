"""Checkout — turn the cart into an order submission and reconcile on reply.

On a successful submission the cart is cleared. On any failure (HTTP error
status or transport error) the cart is left untouched so the customer can
retry; a retry is not deduplicated against an order the server may already
have created.
"""

from dataclasses import dataclass
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, EmailStr

from storefront.ordering.cart.cart import Cart
from storefront.ordering.cart.management import CartManager
from storefront.ordering.domain import logger

ORDERS_PATH = "/api/orders"
PLACE_ORDER_FAILED = "Unable to place order. Please retry."
CANCEL_ORDER_FAILED = "Unable to cancel order"


class ShippingOption(BaseModel):
    label: str
    cost: float

    model_config = ConfigDict(frozen=True)


STANDARD_SHIPPING = ShippingOption(label="Standard (5-7 days) - Free", cost=0.0)
EXPRESS_SHIPPING = ShippingOption(label="Express (2-3 days) - $25.00", cost=25.0)
SHIPPING_OPTIONS = (STANDARD_SHIPPING, EXPRESS_SHIPPING)


class CheckoutForm(BaseModel):
    customer_name: str
    email: EmailStr
    street_address: str
    city: str
    zip_code: str
    payment_method: str = "Credit Card"
    card_number: str | None = None
    card_name: str | None = None
    shipping: ShippingOption = STANDARD_SHIPPING


def build_payment_details(form: CheckoutForm) -> dict[str, Any]:
    """Sandbox placeholders only; no real payment data is kept."""
    method = form.payment_method or ""
    if method == "Credit Card":
        details: dict[str, Any] = {}
        card_number = "".join((form.card_number or "").split())
        if card_number:
            details["cardEnding"] = card_number[-4:]
        details["cardName"] = form.card_name
        return details
    if "PayPal" in method:
        return {"note": "PayPal sandbox authorization"}
    return {"reference": "Bank transfer placeholder"}


def build_order_payload(form: CheckoutForm, cart: Cart) -> dict[str, Any]:
    subtotal = cart.subtotal
    return {
        "customerName": form.customer_name,
        "email": str(form.email),
        "streetAddress": form.street_address,
        "city": form.city,
        "zipCode": form.zip_code,
        "shippingMethod": form.shipping.label,
        "paymentMethod": form.payment_method,
        "paymentDetails": build_payment_details(form),
        "items": cart.to_line_items(),
        "subtotal": subtotal,
        "shipping": form.shipping.cost,
        "total": round(subtotal + form.shipping.cost, 2),
    }


@dataclass(frozen=True)
class CheckoutResult:
    ok: bool
    message: str
    order_number: str | None = None
    status: str | None = None


def _error_message(response: httpx.Response, fallback: str) -> str:
    try:
        body = response.json()
    except ValueError:
        return fallback
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return fallback


class CheckoutClient:
    """Talks to the order API on behalf of the cart.

    ``http`` is any ``httpx.Client`` pointed at the storefront (a FastAPI
    ``TestClient`` works too).
    """

    def __init__(self, http: httpx.Client, cart: CartManager):
        self.http = http
        self.cart = cart

    def submit(self, form: CheckoutForm) -> CheckoutResult:
        cart = self.cart.cart
        if not cart.entries:
            return CheckoutResult(ok=False, message="Your cart is empty")

        payload = build_order_payload(form, cart)
        try:
            response = self.http.post(ORDERS_PATH, json=payload)
            response.raise_for_status()
            order_number = response.json()["orderNumber"]
        except (httpx.HTTPError, ValueError, KeyError) as exc:
            logger.warning("checkout_failed", error=str(exc))
            return CheckoutResult(ok=False, message=PLACE_ORDER_FAILED)

        self.cart.clear()
        logger.info("checkout_succeeded", order_number=order_number)
        return CheckoutResult(
            ok=True,
            message=f"Order {order_number} created.",
            order_number=order_number,
        )

    def cancel(self, order_number: str) -> CheckoutResult:
        try:
            response = self.http.post(f"{ORDERS_PATH}/{order_number}/cancel")
        except httpx.HTTPError as exc:
            logger.warning("order_cancel_failed", order_number=order_number, error=str(exc))
            return CheckoutResult(ok=False, message=CANCEL_ORDER_FAILED)

        if not response.is_success:
            return CheckoutResult(ok=False, message=_error_message(response, CANCEL_ORDER_FAILED))

        try:
            body = response.json()
            cancelled = body["orderNumber"]
        except (ValueError, KeyError, TypeError) as exc:
            logger.warning("order_cancel_failed", order_number=order_number, error=str(exc))
            return CheckoutResult(ok=False, message=CANCEL_ORDER_FAILED)

        return CheckoutResult(
            ok=True,
            message=f"Order {cancelled} cancelled.",
            order_number=cancelled,
            status=body.get("status"),
        )
