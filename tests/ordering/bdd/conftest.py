from contextlib import ExitStack

import pytest
from fastapi.testclient import TestClient
from pytest_bdd import given, parsers, then

from storefront.app import create_app
from storefront.catalogue.product.provider import StaticCatalogue
from storefront.ordering.cart.checkout import CheckoutForm
from storefront.ordering.cart.management import CartManager
from storefront.ordering.cart.session import FileCartSession


class Storefront:
    """A running app that can be stopped and started again on the same database."""

    def __init__(self, settings):
        self.settings = settings
        self.client = None
        self._stack = ExitStack()

    def start(self) -> None:
        self.client = self._stack.enter_context(TestClient(create_app(self.settings)))

    def stop(self) -> None:
        self._stack.close()
        self.client = None

    def restart(self) -> None:
        self.stop()
        self.start()


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def catalogue():
    return StaticCatalogue()


@pytest.fixture()
def shopper():
    """The shopper's answer to removal prompts."""
    return {"confirms_removal": True}


@pytest.fixture()
def form():
    return CheckoutForm(
        customer_name="Avery Chen",
        email="avery@example.com",
        street_address="123 Market St",
        city="San Francisco",
        zip_code="94107",
        card_number="4111111111111234",
        card_name="Avery Chen",
    )


@pytest.fixture()
def storefront(settings, tmp_path):
    durable = settings.model_copy(update={"database_url": f"sqlite+aiosqlite:///{tmp_path}/orders.db"})
    running = Storefront(durable)
    yield running
    running.stop()


# ---------------------------------------------------------------------------
# Shared steps
# ---------------------------------------------------------------------------
@given("an empty order ledger")
def _(client):
    assert client.get("/api/orders").json() == []


@given(parsers.cfparse('a cart holding {quantity:d} of "{product_id}"'), target_fixture="cart")
def _(tmp_path, catalogue, shopper, quantity, product_id):
    manager = CartManager(
        FileCartSession(tmp_path / "cart.json"),
        confirm=lambda entry: shopper["confirms_removal"],
    )
    product = catalogue.get_product(product_id)
    for _unit in range(quantity):
        manager.add(product)
    return manager


@then(parsers.cfparse("the order ledger holds {count:d} orders"))
def _(client, count):
    assert len(client.get("/api/orders").json()) == count
