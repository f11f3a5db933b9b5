from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from storefront.app import create_app
from storefront.ordering.order.numbering import MonotonicOrderNumberGenerator
from storefront.ordering.storage.store import OrderStore
from storefront.shared.config import Settings

MEMORY_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)
        elif "/bdd/" in str(test_path):
            item.add_marker(pytest.mark.bdd)


@pytest.fixture
def settings(tmp_path):
    return Settings(
        env="test",
        database_url=MEMORY_DATABASE_URL,
        seed_sample_orders=False,
        log_dir=str(tmp_path / "logs"),
    )


@pytest.fixture
async def store():
    """A fresh in-memory order store with the schema in place."""
    order_store = OrderStore(MEMORY_DATABASE_URL)
    await order_store.create_schema()
    yield order_store
    await order_store.dispose()


@pytest.fixture
def numbers():
    return MonotonicOrderNumberGenerator()


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


def _order_payload(**overrides):
    payload = {
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
        "shipping": 0,
        "total": 899.99,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def order_payload():
    """Factory for a valid checkout submission; keyword arguments override fields."""
    return _order_payload
