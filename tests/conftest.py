from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.categories.models import Category
from modules.products.models import Product


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def make_category():
    """Factory persisting a Category row through the ORM."""

    def _make(name: str = "Electronics") -> Category:
        return Category.objects.create(name=name)

    return _make


@pytest.fixture()
def make_product(make_category):
    """Factory persisting a Product row (and its category when not given)."""

    def _make(category: Category | None = None, **overrides) -> Product:
        fields = {
            "name": "Wireless Mouse",
            "price": Decimal("24.90"),
            "stock": 10,
        }
        fields.update(overrides)
        return Product.objects.create(
            category=category or make_category(), **fields
        )

    return _make
