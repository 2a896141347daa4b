import itertools

import pytest

from rest_framework.test import APIClient

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
def product_factory():
    """Persist Products with valid defaults; each call gets a fresh name."""
    counter = itertools.count(1)

    def _create(**overrides) -> Product:
        fields = {
            "name": f"product {next(counter)}",
            "price": 100,
            "description": None,
        }
        fields.update(overrides)
        return Product.objects.create(**fields)

    return _create
