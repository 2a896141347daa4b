"""Unit tests for ProductDjangoRepository.

Covers:
- get_by_id / get_for_update / get_by_name look-ups (Null Object on miss).
- list in insertion order.
- insert assigns ids; update persists mutable columns.
- UNIQUE name violations surface as ProductAlreadyExists.
- delete returns whether a row was removed.
"""

from __future__ import annotations

import pytest
from django.db import transaction

from modules.products.exceptions import ProductAlreadyExists
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_product(**overrides) -> Product:
    defaults = {
        "name": "Widget",
        "price": 1999,
        "description": "A fine widget",
    }
    defaults.update(overrides)
    return Product.objects.create(**defaults)


@pytest.fixture()
def repo():
    return ProductDjangoRepository()


# ===========================================================================
# Instantiation
# ===========================================================================


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, IProductRepository)


# ===========================================================================
# Look-ups
# ===========================================================================


class TestGetById:
    def test_returns_product_when_found(self, repo):
        product = _make_product()
        result = repo.get_by_id(product.id)
        assert result is not None
        assert result.id == product.id

    def test_returns_none_when_not_found(self, repo):
        assert repo.get_by_id(10000) is None

    def test_returns_none_for_negative_id(self, repo):
        assert repo.get_by_id(-1) is None

    def test_returns_none_for_invalid_id(self, repo):
        assert repo.get_by_id("not-a-number") is None


class TestGetForUpdate:
    def test_returns_product_inside_transaction(self, repo):
        product = _make_product()
        with transaction.atomic():
            result = repo.get_for_update(product.id)
        assert result is not None
        assert result.id == product.id

    def test_returns_none_when_not_found(self, repo):
        with transaction.atomic():
            assert repo.get_for_update(10000) is None


class TestGetByName:
    def test_exact_match(self, repo):
        product = _make_product(name="Widget")
        assert repo.get_by_name("Widget").id == product.id

    def test_is_case_sensitive(self, repo):
        _make_product(name="Widget")
        assert repo.get_by_name("widget") is None


class TestList:
    def test_returns_empty_list_when_no_products(self, repo):
        assert repo.list() == []

    def test_returns_products_in_insertion_order(self, repo):
        _make_product(name="zeta")
        _make_product(name="alpha")
        assert [p.name for p in repo.list()] == ["zeta", "alpha"]


# ===========================================================================
# Writes
# ===========================================================================


class TestInsert:
    def test_assigns_id(self, repo):
        product = repo.insert(Product(name="New", price=10))
        assert product.id is not None
        assert Product.objects.filter(id=product.id).exists()

    def test_returns_same_entity(self, repo):
        product = Product(name="Return", price=10)
        assert repo.insert(product) is product

    def test_duplicate_name_raises_domain_exception(self, repo):
        _make_product(name="Taken")
        with pytest.raises(ProductAlreadyExists):
            repo.insert(Product(name="Taken", price=10))
        assert Product.objects.filter(name="Taken").count() == 1


class TestUpdate:
    def test_persists_mutable_fields(self, repo):
        product = _make_product()
        product.name = "Renamed"
        product.price = 5
        product.description = None
        product.is_updated = True
        repo.update(product)

        product.refresh_from_db()
        assert product.name == "Renamed"
        assert product.price == 5
        assert product.description is None
        assert product.is_updated is True

    def test_name_taken_by_other_product_raises(self, repo):
        _make_product(name="First")
        second = _make_product(name="Second")
        second.name = "First"
        with pytest.raises(ProductAlreadyExists):
            repo.update(second)
        second.refresh_from_db()
        assert second.name == "Second"


class TestDelete:
    def test_removes_existing_product(self, repo):
        product = _make_product()
        assert repo.delete(product.id) is True
        assert not Product.objects.filter(id=product.id).exists()

    def test_returns_false_for_nonexistent(self, repo):
        assert repo.delete(10000) is False
