"""Unit tests for Product DTOs.

Covers:
- CreateProductDTO: name trimming and length bounds, strict price type
  and positivity, optional description, frozen immutability.
- UpdateProductDTO: every field optional, same rules when present,
  ``changes()`` only reports present fields.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from modules.products.constants import PRICE_MAX
from modules.products.dtos import CreateProductDTO, UpdateProductDTO

pytestmark = pytest.mark.unit


# ===========================================================================
# CreateProductDTO
# ===========================================================================


class TestCreateProductDTOValid:
    def test_create_with_valid_data(self):
        dto = CreateProductDTO(name="valid name", price=10000, description="desc")
        assert dto.name == "valid name"
        assert dto.price == 10000
        assert dto.description == "desc"

    def test_description_defaults_to_none(self):
        dto = CreateProductDTO(name="valid name", price=1)
        assert dto.description is None

    def test_name_is_trimmed(self):
        dto = CreateProductDTO(name="   padded   ", price=1)
        assert dto.name == "padded"

    def test_name_length_bounds_are_inclusive(self):
        assert CreateProductDTO(name="ab", price=1).name == "ab"
        assert CreateProductDTO(name="a" * 20, price=1).name == "a" * 20

    def test_length_is_checked_after_trimming(self):
        dto = CreateProductDTO(name="  " + "a" * 20 + "  ", price=1)
        assert dto.name == "a" * 20

    def test_maximum_price(self):
        assert CreateProductDTO(name="big", price=PRICE_MAX).price == PRICE_MAX

    def test_is_frozen(self):
        dto = CreateProductDTO(name="valid name", price=1)
        with pytest.raises(ValidationError):
            dto.price = 2


class TestCreateProductDTOInvalid:
    def test_missing_name(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(name=None, price=10000)

    def test_missing_price(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(name="valid name", price=None)

    def test_name_not_a_string(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(name=10000, price=10000)

    def test_name_too_short(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(name="a", price=10000)

    def test_name_too_short_after_trimming(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(name="  a  ", price=10000)

    def test_name_too_long(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(name="a" * 21, price=10000)

    @pytest.mark.parametrize("price", ["10000", 10000.5, 100.0, True])
    def test_price_not_an_integer(self, price):
        with pytest.raises(ValidationError):
            CreateProductDTO(name="valid name", price=price)

    @pytest.mark.parametrize("price", [0, -1, -10000])
    def test_price_not_positive(self, price):
        with pytest.raises(ValidationError, match="greater than 0"):
            CreateProductDTO(name="valid name", price=price)

    def test_price_above_storage_range(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(name="valid name", price=PRICE_MAX + 1)

    def test_description_not_a_string(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(name="valid name", price=1, description=42)


# ===========================================================================
# UpdateProductDTO
# ===========================================================================


class TestUpdateProductDTO:
    def test_all_fields_optional(self):
        dto = UpdateProductDTO()
        assert dto.name is None
        assert dto.price is None
        assert dto.description is None
        assert dto.changes() == {}

    def test_changes_reports_only_present_fields(self):
        dto = UpdateProductDTO(price=10000)
        assert dto.changes() == {"price": 10000}

    def test_changes_with_every_field(self):
        dto = UpdateProductDTO(name=" new name ", price=2, description="d")
        assert dto.changes() == {"name": "new name", "price": 2, "description": "d"}

    def test_name_too_short(self):
        with pytest.raises(ValidationError):
            UpdateProductDTO(name="a")

    def test_name_too_long(self):
        with pytest.raises(ValidationError):
            UpdateProductDTO(name="a" * 21)

    def test_name_not_a_string(self):
        with pytest.raises(ValidationError):
            UpdateProductDTO(name=10000)

    @pytest.mark.parametrize("price", ["10000", 10000.5, 0, -10000])
    def test_invalid_price(self, price):
        with pytest.raises(ValidationError):
            UpdateProductDTO(price=price)
