"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Views) and the
Service layer.  DTOs are immutable (``frozen=True``) and carry input
that has already passed boundary validation:

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: patch for the one-time partial update.

Types are strict: ``"10000"``, ``10000.5`` and ``True`` are not prices,
``10000`` is not a name.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

from modules.products.constants import (
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    PRICE_MAX,
    UPDATABLE_FIELDS,
)


def _strip_name(v: Any) -> Any:
    if isinstance(v, str):
        return v.strip()
    return v


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` is a string of 2-20 characters once surrounding
      whitespace is trimmed.
    - ``price`` is an integer greater than zero.
    - ``description`` is an optional string.
    """

    model_config = ConfigDict(frozen=True)

    name: StrictStr = Field(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    price: StrictInt = Field(gt=0, le=PRICE_MAX)
    description: Optional[StrictStr] = None

    @field_validator("name", mode="before")
    @classmethod
    def trim_name(cls, v: Any) -> Any:
        return _strip_name(v)


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    All fields are optional; ``None`` means "leave unchanged".  An empty
    patch is valid and still consumes the product's one allowed update.
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[StrictStr] = Field(
        default=None, min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH
    )
    price: Optional[StrictInt] = Field(default=None, gt=0, le=PRICE_MAX)
    description: Optional[StrictStr] = None

    @field_validator("name", mode="before")
    @classmethod
    def trim_name(cls, v: Any) -> Any:
        return _strip_name(v)

    def changes(self) -> Dict[str, Any]:
        """Return only the fields present in the patch."""
        return {
            field: getattr(self, field)
            for field in UPDATABLE_FIELDS
            if getattr(self, field) is not None
        }
