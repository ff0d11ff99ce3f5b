"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the Service
layer, and between the Service layer and the store.  DTOs are
immutable (``frozen=True``).

Input DTOs accept the camelCase wire names (``stockQuantity``,
``changedBy``) as well as the Python field names.

- ``CreateProductDTO``: payload for product creation.
- ``UpdateProductDTO``: payload for product updates; only supplied
  fields are written.
- ``ActorDTO``: the optional ``changedBy`` query parameter.
- ``InsertProductCommand`` / ``UpdateProductCommand`` /
  ``DeleteProductCommand``: parameter bundles for the store's mutating
  operations.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

NAME_MAX_LENGTH = 200
ACTOR_MAX_LENGTH = 128
# Upper bound of the stored integer column.
STOCK_QUANTITY_MAX = 2_147_483_647

_wire_config = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` is a non-empty string.
    - ``price`` is a non-negative decimal with at most two decimal places.
    - ``stock_quantity`` is non-negative and fits the stored integer column.
    """

    model_config = _wire_config

    name: str = Field(max_length=NAME_MAX_LENGTH)
    price: Decimal = Field(ge=0, max_digits=18, decimal_places=2)
    description: Optional[str] = None
    stock_quantity: int = Field(default=0, ge=0, le=STOCK_QUANTITY_MAX)

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name must not be empty.")
        return v


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    Every field is optional.  Fields present in the request are written
    (``description`` may be explicitly set to ``null``); absent fields keep
    their stored value.  A full payload therefore replaces the product.
    """

    model_config = _wire_config

    name: Optional[str] = Field(default=None, max_length=NAME_MAX_LENGTH)
    price: Optional[Decimal] = Field(default=None, ge=0, max_digits=18, decimal_places=2)
    description: Optional[str] = None
    stock_quantity: Optional[int] = Field(
        default=None, ge=0, le=STOCK_QUANTITY_MAX
    )

    @field_validator("name", "price", "stock_quantity")
    @classmethod
    def must_not_be_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("Field may be omitted but not null.")
        return v

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name must not be empty.")
        return v

    def changes(self) -> Dict[str, Any]:
        """Return the supplied fields keyed by model attribute name."""
        return self.model_dump(exclude_unset=True)


class ActorDTO(BaseModel):
    """The optional actor attributed to a mutation (``?changedBy=``).

    An empty value is treated as absent.
    """

    model_config = _wire_config

    changed_by: Optional[str] = Field(default=None, max_length=ACTOR_MAX_LENGTH)

    @field_validator("changed_by", mode="before")
    @classmethod
    def empty_means_absent(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @classmethod
    def from_query(cls, params: Mapping[str, str]) -> ActorDTO:
        return cls.model_validate({"changedBy": params.get("changedBy")})


# ---------------------------------------------------------------------------
# Store commands
# ---------------------------------------------------------------------------


class InsertProductCommand(BaseModel):
    """Parameters of the store's *insert product* operation."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: Optional[str]
    price: Decimal
    stock_quantity: int
    created_by: Optional[str] = None

    @classmethod
    def from_dto(
        cls, dto: CreateProductDTO, created_by: Optional[str] = None
    ) -> InsertProductCommand:
        return cls(
            name=dto.name,
            description=dto.description,
            price=dto.price,
            stock_quantity=dto.stock_quantity,
            created_by=created_by,
        )


class UpdateProductCommand(BaseModel):
    """Parameters of the store's *update product* operation."""

    model_config = ConfigDict(frozen=True)

    id: int
    changes: Dict[str, Any]
    updated_by: Optional[str] = None


class DeleteProductCommand(BaseModel):
    """Parameters of the store's *delete product* operation."""

    model_config = ConfigDict(frozen=True)

    id: int
    deleted_by: Optional[str] = None
