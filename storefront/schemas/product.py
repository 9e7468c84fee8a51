# storefront/schemas/product.py
import re

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field

from storefront.models.product import ProductCategory

LETTERS_AND_SPACES = re.compile(r"^[a-zA-Z\s]+$")


class ProductBase(SQLModel):
    """
    Shared product fields.

    Validation rules:
      - name is required, at most 100 chars, letters and spaces only
      - price is required and cannot be negative
      - rating, when given, lies between 0.0 and 5.0
    """

    name: str = Field(max_length=100)
    price: float = Field(ge=0)
    category: ProductCategory
    rating: float | None = Field(default=None, ge=0.0, le=5.0)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        if not LETTERS_AND_SPACES.match(v):
            raise ValueError("Name can only contain letters and spaces")
        return v


class ProductCreate(ProductBase):
    """
    Payload for creating a product.
    """

    model_config = ConfigDict(extra="forbid")


class ProductUpdate(ProductBase):
    """
    Full replacement payload for an existing product.
    Every mutable field must be sent again.
    """

    model_config = ConfigDict(extra="forbid")


class ProductRead(ProductBase):
    """
    Product representation for clients.
    """

    id: int
