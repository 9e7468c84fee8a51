# storefront/schemas/customer.py
import re

from pydantic import EmailStr, ConfigDict, field_validator
from sqlmodel import SQLModel, Field

from storefront.schemas.cart import ShoppingCartRead

LETTERS_AND_SPACES = re.compile(r"^[a-zA-Z\s]+$")


class CustomerBase(SQLModel):
    """
    Shared customer fields.

    Validation rules:
      - first_name / last_name: required, <= 50 chars, letters and spaces
      - email must be a valid EmailStr
      - address: required, <= 200 chars
    """

    first_name: str = Field(max_length=50)
    last_name: str = Field(max_length=50)
    email: EmailStr
    address: str = Field(max_length=200)

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        if not LETTERS_AND_SPACES.match(v):
            raise ValueError("name can only contain letters and spaces")
        return v

    @field_validator("address")
    @classmethod
    def validate_address(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Address is required")
        return v


class CustomerCreate(CustomerBase):
    """Payload for registering a customer."""

    model_config = ConfigDict(extra="forbid")


class CustomerUpdate(CustomerBase):
    """
    Full replacement payload for an existing customer.
    """

    model_config = ConfigDict(extra="forbid")


class CustomerRead(CustomerBase):
    """Response schema returned to clients."""

    id: int


class CustomerWithCartsRead(CustomerRead):
    """
    Customer view with every shopping cart the customer owns and the
    products inside them.
    """

    shopping_carts: list[ShoppingCartRead] = []
