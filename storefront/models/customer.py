# storefront/models/customer.py
from sqlmodel import SQLModel, Field


class Customer(SQLModel, table=True):
    """
    Store customer.

    Owns zero or more shopping carts (see `ShoppingCart.customer_id`).
    Carts are not removed together with the customer.
    """

    __tablename__ = "customers"

    id: int | None = Field(
        default=None,
        primary_key=True,
    )

    first_name: str = Field(max_length=50)
    last_name: str = Field(max_length=50)

    email: str = Field(
        unique=True,
        index=True,
    )

    address: str = Field(max_length=200)
