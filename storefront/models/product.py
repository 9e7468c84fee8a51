# storefront/models/product.py
from enum import Enum

from sqlmodel import SQLModel, Field


class ProductCategory(str, Enum):
    """Fixed set of item types a product can belong to."""

    TECH = "TECH"
    BEAUTY = "BEAUTY"
    FASHION = "FASHION"
    HOME = "HOME"
    SPORTS = "SPORTS"
    BOOKS = "BOOKS"
    GROCERY = "GROCERY"
    TOYS = "TOYS"


class Product(SQLModel, table=True):
    """
    Product catalog entry.

    Identity is immutable; every other field is replaced in place on update.
    """

    __tablename__ = "products"

    id: int | None = Field(
        default=None,
        primary_key=True,
    )

    name: str = Field(
        max_length=100,
        index=True,
        description="Display name of the product",
    )

    price: float = Field(
        description="Unit price",
    )

    category: ProductCategory = Field(
        index=True,
        description="Item type used for suggestions",
    )

    rating: float | None = Field(
        default=None,
        description="Average rating between 0.0 and 5.0",
    )
