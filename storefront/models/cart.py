# storefront/models/cart.py
from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field


class ShoppingCart(SQLModel, table=True):
    """
    A customer's shopping cart.

    Created lazily on the first "add product" without a cart id.
    Deleted explicitly, or when the last unit of a product is removed.
    """

    __tablename__ = "shopping_carts"

    id: int | None = Field(
        default=None,
        primary_key=True,
    )

    customer_id: int = Field(
        foreign_key="customers.id",
        index=True,
    )


class CartItem(SQLModel, table=True):
    """
    One line of a shopping cart.
    A cart cannot have 2 rows for the same product.
    """

    __tablename__ = "cart_items"
    __table_args__ = (
        UniqueConstraint("cart_id", "product_id", name="uq_cart_items_cart_product"),
    )

    id: int | None = Field(
        default=None,
        primary_key=True,
    )

    cart_id: int = Field(
        foreign_key="shopping_carts.id",
        index=True,
    )

    product_id: int = Field(
        foreign_key="products.id",
        index=True,
    )

    quantity: int = Field(
        gt=0,
        description="Must be >= 1",
    )
