# storefront/schemas/cart.py
from sqlmodel import SQLModel

from storefront.schemas.product import ProductRead


class CartItemRead(SQLModel):
    """
    Read model for a single cart line, with the full product view.
    """

    id: int
    product: ProductRead
    quantity: int


class ShoppingCartRead(SQLModel):
    """
    One customer cart with all of its lines.
    """

    id: int
    customer_id: int
    items: list[CartItemRead]
