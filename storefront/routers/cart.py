# storefront/routers/cart.py
from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse
from sqlmodel import Session

from storefront.database import get_session
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.customer_repo import CustomerRepository
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.cart import ShoppingCartRead
from storefront.schemas.status import StatusResponse
from storefront.services.cart_service import CartService

router = APIRouter(prefix="/api/shopping-cart", tags=["Shopping Cart"])

cart_repo = CartRepository()
customer_repo = CustomerRepository()
product_repo = ProductRepository()
service = CartService(cart_repo, customer_repo, product_repo)


@router.get("/{customer_id}/carts", response_model=list[ShoppingCartRead])
def get_customer_carts(
    customer_id: int,
    session: Session = Depends(get_session),
):
    """
    All shopping carts of a customer with their contents.
    """
    return service.get_customer_carts(session, customer_id)


@router.post("/add-product", response_model=StatusResponse)
def add_product_to_cart(
    customer_id: int = Query(alias="customerId"),
    cart_id: int | None = Query(default=None, alias="cartId"),
    product_id: int = Query(alias="productId"),
    quantity: int = Query(),
    session: Session = Depends(get_session),
):
    """
    Add a product to a cart, or increase its quantity.

    - Without `cartId` a new cart is created for the customer.
    - A product may live in only one of the customer's carts.
    """
    return service.add_product_to_cart(
        session,
        customer_id=customer_id,
        cart_id=cart_id,
        product_id=product_id,
        quantity=quantity,
    )


@router.delete("/remove-product", response_class=PlainTextResponse)
def remove_product_from_cart(
    customer_id: int = Query(alias="customerId"),
    product_id: int = Query(alias="productId"),
    quantity: int = Query(),
    session: Session = Depends(get_session),
):
    """
    Remove units of a product from whichever cart of the customer holds it.

    Removing the last units deletes the whole cart.
    """
    service.remove_product_from_cart(
        session,
        customer_id=customer_id,
        product_id=product_id,
        quantity=quantity,
    )
    return "Product removed successfully."


@router.delete("/{cart_id}", response_class=PlainTextResponse)
def delete_cart(
    cart_id: int,
    session: Session = Depends(get_session),
):
    """
    Delete a shopping cart and all of its items.
    """
    service.delete_cart(session, cart_id)
    return "Shopping cart deleted successfully."
