# storefront/repositories/cart_repo.py
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, col, select

from storefront.models.cart import CartItem, ShoppingCart
from storefront.models.product import Product


class CartRepository:

    # ----- Carts -----

    def get_cart(self, session: Session, cart_id: int) -> ShoppingCart | None:
        return session.get(ShoppingCart, cart_id)

    def list_for_customer(self, session: Session, customer_id: int) -> list[ShoppingCart]:
        stmt = (
            select(ShoppingCart)
            .where(ShoppingCart.customer_id == customer_id)
            .order_by(ShoppingCart.id)
        )
        return session.exec(stmt).all()

    def create_cart(self, session: Session, cart: ShoppingCart) -> ShoppingCart:
        # flush so the cart has an id before lines are attached
        session.add(cart)
        session.flush()
        session.refresh(cart)
        return cart

    def delete_cart(self, session: Session, cart: ShoppingCart) -> None:
        """Delete a cart together with every line it still holds."""
        for item in self.list_items(session, cart.id):
            session.delete(item)
        session.flush()
        session.delete(cart)
        session.flush()

    # ----- Cart items -----

    def get_item(
        self, session: Session, cart_id: int, product_id: int
    ) -> CartItem | None:
        stmt = select(CartItem).where(
            CartItem.cart_id == cart_id, CartItem.product_id == product_id
        )
        return session.exec(stmt).first()

    def list_items(self, session: Session, cart_id: int) -> list[CartItem]:
        stmt = select(CartItem).where(CartItem.cart_id == cart_id).order_by(CartItem.id)
        return session.exec(stmt).all()

    def list_items_with_products(
        self, session: Session, cart_id: int
    ) -> list[tuple[CartItem, Product]]:
        stmt = (
            select(CartItem, Product)
            .join(Product, col(CartItem.product_id) == col(Product.id))
            .where(CartItem.cart_id == cart_id)
            .order_by(CartItem.id)
        )
        return session.exec(stmt).all()

    def product_in_other_cart(
        self,
        session: Session,
        customer_id: int,
        product_id: int,
        exclude_cart_id: int | None = None,
    ) -> bool:
        """
        True when one of the customer's carts, other than `exclude_cart_id`,
        already holds a line for the product. With no cart to exclude every
        cart of the customer is checked.
        """
        stmt = (
            select(CartItem.id)
            .join(ShoppingCart, col(CartItem.cart_id) == col(ShoppingCart.id))
            .where(
                ShoppingCart.customer_id == customer_id,
                CartItem.product_id == product_id,
            )
        )
        if exclude_cart_id is not None:
            stmt = stmt.where(col(ShoppingCart.id) != exclude_cart_id)
        return session.exec(stmt).first() is not None

    def try_create_item(self, session: Session, item: CartItem) -> CartItem | None:
        """
        Insert a new line inside a SAVEPOINT.

        Returns None when a line for the same (cart, product) was inserted
        concurrently and the unique constraint rejected ours; the outer
        transaction stays usable.
        """
        try:
            with session.begin_nested():
                session.add(item)
                session.flush()
        except IntegrityError:
            return None
        session.refresh(item)
        return item

    def update_item(self, session: Session, item: CartItem) -> CartItem:
        session.add(item)
        session.flush()
        session.refresh(item)
        return item

    def delete_item(self, session: Session, item: CartItem) -> None:
        session.delete(item)
        session.flush()
