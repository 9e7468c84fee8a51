# storefront/services/cart_service.py
from fastapi import status
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from storefront.core.exceptions import InvalidInputError, ResourceNotFoundError
from storefront.core.logging import get_logger
from storefront.database import transaction
from storefront.models.cart import CartItem, ShoppingCart
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.customer_repo import CustomerRepository
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.cart import CartItemRead, ShoppingCartRead
from storefront.schemas.product import ProductRead
from storefront.schemas.status import StatusResponse

logger = get_logger(__name__)


def build_cart_view(
    cart_repo: CartRepository,
    session: Session,
    cart: ShoppingCart,
) -> ShoppingCartRead:
    """A cart with its lines, each expanded with the product it references."""
    rows = cart_repo.list_items_with_products(session, cart.id)
    return ShoppingCartRead(
        id=cart.id,
        customer_id=cart.customer_id,
        items=[
            CartItemRead(
                id=item.id,
                product=ProductRead.model_validate(product),
                quantity=item.quantity,
            )
            for item, product in rows
        ],
    )


class CartService:
    """
    Business logic for shopping carts.

    Responsibilities:
      - create a cart on demand when a customer adds a product without one
      - merge quantities into an existing line or create a new line
      - reduce / delete lines, deleting the cart with its last removed unit
      - keep a product in at most one of a customer's carts

    Every mutation runs as a single transaction.
    """

    def __init__(
        self,
        cart_repo: CartRepository,
        customer_repo: CustomerRepository,
        product_repo: ProductRepository,
    ):
        self.cart_repo = cart_repo
        self.customer_repo = customer_repo
        self.product_repo = product_repo

    # ---- internal helpers ----

    @staticmethod
    def _validate_quantity(quantity: int) -> None:
        if quantity <= 0:
            logger.warning(f"Invalid quantity: {quantity}. Quantity must be greater than zero.")
            raise InvalidInputError("Quantity must be greater than zero.")

    def _resolve_cart(
        self,
        session: Session,
        customer_id: int,
        cart_id: int | None,
    ) -> ShoppingCart:
        """
        Load the target cart, or create a new one for the customer when no
        cart id was given.
        """
        if cart_id is not None:
            cart = self.cart_repo.get_cart(session, cart_id)
            if not cart:
                raise ResourceNotFoundError(f"Cart not found with ID: {cart_id}")
            if cart.customer_id != customer_id:
                raise InvalidInputError(
                    f"Cart {cart_id} does not belong to customer {customer_id}."
                )
            return cart

        customer = self.customer_repo.get_by_id(session, customer_id)
        if not customer:
            raise ResourceNotFoundError(f"Customer not found with ID: {customer_id}")

        cart = self.cart_repo.create_cart(session, ShoppingCart(customer_id=customer.id))
        logger.info(f"Created a new cart with ID: {cart.id} for customer ID: {customer_id}")
        return cart

    def _merge_or_insert(
        self,
        session: Session,
        cart_id: int,
        product_id: int,
        quantity: int,
    ) -> CartItem:
        existing = self.cart_repo.get_item(session, cart_id, product_id)

        if existing is None:
            created = self.cart_repo.try_create_item(
                session,
                CartItem(cart_id=cart_id, product_id=product_id, quantity=quantity),
            )
            if created is not None:
                logger.info(f"Added new product ID: {product_id} to cart ID: {cart_id}")
                return created

            # lost an insert race; the row exists now
            existing = self.cart_repo.get_item(session, cart_id, product_id)
            if existing is None:
                raise InvalidInputError("Unable to add product to cart.")

        existing.quantity += quantity
        self.cart_repo.update_item(session, existing)
        logger.info(
            f"Updated quantity for product ID: {product_id} in cart ID: {cart_id} "
            f"to {existing.quantity}"
        )
        return existing

    # ---- public operations ----

    def get_customer_carts(
        self,
        session: Session,
        customer_id: int,
    ) -> list[ShoppingCartRead]:
        """
        Every cart owned by the customer, expanded with its lines and the
        products they reference.

        Raises:
            ResourceNotFoundError: unknown customer.
        """
        logger.info(f"Fetching all shopping carts for customer with ID: {customer_id}")

        if not self.customer_repo.get_by_id(session, customer_id):
            raise ResourceNotFoundError(f"Customer not found with ID: {customer_id}")

        carts = self.cart_repo.list_for_customer(session, customer_id)
        return [build_cart_view(self.cart_repo, session, cart) for cart in carts]

    def add_product_to_cart(
        self,
        session: Session,
        customer_id: int,
        cart_id: int | None,
        product_id: int,
        quantity: int,
    ) -> StatusResponse:
        """
        Add `quantity` units of a product to a customer's cart.

        Rules:
          - quantity must be > 0
          - the product may not already sit in another cart of the customer
          - no cart id => a new cart is created for the customer
          - existing line for the product => quantities are summed
        """
        logger.info(
            f"Adding product with ID: {product_id} to cart with ID: {cart_id} "
            f"for customer with ID: {customer_id}"
        )

        self._validate_quantity(quantity)

        try:
            with transaction(session):
                if self.cart_repo.product_in_other_cart(
                    session, customer_id, product_id, exclude_cart_id=cart_id
                ):
                    logger.warning(
                        f"Product with ID: {product_id} is already added to a different "
                        f"cart for customer ID: {customer_id}"
                    )
                    raise InvalidInputError(
                        "Product is already added to a different cart for the customer."
                    )

                cart = self._resolve_cart(session, customer_id, cart_id)

                product = self.product_repo.get_by_id(session, product_id)
                if not product:
                    raise ResourceNotFoundError(f"Product not found with ID: {product_id}")

                item = self._merge_or_insert(session, cart.id, product.id, quantity)
                resolved_cart_id = cart.id
                line_quantity = item.quantity
        except SQLAlchemyError as e:
            logger.error(f"Error while adding product to cart: {e}", exc_info=True)
            raise InvalidInputError("Unable to add product to cart.") from e

        return StatusResponse(
            status_code=status.HTTP_201_CREATED,
            status_message=f"Product ID {product_id} successfully added for customer {customer_id}",
            count=line_quantity,
            cart_id=resolved_cart_id,
        )

    def remove_product_from_cart(
        self,
        session: Session,
        customer_id: int,
        product_id: int,
        quantity: int,
    ) -> None:
        """
        Remove `quantity` units of a product from whichever of the customer's
        carts holds it.

        Removing all remaining units deletes the line and its whole cart.
        """
        logger.info(
            f"Removing product with ID: {product_id} from any cart for customer with ID: {customer_id}"
        )

        self._validate_quantity(quantity)

        with transaction(session):
            carts = self.cart_repo.list_for_customer(session, customer_id)
            if not carts:
                logger.warning(f"No carts found for customer with ID: {customer_id}")
                raise ResourceNotFoundError("No shopping carts found for the customer.")

            for cart in carts:
                item = self.cart_repo.get_item(session, cart.id, product_id)
                if item is None:
                    continue

                if item.quantity <= quantity:
                    self.cart_repo.delete_item(session, item)
                    self.cart_repo.delete_cart(session, cart)
                    logger.info(f"Product completely removed, cart ID: {cart.id} deleted")
                else:
                    item.quantity -= quantity
                    self.cart_repo.update_item(session, item)
                    logger.info(
                        f"Reduced quantity of product ID: {product_id} in cart ID: {cart.id} "
                        f"to {item.quantity}"
                    )
                return

            logger.warning(
                f"Product with ID: {product_id} not found in any cart for customer ID: {customer_id}"
            )
            raise ResourceNotFoundError("Product not found in any cart for the customer.")

    def delete_cart(self, session: Session, cart_id: int) -> None:
        """Delete a cart and all of its lines."""
        logger.info(f"Deleting shopping cart with ID: {cart_id}")

        with transaction(session):
            cart = self.cart_repo.get_cart(session, cart_id)
            if not cart:
                raise ResourceNotFoundError(f"Cart not found with ID: {cart_id}")

            self.cart_repo.delete_cart(session, cart)

        logger.info(f"Cart {cart_id} deleted successfully.")
