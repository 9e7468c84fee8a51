# storefront/services/product_service.py
from sqlmodel import Session

from storefront.core.exceptions import InvalidInputError, ResourceNotFoundError
from storefront.core.logging import get_logger
from storefront.database import transaction
from storefront.models.product import Product, ProductCategory
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.product import ProductCreate, ProductUpdate

logger = get_logger(__name__)


class ProductService:
    """
    Business logic for the product catalog.

    Responsibilities:
      - CRUD with full-replacement updates
      - name search and "suggested products" queries
      - refuse to delete products still sitting in a cart
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    # ----- Queries -----

    def list_products(self, session: Session) -> list[Product]:
        logger.info("Fetching all products")
        products = self.repo.list_all(session)
        logger.info(f"Successfully fetched {len(products)} products.")
        return products

    def get_product(self, session: Session, product_id: int) -> Product:
        product = self.repo.get_by_id(session, product_id)
        if not product:
            logger.warning(f"Product with ID {product_id} not found")
            raise ResourceNotFoundError(f"Product not found with ID: {product_id}")
        return product

    def search_products(self, session: Session, name: str) -> list[Product]:
        """
        Case-insensitive substring search on product names.

        Raises:
            ResourceNotFoundError: nothing matched.
        """
        logger.info(f"Searching for products with name containing: {name}")
        products = self.repo.search_by_name(session, name)
        if not products:
            logger.warning(f"No products found with name: {name}")
            raise ResourceNotFoundError(f"No products found with name: {name}")

        logger.info(f"Found {len(products)} product(s) matching the name '{name}'.")
        return products

    def suggest_products(
        self,
        session: Session,
        excluded_ids: list[int],
        categories: list[ProductCategory],
    ) -> list[Product]:
        """
        Products outside `excluded_ids` (e.g. already in the cart) within the
        given categories, ordered by rating (best first).
        """
        logger.info(
            f"Fetching suggested products with exclusions: {excluded_ids} "
            f"and categories: {[c.value for c in categories]}"
        )
        return self.repo.find_suggested(session, excluded_ids, categories)

    # ----- Commands -----

    def create_products(
        self,
        session: Session,
        payloads: list[ProductCreate],
    ) -> list[Product]:
        """Insert a batch of products; either all of them are saved or none."""
        logger.info(f"Saving {len(payloads)} new product(s)")

        with transaction(session):
            products = self.repo.create_many(
                session,
                [Product(**payload.model_dump()) for payload in payloads],
            )
            for product in products:
                logger.info(f"Product saved successfully with ID: {product.id}")

        for product in products:
            session.refresh(product)
        return products

    def update_product(
        self,
        session: Session,
        product_id: int,
        payload: ProductUpdate,
    ) -> Product:
        """Replace every mutable field of an existing product."""
        logger.info(f"Updating product with ID: {product_id}")

        with transaction(session):
            product = self.get_product(session, product_id)
            product.sqlmodel_update(payload.model_dump())
            self.repo.update(session, product)

        session.refresh(product)
        logger.info(f"Product with ID {product_id} updated successfully.")
        return product

    def delete_product(self, session: Session, product_id: int) -> None:
        logger.info(f"Deleting product with ID: {product_id}")

        with transaction(session):
            product = self.get_product(session, product_id)
            if self.repo.is_referenced(session, product_id):
                logger.warning(f"Product with ID {product_id} is still in a shopping cart")
                raise InvalidInputError(
                    f"Product with ID {product_id} is still in a shopping cart"
                )
            self.repo.delete(session, product)

        logger.info(f"Product with ID {product_id} deleted successfully.")
