# storefront/repositories/product_repo.py
from typing import Iterable

from sqlalchemy import func
from sqlmodel import Session, col, select

from storefront.models.cart import CartItem
from storefront.models.product import Product, ProductCategory


class ProductRepository:
    """
    Data access layer for Product.

    - Pure DB operations (CRUD + queries).
    - No FastAPI, no business logic.
    - Never commits: the service owns the transaction.
    """

    def get_by_id(self, session: Session, product_id: int) -> Product | None:
        return session.get(Product, product_id)

    def list_all(self, session: Session) -> list[Product]:
        stmt = select(Product).order_by(Product.id)
        return session.exec(stmt).all()

    def search_by_name(self, session: Session, name: str) -> list[Product]:
        """
        Case-insensitive substring match on the product name.

        `%` and `_` in the term are matched literally.
        """
        stmt = (
            select(Product)
            .where(func.lower(Product.name).contains(name.lower(), autoescape=True))
            .order_by(Product.id)
        )
        return session.exec(stmt).all()

    def find_suggested(
        self,
        session: Session,
        excluded_ids: Iterable[int],
        categories: Iterable[ProductCategory],
    ) -> list[Product]:
        """
        Products not in `excluded_ids` whose category is in `categories`,
        best rated first. Unrated products go last.
        """
        stmt = (
            select(Product)
            .where(col(Product.id).notin_(list(excluded_ids)))
            .where(col(Product.category).in_(list(categories)))
            .order_by(col(Product.rating).desc().nulls_last(), Product.id)
        )
        return session.exec(stmt).all()

    def is_referenced(self, session: Session, product_id: int) -> bool:
        """True when any cart line still points at the product."""
        stmt = select(CartItem.id).where(CartItem.product_id == product_id)
        return session.exec(stmt).first() is not None

    def create(self, session: Session, product: Product) -> Product:
        session.add(product)
        session.flush()
        session.refresh(product)
        return product

    def create_many(self, session: Session, products: list[Product]) -> list[Product]:
        session.add_all(products)
        session.flush()
        for product in products:
            session.refresh(product)
        return products

    def update(self, session: Session, product: Product) -> Product:
        session.add(product)
        session.flush()
        session.refresh(product)
        return product

    def delete(self, session: Session, product: Product) -> None:
        session.delete(product)
        session.flush()
