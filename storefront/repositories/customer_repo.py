# storefront/repositories/customer_repo.py
from sqlmodel import Session, select

from storefront.models.customer import Customer


class CustomerRepository:
    """
    Data access layer for Customer.

    Responsibilities:
      - Pure DB operations (CRUD + queries)
      - No FastAPI, no HTTP, no business logic
      - Flush only; commit happens in the service transaction
    """

    # ----- Basic CRUD -----

    def get_by_id(self, session: Session, customer_id: int) -> Customer | None:
        """Return a Customer by primary key, or None if not found."""
        return session.get(Customer, customer_id)

    def get_by_email(self, session: Session, email: str) -> Customer | None:
        """Return a Customer by unique email, or None if not found."""
        stmt = select(Customer).where(Customer.email == email)
        return session.exec(stmt).first()

    def list_all(self, session: Session) -> list[Customer]:
        stmt = select(Customer).order_by(Customer.id)
        return session.exec(stmt).all()

    def create(self, session: Session, customer: Customer) -> Customer:
        """Insert a new Customer and return the persisted row."""
        session.add(customer)
        session.flush()
        session.refresh(customer)
        return customer

    def update(self, session: Session, customer: Customer) -> Customer:
        """Persist changes to an existing Customer."""
        session.add(customer)
        session.flush()
        session.refresh(customer)
        return customer

    def delete(self, session: Session, customer: Customer) -> None:
        session.delete(customer)
        session.flush()
