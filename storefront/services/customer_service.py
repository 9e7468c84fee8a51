# storefront/services/customer_service.py
from sqlmodel import Session

from storefront.core.exceptions import InvalidInputError, ResourceNotFoundError
from storefront.core.logging import get_logger
from storefront.database import transaction
from storefront.models.customer import Customer
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.customer_repo import CustomerRepository
from storefront.schemas.customer import CustomerCreate, CustomerUpdate, CustomerWithCartsRead
from storefront.services.cart_service import build_cart_view

logger = get_logger(__name__)


class CustomerService:
    """
    Business logic for Customer.

    Responsibilities:
      - keep emails unique
      - orchestrate repository operations
      - refuse to delete customers that still own carts
      - expose customers together with their carts
    """

    def __init__(self, repo: CustomerRepository, cart_repo: CartRepository):
        self.repo = repo
        self.cart_repo = cart_repo

    def _ensure_email_free(
        self,
        session: Session,
        email: str,
        customer_id: int | None = None,
    ) -> None:
        owner = self.repo.get_by_email(session, email)
        if owner and owner.id != customer_id:
            raise InvalidInputError(f"Email {email} is already registered")

    def _with_carts(self, session: Session, customer: Customer) -> CustomerWithCartsRead:
        carts = [
            build_cart_view(self.cart_repo, session, cart)
            for cart in self.cart_repo.list_for_customer(session, customer.id)
        ]
        return CustomerWithCartsRead.model_validate(customer, update={"shopping_carts": carts})

    def list_customers(self, session: Session) -> list[CustomerWithCartsRead]:
        logger.info("Fetching all customers from the database.")
        customers = self.repo.list_all(session)
        logger.info(f"Successfully fetched {len(customers)} customers.")
        return [self._with_carts(session, customer) for customer in customers]

    def get_customer(self, session: Session, customer_id: int) -> Customer:
        """
        Raises:
            ResourceNotFoundError: if not found.
        """
        customer = self.repo.get_by_id(session, customer_id)
        if not customer:
            logger.warning(f"Customer with ID {customer_id} not found.")
            raise ResourceNotFoundError(f"Customer not found with ID: {customer_id}")
        return customer

    def get_customer_with_carts(
        self,
        session: Session,
        customer_id: int,
    ) -> CustomerWithCartsRead:
        """The customer with all of their shopping carts and contents."""
        return self._with_carts(session, self.get_customer(session, customer_id))

    def create_customer(self, session: Session, payload: CustomerCreate) -> Customer:
        logger.info(f"Saving customer to the database: {payload.email}")

        with transaction(session):
            self._ensure_email_free(session, payload.email)
            customer = self.repo.create(session, Customer(**payload.model_dump()))

        session.refresh(customer)
        logger.info(f"Successfully saved customer with ID: {customer.id}")
        return customer

    def update_customer(
        self,
        session: Session,
        customer_id: int,
        payload: CustomerUpdate,
    ) -> Customer:
        """Full replacement of the customer's fields."""
        logger.info(f"Updating customer with ID: {customer_id}")

        with transaction(session):
            customer = self.get_customer(session, customer_id)
            self._ensure_email_free(session, payload.email, customer_id)
            customer.sqlmodel_update(payload.model_dump())
            self.repo.update(session, customer)

        session.refresh(customer)
        logger.info(f"Successfully updated customer with ID: {customer_id}")
        return customer

    def delete_customer(self, session: Session, customer_id: int) -> None:
        """
        Delete a customer.

        Carts are not removed together with their owner, so a customer that
        still owns carts cannot be deleted.
        """
        logger.info(f"Deleting customer with ID: {customer_id}")

        with transaction(session):
            customer = self.get_customer(session, customer_id)
            if self.cart_repo.list_for_customer(session, customer_id):
                raise InvalidInputError(
                    f"Customer with ID {customer_id} still owns shopping carts"
                )
            self.repo.delete(session, customer)

        logger.info(f"Successfully deleted customer with ID: {customer_id}")
