# storefront/routers/customers.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from storefront.database import get_session
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.customer_repo import CustomerRepository
from storefront.schemas.customer import (
    CustomerCreate,
    CustomerRead,
    CustomerUpdate,
    CustomerWithCartsRead,
)
from storefront.services.customer_service import CustomerService

router = APIRouter(prefix="/api/customers", tags=["Customers"])

repo = CustomerRepository()
service = CustomerService(repo, CartRepository())


@router.get("", response_model=list[CustomerWithCartsRead])
def list_customers(session: Session = Depends(get_session)):
    """
    List all customers with their shopping carts.
    """
    return service.list_customers(session)


@router.get("/{customer_id}", response_model=CustomerWithCartsRead)
def get_customer(
    customer_id: int,
    session: Session = Depends(get_session),
):
    """
    A customer with all of their shopping carts and the products in them.
    """
    return service.get_customer_with_carts(session, customer_id)


@router.post(
    "",
    response_model=CustomerRead,
    status_code=status.HTTP_201_CREATED,
)
def create_customer(
    payload: CustomerCreate,
    session: Session = Depends(get_session),
):
    """
    Register a new customer.

    - 400 when the email is already registered.
    """
    return service.create_customer(session, payload)


@router.put("/{customer_id}", response_model=CustomerRead)
def update_customer(
    customer_id: int,
    payload: CustomerUpdate,
    session: Session = Depends(get_session),
):
    """
    Replace an existing customer's details.
    """
    return service.update_customer(session, customer_id, payload)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(
    customer_id: int,
    session: Session = Depends(get_session),
):
    """
    Delete a customer.

    - 400 while the customer still owns shopping carts.
    """
    service.delete_customer(session, customer_id)
    return None
