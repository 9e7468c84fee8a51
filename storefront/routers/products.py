# storefront/routers/products.py
from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session

from storefront.database import get_session
from storefront.models.product import ProductCategory
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.product import ProductCreate, ProductRead, ProductUpdate
from storefront.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])

repo = ProductRepository()
service = ProductService(repo)


# -------- Queries --------


@router.get("", response_model=list[ProductRead])
def list_products(session: Session = Depends(get_session)):
    """
    List every product in the catalog.
    """
    return service.list_products(session)


@router.get("/search", response_model=list[ProductRead])
def search_products(
    name: str = Query(min_length=1),
    session: Session = Depends(get_session),
):
    """
    Case-insensitive search by (part of) the product name.

    - 404 when nothing matches.
    """
    return service.search_products(session, name)


@router.get(
    "/suggested",
    response_model=list[ProductRead],
    responses={status.HTTP_204_NO_CONTENT: {"description": "No suggestions"}},
)
def suggested_products(
    excluded_product_ids: list[int] = Query(default=[], alias="excludedProductIds"),
    categories: list[ProductCategory] = Query(alias="categories"),
    session: Session = Depends(get_session),
):
    """
    Suggest products from the given categories, skipping the excluded ids
    (e.g. products already in the cart). Best rated first.

    - 204 when there is nothing to suggest.
    """
    products = service.suggest_products(session, excluded_product_ids, categories)
    if not products:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return products


@router.get("/{product_id}", response_model=ProductRead)
def get_product(
    product_id: int,
    session: Session = Depends(get_session),
):
    return service.get_product(session, product_id)


# -------- Commands --------


@router.post(
    "",
    response_model=list[ProductRead],
    status_code=status.HTTP_201_CREATED,
)
def create_products(
    payload: list[ProductCreate],
    session: Session = Depends(get_session),
):
    """
    Create one or more products in a single request.
    """
    return service.create_products(session, payload)


@router.put("/{product_id}", response_model=ProductRead)
def update_product(
    product_id: int,
    payload: ProductUpdate,
    session: Session = Depends(get_session),
):
    """
    Replace an existing product.
    """
    return service.update_product(session, product_id, payload)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int,
    session: Session = Depends(get_session),
):
    """
    Delete a product.

    - 400 while the product is still in a shopping cart.
    """
    service.delete_product(session, product_id)
    return None
