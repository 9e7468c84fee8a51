# storefront/core/exceptions.py
"""
Error kinds raised by the service layer.

They are HTTPException subclasses, so services raise them exactly like any
other HTTP error and FastAPI renders `{"detail": ...}` with the matching
status code. Callers that only care about the cause can catch the specific
class.
"""
from fastapi import HTTPException, status


class StorefrontError(HTTPException):
    """Base class for domain errors with a fixed HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(status_code=self.status_code, detail=detail)

    @property
    def message(self) -> str:
        return str(self.detail)


class ResourceNotFoundError(StorefrontError):
    """Customer, cart, product or line item id does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class InvalidInputError(StorefrontError):
    """Request is well-formed but violates a business rule."""

    status_code = status.HTTP_400_BAD_REQUEST
