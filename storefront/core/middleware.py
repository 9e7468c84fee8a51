# storefront/core/middleware.py
"""
Request/response logging.

Logs every incoming request (method, path, query string) and the status of
the response that went back. Kept outside the routers and services so the
cart logic never has to know about it.
"""
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from storefront.core.logging import get_logger

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        logger.info(
            f"Incoming request: {request.method} {request.url.path} "
            f"params={request.url.query or '-'}"
        )

        response = await call_next(request)

        logger.info(f"Response status {response.status_code} for {request.url.path}")
        return response
