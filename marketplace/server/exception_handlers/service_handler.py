"""
Service error handler.

Maps ``ServiceError`` subclasses to their HTTP status. Client-actionable
errors carry ``{"error": message}``; store and unknown failures return a
bare 500 with no body.
"""

from fastapi import Request
from fastapi.responses import JSONResponse, Response

from marketplace.core.logging_config import get_logger
from marketplace.server.services.errors import ServiceError

logger = get_logger(__name__)


async def service_error_handler(request: Request, exc: ServiceError) -> Response:
    """
    Render a service error.

    Args:
        request: The HTTP request that caused the exception
        exc: The service error that was raised

    Returns:
        JSON error body for exposed errors, empty response otherwise
    """
    if not exc.expose:
        logger.error(
            f"{type(exc).__name__} in {request.method} {request.url.path}: {exc.message}",
            exc_info=exc.__cause__ is not None,
        )
        return Response(status_code=exc.status_code)

    logger.debug(f"{type(exc).__name__} in {request.method} {request.url.path}: {exc.message}")
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message}, headers=headers)
