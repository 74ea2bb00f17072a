"""
Exception handlers for the marketplace server.

This package contains custom exception handlers for different error types
and a setup function to register them with the FastAPI application.
"""

from fastapi import FastAPI

from marketplace.core.logging_config import get_logger
from marketplace.server.services.errors import ServiceError

from .global_handler import global_exception_handler
from .service_handler import service_error_handler

logger = get_logger(__name__)


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    This function should be called during application initialization to set up
    all custom exception handlers.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")


__all__ = ["global_exception_handler", "service_error_handler", "setup_exception_handlers"]
