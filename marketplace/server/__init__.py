"""
Marketplace Server Package.

This package contains the web server implementation for the marketplace backend.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Settings, constants and security helpers.
    exception_handlers: Mapping of service errors to HTTP responses.
    services: Business logic, dependency wiring and startup seeding.
"""
