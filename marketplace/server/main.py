"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS),
registers exception handlers and includes all API routers. It serves as the
root of the web server.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from marketplace.core.database import async_session_maker, engine
from marketplace.core.database.migrations import run_migrations
from marketplace.core.logging_config import get_logger, setup_logging

from .api.v1 import auth, categories, health, products, users
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .services.seeding import seed_admin

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Startup applies pending migrations and seeds the admin account. Any
    failure here is fatal: the exception propagates and the server does not
    start.
    """
    logger.info("Starting up Marketplace Server...")
    try:
        if settings.database.run_migrations_on_startup:
            await run_migrations(engine)
        await seed_admin(async_session_maker, settings.admin)
    except Exception as e:
        logger.critical(f"Startup failed: {e}", exc_info=True)
        raise

    yield

    logger.info("Shutting down Marketplace Server...")
    await engine.dispose()


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    Marketplace Backend API

    User registration and authentication, role management, product listing
    CRUD and product categories.
    """,
    version=constant.API_VERSION,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.origins,
    allow_credentials=settings.cors.allow_credentials,
    allow_methods=settings.cors.allow_methods,
    allow_headers=settings.cors.allow_headers,
)

setup_exception_handlers(app)

app.include_router(health.router, tags=["health"])
app.include_router(auth.router, prefix=f"{constant.API_V1_STR}/auth", tags=["auth"])
app.include_router(users.router, prefix=f"{constant.API_V1_STR}/users", tags=["users"])
app.include_router(products.router, prefix=f"{constant.API_V1_STR}/products", tags=["products"])
app.include_router(categories.router, prefix=f"{constant.API_V1_STR}/categories", tags=["categories"])


def run() -> None:
    """Serve the application with uvicorn using the configured host and port."""
    import uvicorn

    uvicorn.run(
        "marketplace.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )
