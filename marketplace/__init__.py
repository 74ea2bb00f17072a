"""Marketplace backend.

An HTTP API for a multi-user marketplace: account registration and login,
role management, product listings and product categories, persisted in a
relational database through SQLModel.

Core subpackages
----------------

- ``marketplace.core``:

  - Logging configuration.
  - SQLModel entities, repositories and the Alembic migration runner.
  - Domain enums and API request/response models.

- ``marketplace.server``:

  - The FastAPI application, its routers and exception handlers.
  - Services holding the business rules (ownership checks, password
    hashing, role assignment) and startup admin seeding.

Request flow
------------

HTTP request → router → service (built per request on its own database
session) → repository → database → response model → JSON.
"""
