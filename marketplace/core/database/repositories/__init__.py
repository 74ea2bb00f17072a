"""
Database repository layer using SQLModel.

This package contains all repository classes. Each module provides type-safe
data access operations for its corresponding SQLModel entity models.

Modules:
- base: AsyncBaseRepository interface and QueryBuilder utilities
- users: User account repository operations
- products: Product listing repository operations
- categories: Category and product/category link operations
- bundle: Per-session repository bundle for services
"""

from .bundle import SqlRepoBundle, build_sql_repos_from_session
from .categories import CategoryRepository
from .products import ProductRepository
from .users import UserRepository

__all__ = [
    "CategoryRepository",
    "ProductRepository",
    "SqlRepoBundle",
    "UserRepository",
    "build_sql_repos_from_session",
]
