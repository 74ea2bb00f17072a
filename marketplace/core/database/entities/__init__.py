"""
Database entity models.

This package contains all database entity models, one module per table:

- users: Marketplace accounts and their role
- products: Product listings and their owner reference
- categories: Admin-managed category vocabulary
- product_categories: Product/category association rows
"""

from . import categories, product_categories, products, users
from .categories import Category
from .product_categories import ProductCategory
from .products import Product
from .users import User

__all__ = [
    "Category",
    "Product",
    "ProductCategory",
    "User",
    "categories",
    "product_categories",
    "products",
    "users",
]
