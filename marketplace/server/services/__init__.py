"""
Service layer.

Services hold the business rules (ownership checks, password hashing, role
assignment) and translate database failures into the closed error set in
``errors``.
"""

from .category_service import CategoryService
from .product_service import ProductService
from .user_service import AuthUser, UserService

__all__ = ["AuthUser", "CategoryService", "ProductService", "UserService"]
