"""
I/O models for API requests and responses.

This package contains Pydantic-based I/O schemas that define the contract
between API endpoints and clients. These models are separate from database
entities to allow independent evolution of API contracts.

Modules:
- base: camelCase response base and the created-id envelope
- users: Registration, login, role and user view models
- products: Product create/update body and read models
- categories: Category models
"""

from .base import CamelModel, CreatedId
from .categories import CategoryCreate, CategoryReturn
from .products import ProductDetails, ProductReturn, ProductSummary
from .users import (
    MinUserReturnDto,
    RoleUpdate,
    TokenReturn,
    UserLogin,
    UsernameExists,
    UserRegister,
    UserReturn,
)

__all__ = [
    "CamelModel",
    "CategoryCreate",
    "CategoryReturn",
    "CreatedId",
    "MinUserReturnDto",
    "ProductDetails",
    "ProductReturn",
    "ProductSummary",
    "RoleUpdate",
    "TokenReturn",
    "UserLogin",
    "UserRegister",
    "UserReturn",
    "UsernameExists",
]
