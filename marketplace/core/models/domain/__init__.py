"""Domain enums and constants shared by entities, services and the API layer."""

from .enums import ADMIN_USERNAME, Role

__all__ = ["ADMIN_USERNAME", "Role"]
