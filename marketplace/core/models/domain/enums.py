"""Domain enums for marketplace models."""

from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """
    Authorization role carried by every user account.

    Only ``admin`` accounts may manage categories and assign roles.
    """

    user = "user"
    admin = "admin"


ADMIN_USERNAME = "admin"
