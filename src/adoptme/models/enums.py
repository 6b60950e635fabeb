"""
Enum definitions for the AdoptMe Backend
"""

from enum import Enum


class UserRole(str, Enum):
    """
    Roles a user document may carry.
    New users default to USER.
    """
    USER = "user"
    ADMIN = "admin"
