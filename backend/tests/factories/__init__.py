# backend/tests/factories/__init__.py

"""
Shared test factories for the POS backend.

These factories provide reusable test data generation for all modules.
"""

from .base import BaseFactory, bind_session
from .table import TableFactory
from .menu import MenuItemFactory
from .staff import StaffMemberFactory

__all__ = [
    # Base
    'BaseFactory',
    'bind_session',

    # Floor
    'TableFactory',

    # Menu
    'MenuItemFactory',

    # Staff
    'StaffMemberFactory',
]
