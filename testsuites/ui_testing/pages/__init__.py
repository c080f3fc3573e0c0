"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the Swag Labs screens.

Each page class encapsulates:
    - Element selectors (fixed per page)
    - Page-specific actions
    - Text / state queries

Author: Automation Team
License: MIT
================================================================================
"""

from .login_page import LoginPage
from .inventory_page import InventoryPage, SortOption
from .cart_page import CartPage
from .checkout_page import CheckoutPage, parse_amount
from .checkout_complete_page import CheckoutCompletePage

__all__ = [
    "LoginPage",
    "InventoryPage",
    "SortOption",
    "CartPage",
    "CheckoutPage",
    "CheckoutCompletePage",
    "parse_amount",
]
