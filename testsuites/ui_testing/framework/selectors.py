"""
================================================================================
Selector Helpers
================================================================================

Pure functions that build selector text. No page access happens here, so
everything in this module is testable without a browser.

Swag Labs tags its controls with ``data-test`` attributes. Per-product
buttons derive their id from the product name, e.g.::

    "Sauce Labs Backpack" -> add-to-cart-sauce-labs-backpack

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re

_WHITESPACE_RUN = re.compile(r"\s+")
_PARENTHESES = re.compile(r"[()]")


def to_data_test_id(name: str) -> str:
    """
    Derive the ``data-test`` suffix used for a product name.

    Lowercases, collapses every whitespace run into a single hyphen and
    drops ``(`` / ``)``. Other punctuation is passed through untouched.

    Args:
        name: Human-readable product name (already-normalized ids pass
            through unchanged)

    Returns:
        Normalized identifier

    Examples:
        >>> to_data_test_id("Sauce Labs Backpack")
        'sauce-labs-backpack'
        >>> to_data_test_id("Item (Special)")
        'item-special'
    """
    hyphenated = _WHITESPACE_RUN.sub("-", name.lower())
    return _PARENTHESES.sub("", hyphenated)


def data_test(value: str) -> str:
    """Attribute selector for a ``data-test`` value."""
    return f'[data-test="{value}"]'


def add_to_cart_button(item_name: str) -> str:
    return data_test(f"add-to-cart-{to_data_test_id(item_name)}")


def remove_button(item_name: str) -> str:
    return data_test(f"remove-{to_data_test_id(item_name)}")


__all__ = [
    "add_to_cart_button",
    "data_test",
    "remove_button",
    "to_data_test_id",
]
