"""
================================================================================
Inventory Page Object
================================================================================

Product listing shown after login.

Per-product add/remove buttons are addressed through derived ``data-test``
ids (see ``framework.selectors.to_data_test_id``), so callers may pass either
the display name ("Sauce Labs Backpack") or the id ("sauce-labs-backpack").

================================================================================
"""

from __future__ import annotations

from typing import List

import allure

from testsuites.ui_testing.framework.element import Element
from testsuites.ui_testing.framework.maybe import Maybe
from testsuites.ui_testing.framework.page_base import PageBase
from testsuites.ui_testing.framework.selectors import (
    add_to_cart_button,
    data_test,
    remove_button,
)


class SortOption:
    """Values of the product sort <select>."""
    NAME_ASC = "az"
    NAME_DESC = "za"
    PRICE_ASC = "lohi"
    PRICE_DESC = "hilo"


class InventoryPage(PageBase):
    """Page Object for the product inventory."""

    URL_PATH = "/inventory.html"
    PAGE_TITLE = "Products"

    ELEMENTS = {
        "cart_link": data_test("shopping-cart-link"),
        "cart_badge": ".shopping_cart_badge",
        "products_title": ".title",
        "inventory_items": ".inventory_item",
        "item_names": ".inventory_item_name",
        "item_prices": ".inventory_item_price",
        "sort_select": data_test("product-sort-container"),
    }

    # ============================================================
    # Page Actions
    # ============================================================

    @allure.step("Add to cart: {item_name}")
    async def add_item_to_cart(self, item_name: str) -> None:
        await self.click(Element(add_to_cart_button(item_name), name=f"add {item_name}"))

    @allure.step("Remove from cart: {item_name}")
    async def remove_item_from_cart(self, item_name: str) -> None:
        await self.click(Element(remove_button(item_name), name=f"remove {item_name}"))

    @allure.step("Open cart")
    async def go_to_cart(self) -> None:
        await self.click("cart_link")

    @allure.step("Sort products: {option}")
    async def sort_products(self, option: str) -> None:
        """
        Change product ordering.

        Args:
            option: One of the SortOption values
        """
        await self.select("sort_select", option)

    # ============================================================
    # Queries
    # ============================================================

    async def get_cart_item_count(self) -> Maybe[str]:
        """
        Cart badge text.

        The badge is not rendered while the cart is empty, in which case
        ABSENT is returned (not "0").
        """
        return await self.get_optional_text("cart_badge")

    async def get_product_names(self) -> List[str]:
        return await self.all_texts("item_names")

    async def get_product_prices(self) -> List[str]:
        return await self.all_texts("item_prices")

    async def get_product_price(self, item_name: str) -> str:
        """Price label of the inventory card containing ``item_name``."""
        item = await self.resolve_one("inventory_items", has_text=item_name)
        return await item.locator(".inventory_item_price").text_content() or ""

    async def is_item_in_cart(self, item_name: str) -> bool:
        """True when the item's Remove button is visible."""
        return await self.is_visible(Element(remove_button(item_name), name=f"remove {item_name}"))

    async def get_title(self) -> str:
        return await self.get_text("products_title")
