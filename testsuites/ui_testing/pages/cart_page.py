"""
================================================================================
Cart Page Object
================================================================================

Shopping cart listing. Row-specific queries look up the ``.cart_item`` row
that contains the given product name; pass an unambiguous name.

================================================================================
"""

from __future__ import annotations

from typing import List

import allure

from testsuites.ui_testing.framework.page_base import PageBase
from testsuites.ui_testing.framework.selectors import data_test


class CartPage(PageBase):
    """Page Object for the shopping cart."""

    URL_PATH = "/cart.html"
    PAGE_TITLE = "Your Cart"

    ELEMENTS = {
        "checkout_button": data_test("checkout"),
        "continue_shopping_button": data_test("continue-shopping"),
        "cart_items": ".cart_item",
        "cart_title": ".title",
        "item_names": ".inventory_item_name",
        "item_prices": ".inventory_item_price",
    }

    async def get_item_quantity(self, item_name: str) -> str:
        row = await self.resolve_one("cart_items", has_text=item_name)
        return await row.locator(".cart_quantity").text_content() or ""

    async def get_item_description(self, item_name: str) -> str:
        row = await self.resolve_one("cart_items", has_text=item_name)
        return await row.locator(".inventory_item_desc").text_content() or ""

    async def get_item_name(self) -> str:
        """Name of the first item in the cart."""
        return await self.get_text(self.element("item_names").first())

    async def get_item_price(self) -> str:
        """Price of the first item in the cart."""
        return await self.get_text(self.element("item_prices").first())

    async def get_all_item_names(self) -> List[str]:
        return await self.all_texts("item_names")

    @allure.step("Remove {item_name} from cart")
    async def remove_item(self, item_name: str) -> None:
        row = await self.resolve_one("cart_items", has_text=item_name)
        await row.locator(".btn_secondary").click()

    @allure.step("Proceed to checkout")
    async def checkout(self) -> None:
        await self.click("checkout_button")

    @allure.step("Continue shopping")
    async def continue_shopping(self) -> None:
        await self.click("continue_shopping_button")

    async def get_cart_item_count(self) -> int:
        return await self.count("cart_items")

    async def is_cart_empty(self) -> bool:
        return await self.get_cart_item_count() == 0
