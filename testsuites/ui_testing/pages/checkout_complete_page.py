"""
================================================================================
Checkout Complete Page Object
================================================================================
"""

from __future__ import annotations

import allure

from testsuites.ui_testing.framework.page_base import PageBase
from testsuites.ui_testing.framework.selectors import data_test


class CheckoutCompletePage(PageBase):
    """Order confirmation screen."""

    URL_PATH = "/checkout-complete.html"
    PAGE_TITLE = "Checkout: Complete!"

    ELEMENTS = {
        "complete_header": data_test("complete-header"),
        "complete_text": data_test("complete-text"),
        "back_home_button": data_test("back-to-products"),
        "pony_express_image": ".pony_express",
    }

    async def get_success_message(self) -> str:
        return await self.get_text("complete_header")

    async def get_complete_text(self) -> str:
        return await self.get_text("complete_text")

    @allure.step("Back to products")
    async def go_back_home(self) -> None:
        await self.click("back_home_button")

    def is_on_complete_page(self) -> bool:
        return "checkout-complete.html" in self.page.url

    async def is_pony_express_image_visible(self) -> bool:
        return await self.is_visible("pony_express_image")
