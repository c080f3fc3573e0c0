"""
================================================================================
Checkout Page Object
================================================================================

Covers both checkout steps:
    - step one: customer information form (/checkout-step-one.html)
    - step two: order overview with price summary (/checkout-step-two.html)

================================================================================
"""

from __future__ import annotations

import re
from decimal import Decimal

import allure

from autotest_tools.data_generator.customer_data_generator import CustomerInfo
from testsuites.ui_testing.framework.maybe import Maybe
from testsuites.ui_testing.framework.page_base import PageBase
from testsuites.ui_testing.framework.selectors import data_test


_AMOUNT = re.compile(r"\$\s*([0-9][0-9,]*(?:\.[0-9]+)?)")


def parse_amount(label: str) -> Decimal:
    """
    Extract the dollar amount from a summary label.

    >>> parse_amount("Item total: $29.99")
    Decimal('29.99')

    Raises:
        ValueError: If the label holds no dollar amount
    """
    match = _AMOUNT.search(label)
    if match is None:
        raise ValueError(f"No dollar amount in label: {label!r}")
    return Decimal(match.group(1).replace(",", ""))


class CheckoutPage(PageBase):
    """Page Object for the two checkout steps."""

    URL_PATH = "/checkout-step-one.html"
    OVERVIEW_PATH = "/checkout-step-two.html"
    PAGE_TITLE = "Checkout: Your Information"

    ELEMENTS = {
        "first_name_input": data_test("firstName"),
        "last_name_input": data_test("lastName"),
        "postal_code_input": data_test("postalCode"),
        "continue_button": data_test("continue"),
        "cancel_button": data_test("cancel"),
        "finish_button": data_test("finish"),
        "cart_items": ".cart_item",
        "error_message": data_test("error"),
        "item_quantities": ".cart_quantity",
        "item_descriptions": ".inventory_item_desc",
        "item_names": ".inventory_item_name",
        "item_prices": ".inventory_item_price",
        "subtotal_label": ".summary_subtotal_label",
        "tax_label": ".summary_tax_label",
        "total_label": ".summary_total_label",
        "value_labels": ".summary_value_label",
    }

    # ============================================================
    # Step One: Customer Information
    # ============================================================

    @allure.step("Fill personal info: {first_name} {last_name}, {postal_code}")
    async def fill_personal_info(self, first_name: str, last_name: str, postal_code: str) -> None:
        await self.fill("first_name_input", first_name)
        await self.fill("last_name_input", last_name)
        await self.fill("postal_code_input", postal_code)

    async def fill_customer(self, customer: CustomerInfo) -> None:
        await self.fill_personal_info(customer.first_name, customer.last_name, customer.postal_code)

    # `continue` is a keyword
    @allure.step("Continue to overview")
    async def continue_(self) -> None:
        await self.click("continue_button")

    @allure.step("Cancel checkout")
    async def cancel(self) -> None:
        await self.click("cancel_button")

    async def get_error_message(self) -> Maybe[str]:
        """Form validation banner, or ABSENT when the form was accepted."""
        return await self.get_optional_text("error_message")

    # ============================================================
    # Step Two: Overview
    # ============================================================

    @allure.step("Finish order")
    async def finish(self) -> None:
        await self.click("finish_button")

    async def get_order_item_quantity(self) -> str:
        return await self.get_text(self.element("item_quantities").first())

    async def get_order_item_description(self) -> str:
        return await self.get_text(self.element("item_descriptions").first())

    async def get_order_item_name(self) -> str:
        return await self.get_text(self.element("item_names").first())

    async def get_order_item_price(self) -> str:
        return await self.get_text(self.element("item_prices").first())

    async def get_subtotal(self) -> str:
        return await self.get_text("subtotal_label")

    async def get_tax(self) -> str:
        return await self.get_text("tax_label")

    async def get_total(self) -> str:
        return await self.get_text("total_label")

    async def get_payment_info(self) -> str:
        return await self.get_text(self.element("value_labels").first())

    async def get_shipping_info(self) -> str:
        return await self.get_text(self.element("value_labels").last())

    def is_on_overview(self) -> bool:
        return self.page.url.split("?")[0].endswith(self.OVERVIEW_PATH)
