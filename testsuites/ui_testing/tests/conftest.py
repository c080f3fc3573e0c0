"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for UI tests, providing fixtures for browser
management, page objects, and test setup/teardown.

Key Features:
- Browser and page lifecycle management (one isolated browser per scenario)
- Page Object fixtures for all Swag Labs screens
- Screenshot + URL capture on failure
- Logged-in session fixture

================================================================================
"""

from typing import AsyncGenerator

import pytest
from playwright.async_api import Page

from autotest_tools.data_generator import generate_customer
from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.config_loader import ConfigLoader
from testsuites.ui_testing.framework.page_base import BasePage
from testsuites.ui_testing.pages import (
    CartPage,
    CheckoutCompletePage,
    CheckoutPage,
    InventoryPage,
    LoginPage,
)


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture
async def browser_manager() -> AsyncGenerator[BrowserManager, None]:
    """
    Browser manager fixture.

    Each scenario owns its browser, so parallel workers (pytest-xdist)
    never share a session.
    """
    async with BrowserManager() as manager:
        yield manager


@pytest.fixture
async def page(request, browser_manager: BrowserManager) -> AsyncGenerator[Page, None]:
    """
    Page fixture in a fresh browser context.

    On failure the screenshot and current URL are attached to Allure.
    """
    page = await browser_manager.new_page()
    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        await BasePage(page).capture_failure(request.node.name)


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def login_page(page: Page) -> LoginPage:
    return LoginPage(page)


@pytest.fixture
def inventory_page(page: Page) -> InventoryPage:
    return InventoryPage(page)


@pytest.fixture
def cart_page(page: Page) -> CartPage:
    return CartPage(page)


@pytest.fixture
def checkout_page(page: Page) -> CheckoutPage:
    return CheckoutPage(page)


@pytest.fixture
def checkout_complete_page(page: Page) -> CheckoutCompletePage:
    return CheckoutCompletePage(page)


# ================================================================================
# Authentication Fixtures
# ================================================================================

@pytest.fixture
async def logged_in_inventory(
    login_page: LoginPage,
    inventory_page: InventoryPage,
    test_data,
) -> InventoryPage:
    """
    Provides InventoryPage after logging in as the standard user.
    """
    user = test_data["standard_user"]
    await login_page.goto()
    await login_page.login(user["username"], user["password"])
    await inventory_page.wait_for_url("**/inventory.html")
    return inventory_page


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Store each phase's report on the item.

    The ``page`` fixture reads ``rep_call`` during teardown to decide whether
    to capture failure details.
    """
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


# ================================================================================
# Utility Fixtures
# ================================================================================

@pytest.fixture
def test_data():
    """
    Provides common test data for UI tests.
    """
    users = ConfigLoader().get_section("users")
    return {
        "standard_user": users.get("standard", {"username": "standard_user", "password": "secret_sauce"}),
        "locked_out_user": users.get("locked_out", {"username": "locked_out_user", "password": "secret_sauce"}),
        "invalid_user": users.get("invalid", {"username": "invalid_user", "password": "wrong_password"}),
        "customer": generate_customer(),
    }
