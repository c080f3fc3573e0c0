"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Swag Labs login screen, served at the application root.

================================================================================
"""

from __future__ import annotations

import allure

from testsuites.ui_testing.framework.maybe import Maybe
from testsuites.ui_testing.framework.page_base import PageBase
from testsuites.ui_testing.framework.selectors import data_test


class LoginPage(PageBase):
    """Login page object (async)."""

    URL_PATH = "/"
    PAGE_TITLE = "Swag Labs"
    HEADER_SELECTOR = ".login_logo"

    ELEMENTS = {
        "username_input": data_test("username"),
        "password_input": data_test("password"),
        "login_button": data_test("login-button"),
        "error_message": data_test("error"),
        "logo": ".login_logo",
    }

    @allure.step("Open login page")
    async def goto(self) -> "LoginPage":
        """Navigate to the login page."""
        await self.navigate()
        return self

    @allure.step("Login (username={username})")
    async def login(self, username: str, password: str) -> None:
        """
        Fill credentials and submit.

        Does not wait for the inventory page; a rejected login leaves the
        browser on this screen with an error banner.
        """
        await self.fill("username_input", username)
        await self.fill("password_input", password)
        await self.click("login_button")

    async def get_error_message(self) -> Maybe[str]:
        """Error banner text, or ABSENT when no error is shown."""
        return await self.get_optional_text("error_message")

    @allure.step("Verify login form is displayed")
    async def is_form_displayed(self) -> bool:
        username_ok = await self.is_visible("username_input")
        password_ok = await self.is_visible("password_input")
        button_ok = await self.is_visible("login_button")
        return username_ok and password_ok and button_ok
