"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - A fixed table of named element descriptors per page
    - Common page interactions (click / fill / select)
    - Text, visibility and count queries, with explicit absence
    - Filtered collection lookup ("the row containing X")
    - Screenshot and debugging utilities

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Union
from urllib.parse import urlparse

import allure
from loguru import logger
from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .config_loader import get_config
from .element import Element, ElementNotFoundError
from .maybe import ABSENT, Maybe, Present


DEFAULT_BASE_URL = "https://www.saucedemo.com"

# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"

Target = Union[str, Element]


class BasePage:
    """
    Base class for all page objects.

    Subclasses declare ``ELEMENTS`` (logical name -> selector). The table is
    bound into immutable ``Element`` descriptors at construction; no browser
    call happens until an operation runs.

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/"
            ELEMENTS = {
                "username_input": data_test("username"),
                "login_button": data_test("login-button"),
            }

            async def login(self, username: str, password: str):
                await self.fill("username_input", username)
                await self.click("login_button")
    """

    # Override in subclasses
    URL_PATH: str = "/"
    PAGE_TITLE: str = ""
    # Element whose text is PAGE_TITLE once the screen has rendered
    HEADER_SELECTOR: str = ".title"
    ELEMENTS: Dict[str, str] = {}

    def __init__(
        self,
        page: Page,
        base_url: str = "",
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            base_url: Base URL for the application (defaults to ui.base_url)
        """
        self.page = page
        if not base_url:
            base_url = get_config("ui.base_url", DEFAULT_BASE_URL)
        self.base_url = base_url.rstrip("/")
        self.optional_timeout: int = get_config("ui.optional_timeout", 2000)
        self.elements: Mapping[str, Element] = MappingProxyType({
            name: Element(selector, name=name)
            for name, selector in self.ELEMENTS.items()
        })

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    async def navigate(self, wait_for: str = "load") -> None:
        """
        Navigate to this page.

        Args:
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle'
        """
        with allure.step(f"Navigate to {self.URL_PATH}"):
            await self.page.goto(self.url, wait_until=wait_for)
            logger.debug(f"Navigated to: {self.url}")

    def current_url(self) -> str:
        return self.page.url

    async def title(self) -> str:
        return await self.page.title()

    def is_current(self) -> bool:
        """True when the browser is on this page's path."""
        return urlparse(self.page.url).path == urlparse(self.url).path

    async def has_expected_header(self) -> bool:
        """
        True when the screen's header reads PAGE_TITLE.

        The document title is "Swag Labs" on every screen, so the rendered
        header is what tells the screens apart.
        """
        header = Element(self.HEADER_SELECTOR, name="page_header")
        text = await self.get_optional_text(header)
        return text.value_or("").strip() == self.PAGE_TITLE

    async def wait_for_url(
        self,
        url_pattern: str,
        timeout: int = 10000,
    ) -> None:
        """
        Wait for URL to match pattern.

        Args:
            url_pattern: URL pattern (supports wildcards)
            timeout: Timeout in milliseconds
        """
        with allure.step(f"Wait for URL: {url_pattern}"):
            await self.page.wait_for_url(url_pattern, timeout=timeout)

    # =========================================================================
    # Element Resolution
    # =========================================================================

    def element(self, name: str) -> Element:
        """
        Look up a declared element descriptor.

        Raises:
            ElementNotFoundError: If the page declares no element by that name
        """
        try:
            return self.elements[name]
        except KeyError:
            raise ElementNotFoundError(
                f"No locator defined for element '{name}' on {type(self).__name__}"
            ) from None

    def _as_element(self, target: Target) -> Element:
        if isinstance(target, Element):
            return target
        return self.element(target)

    def locator(self, target: Target) -> Locator:
        """Fresh Playwright locator for a named element or descriptor."""
        return self._as_element(target).resolve(self.page)

    async def resolve_one(self, target: Target, has_text: str) -> Locator:
        """
        Narrow a repeated collection to the member containing ``has_text``.

        Behaviour:
            - no match within the default timeout -> ElementNotFoundError
            - several matches -> the first one, logged as a warning
            - one match -> that match

        Args:
            target: Collection element (e.g. "cart_items")
            has_text: Text the wanted member contains

        Returns:
            Locator for the single chosen member
        """
        element = self._as_element(target).filter(has_text=has_text)
        matches = element.resolve(self.page)
        try:
            await matches.first.wait_for(state="attached")
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(
                f"No '{self._as_element(target).name}' contains text '{has_text}' "
                f"({element.describe()})"
            ) from e

        count = await matches.count()
        if count > 1:
            logger.warning(
                f"{count} elements match {element.describe()}; using the first one"
            )
        else:
            logger.debug(f"Resolved {element.describe()}")
        return matches.first

    # =========================================================================
    # Element Interactions
    # =========================================================================

    async def click(self, target: Target, **kwargs) -> None:
        """
        Click element.

        Args:
            target: Element name or descriptor
            **kwargs: Additional Playwright click options
        """
        element = self._as_element(target)
        with allure.step(f"Click: {element.name}"):
            await element.resolve(self.page).click(**kwargs)

    async def fill(self, target: Target, value: str, **kwargs) -> None:
        """
        Fill input element.

        Args:
            target: Element name or descriptor
            value: Value to fill
            **kwargs: Additional Playwright fill options
        """
        element = self._as_element(target)
        shown = "*" * len(value) if "password" in element.name.lower() else value
        with allure.step(f"Fill {element.name}: {shown}"):
            await element.resolve(self.page).fill(value, **kwargs)

    async def select(self, target: Target, value: str) -> List[str]:
        """
        Select an option of a <select> element by value.

        Returns:
            Values of the selected options, as reported by Playwright
        """
        element = self._as_element(target)
        with allure.step(f"Select {element.name}: {value}"):
            return await element.resolve(self.page).select_option(value)

    # =========================================================================
    # Queries
    # =========================================================================

    async def get_text(self, target: Target) -> str:
        """
        Get text content of element.

        Returns:
            Text content ("" when the node has none)
        """
        return await self.locator(target).text_content() or ""

    async def get_optional_text(
        self,
        target: Target,
        timeout: Optional[int] = None,
    ) -> Maybe[str]:
        """
        Get text of an element that may legitimately not be rendered.

        Args:
            target: Element name or descriptor
            timeout: How long to wait for the element (ms).
                Defaults to ui.optional_timeout.

        Returns:
            Present(text) or ABSENT
        """
        element = self._as_element(target)
        locator = element.resolve(self.page)
        try:
            await locator.wait_for(
                state="attached",
                timeout=timeout if timeout is not None else self.optional_timeout,
            )
        except PlaywrightTimeoutError:
            logger.debug(f"Element '{element.name}' is absent")
            return ABSENT
        return Present(await locator.text_content() or "")

    async def is_visible(self, target: Target) -> bool:
        """Check if element is visible right now (no waiting)."""
        return await self.locator(target).is_visible()

    async def count(self, target: Target) -> int:
        return await self.locator(target).count()

    async def all_texts(self, target: Target) -> List[str]:
        return await self.locator(target).all_text_contents()

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    async def screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            name: Screenshot name (without extension)
            full_page: Capture full scrollable page
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = SCREENSHOT_DIR / f"{name}_{timestamp}.png"

        await self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            allure.attach.file(
                str(filepath),
                name=name,
                attachment_type=allure.attachment_type.PNG,
            )

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    async def capture_failure(self, test_name: str) -> None:
        """
        Capture debugging information on test failure.

        Saves:
            - Screenshot
            - Current URL
        """
        with allure.step("Capture failure details"):
            await self.screenshot(f"failure_{test_name}", attach_to_allure=True)
            allure.attach(
                self.page.url,
                name="Current URL",
                attachment_type=allure.attachment_type.TEXT,
            )


__all__ = [
    "BasePage",
    "PageBase",
    "DEFAULT_BASE_URL",
]

# Page modules import the PageBase name
PageBase = BasePage
