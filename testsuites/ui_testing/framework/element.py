"""
================================================================================
Element Descriptors
================================================================================

Immutable selector descriptors for Page Objects.

An ``Element`` is *not* a live handle. It only records how to find an
element (selector, optional text filter, optional first/last/nth pick,
optional parent) and is turned into a Playwright ``Locator`` each time a
page object queries or acts on it. Nothing is cached between calls, so a
descriptor stays valid across navigations.

Usage:
    >>> rows = Element(".cart_item", name="cart_items")
    >>> backpack = rows.filter(has_text="Sauce Labs Backpack")
    >>> quantity = backpack.child(".cart_quantity", name="quantity")
    >>> await quantity.resolve(page).text_content()

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Union

from playwright.async_api import Locator, Page


class ElementNotFoundError(Exception):
    """Raised when an element is not defined or a filtered collection has no match."""
    pass


@dataclass(frozen=True)
class Element:
    """
    Selector descriptor resolved against the live page on demand.

    Attributes:
        selector: CSS / attribute selector
        name: Logical element name used in logs and Allure steps
        has_text: Only keep matches containing this text
        pick: ``"first"``, ``"last"`` or an index; ``None`` keeps all matches
        parent: Scope the selector to matches of another element
    """
    selector: str
    name: str = "custom_element"
    has_text: Optional[str] = None
    pick: Optional[Union[str, int]] = None
    parent: Optional["Element"] = None

    def resolve(self, page: Page) -> Locator:
        """
        Build a fresh Playwright locator for this descriptor.

        No I/O happens here; Playwright locators are lazy as well.
        """
        if self.parent is not None:
            locator = self.parent.resolve(page).locator(self.selector)
        else:
            locator = page.locator(self.selector)

        if self.has_text is not None:
            locator = locator.filter(has_text=self.has_text)

        if self.pick == "first":
            locator = locator.first
        elif self.pick == "last":
            locator = locator.last
        elif isinstance(self.pick, int):
            locator = locator.nth(self.pick)

        return locator

    def filter(self, has_text: str) -> "Element":
        return replace(self, has_text=has_text, name=f"{self.name}[{has_text}]")

    def first(self) -> "Element":
        return replace(self, pick="first")

    def last(self) -> "Element":
        return replace(self, pick="last")

    def nth(self, index: int) -> "Element":
        return replace(self, pick=index)

    def child(self, selector: str, name: Optional[str] = None) -> "Element":
        """Descriptor for ``selector`` scoped inside this element."""
        return Element(
            selector=selector,
            name=name or f"{self.name} > {selector}",
            parent=self,
        )

    def describe(self) -> str:
        """Readable form for logs, e.g. ``.cart_item:has-text('Backpack') >> .cart_quantity``."""
        text = self.selector
        if self.has_text is not None:
            text += f":has-text('{self.has_text}')"
        if self.pick is not None:
            text += f" [{self.pick}]"
        if self.parent is not None:
            text = f"{self.parent.describe()} >> {text}"
        return text


__all__ = [
    "Element",
    "ElementNotFoundError",
]
