"""
In-memory stand-ins for the parts of the Playwright async API the page
objects use. A page is a tree of ``FakeNode``s; a node matches a selector
when that exact selector string is in its ``selectors`` set.

Strictness follows Playwright: single-element operations on zero matches
time out, on several matches raise a strict mode violation.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError


BASE_URL = "https://www.saucedemo.com"


class FakeNode:
    def __init__(
        self,
        selectors: Sequence[str],
        text: str = "",
        children: Sequence["FakeNode"] = (),
        visible: bool = True,
        on_click: Optional[Callable[["FakePage"], None]] = None,
    ):
        self.selectors = set(selectors)
        self.text = text
        self.children = list(children)
        self.visible = visible
        self.on_click = on_click
        self.value = ""

    def descendants(self) -> List["FakeNode"]:
        found = []
        for child in self.children:
            found.append(child)
            found.extend(child.descendants())
        return found

    def text_content(self) -> str:
        return self.text + "".join(child.text_content() for child in self.children)


def node(selector, text: str = "", *children: FakeNode, **kwargs) -> FakeNode:
    """Shorthand: ``node(".cart_item", "", node(".cart_quantity", "1"))``."""
    selectors = [selector] if isinstance(selector, str) else list(selector)
    return FakeNode(selectors, text, children, **kwargs)


class FakeLocator:
    def __init__(self, page: "FakePage", steps: Tuple[tuple, ...]):
        self._page = page
        self._steps = steps

    def _with(self, step: tuple) -> "FakeLocator":
        return FakeLocator(self._page, self._steps + (step,))

    def _query(self) -> List[FakeNode]:
        self._page.queries += 1
        nodes = [self._page.root]
        for kind, arg in self._steps:
            if kind == "css":
                matched = []
                for parent in nodes:
                    for candidate in parent.descendants():
                        if arg in candidate.selectors and candidate not in matched:
                            matched.append(candidate)
                nodes = matched
            elif kind == "has_text":
                nodes = [n for n in nodes if arg in n.text_content()]
            elif kind == "nth":
                if arg == -1:
                    nodes = nodes[-1:]
                else:
                    nodes = nodes[arg:arg + 1]
        return nodes

    def _single(self) -> FakeNode:
        nodes = self._query()
        if not nodes:
            raise PlaywrightTimeoutError(f"Timeout exceeded waiting for {self}")
        if len(nodes) > 1:
            raise PlaywrightError(f"strict mode violation: {self} resolved to {len(nodes)} elements")
        return nodes[0]

    def __repr__(self) -> str:
        return f"FakeLocator({self._steps})"

    # Locator composition
    def locator(self, selector: str) -> "FakeLocator":
        return self._with(("css", selector))

    def filter(self, has_text: Optional[str] = None) -> "FakeLocator":
        return self._with(("has_text", has_text)) if has_text is not None else self

    @property
    def first(self) -> "FakeLocator":
        return self._with(("nth", 0))

    @property
    def last(self) -> "FakeLocator":
        return self._with(("nth", -1))

    def nth(self, index: int) -> "FakeLocator":
        return self._with(("nth", index))

    # Queries
    async def count(self) -> int:
        return len(self._query())

    async def text_content(self, timeout: Optional[float] = None) -> Optional[str]:
        return self._single().text_content()

    async def all_text_contents(self) -> List[str]:
        return [n.text_content() for n in self._query()]

    async def is_visible(self) -> bool:
        nodes = self._query()
        if not nodes:
            return False
        if len(nodes) > 1:
            raise PlaywrightError("strict mode violation")
        return nodes[0].visible

    async def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None:
        self._page.waits.append((repr(self), state, timeout))
        target = self._single()
        if state == "visible" and not target.visible:
            raise PlaywrightTimeoutError(f"Timeout exceeded waiting for {self} to be visible")

    # Actions
    async def click(self, **kwargs) -> None:
        target = self._single()
        if not target.visible:
            raise PlaywrightTimeoutError(f"{self} is not visible")
        self._page.clicks.append(sorted(target.selectors)[0])
        if target.on_click is not None:
            target.on_click(self._page)

    async def fill(self, value: str, **kwargs) -> None:
        target = self._single()
        target.value = value
        self._page.fills.append((sorted(target.selectors)[0], value))

    async def select_option(self, value: str, **kwargs) -> List[str]:
        target = self._single()
        target.value = value
        self._page.selections.append((sorted(target.selectors)[0], value))
        return [value]


class FakePage:
    def __init__(self, *nodes: FakeNode, url: str = "about:blank", title: str = ""):
        self.root = FakeNode([], "", nodes)
        self.url = url
        self._title = title
        self.queries = 0
        self.clicks: List[str] = []
        self.fills: List[Tuple[str, str]] = []
        self.selections: List[Tuple[str, str]] = []
        self.waits: List[tuple] = []
        self.visited: List[str] = []

    def set_nodes(self, *nodes: FakeNode) -> None:
        self.root = FakeNode([], "", nodes)

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self, (("css", selector),))

    async def goto(self, url: str, wait_until: Optional[str] = None) -> None:
        self.visited.append(url)
        self.url = url

    async def title(self) -> str:
        return self._title

    async def wait_for_url(self, url_pattern: str, timeout: Optional[float] = None) -> None:
        self.waits.append(("url", url_pattern, timeout))
