import pytest
from playwright.async_api import Error as PlaywrightError

from testsuites.ui_testing.framework import browser_manager
from testsuites.ui_testing.framework.browser_manager import BrowserManager


class StubDriver:
    """Records shutdown calls of the Playwright objects BrowserManager owns."""

    def __init__(self, launch_error=None, context_error=None):
        self.launch_error = launch_error
        self.context_error = context_error
        self.calls = []
        self.chromium = self

    # async_playwright() and its start()
    def __call__(self):
        return self

    async def start(self):
        self.calls.append("start")
        return self

    async def stop(self):
        self.calls.append("stop")

    # BrowserType.launch() returning the browser
    async def launch(self, **options):
        if self.launch_error is not None:
            raise self.launch_error
        return self

    async def new_context(self, **options):
        return StubContext(self)

    async def close(self):
        self.calls.append("browser.close")


class StubContext:
    def __init__(self, driver):
        self.driver = driver

    def set_default_timeout(self, timeout):
        pass

    async def close(self):
        self.driver.calls.append("context.close")
        if self.driver.context_error is not None:
            raise self.driver.context_error


def test_settings_come_from_config(monkeypatch):
    monkeypatch.setenv("UI_BROWSER", "firefox")
    monkeypatch.setenv("UI_HEADLESS", "false")
    monkeypatch.setenv("UI_TIMEOUT", "3000")

    manager = BrowserManager()

    assert manager.browser_type == "firefox"
    assert manager.headless is False
    assert manager.timeout == 3000


def test_explicit_arguments_win(monkeypatch):
    monkeypatch.setenv("UI_BROWSER", "firefox")
    manager = BrowserManager(headless=True, browser_type="webkit", timeout=500)
    assert (manager.browser_type, manager.headless, manager.timeout) == ("webkit", True, 500)


def test_unsupported_browser():
    with pytest.raises(ValueError, match="opera"):
        BrowserManager(browser_type="opera")


async def test_new_context_requires_start():
    manager = BrowserManager(browser_type="chromium")
    assert manager.browser is None
    with pytest.raises(RuntimeError, match="not started"):
        await manager.new_context()


async def test_failed_launch_stops_playwright(monkeypatch):
    driver = StubDriver(launch_error=PlaywrightError("Executable doesn't exist"))
    monkeypatch.setattr(browser_manager, "async_playwright", driver)

    with pytest.raises(PlaywrightError, match="Executable"):
        async with BrowserManager(browser_type="chromium"):
            pass

    assert driver.calls == ["start", "stop"]


async def test_close_finishes_after_context_error(monkeypatch):
    driver = StubDriver(context_error=PlaywrightError("Target closed"))
    monkeypatch.setattr(browser_manager, "async_playwright", driver)

    manager = BrowserManager(browser_type="chromium")
    await manager.start()
    await manager.new_context()

    with pytest.raises(PlaywrightError, match="Target closed"):
        await manager.close()

    assert driver.calls == ["start", "context.close", "browser.close", "stop"]
    assert manager.browser is None
