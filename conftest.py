"""
Repository-level pytest configuration.

Why this exists:
  - Provide safe defaults for local runs (no secrets embedded)
  - Register command line options used by the UI suite

The Swag Labs demo credentials are public and live in config/config.yaml.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest


def pytest_addoption(parser):
    """Options for the browser scenarios."""
    group = parser.getgroup("swag-labs")
    group.addoption(
        "--run-e2e",
        action="store_true",
        default=False,
        help="Run browser scenarios against the live site (also: UI_RUN_E2E=true)",
    )
    group.addoption(
        "--ui-browser",
        choices=["chromium", "firefox", "webkit"],
        default=None,
        help="Browser for UI scenarios (overrides ui.browser)",
    )
    group.addoption(
        "--headed",
        action="store_true",
        default=False,
        help="Show the browser window",
    )


def pytest_configure(config):
    # Command line wins over config.yaml; ConfigLoader reads these env vars.
    if config.getoption("--ui-browser"):
        os.environ["UI_BROWSER"] = config.getoption("--ui-browser")
    if config.getoption("--headed"):
        os.environ["UI_HEADLESS"] = "false"
    if config.getoption("--run-e2e"):
        os.environ["UI_RUN_E2E"] = "true"


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _safe_env_defaults() -> Generator[None, None, None]:
    """
    Set environment defaults if not already provided by the user/CI.
    """
    defaults = {
        "UI_BASE_URL": "https://www.saucedemo.com",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    yield
