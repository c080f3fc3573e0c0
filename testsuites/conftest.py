"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers, initializes logging and gates the live browser
scenarios.

================================================================================
"""

import pytest

from testsuites.ui_testing.framework.config_loader import get_config
from testsuites.ui_testing.framework.log_config import init_logger


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""
    init_logger()

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests against the live Swag Labs site"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: UI-specific tests"
    )
    config.addinivalue_line(
        "markers", "unit: Browser-free tests of the framework and page objects"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "auth: Tests related to login"
    )
    config.addinivalue_line(
        "markers", "cart: Tests related to the shopping cart"
    )
    config.addinivalue_line(
        "markers", "checkout: Tests related to checkout and order completion"
    )


def pytest_collection_modifyitems(config, items):
    """
    Add directory-based markers and skip browser scenarios unless enabled.

    Browser scenarios need network access and an installed Playwright
    browser; enable them with --run-e2e or UI_RUN_E2E=true.
    """
    run_e2e = get_config("ui.run_e2e", False)
    skip_e2e = pytest.mark.skip(reason="browser scenarios disabled (use --run-e2e or UI_RUN_E2E=true)")

    for item in items:
        parts = item.path.parts

        if "ui_testing" in parts:
            item.add_marker(pytest.mark.ui)
            item.add_marker(pytest.mark.e2e)
            if not run_e2e:
                item.add_marker(skip_e2e)

        if "unit" in parts:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Swag Labs UI Automation",
        f"Target: {get_config('ui.base_url', 'https://www.saucedemo.com')}",
        "=" * 60,
        "",
    ]
