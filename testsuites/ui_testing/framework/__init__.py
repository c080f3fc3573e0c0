"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based page object framework for the Swag Labs suite.

Components:
    - element: immutable selector descriptors resolved per call
    - selectors: derived data-test ids and selector builders
    - maybe: explicit Present / ABSENT values for optional elements
    - page_base: base page object for common operations
    - browser_manager: browser lifecycle management
    - config_loader / log_config: YAML configuration and Loguru setup

Author: Automation Team
License: MIT
================================================================================
"""

from .element import Element, ElementNotFoundError
from .maybe import ABSENT, Absent, AbsentValueError, Maybe, Present
from .page_base import BasePage
from .browser_manager import BrowserManager
from .config_loader import ConfigLoader, ConfigurationError, get_config
from .log_config import init_logger
from .selectors import to_data_test_id

__all__ = [
    "ABSENT",
    "Absent",
    "AbsentValueError",
    "BasePage",
    "BrowserManager",
    "ConfigLoader",
    "ConfigurationError",
    "Element",
    "ElementNotFoundError",
    "Maybe",
    "Present",
    "get_config",
    "init_logger",
    "to_data_test_id",
]
