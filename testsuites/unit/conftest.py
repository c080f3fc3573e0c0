"""
================================================================================
Unit Test Configuration
================================================================================

Browser-free fixtures: page objects are driven against ``FakePage`` trees
built from Swag Labs markup snippets.

================================================================================
"""

import pytest

from testsuites.ui_testing.framework.config_loader import ConfigLoader
from testsuites.unit.fakes import BASE_URL, FakePage, node


@pytest.fixture(autouse=True)
def _fresh_config():
    """Each unit test starts from an unloaded configuration singleton."""
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()


def cart_row(name: str, description: str, price: str, quantity: str = "1"):
    return node(
        ".cart_item", "",
        node(".cart_quantity", quantity),
        node(".inventory_item_name", name),
        node(".inventory_item_desc", description),
        node(".inventory_item_price", price),
        node(".btn_secondary", "Remove"),
    )


@pytest.fixture
def backpack_row():
    return cart_row(
        "Sauce Labs Backpack",
        "carry.allTheThings() with the sleek, streamlined Sly Pack",
        "$29.99",
    )


@pytest.fixture
def bike_light_row():
    return cart_row(
        "Sauce Labs Bike Light",
        "A red light isn't the desired state in testing but it sure helps when riding your bike at night.",
        "$9.99",
    )


@pytest.fixture
def empty_page() -> FakePage:
    return FakePage(url=f"{BASE_URL}/")
