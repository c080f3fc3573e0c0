"""
================================================================================
Autotest Tools
================================================================================

Automation utilities shared by the test suites.

Modules:
    - data_generator: customer records for the checkout form

Example:
    from autotest_tools.data_generator import generate_customer

    customer = generate_customer(seed=7)

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "data_generator",
]
