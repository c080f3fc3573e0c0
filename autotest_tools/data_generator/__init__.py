"""
================================================================================
Test Data Generators
================================================================================
"""

from .customer_data_generator import (
    CustomerDataGenerator,
    CustomerDataType,
    CustomerInfo,
    EXPECTED_ERRORS,
    generate_customer,
)

__all__ = [
    "CustomerDataGenerator",
    "CustomerDataType",
    "CustomerInfo",
    "EXPECTED_ERRORS",
    "generate_customer",
]
