"""
================================================================================
Checkout Customer Data Generator
================================================================================

Generates customer information for the checkout form.

Features:
- Random but readable first / last names and 5-digit postal codes
- Reproducible output via a seed
- Incomplete variants for negative form validation tests

================================================================================
"""

import random
import string
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from loguru import logger


# ================================================================================
# Enums and Constants
# ================================================================================

class CustomerDataType(Enum):
    """Which customer record to produce."""
    VALID = "valid"
    MISSING_FIRST_NAME = "missing_first_name"
    MISSING_LAST_NAME = "missing_last_name"
    MISSING_POSTAL_CODE = "missing_postal_code"


FIRST_NAMES = [
    "John", "Jane", "Alex", "Maria", "Wei", "Aisha", "Lucas", "Emma", "Noah", "Sofia",
]

LAST_NAMES = [
    "Doe", "Smith", "Garcia", "Chen", "Khan", "Novak", "Rossi", "Silva", "Kim", "Brown",
]

# Error banner shown by the checkout form for each incomplete record
EXPECTED_ERRORS = {
    CustomerDataType.MISSING_FIRST_NAME: "Error: First Name is required",
    CustomerDataType.MISSING_LAST_NAME: "Error: Last Name is required",
    CustomerDataType.MISSING_POSTAL_CODE: "Error: Postal Code is required",
}


# ================================================================================
# Models
# ================================================================================

@dataclass(frozen=True)
class CustomerInfo:
    """
    Customer information entered on checkout step one.

    Attributes:
        first_name: Given name
        last_name: Family name
        postal_code: Postal / ZIP code
    """
    first_name: str
    last_name: str
    postal_code: str


# ================================================================================
# Generator
# ================================================================================

class CustomerDataGenerator:
    """
    Produces CustomerInfo records.

    Usage:
        >>> generator = CustomerDataGenerator(seed=42)
        >>> customer = generator.generate()
        >>> incomplete = generator.generate(CustomerDataType.MISSING_POSTAL_CODE)
    """

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def generate(self, data_type: CustomerDataType = CustomerDataType.VALID) -> CustomerInfo:
        """
        Generate a customer record.

        Args:
            data_type: Valid record or one with a blank required field

        Returns:
            CustomerInfo instance
        """
        customer = CustomerInfo(
            first_name=self._random.choice(FIRST_NAMES),
            last_name=self._random.choice(LAST_NAMES),
            postal_code="".join(self._random.choices(string.digits, k=5)),
        )

        if data_type == CustomerDataType.MISSING_FIRST_NAME:
            customer = replace(customer, first_name="")
        elif data_type == CustomerDataType.MISSING_LAST_NAME:
            customer = replace(customer, last_name="")
        elif data_type == CustomerDataType.MISSING_POSTAL_CODE:
            customer = replace(customer, postal_code="")

        logger.debug(f"Generated {data_type.value} customer: {customer}")
        return customer


def generate_customer(seed: Optional[int] = None) -> CustomerInfo:
    """Generate a single valid customer."""
    return CustomerDataGenerator(seed).generate()


__all__ = [
    "CustomerDataGenerator",
    "CustomerDataType",
    "CustomerInfo",
    "EXPECTED_ERRORS",
    "generate_customer",
]
