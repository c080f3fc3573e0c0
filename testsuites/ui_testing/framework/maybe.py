"""
================================================================================
Optional Values
================================================================================

Explicit present/absent values for queries whose target element may
legitimately not be rendered (cart badge on an empty cart, error banner on a
valid form).

A query returns either ``Present(value)`` or the ``ABSENT`` singleton, so a
scenario has to decide what absence means instead of receiving ``None`` and
tripping over it later.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class AbsentValueError(Exception):
    """Raised when unwrapping a value that is absent."""
    pass


@dataclass(frozen=True)
class Present(Generic[T]):
    """A value that was observed on the page."""

    value: T

    @property
    def is_present(self) -> bool:
        return True

    def unwrap(self, message: str = "") -> T:
        return self.value

    def value_or(self, default: T) -> T:
        return self.value


class Absent:
    """The element was not rendered. Use the ``ABSENT`` singleton."""

    _instance: "Absent" = None

    def __new__(cls) -> "Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def is_present(self) -> bool:
        return False

    def unwrap(self, message: str = "") -> None:
        """
        Raise because there is nothing to unwrap.

        Raises:
            AbsentValueError: always
        """
        raise AbsentValueError(message or "Value is absent")

    def value_or(self, default: T) -> T:
        return default

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = Absent()

Maybe = Union[Present[T], Absent]


__all__ = [
    "ABSENT",
    "Absent",
    "AbsentValueError",
    "Maybe",
    "Present",
]
