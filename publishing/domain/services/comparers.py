"""
Organization Comparers

Three total orders over anything exposing the organization key fields
(Organization and Publisher both do). Each comparer is a plain
(a, b) -> int function so it can be injected into a sort.
"""

from enum import Enum
from typing import Any, Callable

Comparator = Callable[[Any, Any], int]


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def compare_by_name(a: Any, b: Any) -> int:
    """Lexicographic on name."""
    return _cmp(a.name, b.name)


def compare_by_year(a: Any, b: Any) -> int:
    """Numeric on registration year."""
    return _cmp(a.registration_year, b.registration_year)


def compare_by_address(a: Any, b: Any) -> int:
    """Lexicographic on address."""
    return _cmp(a.address, b.address)


class OrderBy(str, Enum):
    NAME = "name"
    YEAR = "year"
    ADDRESS = "address"

    @property
    def comparator(self) -> Comparator:
        return _COMPARATORS[self]


_COMPARATORS = {
    OrderBy.NAME: compare_by_name,
    OrderBy.YEAR: compare_by_year,
    OrderBy.ADDRESS: compare_by_address,
}
