"""
Domain Services Package
"""

from .comparers import (
    Comparator,
    OrderBy,
    compare_by_address,
    compare_by_name,
    compare_by_year,
)

__all__ = [
    "Comparator",
    "OrderBy",
    "compare_by_address",
    "compare_by_name",
    "compare_by_year",
]
