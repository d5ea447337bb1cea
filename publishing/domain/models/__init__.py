"""
Domain Models Package

Pure domain entities with no infrastructure dependencies.
Re-exports all domain models for convenient imports.
"""

from .enums import BookFormat
from .exceptions import InvalidArgumentError
from .entities import Person, Book, Organization, validate_registration_year
from .publisher import Publisher
from .collection import PublisherCollection

__all__ = [
    # Enums
    "BookFormat",
    # Errors
    "InvalidArgumentError",
    # Entities
    "Person", "Book", "Organization", "validate_registration_year",
    # Aggregates
    "Publisher", "PublisherCollection",
]
