from __future__ import annotations
from dataclasses import dataclass, field
import datetime
from typing import Any

from .enums import BookFormat
from .exceptions import InvalidArgumentError

DATE_FORMAT = "%d.%m.%Y"


def _short_date(value: datetime.date) -> str:
    return value.strftime(DATE_FORMAT)


@dataclass
class Person:
    first_name: str = "DefaultFirstName"
    last_name: str = "DefaultLastName"
    birth_date: datetime.date = datetime.date(2001, 1, 1)

    @property
    def date(self) -> datetime.date:
        return self.birth_date

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __hash__(self) -> int:
        return hash((self.first_name, self.last_name, self.birth_date))

    def __str__(self) -> str:
        return f"{self.full_name}, born on {_short_date(self.birth_date)}"

    def to_short_string(self) -> str:
        return self.full_name

    def deep_copy(self) -> "Person":
        return Person(self.first_name, self.last_name, self.birth_date)


@dataclass
class Book:
    """
    A published title written by a single author.

    Attributes:
        author: Person who wrote the book
        title: Book title
        publication_date: Date the book was published
        format: Physical size of the edition (pocket, standard, big)
    """
    author: Person = field(default_factory=Person)
    title: str = "DefaultTitle"
    publication_date: datetime.date = datetime.date(2001, 1, 1)
    format: BookFormat = BookFormat.STANDARD

    @property
    def date(self) -> datetime.date:
        return self.publication_date

    def __str__(self) -> str:
        return (
            f"Author: {self.author}, Title: {self.title}, "
            f"Format: {self.format.value}, Published: {_short_date(self.publication_date)}"
        )

    def deep_copy(self) -> "Book":
        return Book(self.author.deep_copy(), self.title, self.publication_date, self.format)


@dataclass
class Organization:
    """
    Entity key identifying an organization-like record.

    Equality and hashing are structural over (name, address, registration_year),
    so two separately built keys with the same fields find each other in sets
    and dicts. The registration year is checked on construction and on every
    later assignment; a year after the current calendar year raises
    InvalidArgumentError and leaves the key unchanged.
    """
    name: str = "DefaultOrg"
    address: str = "DefaultAddress"
    registration_year: int = 2000

    def __setattr__(self, key: str, value: Any) -> None:
        if key == "registration_year":
            validate_registration_year(value)
        super().__setattr__(key, value)

    def __hash__(self) -> int:
        return hash((self.name, self.address, self.registration_year))

    def __str__(self) -> str:
        return self.to_canonical_string()

    def to_canonical_string(self) -> str:
        """Deterministic text form, used as an alternate lookup key."""
        return f"Organization name: {self.name}, Address: {self.address}, Year: {self.registration_year}"

    def deep_copy(self) -> "Organization":
        return Organization(self.name, self.address, self.registration_year)


def validate_registration_year(year: int) -> None:
    current_year = datetime.date.today().year
    if year > current_year:
        raise InvalidArgumentError(
            f"Registration year {year} is in the future (current year: {current_year})"
        )
