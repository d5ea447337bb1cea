"""
Publisher Aggregate

A publisher embeds an Organization key by value and owns its books and
employees. Filtering methods are generators that make one linear pass over
the owned book list each time they are called.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import datetime
from typing import Iterator, List, Optional

from .entities import Book, Organization, Person, DATE_FORMAT
from .enums import BookFormat


@dataclass
class Publisher:
    """
    Publishing house aggregate.

    Attributes:
        organization: Entity key (name, address, registration year)
        license_expiry: Date the publishing license expires
        books: Owned list of published books (duplicates allowed)
        employees: Owned list of employees (duplicates allowed)

    Iterating a publisher yields the books whose author is not an employee.
    """
    organization: Organization = field(default_factory=Organization)
    license_expiry: datetime.date = field(default_factory=datetime.date.today)
    books: List[Book] = field(default_factory=list)
    employees: List[Person] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        name: str,
        address: str,
        registration_year: int,
        license_expiry: Optional[datetime.date] = None,
    ) -> "Publisher":
        return cls(
            organization=Organization(name, address, registration_year),
            license_expiry=license_expiry or datetime.date.today(),
        )

    # ------------------------------------------------------------------
    # Key field delegation
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self.organization.name

    @name.setter
    def name(self, value: str) -> None:
        self.organization.name = value

    @property
    def address(self) -> str:
        return self.organization.address

    @address.setter
    def address(self, value: str) -> None:
        self.organization.address = value

    @property
    def registration_year(self) -> int:
        return self.organization.registration_year

    @registration_year.setter
    def registration_year(self, value: int) -> None:
        self.organization.registration_year = value

    @property
    def organization_info(self) -> Organization:
        """Independent copy of the key; mutating it does not touch the publisher."""
        return self.organization.deep_copy()

    @organization_info.setter
    def organization_info(self, value: Organization) -> None:
        self.organization = value.deep_copy()

    @property
    def date(self) -> datetime.date:
        return self.license_expiry

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_books(self, *books: Book) -> None:
        self.books.extend(books)

    def add_employees(self, *people: Person) -> None:
        self.employees.extend(people)

    def deep_copy(self) -> "Publisher":
        """Clone the key, the expiry date and every owned book (with its author) and employee."""
        return Publisher(
            organization=self.organization.deep_copy(),
            license_expiry=self.license_expiry,
            books=[book.deep_copy() for book in self.books],
            employees=[person.deep_copy() for person in self.employees],
        )

    # ------------------------------------------------------------------
    # Derived queries
    # ------------------------------------------------------------------

    @property
    def percentage_pocket_format(self) -> float:
        if not self.books:
            return 0
        pocket = sum(1 for book in self.books if book.format == BookFormat.POCKET)
        return pocket / len(self.books) * 100

    def books_after_year(self, year: int) -> Iterator[Book]:
        for book in self.books:
            if book.publication_date.year > year:
                yield book

    def books_by_author(self, full_name: str) -> Iterator[Book]:
        for book in self.books:
            if book.author.full_name == full_name:
                yield book

    def books_by_employee_authors(self) -> Iterator[Book]:
        for book in self.books:
            if book.author in self.employees:
                yield book

    def books_by_external_authors(self) -> Iterator[Book]:
        for book in self.books:
            if book.author not in self.employees:
                yield book

    def __iter__(self) -> Iterator[Book]:
        return self.books_by_external_authors()

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        books = "\n".join(str(book) for book in self.books)
        employees = "\n".join(str(person) for person in self.employees)
        return (
            f"{self.organization}, License Expiry: {self.license_expiry.strftime(DATE_FORMAT)},\n"
            f"Books:\n{books},\nEmployees:\n{employees}\n"
        )

    def to_short_string(self) -> str:
        return (
            f"{self.organization}, License Expiry: {self.license_expiry.strftime(DATE_FORMAT)}, "
            f"Total Books: {len(self.books)}, Employees: {len(self.employees)}"
        )
