"""
Publisher Collection

Ordered, mutable sequence of publishers with comparator-driven sorting.
"""

import datetime
import logging
from functools import cmp_to_key
from typing import Any, Callable, Iterator, List

from .entities import Book, Person
from .enums import BookFormat
from .publisher import Publisher
from publishing.domain.services.comparers import (
    compare_by_address,
    compare_by_name,
    compare_by_year,
)

logger = logging.getLogger(__name__)


class PublisherCollection:
    """Holds publishers in insertion order until sorted."""

    def __init__(self) -> None:
        self._publishers: List[Publisher] = []

    @property
    def publishers(self) -> List[Publisher]:
        return list(self._publishers)

    def __len__(self) -> int:
        return len(self._publishers)

    def __iter__(self) -> Iterator[Publisher]:
        return iter(self._publishers)

    def add_defaults(self) -> None:
        """Add the two reference publishers, each with one book and one employee."""
        author = Person("Ivan", "Ivanenko", datetime.date(1980, 1, 1))
        employee = Person("Taras", "Shevchenko", datetime.date(1990, 2, 2))

        alpha = Publisher.create("Alpha", "Kyiv", 2010)
        alpha.add_books(Book(author, "Intro to Python", datetime.date(2020, 1, 1), BookFormat.STANDARD))
        alpha.add_employees(author)

        beta = Publisher.create("Beta", "Lviv", 2012)
        beta.add_books(Book(employee, "Advanced Python", datetime.date(2021, 2, 2), BookFormat.BIG))
        beta.add_employees(employee)

        self._publishers.extend([alpha, beta])

    def add_publishers(self, *publishers: Publisher) -> None:
        """Add publishers, giving each a pocket-format book and a default employee."""
        for publisher in publishers:
            book = Book(
                Person("Oksana", "Petryk", datetime.date(1995, 3, 3)),
                f"Book of {publisher.name}",
                datetime.date.today(),
                BookFormat.POCKET,
            )
            publisher.add_books(book)
            publisher.add_employees(Person("Andrii", "Zaychenko", datetime.date(1993, 4, 4)))
            self._publishers.append(publisher)

    def sort(self, comparator: Callable[[Any, Any], int]) -> None:
        """Stable in-place sort using the injected comparator."""
        self._publishers.sort(key=cmp_to_key(comparator))
        logger.debug(f"Sorted {len(self._publishers)} publishers with {getattr(comparator, '__name__', comparator)}")

    def sort_by_name(self) -> None:
        self.sort(compare_by_name)

    def sort_by_year(self) -> None:
        self.sort(compare_by_year)

    def sort_by_address(self) -> None:
        self.sort(compare_by_address)

    def __str__(self) -> str:
        return "\n".join(str(p) for p in self._publishers)

    def to_short_string(self) -> str:
        return "\n".join(p.to_short_string() for p in self._publishers)
