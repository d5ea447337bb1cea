"""
Showcase Application Service

Builds the reference publisher collection and walks through the domain
operations (equality, validation, deep copy, filters) for the run script.
"""

import datetime
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from publishing.domain.models import (
    Book,
    BookFormat,
    InvalidArgumentError,
    Organization,
    Person,
    Publisher,
    PublisherCollection,
)
from publishing.domain.services import OrderBy

logger = logging.getLogger(__name__)


@dataclass
class WalkthroughResult:
    """Everything the publisher walkthrough observed."""
    same_object: bool
    structurally_equal: bool
    hashes: Tuple[int, int]
    year_error: Optional[str]
    original: str
    copy: str
    books_after_2020: List[Book] = field(default_factory=list)
    books_by_petryk: List[Book] = field(default_factory=list)
    books_by_employees: List[Book] = field(default_factory=list)
    books_by_external_authors: List[Book] = field(default_factory=list)


class ShowcaseService:
    """Application service for the demo flows."""

    def build_collection(self) -> PublisherCollection:
        collection = PublisherCollection()
        collection.add_defaults()
        collection.add_publishers(
            Publisher.create("Gamma", "Odesa", 2005),
            Publisher.create("Delta", "Kharkiv", 2008),
        )
        return collection

    def sorted_views(self, collection: PublisherCollection) -> List[Tuple[OrderBy, str]]:
        """Sort by name, year and address in turn, capturing the short form after each."""
        views = []
        for order in (OrderBy.NAME, OrderBy.YEAR, OrderBy.ADDRESS):
            collection.sort(order.comparator)
            views.append((order, collection.to_short_string()))
        return views

    def publisher_walkthrough(self) -> WalkthroughResult:
        org1 = Organization("Name", "Addr", 2001)
        org2 = Organization("Name", "Addr", 2001)

        year_error = None
        try:
            org1.registration_year = datetime.date.today().year + 1
        except InvalidArgumentError as e:
            logger.warning(f"Rejected registration year: {e}")
            year_error = str(e)

        publisher = Publisher.create("Litera", "Kyiv", 2020, datetime.date(2030, 12, 31))
        author1 = Person("Ivan", "Ivanenko", datetime.date(1980, 1, 1))
        author2 = Person("Oksana", "Petryk", datetime.date(1990, 2, 2))
        publisher.add_books(
            Book(author1, "Intro to Python", datetime.date(2020, 1, 1), BookFormat.STANDARD),
            Book(author2, "Advanced Python", datetime.date(2021, 2, 2), BookFormat.BIG),
        )
        publisher.add_employees(author2)

        copy = publisher.deep_copy()
        # organization_info is a detached copy, so this rename does not stick
        publisher.organization_info.name = "ChangedName"
        publisher.books[0].title = "ChangedTitle"

        return WalkthroughResult(
            same_object=org1 is org2,
            structurally_equal=org1 == org2,
            hashes=(hash(org1), hash(org2)),
            year_error=year_error,
            original=str(publisher),
            copy=str(copy),
            books_after_2020=list(publisher.books_after_year(2020)),
            books_by_petryk=list(publisher.books_by_author("Oksana Petryk")),
            books_by_employees=list(publisher.books_by_employee_authors()),
            books_by_external_authors=list(publisher),
        )
