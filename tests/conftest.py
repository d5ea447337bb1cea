"""
Test Configuration and Fixtures
================================

Shared pytest fixtures for testing the publisher collections project.

Usage:
    pytest tests/                    # Run all tests
    pytest tests/ -v                 # Verbose output
    pytest tests/ -k "harness"       # Run only harness tests
    pytest tests/ --quick            # Skip slow tests
"""

import datetime
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from publishing.domain.models import Book, BookFormat, Person, Publisher


# =============================================================================
# Custom Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: marks tests as slow")


def pytest_addoption(parser):
    """Add custom command line options"""
    parser.addoption(
        "--quick",
        action="store_true",
        default=False,
        help="Skip slow tests",
    )


def pytest_collection_modifyitems(config, items):
    """Skip slow tests if --quick is specified"""
    if config.getoption("--quick"):
        skip_slow = pytest.mark.skip(reason="Skipped with --quick")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


# =============================================================================
# Domain Fixtures
# =============================================================================

@pytest.fixture
def expiry() -> datetime.date:
    return datetime.date(2030, 12, 31)


@pytest.fixture
def ivan() -> Person:
    return Person("Ivan", "Ivanenko", datetime.date(1980, 1, 1))


@pytest.fixture
def oksana() -> Person:
    return Person("Oksana", "Petryk", datetime.date(1990, 2, 2))


@pytest.fixture
def litera(ivan, oksana, expiry) -> Publisher:
    """Publisher with one external author and one employee author"""
    publisher = Publisher.create("Litera", "Kyiv", 2020, expiry)
    publisher.add_books(
        Book(ivan, "Intro to Python", datetime.date(2020, 1, 1), BookFormat.STANDARD),
        Book(oksana, "Advanced Python", datetime.date(2021, 2, 2), BookFormat.BIG),
    )
    publisher.add_employees(oksana)
    return publisher
