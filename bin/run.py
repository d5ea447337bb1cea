#!/usr/bin/env python3
"""
Publisher Collections Runner

Builds the reference publisher collection, prints it before and after each
sort (name, registration year, address), then times organization lookups
across list and dict containers for the first, middle, last and an absent
element.

Usage:
    python bin/run.py                         # Collection sorts + lookup timings (N=1000)
    python bin/run.py --size 100000           # Larger lookup containers
    python bin/run.py --showcase              # Also walk through equality, deep copy, filters
    python bin/run.py --skip-lookups -v       # Collection demo only, with debug logging
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import argparse
import logging

from publishing.application.services import ShowcaseService, WalkthroughResult
from publishing.benchmark.harness import ABSENT_LABEL
from publishing.cli.display import (
    Colors,
    colored,
    print_error,
    print_header,
    print_subheader,
)
from publishing.config import Container, Settings


# =============================================================================
# Sections
# =============================================================================

def show_collection(service: ShowcaseService) -> None:
    print_header("Creating PublisherCollection and adding elements")
    collection = service.build_collection()

    print("\nOriginal PublisherCollection:\n")
    print(collection)

    titles = {"name": "Name", "year": "Registration Year", "address": "Address"}
    for order, text in service.sorted_views(collection):
        print_subheader(f"Sorted by {titles[order.value]}")
        print(text)


def show_walkthrough(result: WalkthroughResult) -> None:
    print_header("Publisher Walkthrough")
    print(f"\n  Same object:        {result.same_object}")
    print(f"  Structurally equal: {result.structurally_equal}")
    print(f"  Hash codes:         {result.hashes[0]}, {result.hashes[1]}")
    if result.year_error:
        print(f"  {colored('Rejected year:', Colors.YELLOW)}      {result.year_error}")

    print_subheader("Original (after mutation)")
    print(result.original)
    print_subheader("Deep copy")
    print(result.copy)

    sections = [
        ("Books published after 2020", result.books_after_2020),
        ("Books by author Oksana Petryk", result.books_by_petryk),
        ("Books by authors who are employees", result.books_by_employees),
        ("Books by authors NOT employees", result.books_by_external_authors),
    ]
    for title, books in sections:
        print_subheader(title)
        for book in books:
            print(book)


def show_lookups(container: Container, size: int) -> None:
    print_header(f"Collection Performance Testing (N={size})")
    print()
    harness = container.harness(size)
    results = harness.run_standard_probes()

    mismatched = [
        r.label for r in results
        if not (r.found_nowhere if r.label == ABSENT_LABEL else r.found_everywhere)
    ]
    if mismatched:
        print_error(f"Unexpected lookup results for: {', '.join(mismatched)}")


# =============================================================================
# CLI
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Publisher collection demo and lookup timings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--size", "-n", type=int, default=None,
        help="Number of generated organizations (default: PUBLISHING_BENCH_SIZE or 1000)",
    )
    parser.add_argument("--showcase", action="store_true",
                        help="Also run the publisher walkthrough")
    parser.add_argument("--skip-lookups", action="store_true",
                        help="Skip the lookup timings")
    parser.add_argument("--color", action="store_true",
                        help="Colour the lookup lines")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Verbose output with debug logging")
    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    settings = Settings.from_env()
    container = Container.from_settings(settings)
    container.use_color = args.color
    size = args.size if args.size is not None else settings.collection_size
    if size < 1:
        print_error(f"--size must be at least 1, got {size}")
        return 1

    service = ShowcaseService()
    show_collection(service)

    if args.showcase:
        show_walkthrough(service.publisher_walkthrough())

    if not args.skip_lookups:
        show_lookups(container, size)

    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print(f"\n{colored('Interrupted by user.', Colors.YELLOW)}")
