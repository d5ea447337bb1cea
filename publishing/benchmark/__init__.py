"""
Benchmark Package

Times lookups of organizations across list and dict containers
(linear scan vs. hash lookup) and reports the results.
"""

from .models import (
    AggregateResult,
    BenchmarkRecord,
    BenchmarkScenario,
    BenchmarkSummary,
    LookupContainer,
    LookupMeasurement,
    ProbeResult,
)
from .harness import CollectionHarness
from .runner import BenchmarkRunner
from .reporting import ReportGenerator

__all__ = [
    "AggregateResult",
    "BenchmarkRecord",
    "BenchmarkScenario",
    "BenchmarkSummary",
    "LookupContainer",
    "LookupMeasurement",
    "ProbeResult",
    "CollectionHarness",
    "BenchmarkRunner",
    "ReportGenerator",
]
