"""
In-Memory Result Sink Adapter

Implements IResultSink by collecting results, useful for testing without
capturing console output.
"""

from typing import List, Tuple

from publishing.application.ports.result_sink import IResultSink
from publishing.benchmark.models import LookupMeasurement, ProbeResult


class InMemoryResultSink(IResultSink):
    """In-memory adapter implementing IResultSink."""

    def __init__(self) -> None:
        self.started: List[Tuple[str, str]] = []
        self.measurements: List[LookupMeasurement] = []
        self.results: List[ProbeResult] = []

    def begin_probe(self, label: str, probe: str) -> None:
        self.started.append((label, probe))

    def record(self, measurement: LookupMeasurement) -> None:
        self.measurements.append(measurement)

    def end_probe(self, result: ProbeResult) -> None:
        self.results.append(result)

    def clear(self) -> None:
        self.started.clear()
        self.measurements.clear()
        self.results.clear()
