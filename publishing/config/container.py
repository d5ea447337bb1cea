"""
Dependency Injection Container

Wires the result sink, benchmark runner and report generator.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .settings import Settings

from publishing.application.ports.result_sink import IResultSink
from publishing.adapters.outbound.sinks import ConsoleResultSink
from publishing.benchmark import BenchmarkRunner, CollectionHarness, ReportGenerator


@dataclass
class Container:
    """Dependency injection container."""
    collection_size: int = 1000
    output_dir: str = "results/benchmark"
    use_color: bool = False

    _sink: Optional[IResultSink] = field(default=None, repr=False)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Container":
        """Create container from settings."""
        return cls(
            collection_size=settings.collection_size,
            output_dir=settings.output_dir,
        )

    def result_sink(self) -> IResultSink:
        """Get the result sink singleton."""
        if not self._sink:
            self._sink = ConsoleResultSink(use_color=self.use_color)
        return self._sink

    def harness(self, size: Optional[int] = None) -> CollectionHarness:
        return CollectionHarness(size or self.collection_size, sink=self.result_sink())

    def benchmark_runner(self, quiet: bool = True) -> BenchmarkRunner:
        """Get a benchmark runner; quiet runners skip per-lookup console output."""
        return BenchmarkRunner(
            output_dir=Path(self.output_dir),
            sink=None if quiet else self.result_sink(),
        )

    def report_generator(self) -> ReportGenerator:
        return ReportGenerator(Path(self.output_dir))
