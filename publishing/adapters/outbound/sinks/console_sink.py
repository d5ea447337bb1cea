"""
Console Result Sink Adapter

Implements IResultSink by printing one line per timed lookup.
"""

import sys
from typing import Optional, TextIO

from publishing.application.ports.result_sink import IResultSink
from publishing.benchmark.models import LookupMeasurement, ProbeResult
from publishing.cli.display import Colors, colored


class ConsoleResultSink(IResultSink):
    """
    Console adapter implementing IResultSink.

    Output per probe:
        Searching: First element
          list[Organization] - found: 1200 ns (0.0012 ms)
          ...
    """

    def __init__(self, stream: Optional[TextIO] = None, use_color: bool = False) -> None:
        self.stream = stream or sys.stdout
        self.use_color = use_color

    def _c(self, text: str, color: str) -> str:
        return colored(text, color) if self.use_color else text

    def begin_probe(self, label: str, probe: str) -> None:
        print(f"{self._c('Searching:', Colors.BOLD)} {label}", file=self.stream)

    def record(self, measurement: LookupMeasurement) -> None:
        if measurement.found:
            status = self._c("found", Colors.GREEN)
        else:
            status = self._c("not found", Colors.YELLOW)
        print(
            f"  {measurement.container.value} - {status}: "
            f"{measurement.elapsed_ns} ns ({measurement.elapsed_ms:.4f} ms)",
            file=self.stream,
        )

    def end_probe(self, result: ProbeResult) -> None:
        print(file=self.stream)
