"""
Result Sink Port

Interface defining where lookup measurements are reported.
"""

from abc import ABC, abstractmethod

from publishing.benchmark.models import LookupMeasurement, ProbeResult


class IResultSink(ABC):
    """
    Outbound port for benchmark results.

    The harness pushes every measurement through a sink so timing and
    printing stay out of the lookup code.
    """

    @abstractmethod
    def begin_probe(self, label: str, probe: str) -> None:
        """
        Called before the lookups for a probe start.

        Args:
            label: Probe case name (e.g. "First element")
            probe: Canonical string of the probed key
        """
        pass

    @abstractmethod
    def record(self, measurement: LookupMeasurement) -> None:
        """Called once per timed lookup."""
        pass

    @abstractmethod
    def end_probe(self, result: ProbeResult) -> None:
        """Called with the complete result once all lookups are done."""
        pass
