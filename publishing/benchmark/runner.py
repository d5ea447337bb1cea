import logging
import statistics
import time
from collections import defaultdict
from datetime import datetime
from pathlib import Path
from typing import List, Optional, TYPE_CHECKING

from .harness import CollectionHarness
from .models import AggregateResult, BenchmarkRecord, BenchmarkScenario, BenchmarkSummary

if TYPE_CHECKING:
    from publishing.application.ports.result_sink import IResultSink


class BenchmarkRunner:
    """
    Executes lookup benchmark scenarios.

    Each scenario builds one harness of the requested size and runs the
    standard probes (first, middle, last, absent) once per repeat.
    """

    def __init__(
        self,
        output_dir: Path,
        sink: Optional["IResultSink"] = None,
    ):
        self.output_dir = output_dir
        self.sink = sink

        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.logger = logging.getLogger("Benchmark")
        self.records: List[BenchmarkRecord] = []

    def run_scenario(self, scenario: BenchmarkScenario) -> List[BenchmarkRecord]:
        """Run a single benchmark scenario."""
        scenario_records = []

        start = time.time()
        harness = CollectionHarness(scenario.size, sink=self.sink)
        self.logger.info(
            f"Scenario '{scenario.name}': built {scenario.size} entries "
            f"in {(time.time() - start) * 1000:.1f} ms"
        )

        for run in range(1, scenario.runs + 1):
            for result in harness.run_standard_probes():
                for m in result.measurements:
                    record = BenchmarkRecord(
                        run_id=f"{scenario.name}_{scenario.size}_{run}",
                        timestamp=datetime.now().isoformat(),
                        scenario=scenario.name,
                        size=scenario.size,
                        run=run,
                        probe=result.label,
                        container=m.container.value,
                        found=m.found,
                        elapsed_ns=m.elapsed_ns,
                    )
                    self.records.append(record)
                    scenario_records.append(record)
            self.logger.debug(f"Scenario '{scenario.name}': run {run}/{scenario.runs} done")

        return scenario_records

    def aggregate_results(self, duration: float) -> BenchmarkSummary:
        """Aggregate all collected records into a summary."""
        summary = BenchmarkSummary(
            timestamp=datetime.now().isoformat(),
            duration=duration,
            total_lookups=len(self.records),
            records=self.records,
        )

        # Group by size/probe/container
        groups = defaultdict(list)
        for r in self.records:
            groups[(r.size, r.probe, r.container)].append(r)
            if r.size not in summary.sizes: summary.sizes.append(r.size)
            if r.probe not in summary.probes: summary.probes.append(r.probe)

        for (size, probe, container), recs in groups.items():
            timings = [r.elapsed_ns for r in recs]
            found_flags = {r.found for r in recs}

            agg = AggregateResult(size=size, probe=probe, container=container, num_runs=len(recs))
            agg.mean_ns = statistics.mean(timings)
            agg.min_ns = min(timings)
            agg.max_ns = max(timings)
            agg.stdev_ns = statistics.stdev(timings) if len(timings) > 1 else 0.0
            agg.found = recs[0].found
            agg.consistent = len(found_flags) == 1
            if not agg.consistent:
                self.logger.warning(
                    f"Inconsistent lookup result for {container} / {probe} at size {size}"
                )

            summary.aggregates.append(agg)

        if summary.sizes:
            largest = max(summary.sizes)
            by_container = defaultdict(list)
            for agg in summary.aggregates:
                if agg.size == largest:
                    by_container[agg.container].append(agg.mean_ns)
            means = {c: statistics.mean(v) for c, v in by_container.items()}
            summary.fastest_container = min(means, key=means.get)
            summary.slowest_container = max(means, key=means.get)

        return summary
