import json
from pathlib import Path

from .models import BenchmarkSummary

class ReportGenerator:
    """Generates reports from benchmark results."""

    def __init__(self, output_dir: Path):
        self.output_dir = output_dir

    def save_json(self, summary: BenchmarkSummary) -> Path:
        """Save detailed results to JSON."""
        output_path = self.output_dir / "benchmark_results.json"

        with open(output_path, "w") as f:
            json.dump(summary.to_dict(), f, indent=2)

        return output_path

    def generate_markdown(self, summary: BenchmarkSummary) -> Path:
        """Generate a Markdown summary report."""
        output_path = self.output_dir / "benchmark_report.md"

        lines = [
            "# Collection Lookup Benchmark Report",
            f"\n**Timestamp:** {summary.timestamp}",
            f"**Duration:** {summary.duration:.1f}s",
            f"**Total Lookups:** {summary.total_lookups}",
            f"**Consistent Results:** {'yes' if summary.consistent else 'no'}",
            "",
            "## Executive Summary",
            "",
            f"- **Fastest Container:** {summary.fastest_container or 'n/a'}",
            f"- **Slowest Container:** {summary.slowest_container or 'n/a'}",
            "",
            "## Lookup Timings by Size/Probe/Container",
            "",
            "| Size | Probe | Container | Runs | Found | Mean (ns) | Min (ns) | Max (ns) | Std Dev (ns) |",
            "|------|-------|-----------|------|-------|-----------|----------|----------|--------------|",
        ]

        for agg in summary.aggregates:
            found = "yes" if agg.found else "no"
            if not agg.consistent:
                found += " (inconsistent)"
            lines.append(
                f"| {agg.size} | {agg.probe} | {agg.container} | {agg.num_runs} | {found} | "
                f"{agg.mean_ns:.0f} | {agg.min_ns} | {agg.max_ns} | {agg.stdev_ns:.0f} |"
            )

        with open(output_path, "w") as f:
            f.write("\n".join(lines))

        return output_path
