#!/usr/bin/env python3
"""
Collection Lookup Benchmark Suite

Times organization lookups across list and dict containers for several
collection sizes.  For each (size × run) combination the harness probes the
first, middle, last and an absent element, recording found/not-found and the
elapsed nanoseconds per container.

Usage:
    python bin/benchmark.py --sizes 100,1000,10000 --runs 5
    python bin/benchmark.py --full-suite
    python bin/benchmark.py --config benchmarks/suite.yaml
    python bin/benchmark.py --sizes 1000 --runs 1 --verbose
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import argparse
import logging
import time
from typing import List

from publishing.benchmark import BenchmarkScenario
from publishing.cli.display import (
    Colors,
    colored as _c,
    print_error,
    print_header,
    print_step,
    print_success,
)
from publishing.config import Container, Settings, load_scenarios


# =============================================================================
# Scenario builders
# =============================================================================

def _build_cli_scenarios(args: argparse.Namespace) -> List[BenchmarkScenario]:
    """Build scenarios from the --sizes CLI flag."""
    sizes = [int(s.strip()) for s in args.sizes.split(",") if s.strip()]
    return [
        BenchmarkScenario(name=f"n{size}", size=size, runs=args.runs)
        for size in sizes
    ]


def _build_full_suite(args: argparse.Namespace) -> List[BenchmarkScenario]:
    """Build the comprehensive full-suite benchmark."""
    return [
        BenchmarkScenario(name=f"full-n{size}", size=size, runs=args.runs)
        for size in (100, 1_000, 10_000, 100_000)
    ]


# =============================================================================
# Progress display
# =============================================================================

def _print_scenario_result(
    idx: int,
    total: int,
    scenario: BenchmarkScenario,
    records: list,
) -> None:
    """Print a one-line progress update after a scenario completes."""
    print_step(
        f"[{idx}/{total}] {scenario.name:12s}  "
        f"size={scenario.size:<8d}  "
        f"runs={scenario.runs}  "
        f"lookups={len(records)}"
    )


def _print_summary_table(summary) -> None:
    """Print a compact summary table to the terminal."""
    if not summary.aggregates:
        return

    print_header("Benchmark Results")

    hdr = (
        f"  {'Size':>8} {'Probe':<22} {'Container':<42} "
        f"{'Found':>6} {'Mean(ns)':>12}"
    )
    print(f"\n{_c(hdr, Colors.BOLD)}")
    print(f"  {'─' * 94}")

    for a in summary.aggregates:
        found = "yes" if a.found else "no"
        color = Colors.GREEN if a.consistent else Colors.RED
        print(
            f"  {a.size:>8} {a.probe:<22} {a.container:<42} "
            f"{_c(f'{found:>6}', color)} {a.mean_ns:>12.0f}"
        )

    overall = (
        f"\n  Overall: {summary.total_lookups} lookups, "
        f"fastest={summary.fastest_container}, slowest={summary.slowest_container}"
    )
    print(_c(overall, Colors.BOLD))


# =============================================================================
# CLI
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Collection Lookup Benchmark Suite",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  %(prog)s --sizes 100,1000,10000 --runs 5     Multi-size benchmark
  %(prog)s --full-suite                         Sizes 100 .. 100000
  %(prog)s --config benchmarks/suite.yaml       From YAML config
""",
    )

    # --- Mode ---
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--sizes",
        help="Comma-separated collection sizes (e.g. 100,1000,10000)",
    )
    mode.add_argument(
        "--config", type=Path, metavar="FILE",
        help="YAML configuration file defining scenarios",
    )
    mode.add_argument(
        "--full-suite", action="store_true",
        help="Run comprehensive suite (100 .. 100000)",
    )

    # --- Common options ---
    opts = parser.add_argument_group("Options")
    opts.add_argument(
        "--runs", type=int, default=None,
        help="Runs per scenario for variance analysis (default: PUBLISHING_BENCH_RUNS or 1)",
    )
    opts.add_argument(
        "--output", "-o", default=None, metavar="DIR",
        help="Output directory for reports (default: PUBLISHING_BENCH_OUTPUT or results/benchmark)",
    )

    # --- Runtime ---
    runtime = parser.add_argument_group("Runtime")
    runtime.add_argument("--print-lookups", action="store_true",
                         help="Print every timed lookup as it happens")
    runtime.add_argument("--verbose", "-v", action="store_true",
                         help="Verbose output with debug logging")

    return parser


# =============================================================================
# Main
# =============================================================================

def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    # --- Logging ---
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    settings = Settings.from_env()
    if args.runs is None:
        args.runs = settings.runs
    if args.output:
        settings.output_dir = args.output
    container = Container.from_settings(settings)

    # --- Build scenario list ---
    try:
        if args.config:
            scenarios = load_scenarios(args.config)
        elif args.full_suite:
            scenarios = _build_full_suite(args)
        elif args.sizes:
            scenarios = _build_cli_scenarios(args)
        else:
            scenarios = [
                BenchmarkScenario(name="default", size=settings.collection_size, runs=args.runs)
            ]
    except (ValueError, FileNotFoundError) as e:
        print_error(str(e))
        return 1

    if not scenarios:
        print_error("No scenarios to run.")
        return 1

    # --- Print plan ---
    output_dir = Path(settings.output_dir)
    print_header("Collection Lookup Benchmark Suite")
    print(f"  Scenarios : {len(scenarios)}")
    print(f"  Sizes     : {', '.join(str(s.size) for s in scenarios)}")
    print(f"  Output    : {output_dir}")

    # --- Run ---
    t0 = time.time()
    runner = container.benchmark_runner(quiet=not args.print_lookups)
    for i, scenario in enumerate(scenarios, 1):
        records = runner.run_scenario(scenario)
        _print_scenario_result(i, len(scenarios), scenario, records)

    duration = time.time() - t0
    summary = runner.aggregate_results(duration)

    # --- Reports ---
    reporter = container.report_generator()
    json_path = reporter.save_json(summary)
    md_path = reporter.generate_markdown(summary)

    # --- Terminal summary ---
    _print_summary_table(summary)

    print(f"\n  Reports saved to:")
    print_success(str(json_path))
    print_success(str(md_path))
    print(f"\n  Completed in {_c(f'{duration:.1f}s', Colors.BOLD)}\n")

    return 0 if summary.consistent else 1


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print(f"\n{_c('Benchmark interrupted by user.', Colors.YELLOW)}")
