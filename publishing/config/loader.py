"""
Benchmark Suite Loader

Reads benchmark scenarios from a YAML file:

    scenarios:
      - name: small
        size: 100
        runs: 3
      - name: large
        size: 10000
"""

from pathlib import Path
from typing import List

import yaml

from publishing.benchmark.models import BenchmarkScenario


def load_scenarios(config_path: Path) -> List[BenchmarkScenario]:
    """Load benchmark scenarios from a YAML configuration file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}

    return [
        BenchmarkScenario(
            name=item.get("name", "Unnamed"),
            size=int(item.get("size", 1000)),
            runs=int(item.get("runs", 1)),
        )
        for item in data.get("scenarios", [])
    ]
