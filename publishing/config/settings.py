"""
Application Settings

Environment configuration for the benchmark.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings from environment."""

    # Harness
    collection_size: int = 1000
    runs: int = 1

    # Reports
    output_dir: str = "results/benchmark"

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            collection_size=int(os.getenv("PUBLISHING_BENCH_SIZE", "1000")),
            runs=int(os.getenv("PUBLISHING_BENCH_RUNS", "1")),
            output_dir=os.getenv("PUBLISHING_BENCH_OUTPUT", "results/benchmark"),
        )
