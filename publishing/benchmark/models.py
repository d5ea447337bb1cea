from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Dict, List, Optional, Any


class LookupContainer(str, Enum):
    """The five lookups timed for every probe."""
    ORGANIZATION_LIST = "list[Organization]"
    STRING_LIST = "list[str]"
    ORGANIZATION_MAP_KEY = "dict[Organization, Publisher] (by key)"
    STRING_MAP_KEY = "dict[str, Publisher] (by key)"
    ORGANIZATION_MAP_VALUE = "dict[Organization, Publisher] (by value)"


@dataclass
class LookupMeasurement:
    """Single timed membership test against one container."""
    container: LookupContainer
    found: bool
    elapsed_ns: int

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed_ns / 1_000_000


@dataclass
class ProbeResult:
    """All lookups for one probe value."""
    label: str
    probe: str
    measurements: List[LookupMeasurement] = field(default_factory=list)

    @property
    def found_everywhere(self) -> bool:
        return all(m.found for m in self.measurements)

    @property
    def found_nowhere(self) -> bool:
        return not any(m.found for m in self.measurements)

    def get(self, container: LookupContainer) -> Optional[LookupMeasurement]:
        for m in self.measurements:
            if m.container == container:
                return m
        return None


@dataclass
class BenchmarkRecord:
    """Single lookup result inside a benchmark run."""
    run_id: str
    timestamp: str
    scenario: str
    size: int
    run: int
    probe: str
    container: str
    found: bool = False
    elapsed_ns: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class AggregateResult:
    """Aggregated timings for a size/probe/container combination."""
    size: int
    probe: str
    container: str
    num_runs: int

    # Timing stats (nanoseconds)
    mean_ns: float = 0.0
    min_ns: int = 0
    max_ns: int = 0
    stdev_ns: float = 0.0

    # Found flag, and whether every run agreed on it
    found: bool = False
    consistent: bool = True


@dataclass
class BenchmarkSummary:
    """Complete benchmark summary."""
    timestamp: str
    duration: float
    total_lookups: int

    sizes: List[int] = field(default_factory=list)
    probes: List[str] = field(default_factory=list)

    records: List[BenchmarkRecord] = field(default_factory=list)
    aggregates: List[AggregateResult] = field(default_factory=list)

    # Fastest/slowest container by mean lookup time at the largest size
    fastest_container: Optional[str] = None
    slowest_container: Optional[str] = None

    @property
    def consistent(self) -> bool:
        return all(a.consistent for a in self.aggregates)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "timestamp": self.timestamp,
            "duration": self.duration,
            "total_lookups": self.total_lookups,
            "consistent": self.consistent,
            "sizes": self.sizes,
            "probes": self.probes,
            "fastest_container": self.fastest_container,
            "slowest_container": self.slowest_container,
            "aggregates": [asdict(a) for a in self.aggregates],
            "records": [r.to_dict() for r in self.records],
        }


@dataclass
class BenchmarkScenario:
    """Configuration for a benchmark scenario."""
    name: str
    size: int = 1000
    runs: int = 1

    def __post_init__(self):
        if self.size < 1:
            raise ValueError(f"Scenario '{self.name}': size must be at least 1, got {self.size}")
        if self.runs < 1:
            raise ValueError(f"Scenario '{self.name}': runs must be at least 1, got {self.runs}")
