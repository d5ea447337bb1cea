"""
Collection Lookup Harness

Builds four parallel containers over the same N generated organizations and
times a membership test against each:

    (a) list[Organization]              linear scan, structural equality
    (b) list[str]                       linear scan over canonical strings
    (c) dict[Organization, Publisher]   hash lookup by key
    (d) dict[str, Publisher]            hash lookup by canonical string

A fifth lookup scans the values of (c) for a structurally equal publisher,
which stays linear even though the dict is hash indexed.
"""

import datetime
import logging
import time
from typing import Dict, List, Optional, Tuple, TYPE_CHECKING

from publishing.domain.models import Organization, Publisher

from .models import LookupContainer, LookupMeasurement, ProbeResult

if TYPE_CHECKING:
    from publishing.application.ports.result_sink import IResultSink

logger = logging.getLogger(__name__)

# Generated years cycle through 1900..1999 so they never fall in the future.
BASE_YEAR = 1900
YEAR_SPAN = 100

ABSENT_PROBE = ("NotExist", "Nowhere", 1999)
ABSENT_LABEL = "Non-existing element"


class CollectionHarness:
    """
    Lookup benchmark over N synthetic publishers.

    The containers are filled once in the constructor and never mutated.
    Timings are observational only; the found flag is the result that matters.
    """

    def __init__(
        self,
        count: int,
        license_expiry: Optional[datetime.date] = None,
        sink: Optional["IResultSink"] = None,
    ) -> None:
        if count < 1:
            raise ValueError(f"Harness size must be at least 1, got {count}")

        self.count = count
        self.license_expiry = license_expiry or datetime.date.today()
        self.sink = sink

        self._organizations: List[Organization] = []
        self._strings: List[str] = []
        self._organization_map: Dict[Organization, Publisher] = {}
        self._string_map: Dict[str, Publisher] = {}

        start = time.perf_counter()
        for i in range(count):
            publisher = self.generate_publisher(i, self.license_expiry)
            text = publisher.organization.to_canonical_string()
            # every container gets its own copy of the key and the publisher
            self._organizations.append(publisher.organization_info)
            self._strings.append(text)
            self._organization_map[publisher.organization_info] = publisher
            self._string_map[text] = publisher.deep_copy()
        logger.debug(
            f"Built lookup containers for {count} organizations in "
            f"{(time.perf_counter() - start) * 1000:.2f} ms"
        )

    @staticmethod
    def generate_publisher(i: int, license_expiry: Optional[datetime.date] = None) -> Publisher:
        return Publisher.create(
            f"Publisher{i}",
            f"Address{i}",
            BASE_YEAR + i % YEAR_SPAN,
            license_expiry,
        )

    # ------------------------------------------------------------------
    # Container views
    # ------------------------------------------------------------------

    @property
    def organizations(self) -> List[Organization]:
        """Detached copies of the keys held in the list container."""
        return [org.deep_copy() for org in self._organizations]

    def container_sizes(self) -> Dict[LookupContainer, int]:
        return {
            LookupContainer.ORGANIZATION_LIST: len(self._organizations),
            LookupContainer.STRING_LIST: len(self._strings),
            LookupContainer.ORGANIZATION_MAP_KEY: len(self._organization_map),
            LookupContainer.STRING_MAP_KEY: len(self._string_map),
        }

    # ------------------------------------------------------------------
    # Measurement
    # ------------------------------------------------------------------

    def measure_lookup(self, probe: Organization, label: str = "") -> ProbeResult:
        """Time one membership test per container for the given probe key."""
        text = probe.to_canonical_string()
        value_probe = Publisher(organization=probe.deep_copy(), license_expiry=self.license_expiry)
        mapped_values = self._organization_map.values()
        result = ProbeResult(label=label or text, probe=text)

        if self.sink:
            self.sink.begin_probe(result.label, text)

        # Only the membership expression sits between the two clock reads.
        start = time.perf_counter_ns()
        found = probe in self._organizations
        self._record(result, LookupContainer.ORGANIZATION_LIST, found, time.perf_counter_ns() - start)

        start = time.perf_counter_ns()
        found = text in self._strings
        self._record(result, LookupContainer.STRING_LIST, found, time.perf_counter_ns() - start)

        start = time.perf_counter_ns()
        found = probe in self._organization_map
        self._record(result, LookupContainer.ORGANIZATION_MAP_KEY, found, time.perf_counter_ns() - start)

        start = time.perf_counter_ns()
        found = text in self._string_map
        self._record(result, LookupContainer.STRING_MAP_KEY, found, time.perf_counter_ns() - start)

        start = time.perf_counter_ns()
        found = value_probe in mapped_values
        self._record(result, LookupContainer.ORGANIZATION_MAP_VALUE, found, time.perf_counter_ns() - start)

        if self.sink:
            self.sink.end_probe(result)
        return result

    def _record(self, result: ProbeResult, container: LookupContainer, found: bool, elapsed_ns: int) -> None:
        measurement = LookupMeasurement(container=container, found=found, elapsed_ns=elapsed_ns)
        result.measurements.append(measurement)
        if self.sink:
            self.sink.record(measurement)

    def standard_probes(self) -> List[Tuple[str, Organization]]:
        """First, middle, last and absent probe keys, each a detached copy."""
        return [
            ("First element", self._organizations[0].deep_copy()),
            ("Middle element", self._organizations[self.count // 2].deep_copy()),
            ("Last element", self._organizations[-1].deep_copy()),
            (ABSENT_LABEL, Organization(*ABSENT_PROBE)),
        ]

    def run_standard_probes(self) -> List[ProbeResult]:
        return [self.measure_lookup(org, label) for label, org in self.standard_probes()]
