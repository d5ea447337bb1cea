"""
Unit Tests for publishing.benchmark.harness and result sinks
"""

import datetime
import io
import itertools
from unittest.mock import MagicMock

import pytest

from publishing.adapters.outbound.sinks import ConsoleResultSink, InMemoryResultSink
from publishing.benchmark import CollectionHarness, LookupContainer
from publishing.benchmark import harness as harness_module
from publishing.benchmark.harness import ABSENT_LABEL
from publishing.domain.models import Book, Organization, Publisher


@pytest.fixture(scope="module")
def harness_1000() -> CollectionHarness:
    return CollectionHarness(1000)


# =============================================================================
# Construction
# =============================================================================

class TestHarnessConstruction:

    def test_every_container_has_n_entries(self, harness_1000):
        sizes = harness_1000.container_sizes()
        assert len(sizes) == 4
        assert all(size == 1000 for size in sizes.values())
        assert len(harness_1000.organizations) == 1000

    def test_generated_entities_are_distinct(self, harness_1000):
        assert len(set(harness_1000.organizations)) == 1000

    def test_generated_fields(self):
        publisher = CollectionHarness.generate_publisher(7)
        assert publisher.name == "Publisher7"
        assert publisher.address == "Address7"
        assert publisher.registration_year == 1907

    def test_generated_years_never_in_future(self, harness_1000):
        this_year = datetime.date.today().year
        assert all(org.registration_year <= this_year for org in harness_1000.organizations)

    def test_size_must_be_positive(self):
        with pytest.raises(ValueError):
            CollectionHarness(0)

    def test_organizations_is_a_copy(self, harness_1000):
        snapshot = harness_1000.organizations
        snapshot.clear()
        assert len(harness_1000.organizations) == 1000


# =============================================================================
# Lookups
# =============================================================================

class TestMeasureLookup:

    def test_reference_probes(self, harness_1000):
        results = {r.label: r for r in harness_1000.run_standard_probes()}

        assert results["First element"].probe == "Organization name: Publisher0, Address: Address0, Year: 1900"
        assert results["Middle element"].probe.startswith("Organization name: Publisher500,")
        assert results["Last element"].probe.startswith("Organization name: Publisher999,")

        for label in ("First element", "Middle element", "Last element"):
            assert results[label].found_everywhere
            assert len(results[label].measurements) == 5

        assert results[ABSENT_LABEL].found_nowhere
        assert len(results[ABSENT_LABEL].measurements) == 5

    def test_measurement_order_and_timings(self, harness_1000):
        result = harness_1000.measure_lookup(harness_1000.organizations[0], "First")
        assert [m.container for m in result.measurements] == list(LookupContainer)
        for m in result.measurements:
            assert m.elapsed_ns >= 0
            assert m.elapsed_ms == pytest.approx(m.elapsed_ns / 1_000_000)

    def test_clock_reads_bracket_each_lookup(self, monkeypatch):
        harness = CollectionHarness(10)
        ticks = itertools.count()
        monkeypatch.setattr(harness_module.time, "perf_counter_ns", lambda: next(ticks))

        result = harness.measure_lookup(harness.organizations[0])
        assert [m.elapsed_ns for m in result.measurements] == [1] * 5
        assert next(ticks) == 10

    def test_every_generated_entity_is_found(self):
        harness = CollectionHarness(50)
        for org in harness.organizations:
            assert harness.measure_lookup(org).found_everywhere

    def test_freshly_built_equal_key_is_found(self, harness_1000):
        probe = Organization("Publisher42", "Address42", 1942)
        assert harness_1000.measure_lookup(probe).found_everywhere

    @pytest.mark.parametrize("probe", [
        Organization("NotExist", "Nowhere", 1999),
        Organization("Publisher1", "Address1", 1902),
        Organization("Publisher1", "Address2", 1901),
    ])
    def test_absent_entities_not_found(self, harness_1000, probe):
        assert harness_1000.measure_lookup(probe).found_nowhere

    def test_single_entry_harness(self):
        harness = CollectionHarness(1)
        results = harness.run_standard_probes()
        assert [r.found_everywhere for r in results[:3]] == [True, True, True]
        assert results[3].found_nowhere

    def test_value_scan_requires_equal_publisher(self, generated_publishers):
        harness = CollectionHarness(10, license_expiry=datetime.date(2030, 1, 1))
        key = harness.organizations[3]
        assert harness.measure_lookup(key).get(LookupContainer.ORGANIZATION_MAP_VALUE).found

        # an owned book makes the mapped publisher unequal while its key still matches
        generated_publishers[3].add_books(Book(title="Extra"))
        result = harness.measure_lookup(key)
        assert result.get(LookupContainer.ORGANIZATION_MAP_VALUE).found is False
        assert result.get(LookupContainer.ORGANIZATION_MAP_KEY).found is True

    def test_get_unknown_container_returns_none(self, harness_1000):
        result = harness_1000.measure_lookup(harness_1000.organizations[0])
        result.measurements = result.measurements[:1]
        assert result.get(LookupContainer.STRING_MAP_KEY) is None

    @pytest.mark.slow
    def test_large_harness(self):
        harness = CollectionHarness(100_000)
        results = harness.run_standard_probes()
        assert all(r.found_everywhere for r in results[:3])
        assert results[3].found_nowhere


# =============================================================================
# Container independence
# =============================================================================

@pytest.fixture
def generated_publishers(monkeypatch):
    """Keep a reference to every publisher the harness generates."""
    generated = []
    original = CollectionHarness.generate_publisher

    def recording_generate(i, license_expiry=None):
        publisher = original(i, license_expiry)
        generated.append(publisher)
        return publisher

    monkeypatch.setattr(CollectionHarness, "generate_publisher", staticmethod(recording_generate))
    return generated


class TestContainerIndependence:

    def test_mutating_standard_key_leaves_lookups_intact(self):
        harness = CollectionHarness(10)
        _, first = harness.standard_probes()[0]
        first.name = "Mutated"

        assert harness.measure_lookup(Organization("Publisher0", "Address0", 1900)).found_everywhere
        assert harness.measure_lookup(first).found_nowhere

    def test_mutating_organizations_view_leaves_lookups_intact(self):
        harness = CollectionHarness(10)
        for org in harness.organizations:
            org.address = "Elsewhere"

        assert all(harness.measure_lookup(org).found_everywhere for org in harness.organizations)

    def test_mutating_generated_publisher_only_touches_value_scan(self, generated_publishers):
        harness = CollectionHarness(5, license_expiry=datetime.date(2030, 1, 1))
        assert len(generated_publishers) == 5
        generated_publishers[2].name = "Mutated"

        result = harness.measure_lookup(Organization("Publisher2", "Address2", 1902))
        assert result.get(LookupContainer.ORGANIZATION_LIST).found
        assert result.get(LookupContainer.STRING_LIST).found
        assert result.get(LookupContainer.ORGANIZATION_MAP_KEY).found
        assert result.get(LookupContainer.STRING_MAP_KEY).found
        assert result.get(LookupContainer.ORGANIZATION_MAP_VALUE).found is False

    def test_string_map_holds_its_own_publisher(self, generated_publishers, monkeypatch):
        copies = []
        original = Publisher.deep_copy

        def recording_deep_copy(self):
            copy = original(self)
            copies.append((self, copy))
            return copy

        monkeypatch.setattr(Publisher, "deep_copy", recording_deep_copy)
        CollectionHarness(4)

        assert len(copies) == 4
        for generated, (source, copy) in zip(generated_publishers, copies):
            assert source is generated
            assert copy is not generated
            assert copy.organization is not generated.organization
            assert copy == generated


# =============================================================================
# Result Sinks
# =============================================================================

class TestResultSinks:

    def test_in_memory_sink_receives_everything(self):
        sink = InMemoryResultSink()
        harness = CollectionHarness(20, sink=sink)
        harness.run_standard_probes()

        assert [label for label, _ in sink.started] == [
            "First element", "Middle element", "Last element", ABSENT_LABEL,
        ]
        assert len(sink.measurements) == 20
        assert len(sink.results) == 4

        sink.clear()
        assert sink.measurements == []

    def test_sink_call_sequence(self):
        sink = MagicMock()
        harness = CollectionHarness(5, sink=sink)
        result = harness.measure_lookup(harness.organizations[0], "First element")

        sink.begin_probe.assert_called_once_with("First element", result.probe)
        assert sink.record.call_count == 5
        sink.end_probe.assert_called_once_with(result)

    def test_console_sink_lines(self):
        stream = io.StringIO()
        harness = CollectionHarness(10, sink=ConsoleResultSink(stream=stream))
        harness.measure_lookup(harness.organizations[0], "First element")
        harness.measure_lookup(Organization("NotExist", "Nowhere", 1999), ABSENT_LABEL)

        lines = stream.getvalue().splitlines()
        assert lines[0] == "Searching: First element"
        assert lines[1].startswith("  list[Organization] - found: ")
        assert lines[1].endswith(" ms)")
        assert "  dict[Organization, Publisher] (by value) - found: " in lines[5]
        assert lines[6] == ""
        assert lines[7] == f"Searching: {ABSENT_LABEL}"
        assert all("not found" in line for line in lines[8:13])

    def test_no_sink_is_fine(self):
        harness = CollectionHarness(3)
        assert harness.sink is None
        assert harness.measure_lookup(harness.organizations[1]).found_everywhere
