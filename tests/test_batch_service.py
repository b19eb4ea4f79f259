"""Tests for the distance batch service."""

from __future__ import annotations

import logging

import requests

from zipdistance.adapters.distance import StaticDistanceAdapter, ok_payload
from zipdistance.domain.errors import TransportOrParseError
from zipdistance.domain.models import DistanceQueryResult, OutcomeRecord
from zipdistance.services import DistanceBatchService, mark_nearest

DESTINATION = "60601"
SOURCES = ["95131", "32220", "07305", "75050"]


class RecordingAdapter:
    """Adapter that records call order and counts overlapping queries."""

    def __init__(self, answers):
        self.answers = answers
        self.in_flight = 0
        self.overlaps = 0
        self.order = []

    def query_distance(self, source, destination):
        if self.in_flight:
            self.overlaps += 1
        self.in_flight += 1
        try:
            self.order.append(source)
            answer = self.answers[source]
            if isinstance(answer, Exception):
                raise answer
            return answer
        finally:
            self.in_flight -= 1


def _result(km: float) -> DistanceQueryResult:
    return DistanceQueryResult(distance_km=km, distance_miles=km * 0.6, duration_mins=km)


class TestComputeBatch:
    """Test suite for DistanceBatchService.compute_batch."""

    def test_end_to_end_example(self, service: DistanceBatchService):
        """The reference batch should flag 07305 and report the no-route error."""
        batch = service.compute_batch(SOURCES, DESTINATION)

        assert [r.source for r in batch] == SOURCES
        assert [r.is_min for r in batch] == [False, False, True, False]
        assert batch.records[3].error == "No route found from 75050 to 60601"
        assert batch.records[3].result is None
        assert batch.min_distance_km == 1270.46

    def test_nearest_can_be_first_source(self):
        """The first source should be flagged when it is the nearest."""
        adapter = StaticDistanceAdapter()
        adapter.add("95131", DESTINATION, ok_payload(500_000, 20_000))
        adapter.add("32220", DESTINATION, ok_payload(1_540_000, 51_000))
        adapter.add("07305", DESTINATION, ok_payload(1_270_456, 43_560))
        batch = DistanceBatchService(adapter).compute_batch(SOURCES, DESTINATION)

        assert [r.is_min for r in batch] == [True, False, False, False]
        assert batch.records[3].error == "No route found from 75050 to 60601"
        assert len(batch.nearest) == 1

    def test_all_distinct_successes_mark_exactly_one(self):
        """Distinct distances should flag exactly one record."""
        adapter = RecordingAdapter(
            {"a": _result(40.0), "b": _result(10.5), "c": _result(30.0), "d": _result(20.0)}
        )
        batch = DistanceBatchService(adapter).compute_batch(["a", "b", "c", "d"], "z")
        assert [r.source for r in batch.nearest] == ["b"]
        assert all(r.error is None for r in batch)
        assert adapter.overlaps == 0

    def test_ties_are_all_marked(self):
        """Every record sharing the minimum distance should be flagged."""
        adapter = RecordingAdapter(
            {"a": _result(12.35), "b": _result(50.0), "c": _result(12.35), "d": _result(99.0)}
        )
        batch = DistanceBatchService(adapter).compute_batch(["a", "b", "c", "d"], "z")
        assert [r.is_min for r in batch] == [True, False, True, False]
        assert adapter.overlaps == 0

    def test_all_failures_mark_nothing_and_do_not_raise(self):
        """A batch with no successes should flag nothing and not raise."""
        adapter = StaticDistanceAdapter()
        batch = DistanceBatchService(adapter).compute_batch(SOURCES, DESTINATION)

        assert len(batch) == 4
        assert all(r.error is not None for r in batch)
        assert batch.nearest == ()
        assert batch.min_distance_km is None
        assert batch.all_failed

    def test_queries_are_sequential_and_in_order(self):
        """Queries should run one at a time in input order."""
        adapter = RecordingAdapter(
            {
                "d": _result(4.0),
                "c": requests.ConnectionError("down"),
                "b": _result(2.0),
                "a": _result(1.0),
            }
        )
        batch = DistanceBatchService(adapter).compute_batch(["d", "c", "b", "a"], "z")
        assert adapter.order == ["d", "c", "b", "a"]
        assert adapter.overlaps == 0
        assert [r.source for r in batch] == ["d", "c", "b", "a"]
        assert [r.error for r in batch] == [None, "down", None, None]

    def test_overlapping_queries_are_counted(self):
        """The recording adapter should count a query started inside another."""
        adapter = RecordingAdapter({"inner": _result(1.0)})

        class Reentrant:
            def query_distance(self, source, destination):
                adapter.in_flight += 1
                try:
                    return adapter.query_distance(source, destination)
                finally:
                    adapter.in_flight -= 1

        DistanceBatchService(Reentrant()).compute_batch(["inner"], "z")
        assert adapter.overlaps == 1

    def test_failure_does_not_abort_remaining_queries(self, static_adapter):
        """A failing source should not stop the remaining queries."""
        static_adapter.add("95131", DESTINATION, TransportOrParseError("boom"))
        batch = DistanceBatchService(static_adapter).compute_batch(SOURCES, DESTINATION)

        assert len(static_adapter.calls) == 4
        assert batch.records[0].error == "boom"
        assert batch.records[2].is_min

    def test_unexpected_exception_message_is_kept(self, caplog):
        """Non-domain exceptions should be captured with their message."""
        adapter = RecordingAdapter(
            {"a": requests.ConnectionError("connection refused"), "b": _result(3.0)}
        )
        with caplog.at_level(logging.WARNING):
            batch = DistanceBatchService(adapter).compute_batch(["a", "b"], "z")
        assert batch.records[0].error == "connection refused"
        assert batch.records[1].is_min
        assert adapter.overlaps == 0
        assert "Unexpected error in distance query" in caplog.text

    def test_inputs_are_trimmed_but_source_kept_verbatim(self, static_adapter):
        """Queries use trimmed codes while records keep the raw input."""
        sources = ["  95131 ", "32220", "07305\t", "75050"]
        batch = DistanceBatchService(static_adapter).compute_batch(sources, " 60601 ")

        assert static_adapter.calls == [
            ("95131", "60601"),
            ("32220", "60601"),
            ("07305", "60601"),
            ("75050", "60601"),
        ]
        assert [r.source for r in batch] == sources
        assert batch.destination == " 60601 "

    def test_no_caching_across_batches(self, service, static_adapter):
        """Repeating a batch should query every pair again."""
        service.compute_batch(SOURCES, DESTINATION)
        service.compute_batch(SOURCES, DESTINATION)
        assert len(static_adapter.calls) == 8


class TestMarkNearest:
    """Test suite for mark_nearest."""

    def test_empty_input(self):
        """No records should give no flags and no minimum."""
        assert mark_nearest([]) == ((), None)

    def test_failures_are_never_marked(self):
        """Failed records should never be flagged as nearest."""
        records = [
            OutcomeRecord(source="a", error="x"),
            OutcomeRecord(source="b", result=_result(5.0)),
        ]
        flagged, min_km = mark_nearest(records)
        assert min_km == 5.0
        assert [r.is_min for r in flagged] == [False, True]


def test_format_batch(service):
    """format_batch should list the destination then one line per source."""
    text = service.format_batch(service.compute_batch(SOURCES, DESTINATION))
    lines = text.splitlines()
    assert lines[0] == "Destination: 60601"
    assert lines[3].endswith("(nearest)")
    assert lines[4] == "From 75050: No route found from 75050 to 60601"
