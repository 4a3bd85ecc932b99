"""Tests for lazy fallback candidates."""

import logging

import pytest

from lazy_sequences import NoAcceptingCandidateError, first_accepted, lazy_candidates


class CallCounter:
    """Producer that records how often it was called."""

    def __init__(self, result):
        self.result = result
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.result


def test_last_candidate_accepted():
    """Test that rejected candidates are computed exactly once each."""
    producers = [CallCounter(None), CallCounter(""), CallCounter("10.0.0.1")]

    assert first_accepted(lazy_candidates(*producers)) == "10.0.0.1"
    assert [p.calls for p in producers] == [1, 1, 1]


def test_stops_at_first_accepted():
    """Test that later candidates are never computed."""
    producers = [CallCounter(None), CallCounter("203.0.113.7"), CallCounter("10.0.0.1")]

    assert first_accepted(lazy_candidates(*producers)) == "203.0.113.7"
    assert [p.calls for p in producers] == [1, 1, 0]


def test_no_candidate_accepted(caplog):
    """Test that the error is logged with its context and then raised."""
    producers = [CallCounter(None), CallCounter(0), CallCounter("")]
    context = {"api-gw-header": None, "cf-header": None, "requestIp": None}

    with caplog.at_level(logging.ERROR, logger="lazy_sequences.candidates"):
        with pytest.raises(NoAcceptingCandidateError, match="nothing fits") as exc_info:
            first_accepted(lazy_candidates(*producers), context=context, message="nothing fits")

    assert exc_info.value.context == context
    assert [p.calls for p in producers] == [1, 1, 1]
    assert len(caplog.records) == 1
    assert caplog.records[0].candidates == context
    assert "nothing fits" in caplog.records[0].getMessage()


def test_custom_accept_predicate():
    """Test accepting candidates with a custom predicate."""
    assert first_accepted([1, 5, 12, 20], accept=lambda n: n > 10) == 12


def test_producers_not_called_before_iteration():
    """Test that creating the candidate generator computes nothing."""
    producer = CallCounter("value")
    lazy_candidates(producer)
    assert producer.calls == 0
