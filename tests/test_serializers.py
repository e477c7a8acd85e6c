"""Tests for the exported/persisted record and the human-readable outputs."""

import pytest

from pagesim.serializers import from_record, share_message, summary, to_record, trace_lines
from replacement import InvalidCapacityError, SimulationError, run_simulation, simulate

CLASSIC = "1 2 3 4 1 2 5 1 2 3 4 5"


@pytest.fixture
def fifo():
    return run_simulation(CLASSIC, 3, "FIFO")


class TestRecord:
    def test_field_names_and_types(self, fifo) -> None:
        record = to_record(fifo, reference_string=CLASSIC, timestamp=1700000000000)
        assert record == {
            "timestamp": 1700000000000,
            "algorithm": "FIFO",
            "referenceString": CLASSIC,
            "frameCount": 3,
            "pageFaults": 9,
            "hitRatio": 0.25,
            "states": record["states"],
        }
        assert len(record["states"]) == 12
        assert record["states"][3] == {"frames": ["2", "3", "4"], "pageFault": True, "referenceIndex": 3}
        assert record["states"][7] == {"frames": ["1", "2", "5"], "pageFault": False, "referenceIndex": 7}

    def test_defaults(self) -> None:
        record = to_record(simulate([1, 2, 1], 2, "LRU"))
        assert record["referenceString"] == "1 2 1"
        assert record["states"][-1]["frames"] == ["1", "2"]
        assert isinstance(record["timestamp"], int) and record["timestamp"] > 0

    def test_from_record_rebuilds_result(self, fifo) -> None:
        assert from_record(to_record(fifo)) == fifo

    def test_from_record_rejects_tampered_counts(self, fifo) -> None:
        record = to_record(fifo)
        record["pageFaults"] = 3
        with pytest.raises(SimulationError):
            from_record(record)

    def test_from_record_rejects_tampered_states(self, fifo) -> None:
        record = to_record(fifo)
        record["states"][0]["pageFault"] = False
        with pytest.raises(SimulationError):
            from_record(record)

    def test_from_record_validates_inputs(self, fifo) -> None:
        record = to_record(fifo)
        record["frameCount"] = 0
        with pytest.raises(InvalidCapacityError):
            from_record(record)

    def test_from_record_needs_an_object(self) -> None:
        with pytest.raises(SimulationError):
            from_record(["not", "a", "record"])


def test_summary(fifo) -> None:
    assert summary(fifo) == {
        "algorithm": "FIFO",
        "frameCount": 3,
        "totalReferences": 12,
        "pageFaults": 9,
        "hits": 3,
        "hitRatio": 0.25,
        "faultRatio": 0.75,
    }


def test_share_message(fifo) -> None:
    text = share_message(fifo)
    assert text.splitlines()[0] == "Page Replacement Simulation Results"
    assert "Algorithm: FIFO" in text
    assert f"Reference String: {CLASSIC}" in text
    assert "Frame Count: 3" in text
    assert "Page Faults: 9" in text
    assert "Hit Ratio: 25.00%" in text
    assert "Fault Ratio: 75.00%" in text


def test_trace_lines(fifo) -> None:
    lines = trace_lines(fifo)
    assert len(lines) == 12
    assert lines[0] == "t=0: ref=1 -> FAULT frames=[1]"
    assert lines[3] == "t=3: ref=4 -> FAULT evict=1 frames=[2 3 4]"
    assert lines[7] == "t=7: ref=1 -> HIT frames=[1 2 5]"
