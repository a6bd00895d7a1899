"""Tests for the serialisable report and snapshot models."""

from minigoap.schemas import ExecutionReport, PlanReport, StoreSnapshot
from minigoap.store import MemoryStore


def test_store_snapshot_round_trip():
    store = MemoryStore.from_mapping("World", {"fire": 9, "wood": 50})

    snapshot = StoreSnapshot.from_store(store)
    assert snapshot.name == "World"
    assert snapshot.values == {"fire": 9, "wood": 50}

    restored = snapshot.to_store()
    assert restored.snapshot() == store.snapshot()
    assert restored is not store


def test_store_snapshot_serialises_to_json():
    snapshot = StoreSnapshot(name="Agent", values={"wood": 2})
    assert StoreSnapshot.model_validate_json(snapshot.model_dump_json()) == snapshot


def test_plan_report_defaults():
    report = PlanReport(goal="survive")
    assert report.actions == []
    assert report.validated is False
    assert report.cost == 0


def test_execution_report_defaults():
    report = ExecutionReport()
    assert report.executed == []
    assert report.completed is False
    assert report.goal_reached is None
