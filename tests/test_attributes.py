"""Priority and deadline store tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from ledger.errors import ObjectiveNotFound, ParameterViolation
from ledger.milestone_ledger import MilestoneLedger
from ledger.stores.sql_store import SQLStore
from ledger.types import CallContext, DeadlineView, PriorityView


def build_ledger(tmp_path: Path) -> MilestoneLedger:
    store = SQLStore(db_path=tmp_path / "ledger.db")
    store.create_all()
    return MilestoneLedger(sql_store=store)


@pytest.mark.parametrize("level", [1, 2, 3])
def test_priority_in_range_is_stored(tmp_path: Path, level: int) -> None:
    ledger = build_ledger(tmp_path)
    ctx = CallContext(caller="alice")
    ledger.register("Run 5k", ctx=ctx)
    ledger.set_priority(level, ctx=ctx)

    assert ledger.get_priority("alice") == PriorityView(level=level)


@pytest.mark.parametrize("level", [0, 4, -1])
def test_priority_out_of_range_rejected(tmp_path: Path, level: int) -> None:
    ledger = build_ledger(tmp_path)
    ctx = CallContext(caller="alice")
    ledger.register("Run 5k", ctx=ctx)

    with pytest.raises(ParameterViolation):
        ledger.set_priority(level, ctx=ctx)
    with pytest.raises(ObjectiveNotFound):
        ledger.get_priority("alice")


def test_priority_requires_milestone(tmp_path: Path) -> None:
    ledger = build_ledger(tmp_path)

    with pytest.raises(ObjectiveNotFound):
        ledger.set_priority(2, ctx=CallContext(caller="alice"))
    with pytest.raises(ObjectiveNotFound):
        ledger.get_priority("alice")


def test_priority_upsert_replaces_level(tmp_path: Path) -> None:
    ledger = build_ledger(tmp_path)
    ctx = CallContext(caller="alice")
    ledger.register("Run 5k", ctx=ctx)
    ledger.set_priority(1, ctx=ctx)
    ledger.set_priority(3, ctx=ctx)

    assert ledger.get_priority("alice").level == 3


def test_deadline_is_absolute(tmp_path: Path) -> None:
    ledger = build_ledger(tmp_path)
    ledger.register("Run 5k", ctx=CallContext(caller="alice", height=10))
    ledger.set_deadline(25, ctx=CallContext(caller="alice", height=100))

    assert ledger.get_deadline("alice") == DeadlineView(target_height=125, alerted=False)

    ledger.set_deadline(5, ctx=CallContext(caller="alice", height=200))
    assert ledger.get_deadline("alice") == DeadlineView(target_height=205, alerted=False)


@pytest.mark.parametrize("offset", [0, -3])
def test_deadline_offset_must_be_positive(tmp_path: Path, offset: int) -> None:
    ledger = build_ledger(tmp_path)
    ctx = CallContext(caller="alice", height=50)
    ledger.register("Run 5k", ctx=ctx)

    with pytest.raises(ParameterViolation):
        ledger.set_deadline(offset, ctx=ctx)
    with pytest.raises(ObjectiveNotFound):
        ledger.get_deadline("alice")


def test_deadline_requires_milestone(tmp_path: Path) -> None:
    ledger = build_ledger(tmp_path)

    with pytest.raises(ObjectiveNotFound):
        ledger.set_deadline(10, ctx=CallContext(caller="alice", height=1))


def test_delete_leaves_orphan_priority_and_deadline(tmp_path: Path) -> None:
    ledger = build_ledger(tmp_path)
    ctx = CallContext(caller="alice", height=7)
    ledger.register("Run 5k", ctx=ctx)
    ledger.set_priority(2, ctx=ctx)
    ledger.set_deadline(3, ctx=ctx)
    ledger.delete(ctx=ctx)

    with pytest.raises(ObjectiveNotFound):
        ledger.get("alice")
    assert ledger.get_priority("alice") == PriorityView(level=2)
    assert ledger.get_deadline("alice") == DeadlineView(target_height=10, alerted=False)

    # Orphans cannot be updated until a milestone exists again.
    with pytest.raises(ObjectiveNotFound):
        ledger.set_priority(3, ctx=ctx)


def test_narrowed_priority_bounds(tmp_path: Path) -> None:
    store = SQLStore(db_path=tmp_path / "ledger.db")
    ledger = MilestoneLedger(sql_store=store, priority_min=2, priority_max=3)
    ctx = CallContext(caller="alice")
    ledger.register("Run 5k", ctx=ctx)
    ledger.set_priority(2, ctx=ctx)

    assert ledger.get_priority("alice").level == 2
    with pytest.raises(ParameterViolation):
        ledger.set_priority(1, ctx=ctx)


@pytest.mark.parametrize(
    "bounds",
    [
        {"priority_min": 3, "priority_max": 1},
        {"priority_min": 0, "priority_max": 3},
        {"priority_min": 1, "priority_max": 9},
        {"description_max_bytes": 500},
        {"description_max_bytes": 0},
    ],
)
def test_widened_or_inverted_limits_rejected(tmp_path: Path, bounds: dict[str, int]) -> None:
    store = SQLStore(db_path=tmp_path / "ledger.db")

    with pytest.raises(ValueError):
        MilestoneLedger(sql_store=store, **bounds)
