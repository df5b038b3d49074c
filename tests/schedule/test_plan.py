# topmark:header:start
#
#   project      : CMC
#   file         : test_plan.py
#   file_relpath : tests/schedule/test_plan.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for batch bucketing in `cmc.schedule.plan`."""

from __future__ import annotations

from cmc.schedule.outcomes import ScheduleStatus
from cmc.schedule.plan import PlanKind, RoundPlan, plan_creates, plan_deletes

INVENTORY: list[str] = ["A", "P", "PB", "PBA01", "PBA01A01"]


def test_plan_deletes_orders_bottom_up() -> None:
    """Leaves run first; the unknown code is rejected."""
    plan: RoundPlan = plan_deletes(["PB", "PBA01", "PBA01A01", "PX"], INVENTORY)
    assert plan.kind is PlanKind.DELETE
    assert plan.rounds == {1: ["PBA01A01"], 2: ["PBA01"], 3: ["PB"]}
    assert plan.rejected == {ScheduleStatus.NOT_FOUND: ["PX"]}
    assert plan.skipped == []
    assert not plan.is_executable
    assert plan.counts() == {"scheduled": 3, "not_found": 1}


def test_plan_deletes_groups_same_round_in_request_order() -> None:
    """Siblings share a round."""
    inv: list[str] = ["PB", "PBA01", "PBB02"]
    plan = plan_deletes(["PBB02", "PBA01", "PB"], inv)
    assert list(plan.iter_rounds()) == [(1, ["PBB02", "PBA01"]), (2, ["PB"])]
    assert plan.is_executable


def test_plan_deletes_force_load_folds_into_round_zero() -> None:
    """Forced classifications land in round 0 and nothing is rejected."""
    plan = plan_deletes(["PBA01", "PX"], INVENTORY, force_load=True)
    assert plan.rounds == {0: ["PBA01", "PX"]}
    assert plan.rejected == {}
    assert plan.is_executable
    assert plan.counts() == {"forced": 2}


def test_plan_creates_orders_top_down() -> None:
    """Ancestors are created before descendants; existing and blank codes are skipped."""
    plan = plan_creates(["PBA01A01", "PBA01", "PBB02", "PB", ""], ["A", "P", "PB"])
    assert plan.kind is PlanKind.CREATE
    assert plan.rounds == {1: ["PBA01", "PBB02"], 2: ["PBA01A01"]}
    assert plan.skipped == ["PB", ""]
    assert plan.is_executable


def test_plan_creates_rejects_gaps() -> None:
    """A missing intermediate code blocks its descendants."""
    plan = plan_creates(["PBA01A01"], ["A", "P", "PB"])
    assert plan.rounds == {}
    assert plan.rejected == {ScheduleStatus.MISSING_PARENT: ["PBA01A01"]}


def test_plan_creates_skips_unanchored_codes() -> None:
    """Codes with no existing ancestor at all are skipped, not rejected."""
    plan = plan_creates(["PB", "PBA"], [])
    assert plan.rounds == {}
    assert plan.skipped == ["PB", "PBA"]
    assert plan.is_executable
