# topmark:header:start
#
#   project      : CMC
#   file         : test_rounds_property.py
#   file_relpath : tests/schedule/test_rounds_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for round scheduling on generated inventories.

1) Deleting a whole inventory schedules every leaf in round 1 and every code
   strictly after all of its descendants.
2) Creating a chain below an existing ancestor schedules it strictly outwards,
   and anything already in the inventory is excluded.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, given, settings

from cmc.model.ancestry import ancestors, children, parent
from cmc.schedule.outcomes import ScheduleStatus
from cmc.schedule.rounds import create_rounds, delete_rounds
from tests.strategies_cmc import s_code, s_inventory

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=50)
@given(inventory=s_inventory())
def test_delete_everything_is_bottom_up(inventory: list[str]) -> None:
    """A parent always runs after each of its children; leaves run first."""
    outcomes = delete_rounds(inventory, inventory, inventory)
    rounds: dict[str, int] = {}
    for o in outcomes:
        assert o.status is ScheduleStatus.SCHEDULED
        assert o.round is not None
        rounds[o.code] = o.round

    for code in inventory:
        if not children(code, inventory):
            assert rounds[code] == 1
        up: str = parent(code)
        if up in rounds:
            assert rounds[up] > rounds[code]


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=50)
@given(code=s_code(min_hops=2))
def test_create_chain_is_top_down(code: str) -> None:
    """With only the root and first hop present, each generation follows its parent."""
    chain: list[str] = [code, *ancestors(code)]  # nearest first, root last
    existing: list[str] = chain[-2:]
    to_create: list[str] = chain[:-2]

    outcomes = create_rounds(chain, to_create, existing, root_code=chain[-1])
    by_code = {o.code: o for o in outcomes}

    for c in existing:
        assert by_code[c].status is ScheduleStatus.EXCLUDED
        assert by_code[c].round == 0

    for c in to_create:
        assert by_code[c].status is ScheduleStatus.SCHEDULED
        up: str = parent(c)
        expected: int = 1 if up in existing else by_code[up].round + 1  # type: ignore[operator]
        assert by_code[c].round == expected
