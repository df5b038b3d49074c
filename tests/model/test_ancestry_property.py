# topmark:header:start
#
#   project      : CMC
#   file         : test_ancestry_property.py
#   file_relpath : tests/model/test_ancestry_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests relating levels, parents and children on generated codes."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from cmc.model.ancestry import children, parent
from cmc.model.code import is_root
from cmc.model.levels import level
from tests.strategies_cmc import s_code, s_inventory


@settings(max_examples=200)
@given(code=s_code())
def test_parent_is_one_level_up(code: str) -> None:
    """level(parent(c)) == level(c) - 1 for every well-formed non-root code."""
    assert level(parent(code)) == level(code) - 1


@given(code=s_code())
def test_parent_zero_is_identity(code: str) -> None:
    """parent(c, 0) == c."""
    assert parent(code, 0) == code


@given(code=s_code(), n=st.integers(min_value=2, max_value=10))
def test_repeated_ascent_composes(code: str, n: int) -> None:
    """parent(c, n) == parent(parent(c), n - 1)."""
    assert parent(code, n) == parent(parent(code), n - 1)


@given(code=s_code())
def test_depth_minus_one_ascents_reach_a_root(code: str) -> None:
    """Exactly level(c) - 1 applications of parent reach a root."""
    depth: int = level(code)
    top: str = parent(code, depth - 1)
    assert is_root(top)
    assert not is_root(parent(code, depth - 2))
    assert parent(code, depth) == ""


@settings(max_examples=50)
@given(inventory=s_inventory())
def test_direct_children_subset_of_descendants(inventory: list[str]) -> None:
    """Direct children are always among all descendants, one level down."""
    for code in inventory:
        direct: list[str] = children(code, inventory)
        assert set(direct) <= set(children(code, inventory, direct_only=False))
        assert all(level(c) == level(code) + 1 for c in direct)
        assert all(parent(c) == code for c in direct)
