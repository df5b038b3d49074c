# topmark:header:start
#
#   project      : CMC
#   file         : strategies_cmc.py
#   file_relpath : tests/strategies_cmc.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating well-formed codes and inventories.

Codes are grown one hierarchy hop at a time using the segment widths of the
scheme, so every generated code and all of its ancestors are well formed.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Literal

from hypothesis import strategies as st

from cmc.model.ancestry import ancestors

Draw = Callable[[st.SearchStrategy[Any]], Any]

Branch = Literal["A", "Z"]

SEGMENT_ALPHABET: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
# First character of an A-branch code: anything but the two root codes.
A_FIRST_ALPHABET: str = SEGMENT_ALPHABET.replace("A", "").replace("Z", "")

# Characters added per hop below the root, by branch. Deeper hops add 2.
A_WIDTHS: tuple[int, ...] = (1, 1, 3, 3)
Z_WIDTHS: tuple[int, ...] = (2, 3, 3)
FIXED_WIDTH: int = 2

MAX_DEPTH: int = 8


def _widths(branch: Branch, hops: int) -> list[int]:
    base: tuple[int, ...] = A_WIDTHS if branch == "A" else Z_WIDTHS
    return [base[i] if i < len(base) else FIXED_WIDTH for i in range(hops)]


@st.composite
def s_code(draw: Draw, branch: Branch | None = None, min_hops: int = 1) -> str:
    """Draw a well-formed, non-root code ``min_hops``..``MAX_DEPTH`` hops below its root."""
    chosen: Branch = branch or draw(st.sampled_from(("A", "Z")))
    hops: int = draw(st.integers(min_value=min_hops, max_value=MAX_DEPTH))
    code: str = "" if chosen == "A" else "Z"
    for i, width in enumerate(_widths(chosen, hops)):
        if chosen == "A" and i == 0:
            code += draw(st.sampled_from(A_FIRST_ALPHABET))
            continue
        if chosen == "Z" and i == 0:
            width -= 1  # "Z" itself is the first character
        code += draw(st.text(alphabet=SEGMENT_ALPHABET, min_size=width, max_size=width))
    return code


def closed_inventory(codes: list[str]) -> list[str]:
    """Return ``codes`` plus all of their ancestors, de-duplicated, in first-seen order."""
    seen: dict[str, None] = {}
    for code in codes:
        for c in (*reversed(ancestors(code)), code):
            seen.setdefault(c, None)
    return list(seen)


@st.composite
def s_inventory(draw: Draw, max_codes: int = 12) -> list[str]:
    """Draw an inventory closed under ``parent`` (both roots included)."""
    leaves: list[str] = draw(st.lists(s_code(), min_size=1, max_size=max_codes))
    return closed_inventory(["A", "Z", *leaves])
