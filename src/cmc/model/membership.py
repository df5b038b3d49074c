# topmark:header:start
#
#   project      : CMC
#   file         : membership.py
#   file_relpath : src/cmc/model/membership.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exact-match membership checks between code collections.

Matching is on normalized codes (case-insensitive) and exact, never by prefix.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cmc.model.code import is_blank, normalize

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class MembershipIndex:
    """A reusable, read-only index over a search set of codes.

    Args:
        search_set (Iterable[str]): The codes to index. Duplicates are harmless;
            blank codes are never members.
    """

    __slots__ = ("_codes",)

    def __init__(self, search_set: Iterable[str]) -> None:
        self._codes: frozenset[str] = frozenset(
            n for n in map(normalize, search_set) if not is_blank(n)
        )

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and normalize(code) in self._codes

    def __len__(self) -> int:
        return len(self._codes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._codes)

    def __repr__(self) -> str:
        return f"MembershipIndex({len(self._codes)} codes)"

    def contains(self, code: str) -> bool:
        """Whether ``code`` is in the index."""
        return normalize(code) in self._codes

    def all_present(self, find_values: Iterable[str]) -> bool:
        """Whether every code of ``find_values`` is in the index (True when empty)."""
        return all(self.contains(c) for c in find_values)

    def presence(self, find_values: Iterable[str]) -> list[bool]:
        """Per-element membership of ``find_values``, preserving order."""
        return [self.contains(c) for c in find_values]


def all_present(find_values: Iterable[str], search_set: Iterable[str]) -> bool:
    """Return True iff every element of ``find_values`` exists in ``search_set``.

    An empty ``find_values`` is vacuously present.
    """
    return MembershipIndex(search_set).all_present(find_values)


def presence(find_values: Iterable[str], search_set: Iterable[str]) -> list[bool]:
    """Batch form of `all_present`: one boolean per element of ``find_values``."""
    return MembershipIndex(search_set).presence(find_values)
