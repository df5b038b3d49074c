# topmark:header:start
#
#   project      : CMC
#   file         : code.py
#   file_relpath : src/cmc/model/code.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical form of a code and the structural facts derived from it."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cmc.config.model import resolve_config

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cmc.config.model import SchemeConfig


def normalize(code: str) -> str:
    """Return the canonical (uppercase) form of ``code``.

    Raises:
        TypeError: If ``code`` is not a string.
    """
    if not isinstance(code, str):
        raise TypeError(f"A code must be a string, got {type(code).__name__}")
    return code.upper()


def normalize_all(codes: Iterable[str]) -> list[str]:
    """Normalize every code of ``codes``, preserving order."""
    return [normalize(c) for c in codes]


def structural_length(code: str) -> int:
    """Character length of ``code`` after normalization."""
    return len(normalize(code))


def is_blank(code: str) -> bool:
    """Whether ``code`` is empty or whitespace only.

    The schedulers and the children lookups treat a whitespace-only code
    like the empty code: it schedules as EMPTY and has no children.
    """
    return not code.strip()


def is_root(code: str, *, config: SchemeConfig | None = None) -> bool:
    """Whether ``code`` is one of the two reserved root codes."""
    return normalize(code) in resolve_config(config).roots


def is_z_branch(code: str, *, config: SchemeConfig | None = None) -> bool:
    """Whether ``code`` belongs to the Z-branch tree (starts with the Z root)."""
    cfg: SchemeConfig = resolve_config(config)
    code = normalize(code)
    return bool(code) and code.startswith(cfg.root_z)
