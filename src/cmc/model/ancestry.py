# topmark:header:start
#
#   project      : CMC
#   file         : ancestry.py
#   file_relpath : src/cmc/model/ancestry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Navigation between a code, its ancestors and its descendants.

Ancestors are derived from the code alone: the parent of a code is the prefix
whose length is the structural length of the level above. Descendants need
an inventory (the complete set of existing codes) to search.

Policies:
    - `parent` never raises on malformed input; it returns ``""``.
    - `children` and friends propagate `StructuralError` when ``code`` or a
      candidate inventory entry is malformed. Blank inventory entries are
      skipped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cmc.config.logging import get_logger
from cmc.config.model import resolve_config
from cmc.errors import StructuralError
from cmc.model.code import is_blank, normalize
from cmc.model.levels import bucket_length, bucket_level, level

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from cmc.config.logging import CmcLogger
    from cmc.config.model import SchemeConfig

logger: CmcLogger = get_logger(__name__)


# --- Ancestors ---


def _parent_once(code: str, cfg: SchemeConfig) -> str:
    """Return the direct parent of a normalized code.

    Single-character codes hang under the A-branch root.

    Raises:
        StructuralError: If ``code`` has an inadmissible length.
    """
    if code in cfg.roots:
        return ""
    bucket: int | None = bucket_level(len(code))
    if bucket is None:
        raise StructuralError(code, len(code))
    if bucket == 1:
        return cfg.root_a
    return code[: bucket_length(bucket - 1)]


def parent(code: str, levels: int = 1, *, config: SchemeConfig | None = None) -> str:
    """Return the ancestor of ``code`` that is ``levels`` levels up.

    ``levels=0`` returns ``code`` unchanged. Going above a root, or starting
    from a malformed code, yields ``""``. A negative ``levels`` is a misuse of
    the argument rather than a property of ``code`` and is not converted.

    Args:
        code (str): The code to ascend from.
        levels (int): Number of levels to go up.
        config (SchemeConfig | None): Scheme settings (defaults when None).

    Returns:
        str: The normalized ancestor code, or ``""``.

    Raises:
        ValueError: If ``levels`` is negative.
    """
    if levels < 0:
        raise ValueError(f"levels must be >= 0, got {levels}")
    if levels == 0:
        return code

    cfg: SchemeConfig = resolve_config(config)
    current: str = normalize(code)
    for _ in range(levels):
        if not current:
            break
        try:
            current = _parent_once(current, cfg)
        except StructuralError as exc:
            logger.debug("parent(%r): %s", code, exc)
            return ""
    logger.trace("parent(%r, %d) = %r", code, levels, current)
    return current


def parents(
    codes: Iterable[str],
    levels: int = 1,
    *,
    config: SchemeConfig | None = None,
) -> list[str]:
    """Batch form of `parent`, preserving input order."""
    cfg: SchemeConfig = resolve_config(config)
    return [parent(c, levels, config=cfg) for c in codes]


def ancestors(code: str, *, config: SchemeConfig | None = None) -> list[str]:
    """Return every ancestor of ``code``, nearest first, ending at its root.

    Malformed codes and roots have no ancestors.
    """
    cfg: SchemeConfig = resolve_config(config)
    out: list[str] = []
    current: str = parent(code, config=cfg)
    while current:
        out.append(current)
        current = parent(current, config=cfg)
    return out


# --- Descendants ---


def _is_candidate(code: str, entry: str, cfg: SchemeConfig) -> bool:
    """Whether ``entry`` lies in the subtree rooted at ``code``, by structure."""
    if code == cfg.root_a:
        return not entry.startswith(cfg.root_z)
    if code == cfg.root_z:
        return entry.startswith(cfg.root_z)
    return entry.startswith(code)


def iter_descendants(
    code: str,
    inventory: Iterable[str],
    *,
    direct_only: bool = True,
    config: SchemeConfig | None = None,
) -> Iterator[str]:
    """Yield the descendants of ``code`` found in ``inventory``, in inventory order.

    Args:
        code (str): A non-blank code.
        inventory (Iterable[str]): The complete set of existing codes.
        direct_only (bool): Only yield entries exactly one level below ``code``.
        config (SchemeConfig | None): Scheme settings (defaults when None).

    Yields:
        str: Normalized descendant codes.

    Raises:
        StructuralError: If ``code`` or a candidate entry is malformed.
    """
    cfg: SchemeConfig = resolve_config(config)
    code = normalize(code)
    base: int = level(code, config=cfg)
    for raw in inventory:
        entry: str = normalize(raw)
        if is_blank(entry) or not _is_candidate(code, entry, cfg):
            continue
        depth: int = level(entry, config=cfg)
        if (depth == base + 1) if direct_only else (depth > base):
            yield entry


def children(
    code: str,
    inventory: Iterable[str],
    *,
    direct_only: bool = True,
    if_empty: Sequence[str] | None = None,
    config: SchemeConfig | None = None,
) -> list[str]:
    """Return the children of ``code`` within ``inventory``.

    With ``direct_only`` the result holds the entries one level below
    ``code``; otherwise the whole subtree below it. For the A-branch root
    every non-Z-branch entry is a candidate, for the Z-branch root every
    Z-branch entry; any other code must be a literal prefix of its children.

    Args:
        code (str): The code whose children are requested.
        inventory (Iterable[str]): The complete set of existing codes.
        direct_only (bool): Restrict to direct children.
        if_empty (Sequence[str] | None): Returned (as a list) when ``code`` is
            blank or has no children; ``[]`` when None.
        config (SchemeConfig | None): Scheme settings (defaults when None).

    Returns:
        list[str]: Normalized children in inventory order, or ``if_empty``.

    Raises:
        StructuralError: If ``code`` or a candidate entry is malformed.
    """
    fallback: list[str] = list(if_empty) if if_empty is not None else []
    if is_blank(code):
        return fallback
    found: list[str] = list(
        iter_descendants(code, inventory, direct_only=direct_only, config=config)
    )
    logger.trace("children(%r, direct_only=%s) = %s", code, direct_only, found)
    return found or fallback


def children_count(
    code: str,
    inventory: Iterable[str],
    *,
    direct_only: bool = True,
    config: SchemeConfig | None = None,
) -> int:
    """Number of children of ``code`` within ``inventory`` (0 when none).

    Raises:
        StructuralError: If ``code`` or a candidate entry is malformed.
    """
    if is_blank(code):
        return 0
    return sum(1 for _ in iter_descendants(code, inventory, direct_only=direct_only, config=config))


def children_counts(
    codes: Iterable[str],
    inventory: Sequence[str],
    *,
    direct_only: bool = True,
    config: SchemeConfig | None = None,
) -> list[int]:
    """Batch form of `children_count`, preserving input order."""
    return [
        children_count(c, inventory, direct_only=direct_only, config=config) for c in codes
    ]


def last_child(
    code: str,
    inventory: Iterable[str],
    *,
    config: SchemeConfig | None = None,
) -> str:
    """Return the lexicographically greatest direct child of ``code``, or ``""``."""
    if is_blank(code):
        return ""
    return max(iter_descendants(code, inventory, direct_only=True, config=config), default="")


def last_children(
    codes: Iterable[str],
    inventory: Sequence[str],
    *,
    config: SchemeConfig | None = None,
) -> list[str]:
    """Batch form of `last_child`, preserving input order."""
    return [last_child(c, inventory, config=config) for c in codes]
