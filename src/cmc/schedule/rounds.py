# topmark:header:start
#
#   project      : CMC
#   file         : rounds.py
#   file_relpath : src/cmc/schedule/rounds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dependency-safe round scheduling for batched deletes and creates.

Deletes run bottom-up: a code may only be deleted once its whole subtree is
gone, so a leaf gets round 1 and every ancestor waits one extra round per
level separating it from its deepest descendant.

Creates run top-down: the round of a code is the number of hops from it to
its nearest ancestor that already exists in the inventory.

Both schedulers are pure functions of their inputs. The batch forms index
the inventory and the request batch once and reuse that index per code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cmc.config.logging import get_logger
from cmc.config.model import resolve_config
from cmc.model.ancestry import iter_descendants, parent
from cmc.model.code import is_blank, normalize
from cmc.model.levels import level
from cmc.model.membership import MembershipIndex
from cmc.schedule.outcomes import ScheduleOutcome, ScheduleStatus

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from cmc.config.logging import CmcLogger
    from cmc.config.model import SchemeConfig

logger: CmcLogger = get_logger(__name__)


def _finish(outcome: ScheduleOutcome, force_load: bool) -> ScheduleOutcome:
    if outcome.status.is_rejection:
        logger.debug("%s -> %s", outcome.code, outcome.status.value)
    return outcome.force() if force_load else outcome


# --- Deletes ---


def _delete_round(
    code: str,
    delete_index: MembershipIndex,
    inventory: Sequence[str],
    inventory_index: MembershipIndex,
    cfg: SchemeConfig,
) -> ScheduleOutcome:
    if is_blank(code):
        return ScheduleOutcome.empty(code)
    code = normalize(code)
    if code not in inventory_index:
        return ScheduleOutcome.classified(code, ScheduleStatus.NOT_FOUND)

    subtree: list[str] = list(iter_descendants(code, inventory, direct_only=False, config=cfg))
    if not subtree:
        logger.trace("delete %r: leaf, round 1", code)
        return ScheduleOutcome.scheduled(code, 1)

    if not delete_index.all_present(subtree):
        return ScheduleOutcome.classified(code, ScheduleStatus.CHILDREN_NOT_IN_INVENTORY)

    deepest: int = max(level(d, config=cfg) for d in subtree)
    round_: int = deepest - level(code, config=cfg) + 1
    logger.trace(
        "delete %r: %d descendants, deepest level %d, round %d",
        code,
        len(subtree),
        deepest,
        round_,
    )
    return ScheduleOutcome.scheduled(code, round_)


def delete_round(
    code: str,
    delete_batch: Iterable[str],
    inventory: Iterable[str],
    *,
    force_load: bool | None = None,
    config: SchemeConfig | None = None,
) -> ScheduleOutcome:
    """Return the deletion round of ``code``.

    Rules, first match wins:

    1. blank ``code`` -> EMPTY;
    2. ``code`` absent from ``inventory`` -> NOT_FOUND;
    3. no descendants in ``inventory`` -> round 1;
    4. a descendant absent from ``delete_batch`` -> CHILDREN_NOT_IN_INVENTORY;
    5. otherwise round = deepest descendant level - level of ``code`` + 1.

    Args:
        code (str): The code to delete.
        delete_batch (Iterable[str]): All codes requested for deletion.
        inventory (Iterable[str]): The complete set of existing codes.
        force_load (bool | None): Substitute round 0 for classifications;
            None inherits ``config.force_load``.
        config (SchemeConfig | None): Scheme settings (defaults when None).

    Returns:
        ScheduleOutcome: The round or classification.

    Raises:
        StructuralError: If the subtree of ``code`` holds a malformed code.
    """
    return delete_rounds([code], delete_batch, inventory, force_load=force_load, config=config)[0]


def delete_rounds(
    codes: Iterable[str],
    delete_batch: Iterable[str],
    inventory: Iterable[str],
    *,
    force_load: bool | None = None,
    config: SchemeConfig | None = None,
) -> list[ScheduleOutcome]:
    """Batch form of `delete_round`, preserving the order of ``codes``."""
    cfg: SchemeConfig = resolve_config(config)
    force: bool = cfg.force_load if force_load is None else force_load
    inventory_list: list[str] = list(inventory)
    inventory_index = MembershipIndex(inventory_list)
    delete_index = MembershipIndex(delete_batch)
    return [
        _finish(_delete_round(c, delete_index, inventory_list, inventory_index, cfg), force)
        for c in codes
    ]


# --- Creates ---


def _create_round(
    code: str,
    create_index: MembershipIndex,
    inventory_index: MembershipIndex,
    root_code: str,
    cfg: SchemeConfig,
) -> ScheduleOutcome:
    if is_blank(code):
        return ScheduleOutcome.empty(code)
    requested: str = normalize(code)

    current: str = requested
    depth: int = 0
    ancestor_missing: bool = False
    # Walk up until an existing code is found; parent() shortens the code
    # at every hop and ends at "" above a root.
    while current:
        up: str = parent(current, config=cfg)
        ancestor_missing = ancestor_missing or (
            up not in create_index and up not in inventory_index
        )
        if current in inventory_index:
            if depth == 0:
                return ScheduleOutcome.classified(requested, ScheduleStatus.EXCLUDED)
            if ancestor_missing and current != root_code:
                logger.trace("create %r: gap above existing ancestor %r", requested, current)
                return ScheduleOutcome.classified(requested, ScheduleStatus.MISSING_PARENT)
            logger.trace(
                "create %r: nearest existing ancestor %r, round %d", requested, current, depth
            )
            return ScheduleOutcome.scheduled(requested, depth)
        current = up
        depth += 1

    logger.trace("create %r: no existing ancestor", requested)
    return ScheduleOutcome.empty(requested)


def create_round(
    code: str,
    create_batch: Iterable[str],
    inventory: Iterable[str],
    root_code: str | None = None,
    *,
    force_load: bool | None = None,
    config: SchemeConfig | None = None,
) -> ScheduleOutcome:
    """Return the creation round of ``code``.

    Walks from ``code`` towards its root, counting hops until it reaches a
    code present in ``inventory``:

    - ``code`` itself exists -> EXCLUDED (round 0, nothing to create);
    - some code on the walk, the existing ancestor included, has a parent
      absent from both ``create_batch`` and ``inventory`` -> MISSING_PARENT,
      unless the existing ancestor is ``root_code``;
    - otherwise the hop count is the round;
    - the walk runs past the root without finding an existing code
      (empty inventory, malformed code) -> EMPTY.

    Args:
        code (str): The code to create.
        create_batch (Iterable[str]): All codes requested for creation.
        inventory (Iterable[str]): The complete set of existing codes.
        root_code (str | None): Existing ancestor allowed to have no parent;
            None means the A-branch root.
        force_load (bool | None): Substitute round 0 for classifications;
            None inherits ``config.force_load``.
        config (SchemeConfig | None): Scheme settings (defaults when None).

    Returns:
        ScheduleOutcome: The round or classification.
    """
    return create_rounds(
        [code], create_batch, inventory, root_code, force_load=force_load, config=config
    )[0]


def create_rounds(
    codes: Iterable[str],
    create_batch: Iterable[str],
    inventory: Iterable[str],
    root_code: str | None = None,
    *,
    force_load: bool | None = None,
    config: SchemeConfig | None = None,
) -> list[ScheduleOutcome]:
    """Batch form of `create_round`, preserving the order of ``codes``."""
    cfg: SchemeConfig = resolve_config(config)
    force: bool = cfg.force_load if force_load is None else force_load
    root: str = normalize(root_code) if root_code is not None else cfg.root_a
    inventory_index = MembershipIndex(inventory)
    create_index = MembershipIndex(create_batch)
    return [
        _finish(_create_round(c, create_index, inventory_index, root, cfg), force) for c in codes
    ]
