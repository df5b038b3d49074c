# topmark:header:start
#
#   project      : CMC
#   file         : plan.py
#   file_relpath : src/cmc/schedule/plan.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bucket the outcomes of a whole request batch into an execution plan.

A `RoundPlan` groups scheduled codes by round (execution order), rejected
codes by classification, and codes that need no work. It is presentation
free: callers render or execute it.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from cmc.config.logging import get_logger
from cmc.schedule.outcomes import ScheduleStatus
from cmc.schedule.rounds import create_rounds, delete_rounds

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from cmc.config.logging import CmcLogger
    from cmc.config.model import SchemeConfig
    from cmc.schedule.outcomes import ScheduleOutcome

logger: CmcLogger = get_logger(__name__)


class PlanKind(Enum):
    """Which operation a plan schedules."""

    DELETE = "delete"
    CREATE = "create"


@dataclass(frozen=True)
class RoundPlan:
    """Execution plan of a delete or create batch.

    Attributes:
        kind (PlanKind): The planned operation.
        outcomes (tuple[ScheduleOutcome, ...]): Per-code outcomes, in request order.
    """

    kind: PlanKind
    outcomes: tuple[ScheduleOutcome, ...]

    @property
    def rounds(self) -> dict[int, list[str]]:
        """Scheduled codes by round, ascending; request order within a round."""
        by_round: dict[int, list[str]] = {}
        for o in self.outcomes:
            if o.is_scheduled and o.round is not None:
                by_round.setdefault(o.round, []).append(o.code)
        return dict(sorted(by_round.items()))

    @property
    def rejected(self) -> dict[ScheduleStatus, list[str]]:
        """Codes that cannot run as submitted, by classification."""
        out: dict[ScheduleStatus, list[str]] = {}
        for o in self.outcomes:
            if not o.forced and o.status.is_rejection:
                out.setdefault(o.status, []).append(o.code)
        return out

    @property
    def skipped(self) -> list[str]:
        """Codes needing no work: blank or unanchored input and (unforced) existing codes."""
        return [
            o.code
            for o in self.outcomes
            if not o.is_scheduled and not o.status.is_rejection
        ]

    @property
    def is_executable(self) -> bool:
        """Whether no code of the batch was rejected."""
        return not self.rejected

    def iter_rounds(self) -> Iterator[tuple[int, list[str]]]:
        """Yield ``(round, codes)`` pairs in execution order."""
        yield from self.rounds.items()

    def counts(self) -> dict[str, int]:
        """Number of outcomes per status value; forced outcomes count as ``forced``."""
        counter: Counter[str] = Counter(
            "forced" if o.forced else o.status.value for o in self.outcomes
        )
        return dict(counter)


def _plan(kind: PlanKind, outcomes: list[ScheduleOutcome]) -> RoundPlan:
    plan = RoundPlan(kind=kind, outcomes=tuple(outcomes))
    logger.debug("%s plan: %s", kind.value, plan.counts())
    return plan


def plan_deletes(
    delete_batch: Iterable[str],
    inventory: Iterable[str],
    *,
    force_load: bool | None = None,
    config: SchemeConfig | None = None,
) -> RoundPlan:
    """Schedule every code of ``delete_batch`` and bucket the outcomes.

    Args:
        delete_batch (Iterable[str]): Codes requested for deletion.
        inventory (Iterable[str]): The complete set of existing codes.
        force_load (bool | None): Fold classifications into round 0;
            None inherits ``config.force_load``.
        config (SchemeConfig | None): Scheme settings (defaults when None).

    Returns:
        RoundPlan: The delete plan; round 1 runs first.
    """
    batch: list[str] = list(delete_batch)
    return _plan(
        PlanKind.DELETE,
        delete_rounds(batch, batch, inventory, force_load=force_load, config=config),
    )


def plan_creates(
    create_batch: Iterable[str],
    inventory: Iterable[str],
    root_code: str | None = None,
    *,
    force_load: bool | None = None,
    config: SchemeConfig | None = None,
) -> RoundPlan:
    """Schedule every code of ``create_batch`` and bucket the outcomes.

    Args:
        create_batch (Iterable[str]): Codes requested for creation.
        inventory (Iterable[str]): The complete set of existing codes.
        root_code (str | None): See [`create_round`][cmc.schedule.rounds.create_round].
        force_load (bool | None): Fold classifications into round 0;
            None inherits ``config.force_load``.
        config (SchemeConfig | None): Scheme settings (defaults when None).

    Returns:
        RoundPlan: The create plan; round 1 runs first.
    """
    batch: list[str] = list(create_batch)
    return _plan(
        PlanKind.CREATE,
        create_rounds(batch, batch, inventory, root_code, force_load=force_load, config=config),
    )
