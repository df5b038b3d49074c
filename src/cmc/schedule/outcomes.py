# topmark:header:start
#
#   project      : CMC
#   file         : outcomes.py
#   file_relpath : src/cmc/schedule/outcomes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tagged result of scheduling a single delete or create request.

A schedule outcome is either a round number or one of the classifications
below. Classifications are expected branches of batch planning and are
reported as values, never raised.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class ScheduleStatus(str, Enum):
    """Classification of a scheduled code.

    Values:
      - ``SCHEDULED``: The code has an executable round.
      - ``EMPTY``: Blank input; passed through without a result.
      - ``NOT_FOUND``: Delete of a code absent from the inventory.
      - ``CHILDREN_NOT_IN_INVENTORY``: Delete would orphan a descendant that is
        not part of the delete batch.
      - ``EXCLUDED``: Create of a code that already exists (no-op, round 0).
      - ``MISSING_PARENT``: Create with an ancestor absent from both the
        create batch and the inventory.
    """

    SCHEDULED = "scheduled"
    EMPTY = "empty"
    NOT_FOUND = "not_found"
    CHILDREN_NOT_IN_INVENTORY = "children_not_in_inventory"
    EXCLUDED = "excluded"
    MISSING_PARENT = "missing_parent"

    @property
    def label(self) -> str:
        """Report label of the classification (``""`` for SCHEDULED and EMPTY)."""
        return _LABELS.get(self, "")

    @property
    def is_rejection(self) -> bool:
        """Whether the request cannot be executed as submitted."""
        return self in (
            ScheduleStatus.NOT_FOUND,
            ScheduleStatus.CHILDREN_NOT_IN_INVENTORY,
            ScheduleStatus.MISSING_PARENT,
        )


_LABELS: dict[ScheduleStatus, str] = {
    ScheduleStatus.NOT_FOUND: "NOT FOUND",
    ScheduleStatus.CHILDREN_NOT_IN_INVENTORY: "CHILDREN NOT IN INVENTORY",
    ScheduleStatus.EXCLUDED: "EXCLUDED",
    ScheduleStatus.MISSING_PARENT: "MISSING PARENT",
}


@dataclass(frozen=True)
class ScheduleOutcome:
    """Outcome of scheduling one code.

    Attributes:
        code (str): The normalized code the outcome is about.
        status (ScheduleStatus): Classification; kept even when forced.
        round (int | None): Executable round. ``0`` for EXCLUDED (already
            exists) and for forced classifications, None when there is none.
        forced (bool): Whether force-load substituted round 0 for a classification.
    """

    code: str
    status: ScheduleStatus
    round: int | None = None
    forced: bool = False

    @classmethod
    def scheduled(cls, code: str, round_: int) -> ScheduleOutcome:
        """Outcome for a code executable in round ``round_``."""
        return cls(code=code, status=ScheduleStatus.SCHEDULED, round=round_)

    @classmethod
    def empty(cls, code: str = "") -> ScheduleOutcome:
        """Outcome for blank input, or a create walk that found nothing."""
        return cls(code=code, status=ScheduleStatus.EMPTY)

    @classmethod
    def classified(cls, code: str, status: ScheduleStatus) -> ScheduleOutcome:
        """Outcome for one of the non-round classifications."""
        return cls(
            code=code,
            status=status,
            round=0 if status is ScheduleStatus.EXCLUDED else None,
        )

    @property
    def is_scheduled(self) -> bool:
        """Whether the code gets a real round (SCHEDULED, or forced)."""
        return self.status is ScheduleStatus.SCHEDULED or self.forced

    @property
    def label(self) -> str:
        """Report label of the classification (``""`` when none applies)."""
        return "" if self.forced else self.status.label

    @property
    def value(self) -> int | str:
        """Round number if scheduled, otherwise the report label (``""`` for EMPTY)."""
        if self.is_scheduled and self.round is not None:
            return self.round
        return self.label

    def force(self) -> ScheduleOutcome:
        """Return this outcome with round 0 substituted for a classification.

        SCHEDULED and EMPTY outcomes are returned unchanged.
        """
        if self.status in (ScheduleStatus.SCHEDULED, ScheduleStatus.EMPTY):
            return self
        return replace(self, round=0, forced=True)

    def __str__(self) -> str:
        return f"{self.code}: {self.value}"
