# topmark:header:start
#
#   project      : CMC
#   file         : api.py
#   file_relpath : src/cmc/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public CMC API (stable surface).

Every operation comes in a scalar form and a batch form that preserves input
order; nothing auto-collapses single-element batches.

Configuration contract
----------------------
- Functions accept ``config`` as a frozen [`cmc.config.SchemeConfig`][], as a
  plain **mapping** mirroring the TOML shape, or ``None`` for the defaults.
  Mappings are layered over the defaults and frozen before use.

```python
from cmc import api

api.level("ZB01", config={"levels": {"z_branch_offset": 1}})
```
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from cmc.config.model import DEFAULT_CONFIG, MutableSchemeConfig, SchemeConfig
from cmc.constants import CMC_VERSION
from cmc.errors import CmcConfigError, CmcError, StructuralError
from cmc.model import ancestry, levels as _levels, membership
from cmc.schedule import plan as _plan
from cmc.schedule import rounds
from cmc.schedule.outcomes import ScheduleOutcome, ScheduleStatus
from cmc.schedule.plan import PlanKind, RoundPlan

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

ConfigLike = SchemeConfig | Mapping[str, Any] | None

__all__: list[str] = [
    "CmcConfigError",
    "CmcError",
    "PlanKind",
    "RoundPlan",
    "ScheduleOutcome",
    "ScheduleStatus",
    "SchemeConfig",
    "StructuralError",
    "all_present",
    "children",
    "children_count",
    "children_counts",
    "create_round",
    "create_rounds",
    "delete_round",
    "delete_rounds",
    "last_child",
    "last_children",
    "level",
    "levels",
    "parent",
    "parents",
    "plan_creates",
    "plan_deletes",
    "presence",
    "version",
]


def _config(config: ConfigLike) -> SchemeConfig:
    """Normalize the ``config`` argument to a frozen `SchemeConfig`."""
    if config is None:
        return DEFAULT_CONFIG
    if isinstance(config, SchemeConfig):
        return config
    if isinstance(config, Mapping):
        draft: MutableSchemeConfig = MutableSchemeConfig.from_defaults().merge_with(
            MutableSchemeConfig.from_toml_dict(config)
        )
        return draft.freeze()
    raise CmcConfigError(f"Unsupported config type: {type(config).__name__}")


def version() -> str:
    """Return the installed CMC version."""
    return CMC_VERSION


# --- Levels ---


def level(code: str, *, config: ConfigLike = None) -> int:
    """Level of ``code``; raises `StructuralError` for malformed codes."""
    return _levels.level(code, config=_config(config))


def levels(codes: Iterable[str], *, config: ConfigLike = None) -> list[int | StructuralError]:
    """Level of each code; malformed codes yield their `StructuralError` in place."""
    return _levels.levels(codes, config=_config(config))


# --- Ancestry ---


def parent(code: str, levels: int = 1, *, config: ConfigLike = None) -> str:
    """Ancestor ``levels`` up, or ``""`` above a root or for malformed codes."""
    return ancestry.parent(code, levels, config=_config(config))


def parents(codes: Iterable[str], levels: int = 1, *, config: ConfigLike = None) -> list[str]:
    """Batch form of `parent`."""
    return ancestry.parents(codes, levels, config=_config(config))


def children(
    code: str,
    inventory: Iterable[str],
    *,
    direct_only: bool = True,
    if_empty: Sequence[str] | None = None,
    config: ConfigLike = None,
) -> list[str]:
    """Children (or all descendants) of ``code`` found in ``inventory``."""
    return ancestry.children(
        code, inventory, direct_only=direct_only, if_empty=if_empty, config=_config(config)
    )


def children_count(
    code: str,
    inventory: Iterable[str],
    *,
    direct_only: bool = True,
    config: ConfigLike = None,
) -> int:
    """Number of children (or descendants) of ``code`` in ``inventory``."""
    return ancestry.children_count(
        code, inventory, direct_only=direct_only, config=_config(config)
    )


def children_counts(
    codes: Iterable[str],
    inventory: Sequence[str],
    *,
    direct_only: bool = True,
    config: ConfigLike = None,
) -> list[int]:
    """Batch form of `children_count`."""
    return ancestry.children_counts(
        codes, inventory, direct_only=direct_only, config=_config(config)
    )


def last_child(code: str, inventory: Iterable[str], *, config: ConfigLike = None) -> str:
    """Greatest direct child of ``code`` in ``inventory``, or ``""``."""
    return ancestry.last_child(code, inventory, config=_config(config))


def last_children(
    codes: Iterable[str], inventory: Sequence[str], *, config: ConfigLike = None
) -> list[str]:
    """Batch form of `last_child`."""
    return ancestry.last_children(codes, inventory, config=_config(config))


# --- Membership ---


def all_present(find_values: Iterable[str], search_set: Iterable[str]) -> bool:
    """Whether every code of ``find_values`` is in ``search_set``."""
    return membership.all_present(find_values, search_set)


def presence(find_values: Iterable[str], search_set: Iterable[str]) -> list[bool]:
    """Per-element membership of ``find_values`` in ``search_set``."""
    return membership.presence(find_values, search_set)


# --- Scheduling ---


def delete_round(
    code: str,
    delete_batch: Iterable[str],
    inventory: Iterable[str],
    *,
    force_load: bool | None = None,
    config: ConfigLike = None,
) -> ScheduleOutcome:
    """Deletion round of ``code``, see [`cmc.schedule.rounds.delete_round`][]."""
    return rounds.delete_round(
        code, delete_batch, inventory, force_load=force_load, config=_config(config)
    )


def delete_rounds(
    codes: Iterable[str],
    delete_batch: Iterable[str],
    inventory: Iterable[str],
    *,
    force_load: bool | None = None,
    config: ConfigLike = None,
) -> list[ScheduleOutcome]:
    """Batch form of `delete_round`."""
    return rounds.delete_rounds(
        codes, delete_batch, inventory, force_load=force_load, config=_config(config)
    )


def create_round(
    code: str,
    create_batch: Iterable[str],
    inventory: Iterable[str],
    root_code: str | None = None,
    *,
    force_load: bool | None = None,
    config: ConfigLike = None,
) -> ScheduleOutcome:
    """Creation round of ``code``, see [`cmc.schedule.rounds.create_round`][]."""
    return rounds.create_round(
        code, create_batch, inventory, root_code, force_load=force_load, config=_config(config)
    )


def create_rounds(
    codes: Iterable[str],
    create_batch: Iterable[str],
    inventory: Iterable[str],
    root_code: str | None = None,
    *,
    force_load: bool | None = None,
    config: ConfigLike = None,
) -> list[ScheduleOutcome]:
    """Batch form of `create_round`."""
    return rounds.create_rounds(
        codes, create_batch, inventory, root_code, force_load=force_load, config=_config(config)
    )


def plan_deletes(
    delete_batch: Iterable[str],
    inventory: Iterable[str],
    *,
    force_load: bool | None = None,
    config: ConfigLike = None,
) -> RoundPlan:
    """Execution plan for a whole delete batch."""
    return _plan.plan_deletes(
        delete_batch, inventory, force_load=force_load, config=_config(config)
    )


def plan_creates(
    create_batch: Iterable[str],
    inventory: Iterable[str],
    root_code: str | None = None,
    *,
    force_load: bool | None = None,
    config: ConfigLike = None,
) -> RoundPlan:
    """Execution plan for a whole create batch."""
    return _plan.plan_creates(
        create_batch, inventory, root_code, force_load=force_load, config=_config(config)
    )
