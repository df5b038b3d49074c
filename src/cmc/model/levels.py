# topmark:header:start
#
#   project      : CMC
#   file         : levels.py
#   file_relpath : src/cmc/model/levels.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hierarchical level of a code, computed from its structure alone.

The structural length of a code selects a *bucket level*:

| length          | bucket level         |
|-----------------|----------------------|
| 1               | 1                    |
| 2               | 2                    |
| 5               | 3                    |
| 8               | 4                    |
| even, > 8       | ``(length - 8) / 2 + 4`` |

Every other length is malformed and raises `StructuralError`. The first
three hierarchy hops therefore use variable widths (1, 3, 3 characters) and
every hop below level 4 adds exactly 2 characters.

The level of a code is its bucket level plus the offset of its branch
(the A-branch and the Z-branch use different depth conventions). Both root
codes are level 1.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cmc.config.logging import get_logger
from cmc.config.model import resolve_config
from cmc.constants import FIXED_STEP, FIXED_STEP_FROM, LENGTH_BUCKETS, ROOT_LEVEL
from cmc.errors import StructuralError
from cmc.model.code import is_z_branch, normalize

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cmc.config.logging import CmcLogger
    from cmc.config.model import SchemeConfig

logger: CmcLogger = get_logger(__name__)


def bucket_level(length: int) -> int | None:
    """Return the bucket level of a structural length, or None if inadmissible."""
    if length in LENGTH_BUCKETS:
        return LENGTH_BUCKETS[length]
    if length > FIXED_STEP_FROM and (length - FIXED_STEP_FROM) % FIXED_STEP == 0:
        return (length - FIXED_STEP_FROM) // FIXED_STEP + LENGTH_BUCKETS[FIXED_STEP_FROM]
    return None


def bucket_length(bucket: int) -> int:
    """Inverse of `bucket_level`: the structural length of a bucket level.

    Raises:
        ValueError: If ``bucket`` is not a positive level.
    """
    if bucket < 1:
        raise ValueError(f"Bucket levels start at 1, got {bucket}")
    for length, lvl in LENGTH_BUCKETS.items():
        if lvl == bucket:
            return length
    return FIXED_STEP_FROM + (bucket - LENGTH_BUCKETS[FIXED_STEP_FROM]) * FIXED_STEP


def is_well_formed(code: str, *, config: SchemeConfig | None = None) -> bool:
    """Whether ``code`` is a root or has an admissible structural length."""
    cfg: SchemeConfig = resolve_config(config)
    code = normalize(code)
    return code in cfg.roots or bucket_level(len(code)) is not None


def branch_offset(code: str, *, config: SchemeConfig | None = None) -> int:
    """Level offset of the branch ``code`` belongs to."""
    cfg: SchemeConfig = resolve_config(config)
    return cfg.z_branch_offset if is_z_branch(code, config=cfg) else cfg.a_branch_offset


def level(code: str, *, config: SchemeConfig | None = None) -> int:
    """Return the hierarchical depth of ``code`` (roots are level 1).

    Args:
        code (str): The code to resolve; normalized before analysis.
        config (SchemeConfig | None): Scheme settings (defaults when None).

    Returns:
        int: The level of the code.

    Raises:
        StructuralError: If the structural length of ``code`` has no bucket
            (this includes the empty code).
    """
    cfg: SchemeConfig = resolve_config(config)
    code = normalize(code)
    if code in cfg.roots:
        return ROOT_LEVEL

    bucket: int | None = bucket_level(len(code))
    if bucket is None:
        raise StructuralError(code, len(code))
    result: int = branch_offset(code, config=cfg) + bucket
    logger.trace("level(%r) = %d", code, result)
    return result


def levels(
    codes: Iterable[str],
    *,
    config: SchemeConfig | None = None,
) -> list[int | StructuralError]:
    """Batch form of `level`, preserving input order.

    Malformed codes do not abort the batch: their position holds the
    `StructuralError` instead of a level.

    Args:
        codes (Iterable[str]): Codes to resolve.
        config (SchemeConfig | None): Scheme settings (defaults when None).

    Returns:
        list[int | StructuralError]: One level (or error) per input code.
    """
    cfg: SchemeConfig = resolve_config(config)
    out: list[int | StructuralError] = []
    for code in codes:
        try:
            out.append(level(code, config=cfg))
        except StructuralError as exc:
            logger.debug("%s", exc)
            out.append(exc)
    return out
