# topmark:header:start
#
#   project      : CMC
#   file         : keys.py
#   file_relpath : src/cmc/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for CMC configuration.

These constants are the external configuration schema as it appears in
``cmc.toml`` (top-level keys) and in ``[tool.cmc]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by CMC configuration."""

    # pyproject.toml embedding
    SECTION_TOOL: Final[str] = "tool"
    SECTION_CMC: Final[str] = "cmc"

    # [roots]
    SECTION_ROOTS: Final[str] = "roots"

    KEY_ROOT_A: Final[str] = "a"
    KEY_ROOT_Z: Final[str] = "z"

    # [levels]
    SECTION_LEVELS: Final[str] = "levels"

    KEY_A_BRANCH_OFFSET: Final[str] = "a_branch_offset"
    KEY_Z_BRANCH_OFFSET: Final[str] = "z_branch_offset"

    # [schedule]
    SECTION_SCHEDULE: Final[str] = "schedule"

    KEY_FORCE_LOAD: Final[str] = "force_load"
