# topmark:header:start
#
#   project      : CMC
#   file         : model.py
#   file_relpath : src/cmc/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scheme configuration: immutable runtime snapshot and mutable builder.

- `SchemeConfig` is ``frozen=True`` and is what the engine reads.
- `MutableSchemeConfig` collects layered values (defaults, TOML files,
  programmatic overrides) where ``None`` means *inherit*, and produces a
  validated `SchemeConfig` via `MutableSchemeConfig.freeze`.

TOML file I/O is delegated to [`cmc.config.io`][cmc.config.io].
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, Any

from cmc.config.keys import Toml
from cmc.config.logging import get_logger
from cmc.constants import ROOT_A, ROOT_Z
from cmc.errors import CmcConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from cmc.config.logging import CmcLogger

logger: CmcLogger = get_logger(__name__)

DEFAULT_A_BRANCH_OFFSET: int = 1
DEFAULT_Z_BRANCH_OFFSET: int = 0


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class SchemeConfig:
    """Immutable runtime configuration of the coding scheme.

    Attributes:
        root_a (str): Reserved code of the A-branch root.
        root_z (str): Reserved code of the Z-branch root. Any code starting with
            it belongs to the Z-branch.
        a_branch_offset (int): Level offset added to the bucket level of A-branch codes.
        z_branch_offset (int): Level offset added to the bucket level of Z-branch codes.
        force_load (bool): Substitute round 0 for every schedule classification.
        config_files (tuple[str, ...]): Configuration sources that contributed to this snapshot.
    """

    root_a: str = ROOT_A
    root_z: str = ROOT_Z
    a_branch_offset: int = DEFAULT_A_BRANCH_OFFSET
    z_branch_offset: int = DEFAULT_Z_BRANCH_OFFSET
    force_load: bool = False
    config_files: tuple[str, ...] = ()

    @property
    def roots(self) -> tuple[str, str]:
        """Both root codes, A-branch first."""
        return (self.root_a, self.root_z)

    def thaw(self) -> MutableSchemeConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableSchemeConfig: A mutable builder initialized from this snapshot.
        """
        return MutableSchemeConfig(
            root_a=self.root_a,
            root_z=self.root_z,
            a_branch_offset=self.a_branch_offset,
            z_branch_offset=self.z_branch_offset,
            force_load=self.force_load,
            config_files=list(self.config_files),
        )

    def to_toml_dict(self) -> dict[str, Any]:
        """Export the scheme settings as a plain TOML-shaped dict."""
        return {
            Toml.SECTION_ROOTS: {
                Toml.KEY_ROOT_A: self.root_a,
                Toml.KEY_ROOT_Z: self.root_z,
            },
            Toml.SECTION_LEVELS: {
                Toml.KEY_A_BRANCH_OFFSET: self.a_branch_offset,
                Toml.KEY_Z_BRANCH_OFFSET: self.z_branch_offset,
            },
            Toml.SECTION_SCHEDULE: {
                Toml.KEY_FORCE_LOAD: self.force_load,
            },
        }


DEFAULT_CONFIG: SchemeConfig = SchemeConfig()


def resolve_config(config: SchemeConfig | None) -> SchemeConfig:
    """Return ``config`` or the default configuration when it is None."""
    return DEFAULT_CONFIG if config is None else config


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableSchemeConfig:
    """Mutable configuration used while layering configuration sources.

    All scheme fields default to ``None`` (inherit). `merge_with` lets a later
    layer override an earlier one; `freeze` fills remaining gaps from the
    defaults and validates the result.

    Attributes:
        root_a (str | None): A-branch root code.
        root_z (str | None): Z-branch root code.
        a_branch_offset (int | None): Level offset of the A-branch.
        z_branch_offset (int | None): Level offset of the Z-branch.
        force_load (bool | None): Force-load scheduling mode.
        config_files (list[str]): Configuration sources, in merge order.
    """

    root_a: str | None = None
    root_z: str | None = None
    a_branch_offset: int | None = None
    z_branch_offset: int | None = None
    force_load: bool | None = None
    config_files: list[str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> SchemeConfig:
        """Freeze this builder into an immutable, validated `SchemeConfig`.

        Raises:
            CmcConfigError: If a root code is empty, both roots coincide,
                or an offset is negative.
        """
        root_a: str = (self.root_a if self.root_a is not None else ROOT_A).strip().upper()
        root_z: str = (self.root_z if self.root_z is not None else ROOT_Z).strip().upper()
        if not root_a or not root_z:
            raise CmcConfigError("Root codes must be non-empty strings.")
        if root_a == root_z:
            raise CmcConfigError(f"Root codes must differ (both are {root_a!r}).")

        a_offset: int = (
            self.a_branch_offset if self.a_branch_offset is not None else DEFAULT_A_BRANCH_OFFSET
        )
        z_offset: int = (
            self.z_branch_offset if self.z_branch_offset is not None else DEFAULT_Z_BRANCH_OFFSET
        )
        if a_offset < 0 or z_offset < 0:
            raise CmcConfigError(
                f"Branch offsets must be >= 0 (a={a_offset}, z={z_offset})."
            )

        frozen = SchemeConfig(
            root_a=root_a,
            root_z=root_z,
            a_branch_offset=a_offset,
            z_branch_offset=z_offset,
            force_load=bool(self.force_load),
            config_files=tuple(self.config_files),
        )
        logger.debug("Frozen scheme config: %r", frozen)
        return frozen

    @classmethod
    def from_defaults(cls) -> MutableSchemeConfig:
        """Return a builder populated with the built-in defaults."""
        return DEFAULT_CONFIG.thaw()

    def merge_with(self, other: MutableSchemeConfig) -> MutableSchemeConfig:
        """Return a new builder where set fields of ``other`` override this one.

        Args:
            other (MutableSchemeConfig): The higher-precedence layer.

        Returns:
            MutableSchemeConfig: The merged builder.
        """
        merged = MutableSchemeConfig(config_files=[*self.config_files, *other.config_files])
        for f in fields(self):
            if f.name == "config_files":
                continue
            theirs: Any = getattr(other, f.name)
            setattr(merged, f.name, theirs if theirs is not None else getattr(self, f.name))
        return merged

    @classmethod
    def from_toml_dict(
        cls,
        data: Mapping[str, Any],
        config_file: Path | None = None,
    ) -> MutableSchemeConfig:
        """Create a draft config from a parsed CMC TOML table.

        Args:
            data (Mapping[str, Any]): The CMC table (top level of ``cmc.toml``
                or ``[tool.cmc]`` of ``pyproject.toml``).
            config_file (Path | None): Optional path to the source TOML file.

        Returns:
            MutableSchemeConfig: The resulting draft.

        Raises:
            CmcConfigError: If a known key holds a value of the wrong type.
        """
        source: str = str(config_file) if config_file else "<dict>"
        known: dict[str, tuple[str, ...]] = {
            Toml.SECTION_ROOTS: (Toml.KEY_ROOT_A, Toml.KEY_ROOT_Z),
            Toml.SECTION_LEVELS: (Toml.KEY_A_BRANCH_OFFSET, Toml.KEY_Z_BRANCH_OFFSET),
            Toml.SECTION_SCHEDULE: (Toml.KEY_FORCE_LOAD,),
        }
        for section, value in data.items():
            if section not in known:
                logger.warning("%s: ignoring unknown section [%s]", source, section)
                continue
            if not isinstance(value, dict):
                raise CmcConfigError(f"{source}: [{section}] must be a table")
            for key in value:
                if key not in known[section]:
                    logger.warning("%s: ignoring unknown key %s.%s", source, section, key)

        roots: Mapping[str, Any] = data.get(Toml.SECTION_ROOTS, {})
        levels: Mapping[str, Any] = data.get(Toml.SECTION_LEVELS, {})
        schedule: Mapping[str, Any] = data.get(Toml.SECTION_SCHEDULE, {})
        logger.trace("TOML [roots]: %s", roots)
        logger.trace("TOML [levels]: %s", levels)
        logger.trace("TOML [schedule]: %s", schedule)

        return cls(
            root_a=_get_typed(roots, Toml.KEY_ROOT_A, str, source),
            root_z=_get_typed(roots, Toml.KEY_ROOT_Z, str, source),
            a_branch_offset=_get_typed(levels, Toml.KEY_A_BRANCH_OFFSET, int, source),
            z_branch_offset=_get_typed(levels, Toml.KEY_Z_BRANCH_OFFSET, int, source),
            force_load=_get_typed(schedule, Toml.KEY_FORCE_LOAD, bool, source),
            config_files=[source] if config_file else [],
        )


def _get_typed(table: Mapping[str, Any], key: str, kind: type, source: str) -> Any:
    """Return ``table[key]`` checked against ``kind``, or None when absent."""
    if key not in table:
        return None
    value: Any = table[key]
    # bool is an int subclass; do not accept it where an int is expected
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise CmcConfigError(
            f"{source}: {key!r} must be of type {kind.__name__}, got {type(value).__name__}"
        )
    return value
