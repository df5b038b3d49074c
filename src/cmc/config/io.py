# topmark:header:start
#
#   project      : CMC
#   file         : io.py
#   file_relpath : src/cmc/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render CMC configuration as TOML.

Configuration lives either in a dedicated ``cmc.toml`` (top-level keys) or in
the ``[tool.cmc]`` table of a ``pyproject.toml``. Parsing is done with
`tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from cmc.config.keys import Toml
from cmc.config.logging import get_logger
from cmc.config.model import MutableSchemeConfig
from cmc.constants import CMC_TOML_NAME, PYPROJECT_TOML_NAME
from cmc.errors import CmcConfigError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cmc.config.logging import CmcLogger
    from cmc.config.model import SchemeConfig

logger: CmcLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Read and parse a TOML file into a plain dict.

    Args:
        path (Path): The TOML file to read.

    Returns:
        dict[str, Any]: The parsed document.

    Raises:
        CmcConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CmcConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise CmcConfigError(f"Invalid TOML in {path}: {exc}") from exc
    logger.trace("Parsed TOML from %s", path)
    return doc.unwrap()


def extract_cmc_table(data: dict[str, Any], path: Path) -> dict[str, Any]:
    """Return the CMC table of a parsed config file.

    ``pyproject.toml`` keeps it under ``[tool.cmc]``; any other file holds it
    at the top level.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL, {})
    table: Any = tool.get(Toml.SECTION_CMC, {}) if isinstance(tool, dict) else {}
    if not isinstance(table, dict):
        raise CmcConfigError(f"{path}: [tool.cmc] must be a table")
    return table


def has_cmc_table(path: Path) -> bool:
    """Whether ``path`` is a config file that carries CMC settings."""
    if path.name == CMC_TOML_NAME:
        return True
    return bool(extract_cmc_table(load_toml_dict(path), path))


def discover_config_file(start: Path) -> Path | None:
    """Find the nearest config file from ``start`` upwards.

    In each directory ``cmc.toml`` wins over a ``pyproject.toml`` with a
    ``[tool.cmc]`` table.

    Args:
        start (Path): Directory (or file) where the search begins.

    Returns:
        Path | None: The config file, or None when no directory provides one.
    """
    here: Path = start.resolve()
    if here.is_file():
        here = here.parent
    for directory in (here, *here.parents):
        for name in (CMC_TOML_NAME, PYPROJECT_TOML_NAME):
            candidate: Path = directory / name
            if candidate.is_file() and has_cmc_table(candidate):
                logger.debug("Discovered config file %s", candidate)
                return candidate
    return None


def load_config(
    paths: Iterable[Path] = (),
    *,
    overrides: MutableSchemeConfig | None = None,
) -> SchemeConfig:
    """Build a `SchemeConfig` from defaults, config files and overrides.

    Later files take precedence over earlier ones; ``overrides`` wins over all.

    Args:
        paths (Iterable[Path]): Config files, lowest precedence first.
        overrides (MutableSchemeConfig | None): Programmatic overrides.

    Returns:
        SchemeConfig: The frozen configuration.
    """
    draft: MutableSchemeConfig = MutableSchemeConfig.from_defaults()
    for path in paths:
        table: dict[str, Any] = extract_cmc_table(load_toml_dict(path), path)
        draft = draft.merge_with(MutableSchemeConfig.from_toml_dict(table, config_file=path))
    if overrides is not None:
        draft = draft.merge_with(overrides)
    return draft.freeze()


def to_toml(config: SchemeConfig) -> str:
    """Render the scheme settings of ``config`` as a ``cmc.toml`` document."""
    doc: tomlkit.TOMLDocument = tomlkit.document()
    doc.add(tomlkit.comment("CMC scheme configuration"))
    for section, values in config.to_toml_dict().items():
        table = tomlkit.table()
        for key, value in values.items():
            table.add(key, value)
        doc.add(section, table)
    return tomlkit.dumps(doc)
