# topmark:header:start
#
#   project      : CMC
#   file         : __init__.py
#   file_relpath : src/cmc/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CMC configuration: scheme settings, TOML loading and logging setup."""

from __future__ import annotations

from cmc.config.io import discover_config_file, load_config, to_toml
from cmc.config.model import (
    DEFAULT_CONFIG,
    MutableSchemeConfig,
    SchemeConfig,
    resolve_config,
)

__all__ = [
    "DEFAULT_CONFIG",
    "MutableSchemeConfig",
    "SchemeConfig",
    "discover_config_file",
    "load_config",
    "resolve_config",
    "to_toml",
]
