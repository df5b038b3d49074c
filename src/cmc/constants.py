# topmark:header:start
#
#   project      : CMC
#   file         : constants.py
#   file_relpath : src/cmc/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CMC Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    CMC_VERSION: str = get_version("cmc-hierarchy")
except PackageNotFoundError:  # running from a source checkout
    CMC_VERSION = "0.0.0"

# Reserved root codes of the two trees of the forest:
ROOT_A: Final[str] = "A"
ROOT_Z: Final[str] = "Z"

# Level of both root codes:
ROOT_LEVEL: Final[int] = 1

# Structural length buckets with a dedicated level (length -> bucket level).
# Lengths above the last bucket add one level per FIXED_STEP characters.
LENGTH_BUCKETS: Final[dict[int, int]] = {1: 1, 2: 2, 5: 3, 8: 4}
FIXED_STEP_FROM: Final[int] = 8
FIXED_STEP: Final[int] = 2

# Environment variables:
ENV_LOG_LEVEL: Final[str] = "CMC_LOG_LEVEL"

# Configuration file names:
CMC_TOML_NAME: Final[str] = "cmc.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
