# topmark:header:start
#
#   project      : CMC
#   file         : __init__.py
#   file_relpath : src/cmc/model/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural model of CMC codes: canonical form, levels, ancestry and membership."""

from __future__ import annotations
