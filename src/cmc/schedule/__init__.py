# topmark:header:start
#
#   project      : CMC
#   file         : __init__.py
#   file_relpath : src/cmc/schedule/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Round scheduling of batched deletes and creates."""

from __future__ import annotations
