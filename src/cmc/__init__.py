# topmark:header:start
#
#   project      : CMC
#   file         : __init__.py
#   file_relpath : src/cmc/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CMC package.

CMC (Common Management Code) is a variable-length hierarchical coding scheme
for labelling the nodes of a two-rooted forest. This package derives levels
and ancestry from the code structure alone and schedules batches of deletes
and creates into dependency-safe rounds.

The public surface lives in [`cmc.api`][cmc.api].
"""

from __future__ import annotations
