# topmark:header:start
#
#   project      : CMC
#   file         : errors.py
#   file_relpath : src/cmc/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the CMC engine.

Only faults are exceptions. Expected scheduling classifications (not found,
excluded, missing parent, ...) are reported as values, see
[`cmc.schedule.outcomes`][cmc.schedule.outcomes].
"""

from __future__ import annotations


class CmcError(Exception):
    """Base class for all CMC errors."""


class StructuralError(CmcError, ValueError):
    """A code whose structural length matches no admissible bucket.

    Attributes:
        code (str): The (normalized) offending code.
        length (int): Its structural length.
    """

    def __init__(self, code: str, length: int) -> None:
        self.code: str = code
        self.length: int = length
        super().__init__(f"Malformed code {code!r}: structural length {length} has no level")

    def __reduce__(self) -> tuple[type[StructuralError], tuple[str, int]]:
        return (StructuralError, (self.code, self.length))


class CmcConfigError(CmcError):
    """Error for configuration errors (missing/invalid/malformed config)."""
