# topmark:header:start
#
#   project      : CMC
#   file         : test_code.py
#   file_relpath : tests/model/test_code.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the canonical code form in `cmc.model.code`."""

from __future__ import annotations

from typing import Any

import pytest

from cmc.config.model import SchemeConfig
from cmc.model.code import (
    is_blank,
    is_root,
    is_z_branch,
    normalize,
    normalize_all,
    structural_length,
)


def test_normalize_uppercases() -> None:
    """Codes are compared in uppercase."""
    assert normalize("pba01") == "PBA01"
    assert normalize_all(["pb", "Zb"]) == ["PB", "ZB"]


def test_normalize_rejects_non_text() -> None:
    """Only strings are codes."""
    value: Any = 12
    with pytest.raises(TypeError):
        normalize(value)


def test_structural_length_counts_characters() -> None:
    """Empty is a valid input of length 0."""
    assert structural_length("") == 0
    assert structural_length("pba01a01") == 8


def test_is_blank() -> None:
    """Whitespace-only input counts as blank."""
    assert is_blank("")
    assert is_blank("  ")
    assert not is_blank("P")


def test_roots_and_branches() -> None:
    """Both roots are recognized case-insensitively; the Z-branch is prefix based."""
    assert is_root("a")
    assert is_root("Z")
    assert not is_root("P")
    assert is_z_branch("zb")
    assert is_z_branch("Z")
    assert not is_z_branch("PZ")
    assert not is_z_branch("")


def test_custom_roots() -> None:
    """Root codes come from the scheme configuration."""
    cfg = SchemeConfig(root_a="R", root_z="X")
    assert is_root("R", config=cfg)
    assert not is_root("A", config=cfg)
    assert is_z_branch("XB", config=cfg)
    assert not is_z_branch("ZB", config=cfg)
