"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path_factory: pytest.TempPathFactory) -> Iterator[Path]:
    """Point XDG_CONFIG_HOME at an empty directory so user config never leaks in."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(config_home)}):
        yield config_home


@pytest.fixture
def mock_status_output() -> str:
    """Sample porcelain output with one staged, one unstaged and one untracked file."""
    return "M  staged.cs\n M unstaged.cs\n?? untracked.cs\n"


@pytest.fixture
def mock_deleted_output() -> str:
    """Sample porcelain output with staged and unstaged deletions."""
    return "D  staged-deleted.cs\n D unstaged-deleted.cs\n"


@pytest.fixture
def mock_renamed_output() -> str:
    """Sample porcelain output with a staged rename."""
    return "R  old-name.cs -> new-name.cs\n"


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small project tree for directory scans.

    Layout:
        a.cs, b.py, README, notes.CS, sub/c.cs, sub/deep/d.py
    """
    (tmp_path / "a.cs").write_text("class A {}", encoding="utf-8")
    (tmp_path / "b.py").write_text("print('b')", encoding="utf-8")
    (tmp_path / "README").write_text("readme", encoding="utf-8")
    (tmp_path / "notes.CS").write_text("upper", encoding="utf-8")
    (tmp_path / "sub" / "deep").mkdir(parents=True)
    (tmp_path / "sub" / "c.cs").write_text("class C {}", encoding="utf-8")
    (tmp_path / "sub" / "deep" / "d.py").write_text("d = 1", encoding="utf-8")
    return tmp_path
