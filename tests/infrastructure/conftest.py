"""Pytest fixtures for infrastructure tests."""

from pathlib import Path

import pytest

IAC_DIR = Path(__file__).parent.parent.parent / "IAC"


@pytest.fixture
def iac_project_root():
    """Return the IAC project root directory."""
    return IAC_DIR


@pytest.fixture
def python_files_in_iac(iac_project_root):
    """Return all Python files in IAC directory."""
    return [f for f in iac_project_root.rglob("*.py") if "__pycache__" not in str(f)]
