"""Shared test fixtures and configuration."""

import re
import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def ticket_pattern():
    """Pattern matching Clubhouse-style ticket ids."""
    return re.compile(r"\b(ch\d+)\b")


@pytest.fixture
def message_file(temp_dir):
    """Create a commit message file like the one git hands to the hook."""
    path = temp_dir / "COMMIT_EDITMSG"
    path.write_text("Fix login redirect\n", encoding="utf-8")
    return path


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run
