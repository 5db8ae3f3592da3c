"""Pytest configuration and shared fixtures for the md2vim test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os
from pathlib import Path

import pytest

from md2vim.constants import ENV_PREFIX


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture(autouse=True)
def clean_md2vim_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove MD2VIM_* variables so the developer's environment cannot leak into tests."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty directory with an empty home directory.

    Keeps configuration discovery from finding files outside the test.
    """
    work = tmp_path / "work"
    home = tmp_path / "home"
    work.mkdir()
    home.mkdir()
    monkeypatch.chdir(work)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return work


@pytest.fixture
def sample_markdown() -> str:
    """Provide a small README-style Markdown document.

    Returns
    -------
    str
        Markdown with headings, a paragraph, a list, and a code block.

    """
    return """# Rigellians

Kodos and Kang.

## Installation

1. Land the ship
2. Greet the humans

```sh
make install
```

## Usage

Run `probe` on *every* human.
"""
