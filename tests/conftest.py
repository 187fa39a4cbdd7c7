"""Shared pytest fixtures and test helpers for articlectl tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

BLOG_TEMPLATE = """\
---
# [BLOG] Required fields:
title: "Test Article"
date: 2025-01-01
author: Test Author
tags:
  - python
  - cli

# [BLOG] Optional fields:
excerpt: "Test excerpt"
links:
  - {text: Home, url: https://example.com}
---

# Test Article

Body content here.
"""

PROJECT_TEMPLATE = """\
---
# [PROJECT] Required fields:
title: <TITLE>
date: <DATE>
stack:
  - <TECH>

# [PROJECT] Optional fields:
repo: <URL>
---
# Project

Overview.
"""


@pytest.fixture(autouse=True)
def _restore_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep logging handlers and config discovery from leaking between tests."""
    monkeypatch.delenv("ARTICLECTL_CONFIG", raising=False)
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("articlectl")
    pkg_handlers = pkg.handlers[:]
    pkg_level = pkg.level
    pkg_propagate = pkg.propagate
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.handlers = pkg_handlers
    pkg.setLevel(pkg_level)
    pkg.propagate = pkg_propagate


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project directory holding both stock templates."""
    (tmp_path / "BLOG.md").write_text(BLOG_TEMPLATE, encoding="utf-8")
    (tmp_path / "PROJECT.md").write_text(PROJECT_TEMPLATE, encoding="utf-8")
    return tmp_path


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp project so the CLI reads and writes there.

    Use via ``@pytest.mark.usefixtures("_isolated_project")``.
    """
    monkeypatch.chdir(project_root)


def write_template(directory: Path, content: str, name: str = "BLOG.md") -> Path:
    """Write a template file and return its path."""
    path = directory / name
    path.write_text(content, encoding="utf-8")
    return path
