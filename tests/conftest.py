"""
Test fixtures for solid-examples tests.

This module provides common fixtures for running examples, invoking the
CLI and writing configuration files.
"""

import logging
from pathlib import Path
from typing import Callable, List

import pytest
from click.testing import CliRunner

from solid_examples.examples import REGISTRY
from solid_examples.models import RunContext


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler and level changes made by setup_logging."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def cli_runner():
    """Click test runner."""
    return CliRunner()


@pytest.fixture
def run_context(tmp_path):
    """Run context whose file storage lives in a temporary directory."""
    return RunContext(storage_path=str(tmp_path))


@pytest.fixture
def echo_lines():
    """A list that collects echoed lines, and the echo function feeding it."""
    lines: List[str] = []
    return lines, lines.append


@pytest.fixture
def run_example(run_context) -> Callable[[str], str]:
    """Run a registered example by name and return its output."""

    def _run(name: str) -> str:
        return REGISTRY.get(name).capture(run_context)

    return _run


@pytest.fixture
def temp_config(tmp_path) -> Callable[[str], Path]:
    """Write a TOML config file and return its path."""

    def _write(content: str) -> Path:
        config_path = tmp_path / "config.toml"
        config_path.write_text(content, encoding="utf-8")
        return config_path

    return _write
