"""Shared fixtures for the classic cipher test suite."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from classic.core.diagnostics import Diagnostics
from classic.core.engine import ClassicEngine
from shared.logger import ClassicLogger


@pytest.fixture
def diagnostics() -> Diagnostics:
    """A quiet collector; advisories are recorded but never printed."""
    return Diagnostics("test", quiet=True)


@pytest.fixture
def engine() -> ClassicEngine:
    logger = ClassicLogger("test", console_output=False)
    return ClassicEngine(quiet=True, logger=logger)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()
