"""Shared test fixtures."""

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def rosters_path() -> Path:
    return FIXTURES / "rosters.json"


@pytest.fixture
def game_path() -> Path:
    return FIXTURES / "game.json"
