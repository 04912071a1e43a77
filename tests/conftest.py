# tests/conftest.py
import pytest
import json
from typing import List

from partypicker.bracket import Player
from partypicker.picker import PickerItem

# Markers for test categorization
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")


class ScriptedRandom:
    """Random source that replays fixed draws in a loop."""

    def __init__(self, draws: List[float]):
        self.draws = list(draws)
        self.calls = 0

    def random(self) -> float:
        value = self.draws[self.calls % len(self.draws)]
        self.calls += 1
        return value


@pytest.fixture
def scripted_rng():
    """Factory for scripted random sources."""
    return ScriptedRandom


@pytest.fixture
def four_players():
    """Four seeded players, supplied out of seed order."""
    return [
        Player(id="c", name="Peach", seed=3),
        Player(id="a", name="Mario", seed=1),
        Player(id="d", name="Bowser", seed=4),
        Player(id="b", name="Luigi", seed=2),
    ]


@pytest.fixture
def make_players():
    """Factory for N players seeded 1..N."""
    def _make(count: int) -> List[Player]:
        return [Player(id=f"p{i}", name=f"Player {i}", seed=i) for i in range(1, count + 1)]
    return _make


@pytest.fixture
def wheel_items():
    """Four unweighted wheel items."""
    return [
        PickerItem(id="mario", label="Mario"),
        PickerItem(id="luigi", label="Luigi"),
        PickerItem(id="peach", label="Peach"),
        PickerItem(id="yoshi", label="Yoshi"),
    ]


@pytest.fixture
def tracks_file(tmp_path):
    """Write a small track document and return its path."""
    def _write(document, name: str = "tracks.json"):
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def mock_logger(mocker):
    """Mock structured logger."""
    logger = mocker.MagicMock()
    logger.log_event = mocker.MagicMock()
    logger.log_warning = mocker.MagicMock()
    logger.log_error = mocker.MagicMock()
    return logger
