"""
Basic test fixtures for the silly animals test suite.

Provides small rosters, battles and managers for testing the battle engine
and its presentation.
"""

import sys
import os
import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from silly_animals.core.data import Side
from silly_animals.core.engine import Battle, GamePhase, GameState
from silly_animals.core.entities import Creature, CreatureClass, Roster
from silly_animals.core.events import EventManager
from silly_animals.core.renderer import RendererConfig
from silly_animals.game.entities import load_bestiary
from silly_animals.game.managers import LogManager
from silly_animals.renderers import SimpleRenderer


class TestDataBuilder:
    """Helpers for building creatures and rosters with readable ids."""

    __test__ = False

    @staticmethod
    def creature(creature_id: str, health: int, attack: int, name: str = "Critter", icon: str = "c") -> Creature:
        return Creature(CreatureClass(name=name, icon=icon), health, attack, creature_id=creature_id)

    @staticmethod
    def roster(side: Side, *stats: tuple[str, int, int]) -> Roster:
        """Build a roster from (id, health, attack) triples."""
        return Roster(side, [TestDataBuilder.creature(cid, hp, atk, name=cid) for cid, hp, atk in stats])

    @staticmethod
    def battle(left, right, event_manager=None) -> Battle:
        return Battle(
            TestDataBuilder.roster(Side.LEFT, *left),
            TestDataBuilder.roster(Side.RIGHT, *right),
            event_manager=event_manager,
        )


@pytest.fixture
def builder():
    return TestDataBuilder


@pytest.fixture
def game_state():
    """Create a fresh game state for testing."""
    return GameState(phase=GamePhase.BATTLE)


@pytest.fixture
def event_manager():
    """Create an event manager for testing."""
    return EventManager(enable_debug_logging=False)


@pytest.fixture
def log_manager(event_manager, game_state, tmp_path):
    return LogManager(event_manager, game_state, log_dir=str(tmp_path / "logs"))


@pytest.fixture
def bestiary():
    """The bundled bestiary."""
    return load_bestiary()


@pytest.fixture
def renderer_config():
    return RendererConfig(width=60, height=20, title="Silly Animals Game")


@pytest.fixture
def simple_renderer(renderer_config, tmp_path):
    output = open(tmp_path / "frames.txt", "w", encoding="utf-8")
    yield SimpleRenderer(renderer_config, demo_mode=True, output=output)
    output.close()
