"""Game session state.

Holds the session-level phase and the data other managers publish for the
renderer (log lines). Battle state itself lives on :class:`Battle`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class GamePhase(Enum):
    """High level game phases."""

    SETUP = auto()
    BATTLE = auto()
    GAME_OVER = auto()


@dataclass
class GameState:
    phase: GamePhase = GamePhase.SETUP
    log_data: dict[str, Any] = field(default_factory=dict)
    quit_requested: bool = False

    def is_game_over(self) -> bool:
        return self.phase is GamePhase.GAME_OVER

    def log_lines(self) -> list[str]:
        return list(self.log_data.get('messages', []))
