"""Core battle engine.

This package contains the fundamental engine systems:
- battle.py: Battle rosters, round advance and wave-based event queue
- battle_state.py: Derived battle state, snapshots and round reports
- round_events.py: Transient damage and removal events of a round
- game_state.py: Session-level state shared with the renderer
"""

from .battle import Battle
from .battle_state import BattleSnapshot, BattleState, BattleStatus, CreatureSnapshot, RoundReport
from .game_state import GamePhase, GameState
from .round_events import DamageEvent, RemoveEvent, RoundEvent

__all__ = [
    "Battle",
    "BattleSnapshot",
    "BattleState",
    "BattleStatus",
    "CreatureSnapshot",
    "RoundReport",
    "GamePhase",
    "GameState",
    "DamageEvent",
    "RemoveEvent",
    "RoundEvent",
]
