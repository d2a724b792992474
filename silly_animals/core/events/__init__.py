"""Event system for publisher-subscriber communication.

This package contains the event-driven architecture:
- event_manager.py: Publisher-subscriber event routing and coordination
- events.py: Event definitions for inter-system communication
"""

from .event_manager import EventManager
from .events import (
    GameEvent,
    EventType,
    BattleStarted,
    RoundStarted,
    RoundCompleted,
    BattleFinished,
    CreatureDamaged,
    CreatureDefeated,
    LogMessage,
    DebugMessage,
    LogSaveRequested,
    GameStarted,
    GameEnded,
)

__all__ = [
    "EventManager",
    "GameEvent",
    "EventType",
    "BattleStarted",
    "RoundStarted",
    "RoundCompleted",
    "BattleFinished",
    "CreatureDamaged",
    "CreatureDefeated",
    "LogMessage",
    "DebugMessage",
    "LogSaveRequested",
    "GameStarted",
    "GameEnded",
]
