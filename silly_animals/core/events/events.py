"""Battle events and context.

This module defines the game events that managers can subscribe to.

Event Design Principles:
- Events are immutable dataclasses
- All events carry the battle round they were emitted in
- Events carry snapshots and identifiers, never live rosters
- Keep event types focused and avoid over-granular events
"""

from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING
from abc import ABC
from enum import Enum, auto

from ..data import Side

if TYPE_CHECKING:
    from ..engine.battle_state import RoundReport


class EventType(Enum):
    """Types of game events that managers can subscribe to."""
    # Battle Events
    BATTLE_STARTED = auto()
    ROUND_STARTED = auto()
    ROUND_COMPLETED = auto()
    BATTLE_FINISHED = auto()

    # Creature Events
    CREATURE_DAMAGED = auto()
    CREATURE_DEFEATED = auto()

    # Logging Events
    LOG_MESSAGE = auto()
    DEBUG_MESSAGE = auto()
    LOG_SAVE_REQUESTED = auto()

    # Game Session Events
    GAME_STARTED = auto()
    GAME_ENDED = auto()


@dataclass(frozen=True)
class GameEvent(ABC):
    """Base class for all game events."""
    round_number: int
    event_type: EventType = field(init=False)


@dataclass(frozen=True)
class BattleStarted(GameEvent):
    """Event emitted when a battle is set up with two rosters."""
    left_count: int
    right_count: int

    def __post_init__(self):
        # Set event_type since dataclass frozen=True prevents normal assignment
        object.__setattr__(self, 'event_type', EventType.BATTLE_STARTED)


@dataclass(frozen=True)
class RoundStarted(GameEvent):
    """Event emitted before the first wave of a round is processed."""

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ROUND_STARTED)


@dataclass(frozen=True)
class RoundCompleted(GameEvent):
    """Event emitted after the event queue of a round has drained."""
    report: "RoundReport"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ROUND_COMPLETED)


@dataclass(frozen=True)
class BattleFinished(GameEvent):
    """Event emitted once when a round leaves the battle in a terminal state."""
    winner: Optional[Side]  # None means draw

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.BATTLE_FINISHED)


@dataclass(frozen=True)
class CreatureDamaged(GameEvent):
    """Event emitted when a damage event hits a creature still on a roster."""
    creature_id: str
    creature_name: str
    side: Side
    amount: int
    health_after: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.CREATURE_DAMAGED)


@dataclass(frozen=True)
class CreatureDefeated(GameEvent):
    """Event emitted when a creature is removed from its roster."""
    creature_id: str
    creature_name: str
    side: Side

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.CREATURE_DEFEATED)


@dataclass(frozen=True)
class LogMessage(GameEvent):
    """Event emitted to request a log entry."""
    message: str
    category: str = "SYSTEM"
    level: str = "INFO"
    source: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_MESSAGE)


@dataclass(frozen=True)
class DebugMessage(GameEvent):
    """Event emitted for debug-only log entries."""
    message: str
    source: str = "unknown"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.DEBUG_MESSAGE)


@dataclass(frozen=True)
class LogSaveRequested(GameEvent):
    """Event emitted when the player asks to save the log to disk."""

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_SAVE_REQUESTED)


@dataclass(frozen=True)
class GameStarted(GameEvent):
    """Event emitted when a game session begins."""
    title: str = ""

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.GAME_STARTED)


@dataclass(frozen=True)
class GameEnded(GameEvent):
    """Event emitted when a game session ends."""
    winner: Optional[Side] = None
    reason: str = "battle_finished"  # or "player_quit"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.GAME_ENDED)
