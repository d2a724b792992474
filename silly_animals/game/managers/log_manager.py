"""
Log management system for battle messages and debugging.

This module provides centralized logging with categorization, filtering,
and bounded storage for display under the battle scene. Messages arrive
through the event bus: explicit log events and the battle's own events.
"""
import os
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Optional, TYPE_CHECKING

from ...core.data import SIDE_NAMES
from ...core.events import (
    BattleFinished,
    CreatureDamaged,
    CreatureDefeated,
    DebugMessage,
    EventType,
    GameEnded,
    LogMessage as LogEvent,
    LogSaveRequested,
    RoundStarted,
)

if TYPE_CHECKING:
    from ...core.engine.game_state import GameState
    from ...core.events import EventManager, GameEvent


class LogCategory(Enum):
    """Categories for log messages."""
    SYSTEM = auto()     # System messages (initialization, loading, etc.)
    BATTLE = auto()     # Combat-related messages
    DEBUG = auto()      # Debug messages
    WARNING = auto()    # Warning messages
    ERROR = auto()      # Error messages
    UI = auto()         # UI-related messages


CATEGORY_TAGS = {
    LogCategory.SYSTEM: "SYS",
    LogCategory.BATTLE: "BTL",
    LogCategory.DEBUG: "DBG",
    LogCategory.WARNING: "WRN",
    LogCategory.ERROR: "ERR",
    LogCategory.UI: "UI",
}


@dataclass
class LogMessage:
    """A single log message with metadata."""
    text: str
    category: LogCategory
    timestamp: datetime = field(default_factory=datetime.now)

    def format(self, include_timestamp: bool = False, include_category: bool = True) -> str:
        """Format the message for display."""
        parts = []

        if include_timestamp:
            parts.append(f"[{self.timestamp.strftime('%H:%M:%S')}]")

        if include_category:
            parts.append(f"[{CATEGORY_TAGS.get(self.category, '???')}]")

        parts.append(self.text)
        return " ".join(parts)


class LogLevel(Enum):
    """Log levels for filtering."""
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


class LogManager:
    """Manages game logging with categorization and filtering."""

    def __init__(
        self,
        event_manager: "EventManager",
        game_state: "GameState",
        max_messages: int = 1000,
        default_level: LogLevel = LogLevel.INFO,
        log_dir: str = "logs"
    ):
        """Initialize the log manager.

        Args:
            event_manager: Event manager for event-driven logging (required)
            game_state: Game state to update with log data (required)
            max_messages: Maximum number of messages to store in the buffer
            default_level: Default log level for filtering
            log_dir: Directory that saved log files are written to
        """
        self.messages: deque[LogMessage] = deque(maxlen=max_messages)
        self.log_level = default_level
        self.enabled_categories = set(LogCategory)
        self.event_manager = event_manager
        self.game_state = game_state
        self.log_dir = log_dir

        self.category_levels = {
            LogCategory.DEBUG: LogLevel.DEBUG,
            LogCategory.WARNING: LogLevel.WARNING,
            LogCategory.ERROR: LogLevel.ERROR,
            # SYSTEM, BATTLE, UI default to INFO
        }

        self._setup_event_subscriptions()
        self._update_game_state_log_data()

    def _update_game_state_log_data(self) -> None:
        """Publish the currently visible messages for the renderer."""
        self.game_state.log_data = {
            'messages': [msg.format() for msg in self.get_messages()],
            'debug_enabled': self.is_debug_enabled(),
            'total_messages': len(self.messages)
        }

    def _setup_event_subscriptions(self) -> None:
        subscriptions = [
            (EventType.LOG_MESSAGE, self._handle_log_message_event, "log_message"),
            (EventType.DEBUG_MESSAGE, self._handle_debug_message_event, "debug_message"),
            (EventType.LOG_SAVE_REQUESTED, self._handle_log_save_request, "log_save_request"),
            (EventType.ROUND_STARTED, self._handle_round_started, "round_started"),
            (EventType.CREATURE_DAMAGED, self._handle_creature_damaged, "creature_damaged"),
            (EventType.CREATURE_DEFEATED, self._handle_creature_defeated, "creature_defeated"),
            (EventType.BATTLE_FINISHED, self._handle_battle_finished, "battle_finished"),
            (EventType.GAME_ENDED, self._handle_game_ended, "game_ended"),
        ]
        for event_type, handler, name in subscriptions:
            self.event_manager.subscribe(event_type, handler, subscriber_name=f"LogManager.{name}")

    def _handle_log_message_event(self, event: "GameEvent") -> None:
        if isinstance(event, LogEvent):
            try:
                category = LogCategory[event.category.upper()]
            except (KeyError, AttributeError):
                category = LogCategory.SYSTEM
            self.log(event.message, category)

    def _handle_debug_message_event(self, event: "GameEvent") -> None:
        if isinstance(event, DebugMessage):
            self.debug(f"[{event.source}] {event.message}")

    def _handle_log_save_request(self, event: "GameEvent") -> None:
        if isinstance(event, LogSaveRequested):
            self.save_log_to_file()

    def _handle_round_started(self, event: "GameEvent") -> None:
        if isinstance(event, RoundStarted):
            self.battle(f"Round {event.round_number}")

    def _handle_creature_damaged(self, event: "GameEvent") -> None:
        if isinstance(event, CreatureDamaged):
            self.battle(
                f"{SIDE_NAMES[event.side]} {event.creature_name} takes {event.amount} damage "
                f"({event.health_after} hp left)"
            )

    def _handle_creature_defeated(self, event: "GameEvent") -> None:
        if isinstance(event, CreatureDefeated):
            self.battle(f"{SIDE_NAMES[event.side]} {event.creature_name} is defeated")

    def _handle_battle_finished(self, event: "GameEvent") -> None:
        if isinstance(event, BattleFinished):
            if event.winner is None:
                self.battle(f"Both teams fell in round {event.round_number}. It's a draw!")
            else:
                self.battle(f"{SIDE_NAMES[event.winner]} team wins in round {event.round_number}!")

    def _handle_game_ended(self, event: "GameEvent") -> None:
        if isinstance(event, GameEnded) and event.reason == "player_quit":
            self.system("Battle abandoned")

    def log(self, text: str, category: LogCategory = LogCategory.SYSTEM) -> None:
        """Add a message to the log.

        Args:
            text: The message text
            category: The category of the message
        """
        self.messages.append(LogMessage(text=text, category=category))
        self._update_game_state_log_data()

    def system(self, text: str) -> None:
        self.log(text, LogCategory.SYSTEM)

    def battle(self, text: str) -> None:
        self.log(text, LogCategory.BATTLE)

    def debug(self, text: str) -> None:
        self.log(text, LogCategory.DEBUG)

    def warning(self, text: str) -> None:
        self.log(text, LogCategory.WARNING)

    def error(self, text: str) -> None:
        self.log(text, LogCategory.ERROR)

    def ui(self, text: str) -> None:
        self.log(text, LogCategory.UI)

    def get_messages(self, count: Optional[int] = None,
                     categories: Optional[set[LogCategory]] = None) -> list[LogMessage]:
        """Get recent messages, optionally filtered by category.

        Args:
            count: Maximum number of messages to return (None for all)
            categories: Set of categories to include (None for all enabled)

        Returns:
            List of recent messages, oldest first
        """
        if categories:
            filtered = [msg for msg in self.messages
                        if msg.category in categories and msg.category in self.enabled_categories]
        else:
            filtered = []
            for msg in self.messages:
                if msg.category not in self.enabled_categories:
                    continue

                message_level = self.category_levels.get(msg.category, LogLevel.INFO)
                if message_level.value < self.log_level.value:
                    continue

                filtered.append(msg)

        if count is not None and count < len(filtered):
            return filtered[-count:] if count > 0 else []
        return filtered

    def recent_lines(self, count: int) -> list[str]:
        return [msg.format() for msg in self.get_messages(count)]

    def clear(self) -> None:
        self.messages.clear()
        self._update_game_state_log_data()

    def enable_category(self, category: LogCategory) -> None:
        self.enabled_categories.add(category)

    def disable_category(self, category: LogCategory) -> None:
        self.enabled_categories.discard(category)

    def set_log_level(self, level: LogLevel) -> None:
        self.log_level = level

    def is_debug_enabled(self) -> bool:
        """Check if debug messages are currently shown."""
        return (LogCategory.DEBUG in self.enabled_categories and
                self.log_level == LogLevel.DEBUG)

    def toggle_debug(self) -> None:
        """Toggle debug message visibility."""
        if self.is_debug_enabled():
            self.disable_category(LogCategory.DEBUG)
            self.set_log_level(LogLevel.INFO)
        else:
            self.enable_category(LogCategory.DEBUG)
            self.set_log_level(LogLevel.DEBUG)

        self._update_game_state_log_data()

    def save_log_to_file(self) -> Optional[str]:
        """Save all messages to a timestamped log file.

        Debug messages are included regardless of the current filters.

        Returns:
            Path of the written file, or None if writing failed
        """
        now = datetime.now()
        filepath = os.path.join(self.log_dir, f"log_{now.strftime('%Y%m%d_%H%M%S')}.log")

        try:
            os.makedirs(self.log_dir, exist_ok=True)

            with open(filepath, 'w', encoding='utf-8') as f:
                f.write("Silly Animals Game - Battle Log\n")
                f.write(f"Generated: {now.strftime('%Y-%m-%d %H:%M:%S')}\n")
                f.write("=" * 60 + "\n\n")

                if not self.messages:
                    f.write("No messages to save.\n")
                else:
                    for msg in self.messages:
                        timestamp_str = msg.timestamp.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
                        f.write(f"[{timestamp_str}] [{msg.category.name}] {msg.text}\n")
        except OSError as e:
            self.error(f"Failed to save log file: {e}")
            return None

        self.system(f"Game log saved to {filepath}")
        return filepath
