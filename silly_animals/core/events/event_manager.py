"""
Event bus connecting the battle engine to the session and the log.

The battle publishes what happened during a round; the game session
decides when those events are delivered by calling ``process_events``.
Delivery is first-in first-out, so subscribers see a round in the order
it was resolved.
"""

import threading
from collections import defaultdict, deque
from typing import Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .events import GameEvent, EventType


EventSubscriber = Callable[["GameEvent"], None]


class EventManager:
    """Queue of published events and the subscribers waiting for them."""

    def __init__(self, enable_debug_logging: bool = False):
        """Initialize the event manager.

        Args:
            enable_debug_logging: Report publishing, delivery and subscriber
                errors through the debug callback
        """
        self.enable_debug_logging = enable_debug_logging

        self._subscribers: dict["EventType", list[tuple[str, EventSubscriber]]] = defaultdict(list)
        self._pending: deque[tuple["GameEvent", str]] = deque()
        self._lock = threading.RLock()
        self._debug_callback: Optional[Callable[[str], None]] = None

    def set_debug_callback(self, callback: Optional[Callable[[str], None]]) -> None:
        self._debug_callback = callback

    def _debug_log(self, message: str) -> None:
        if self.enable_debug_logging and self._debug_callback:
            self._debug_callback(f"[EVENT] {message}")

    def subscribe(
        self,
        event_type: "EventType",
        subscriber: EventSubscriber,
        subscriber_name: Optional[str] = None
    ) -> None:
        """Call ``subscriber`` with every delivered event of ``event_type``.

        Subscribers of one type are called in subscription order.
        """
        name = subscriber_name or getattr(subscriber, '__name__', 'anonymous')
        with self._lock:
            self._subscribers[event_type].append((name, subscriber))
        self._debug_log(f"Subscribed {name} to {event_type.name} events")

    def publish(self, event: "GameEvent", source: Optional[str] = None) -> None:
        """Queue an event for the next call to process_events()."""
        with self._lock:
            self._pending.append((event, source or "unknown"))
        self._debug_log(f"Published {event.__class__.__name__} from {source or 'unknown'}")

    @property
    def pending_count(self) -> int:
        with self._lock:
            return len(self._pending)

    def process_events(self) -> int:
        """Deliver every event queued so far, oldest first.

        Events published by subscribers while this runs stay queued for the
        next call.

        Returns:
            Number of events delivered
        """
        with self._lock:
            batch, self._pending = self._pending, deque()

        for event, source in batch:
            self._deliver(event, source)
        return len(batch)

    def _deliver(self, event: "GameEvent", source: str) -> None:
        self._debug_log(
            f"Delivering {event.__class__.__name__} from {source} (round: {event.round_number})"
        )
        with self._lock:
            subscribers = list(self._subscribers.get(event.event_type, []))

        for name, subscriber in subscribers:
            try:
                subscriber(event)
            except Exception as e:
                # Remaining subscribers still receive the event
                self._debug_log(f"Error in subscriber {name}: {e}")
