"""
Unit tests for the Event Manager system.

Tests the event bus that decouples the battle engine from logging and
presentation: subscription, queued delivery order and error isolation.
"""

from unittest.mock import Mock

from silly_animals.core.data import Side
from silly_animals.core.events import (
    BattleFinished,
    EventManager,
    EventType,
    RoundStarted,
)


def round_started(round_number: int = 1) -> RoundStarted:
    return RoundStarted(round_number=round_number)


class TestEventTypes:
    """Test event dataclasses."""

    def test_event_type_set_on_creation(self):
        assert round_started().event_type is EventType.ROUND_STARTED
        assert BattleFinished(round_number=3, winner=None).event_type is EventType.BATTLE_FINISHED

    def test_battle_finished_carries_winner(self):
        event = BattleFinished(round_number=2, winner=Side.RIGHT)

        assert event.winner is Side.RIGHT
        assert event.round_number == 2


class TestEventManager:
    """Test EventManager functionality."""

    def test_publish_queues_until_processed(self, event_manager):
        subscriber = Mock()
        event_manager.subscribe(EventType.ROUND_STARTED, subscriber)

        event_manager.publish(round_started(), source="test")

        subscriber.assert_not_called()
        assert event_manager.pending_count == 1

    def test_process_events(self, event_manager):
        subscriber = Mock()
        event_manager.subscribe(EventType.ROUND_STARTED, subscriber)

        event_manager.publish(round_started(1))
        event_manager.publish(round_started(2))

        assert event_manager.process_events() == 2
        assert subscriber.call_count == 2
        assert event_manager.pending_count == 0

    def test_only_matching_type_delivered(self, event_manager):
        subscriber = Mock()
        event_manager.subscribe(EventType.BATTLE_FINISHED, subscriber)

        event_manager.publish(round_started())
        finished = BattleFinished(round_number=1, winner=Side.LEFT)
        event_manager.publish(finished)
        event_manager.process_events()

        subscriber.assert_called_once_with(finished)

    def test_delivery_keeps_publication_order(self, event_manager):
        seen = []
        event_manager.subscribe(EventType.ROUND_STARTED, lambda e: seen.append(e.round_number))
        event_manager.subscribe(EventType.BATTLE_FINISHED, lambda e: seen.append("finished"))

        for i in range(5):
            event_manager.publish(round_started(i))
        event_manager.publish(BattleFinished(round_number=4, winner=None))
        event_manager.process_events()

        assert seen == [0, 1, 2, 3, 4, "finished"]

    def test_subscribers_called_in_subscription_order(self, event_manager):
        calls = []
        event_manager.subscribe(EventType.ROUND_STARTED, lambda e: calls.append("first"))
        event_manager.subscribe(EventType.ROUND_STARTED, lambda e: calls.append("second"))

        event_manager.publish(round_started())
        event_manager.process_events()

        assert calls == ["first", "second"]

    def test_events_published_during_processing_wait(self, event_manager):
        seen = []

        def republish(event):
            seen.append(event.round_number)
            if event.round_number == 1:
                event_manager.publish(round_started(2))

        event_manager.subscribe(EventType.ROUND_STARTED, republish)
        event_manager.publish(round_started(1))

        assert event_manager.process_events() == 1
        assert seen == [1]
        assert event_manager.process_events() == 1
        assert seen == [1, 2]

    def test_process_with_nothing_queued(self, event_manager):
        assert event_manager.process_events() == 0

    def test_subscriber_exception_handling(self, event_manager):
        failing_subscriber = Mock(side_effect=Exception("Test error"))
        working_subscriber = Mock()

        event_manager.subscribe(EventType.ROUND_STARTED, failing_subscriber)
        event_manager.subscribe(EventType.ROUND_STARTED, working_subscriber)

        event_manager.publish(round_started())
        event_manager.process_events()

        working_subscriber.assert_called_once()

    def test_subscriber_exception_reported_to_debug_callback(self):
        messages = []
        manager = EventManager(enable_debug_logging=True)
        manager.set_debug_callback(messages.append)

        def bad(event):
            raise ValueError("boom")

        manager.subscribe(EventType.ROUND_STARTED, bad, subscriber_name="BadSubscriber")
        manager.publish(round_started(), source="test")
        manager.process_events()

        assert "[EVENT] Published RoundStarted from test" in messages
        assert any("Error in subscriber BadSubscriber: boom" in m for m in messages)

    def test_debug_callback_silent_when_disabled(self, event_manager):
        messages = []
        event_manager.set_debug_callback(messages.append)

        event_manager.subscribe(EventType.ROUND_STARTED, Mock(side_effect=ValueError("boom")))
        event_manager.publish(round_started())
        event_manager.process_events()

        assert messages == []
