"""
Unit tests for the LogManager.

Tests event-driven logging, filtering by level and category, the battle
narrative and saving the log to disk.
"""
import os

from silly_animals.core.data import Side
from silly_animals.core.events import (
    BattleFinished,
    CreatureDamaged,
    CreatureDefeated,
    DebugMessage,
    GameEnded,
    LogMessage as LogEvent,
    LogSaveRequested,
    RoundStarted,
)
from silly_animals.game.managers import LogCategory, LogLevel, LogManager, LogMessage


class TestLogMessage:

    def test_format_with_category(self):
        message = LogMessage(text="hello", category=LogCategory.BATTLE)

        assert message.format() == "[BTL] hello"

    def test_format_plain(self):
        message = LogMessage(text="hello", category=LogCategory.SYSTEM)

        assert message.format(include_category=False) == "hello"

    def test_format_with_timestamp(self):
        message = LogMessage(text="hello", category=LogCategory.SYSTEM)

        assert message.format(include_timestamp=True).startswith("[")
        assert message.format(include_timestamp=True).endswith("[SYS] hello")


class TestLogManager:

    def test_direct_logging_updates_game_state(self, log_manager, game_state):
        log_manager.battle("Round 1")

        assert game_state.log_data['messages'] == ["[BTL] Round 1"]
        assert game_state.log_data['total_messages'] == 1

    def test_debug_hidden_by_default(self, log_manager):
        log_manager.debug("internal")
        log_manager.system("visible")

        assert [m.text for m in log_manager.get_messages()] == ["visible"]

    def test_toggle_debug(self, log_manager, game_state):
        log_manager.debug("internal")

        log_manager.toggle_debug()

        assert log_manager.is_debug_enabled()
        assert [m.text for m in log_manager.get_messages()] == ["internal"]
        assert game_state.log_data['debug_enabled']

        log_manager.toggle_debug()
        assert not log_manager.is_debug_enabled()
        assert log_manager.log_level == LogLevel.INFO

    def test_disabled_category_filtered(self, log_manager):
        log_manager.battle("fight")
        log_manager.ui("menu")

        log_manager.disable_category(LogCategory.UI)

        assert [m.text for m in log_manager.get_messages()] == ["fight"]

    def test_get_messages_by_category(self, log_manager):
        log_manager.battle("fight")
        log_manager.warning("careful")

        messages = log_manager.get_messages(categories={LogCategory.WARNING})

        assert [m.text for m in messages] == ["careful"]

    def test_count_limits_to_most_recent(self, log_manager):
        for i in range(5):
            log_manager.battle(f"line {i}")

        assert log_manager.recent_lines(2) == ["[BTL] line 3", "[BTL] line 4"]
        assert log_manager.recent_lines(0) == []

    def test_bounded_buffer(self, event_manager, game_state):
        manager = LogManager(event_manager, game_state, max_messages=3)

        for i in range(5):
            manager.system(str(i))

        assert [m.text for m in manager.messages] == ["2", "3", "4"]

    def test_clear(self, log_manager, game_state):
        log_manager.system("x")

        log_manager.clear()

        assert game_state.log_data['total_messages'] == 0


class TestEventDrivenLogging:

    def test_log_message_event(self, log_manager, event_manager):
        event_manager.publish(LogEvent(round_number=0, message="loaded", category="battle"))
        event_manager.process_events()

        assert log_manager.messages[-1].text == "loaded"
        assert log_manager.messages[-1].category is LogCategory.BATTLE

    def test_unknown_category_falls_back_to_system(self, log_manager, event_manager):
        event_manager.publish(LogEvent(round_number=0, message="x", category="nonsense"))
        event_manager.process_events()

        assert log_manager.messages[-1].category is LogCategory.SYSTEM

    def test_debug_message_event(self, log_manager, event_manager):
        event_manager.publish(DebugMessage(round_number=0, message="queue drained", source="Battle"))
        event_manager.process_events()

        assert log_manager.messages[-1].text == "[Battle] queue drained"
        assert log_manager.messages[-1].category is LogCategory.DEBUG

    def test_battle_narrative(self, log_manager, event_manager):
        event_manager.publish(RoundStarted(round_number=1))
        event_manager.publish(CreatureDamaged(
            round_number=1, creature_id="x", creature_name="Fish", side=Side.LEFT, amount=2, health_after=0
        ))
        event_manager.publish(CreatureDefeated(round_number=1, creature_id="x", creature_name="Fish", side=Side.LEFT))
        event_manager.publish(BattleFinished(round_number=1, winner=Side.RIGHT))
        event_manager.process_events()

        assert [m.text for m in log_manager.messages] == [
            "Round 1",
            "Left Fish takes 2 damage (0 hp left)",
            "Left Fish is defeated",
            "Right team wins in round 1!",
        ]

    def test_draw_message(self, log_manager, event_manager):
        event_manager.publish(BattleFinished(round_number=4, winner=None))
        event_manager.process_events()

        assert "draw" in log_manager.messages[-1].text

    def test_quit_message(self, log_manager, event_manager):
        event_manager.publish(GameEnded(round_number=2, reason="player_quit"))
        event_manager.process_events()

        assert log_manager.messages[-1].text == "Battle abandoned"

    def test_save_requested_event_writes_file(self, log_manager, event_manager):
        log_manager.battle("Round 1")

        event_manager.publish(LogSaveRequested(round_number=1))
        event_manager.process_events()

        files = os.listdir(log_manager.log_dir)
        assert len(files) == 1
        assert log_manager.messages[-1].text.startswith("Game log saved to")


class TestSaveLog:

    def test_save_includes_debug_messages(self, log_manager):
        log_manager.debug("hidden detail")
        log_manager.battle("Round 1")

        path = log_manager.save_log_to_file()

        with open(path, encoding="utf-8") as f:
            content = f.read()
        assert content.startswith("Silly Animals Game - Battle Log")
        assert "[DEBUG] hidden detail" in content
        assert "[BATTLE] Round 1" in content

    def test_save_empty_log(self, log_manager):
        path = log_manager.save_log_to_file()

        with open(path, encoding="utf-8") as f:
            assert "No messages to save." in f.read()

    def test_save_failure_is_logged(self, event_manager, game_state, tmp_path):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("x")
        manager = LogManager(event_manager, game_state, log_dir=str(blocker))

        assert manager.save_log_to_file() is None
        assert manager.messages[-1].category is LogCategory.ERROR
