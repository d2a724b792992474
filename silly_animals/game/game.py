"""
Main game orchestration class.

This module runs a battle session: it wires the event bus, the log manager
and the render builder around a battle, then alternates rendering the
scene, waiting for the player and advancing one round until the battle
is over.
"""

from typing import Optional, TypeVar

from ..core.data import Side
from ..core.engine import Battle, GamePhase, GameState, RoundReport
from ..core.events import EventManager, GameEnded, GameStarted, LogMessage, LogSaveRequested
from ..core.input import InputEvent, InputType, Key
from ..core.renderer import Renderer
from .entities.bestiary import Bestiary, load_bestiary
from .managers.log_manager import LogManager
from .render_builder import RenderBuilder


TManager = TypeVar("TManager")


class Game:
    """Main game orchestrator that coordinates the battle and its presentation."""

    def __init__(
        self,
        renderer: Renderer,
        bestiary: Optional[Bestiary] = None,
        battle: Optional[Battle] = None,
        enable_debug: bool = False,
        log_dir: str = "logs",
    ):
        self.renderer = renderer
        self.state = GameState(phase=GamePhase.SETUP)
        self.bestiary = bestiary
        self.enable_debug = enable_debug
        self.log_dir = log_dir
        self.running = False

        self.event_manager = EventManager(enable_debug_logging=enable_debug)

        # Initialized in initialize(); accessed through fail-fast properties
        self._battle: Optional[Battle] = battle
        self._log_manager: Optional[LogManager] = None
        self._render_builder: Optional[RenderBuilder] = None

    def _require_manager(self, manager: Optional[TManager], name: str) -> TManager:
        """Return the manager if initialized, otherwise raise a helpful error."""
        if manager is None:
            raise RuntimeError(f"{name} not initialized. Call initialize() first.")
        return manager

    @property
    def battle(self) -> Battle:
        return self._require_manager(self._battle, "Battle")

    @property
    def log_manager(self) -> LogManager:
        return self._require_manager(self._log_manager, "LogManager")

    @property
    def render_builder(self) -> RenderBuilder:
        return self._require_manager(self._render_builder, "RenderBuilder")

    @property
    def is_initialized(self) -> bool:
        return self._render_builder is not None

    def initialize(self) -> None:
        """Set up managers and the battle. Safe to call once per session."""
        self._log_manager = LogManager(self.event_manager, self.state, log_dir=self.log_dir)
        if self.enable_debug:
            self._log_manager.toggle_debug()
            self.event_manager.set_debug_callback(self._log_manager.debug)

        if self._battle is None:
            if self.bestiary is None:
                self.bestiary = load_bestiary()
            self._battle = Battle(
                self.bestiary.build_roster(Side.LEFT),
                self.bestiary.build_roster(Side.RIGHT),
                event_manager=self.event_manager,
            )
        elif self._battle.event_manager is None:
            self._battle.event_manager = self.event_manager

        self._render_builder = RenderBuilder(
            self._battle, self.state, self.renderer, log_manager=self._log_manager
        )

        self.state.phase = GamePhase.BATTLE
        self.event_manager.publish(GameStarted(round_number=0, title=self.renderer.config.title), source="Game")
        self._emit_log(
            f"{len(self._battle.left)} creatures on the left face {len(self._battle.right)} on the right"
        )
        self.event_manager.process_events()

    def run(self) -> None:
        """Run the session until the battle ends or the player quits."""
        if not self.is_initialized:
            self.initialize()

        self.running = True
        self.renderer.start()
        try:
            while self.running:
                if self.battle.state().is_finished:
                    self._finish(reason="battle_finished")
                    self._render()
                    break

                self._render()
                for event in self.renderer.get_input_events():
                    self.handle_input(event)
                    if not self.running:
                        break
        finally:
            self.running = False
            self.renderer.stop()

    def step(self) -> RoundReport:
        """Advance the battle one round and deliver the resulting events."""
        report = self.battle.advance_round()
        self.event_manager.process_events()
        return report

    def handle_input(self, event: InputEvent) -> None:
        if event.event_type == InputType.QUIT or event.key in (Key.Q, Key.ESCAPE):
            self._finish(reason="player_quit")
            self._render()
            return

        if event.event_type != InputType.KEY_PRESS:
            return

        if event.key in (Key.ENTER, Key.SPACE):
            self.step()
        elif event.key == Key.D:
            self.log_manager.toggle_debug()
        elif event.key == Key.S:
            self.event_manager.publish(LogSaveRequested(round_number=self.battle.round_number), source="Game")
            self.event_manager.process_events()

    def _finish(self, reason: str) -> None:
        state = self.battle.state()
        self.event_manager.publish(
            GameEnded(round_number=self.battle.round_number, winner=state.winner, reason=reason),
            source="Game"
        )
        self.event_manager.process_events()
        self.state.phase = GamePhase.GAME_OVER
        self.state.quit_requested = reason == "player_quit"
        self.running = False

    def _render(self) -> None:
        context = self.render_builder.build_render_context()
        self.renderer.clear()
        self.renderer.render_frame(context)
        self.renderer.present()

    def _emit_log(self, message: str, category: str = "SYSTEM", level: str = "INFO") -> None:
        self.event_manager.publish(
            LogMessage(
                round_number=self._battle.round_number if self._battle else 0,
                message=message,
                category=category,
                level=level,
                source="Game"
            ),
            source="Game"
        )
