"""
Render context building system for converting battle state to renderable data.

This module reads an immutable battle snapshot and lays it out as a scene:
a scenery backdrop, the two teams facing each other across a "VS" marker,
a status line and the most recent log messages.
"""
from typing import TYPE_CHECKING

import numpy as np

from ..core.data import SIDE_NAMES, Side
from ..core.engine.battle_state import BattleSnapshot, BattleState, CreatureSnapshot
from ..core.renderable import (
    BackgroundRowRenderData,
    CreatureRenderData,
    RenderContext,
    TextRenderData,
)

if TYPE_CHECKING:
    from ..core.engine import Battle, GameState
    from ..core.renderer import Renderer

TITLE_ROW = 0
LANE_ROW = 8
STATUS_ROW = 12

CREATURE_GAP = 4      # columns between the VS marker and the front creatures
CREATURE_SPACING = 5  # columns between neighbouring creatures

# (band, pattern, cell width) per row, top to bottom
SCENERY = [
    ("blank", " ", 1),
    ("sky", " ", 1),
    ("sky", " ☁️  ", 4),
    ("sky", " ", 1),
    ("sky", "⛰️ ", 2),
    ("grass", " ⛰️", 2),
    ("grass", " ", 1),
    ("grass", " ", 1),
    ("lane", " ", 1),
    ("grass", " ", 1),
    ("grass", " ", 1),
    ("blank", " ", 1),
]


class RenderBuilder:
    """Builds render contexts from battle snapshots."""

    def __init__(
        self,
        battle: "Battle",
        game_state: "GameState",
        renderer: "Renderer",
        log_manager=None
    ):
        self.battle = battle
        self.state = game_state
        self.renderer = renderer
        self.log_manager = log_manager

    def set_battle(self, battle: "Battle") -> None:
        self.battle = battle

    def build_render_context(self) -> RenderContext:
        """Build complete render context from current battle state."""
        snapshot = self.battle.snapshot()
        screen_width, screen_height = self.renderer.get_screen_size()

        context = RenderContext(
            width=screen_width,
            height=screen_height,
            title=self.renderer.config.title,
            round_number=snapshot.round_number,
            is_finished=snapshot.state.is_finished,
        )

        context.background = [
            BackgroundRowRenderData(y=y, band=band, pattern=pattern, cell_width=cell_width)
            for y, (band, pattern, cell_width) in enumerate(SCENERY)
            if y < screen_height
        ]

        centre = self.versus_x(screen_width)
        context.versus = TextRenderData(x=centre, y=LANE_ROW, text="VS")
        context.creatures = (
            self._build_team(snapshot, Side.LEFT, centre, screen_width)
            + self._build_team(snapshot, Side.RIGHT, centre, screen_width)
        )

        context.texts.append(TextRenderData(x=0, y=TITLE_ROW, text=self.renderer.config.title))

        context.status_text = self.status_text(snapshot)
        context.texts.append(TextRenderData(x=0, y=STATUS_ROW, text=context.status_text))

        context.log_messages = self._recent_log_lines(max(0, screen_height - STATUS_ROW - 1))
        return context

    @staticmethod
    def versus_x(screen_width: int) -> int:
        return screen_width // 2 - 2

    @staticmethod
    def team_positions(count: int, side: Side, centre: int) -> np.ndarray:
        """Column of each creature; index 0 is the front creature next to VS."""
        offsets = CREATURE_GAP + np.arange(count, dtype=np.int32) * CREATURE_SPACING
        return centre - offsets if side is Side.LEFT else centre + offsets

    def _build_team(
        self,
        snapshot: BattleSnapshot,
        side: Side,
        centre: int,
        screen_width: int
    ) -> list[CreatureRenderData]:
        creatures: tuple[CreatureSnapshot, ...] = snapshot.roster(side)
        if not creatures:
            return []

        xs = self.team_positions(len(creatures), side, centre)
        # Leave room for a two-column icon and a shifted two-digit label
        visible = np.flatnonzero((xs >= 1) & (xs <= screen_width - 2))

        return [
            CreatureRenderData(
                x=int(xs[i]),
                y=LANE_ROW,
                icon=creatures[i].icon,
                name=creatures[i].name,
                health=creatures[i].health,
                attack=creatures[i].attack,
                side=side,
                is_front=bool(i == 0),
            )
            for i in visible
        ]

    @staticmethod
    def status_text(snapshot: BattleSnapshot) -> str:
        state: BattleState = snapshot.state
        if state.is_battling:
            return f"Round {snapshot.round_number} - Enter: fight  s: save log  d: debug  q: quit"
        if state.winner is None:
            return "Draw! Both teams have fallen."
        return f"{SIDE_NAMES[state.winner]} team wins!"

    def _recent_log_lines(self, count: int) -> list[str]:
        if count <= 0:
            return []
        if self.log_manager is not None:
            return self.log_manager.recent_lines(count)
        lines: list[str] = self.state.log_lines()
        return lines[-count:]
