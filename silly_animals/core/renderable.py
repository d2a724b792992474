from dataclasses import dataclass, field
from typing import Optional

from .data import Side


@dataclass
class BackgroundRowRenderData:
    """One horizontal band of scenery.

    ``pattern`` is repeated to fill the row; ``band`` names the backdrop
    (sky, grass, lane...) so each renderer picks its own colors.
    """
    y: int
    band: str
    pattern: str = " "
    cell_width: int = 1  # on-screen columns taken by one pattern repeat

    def fill(self, width: int) -> str:
        repeats = width // max(1, self.cell_width)
        padding = width - repeats * self.cell_width
        return self.pattern * repeats + " " * padding


@dataclass
class CreatureRenderData:
    """Creature data for rendering.

    This is the OUTPUT data structure used by renderers to draw a creature:
    the icon on the lane row, health on the row below and attack below that.
    """
    x: int
    y: int
    icon: str
    name: str
    health: int
    attack: int
    side: Side
    is_front: bool = False

    @staticmethod
    def label_x(x: int, value: int) -> int:
        """Two-digit stats shift one column left to stay under the icon."""
        return x - (0 if value < 10 else 1)


@dataclass
class TextRenderData:
    x: int
    y: int
    text: str


@dataclass
class RenderContext:
    width: int = 0
    height: int = 0

    title: str = ""
    round_number: int = 0
    status_text: str = ""
    is_finished: bool = False

    background: list[BackgroundRowRenderData] = field(default_factory=list)
    creatures: list[CreatureRenderData] = field(default_factory=list)
    texts: list[TextRenderData] = field(default_factory=list)
    versus: Optional[TextRenderData] = None

    log_messages: list[str] = field(default_factory=list)
