import sys
from typing import Optional, TextIO

from ..core.renderer import Renderer, RendererConfig
from ..core.renderable import CreatureRenderData, RenderContext
from ..core.input import InputEvent, Key, parse_line


class SimpleRenderer(Renderer):
    """Plain ASCII renderer with no colors or cursor control.

    In demo mode input is simulated: every call to ``get_input_events``
    presses enter until ``auto_quit_at`` frames have been drawn.
    """

    def __init__(
        self,
        config: Optional[RendererConfig] = None,
        demo_mode: bool = True,
        auto_quit_at: int = 50,
        output: Optional[TextIO] = None,
        input_stream: Optional[TextIO] = None
    ):
        super().__init__(config)
        self._frame_count = 0
        self._auto_quit_at = auto_quit_at
        self._demo_mode = demo_mode
        self._output = output or sys.stdout
        self._input = input_stream or sys.stdin
        self._buffer: list[str] = []
        self.last_frame: list[str] = []

        # ASCII fill per background band
        self.band_symbols = {
            "blank": " ",
            "sky": " ",
            "grass": ".",
            "lane": "_",
        }

    @property
    def frame_count(self) -> int:
        return self._frame_count

    def initialize(self) -> None:
        print(f"Initializing SimpleRenderer ({self.config.width}x{self.config.height})", file=self._output)
        print("=" * self.config.width, file=self._output)

    def cleanup(self) -> None:
        print("\nSimpleRenderer cleanup complete", file=self._output)

    def clear(self) -> None:
        pass

    def present(self) -> None:
        for line in self._buffer:
            print(line, file=self._output)
        self._buffer.clear()

    def render_frame(self, context: RenderContext) -> None:
        self._frame_count += 1

        width = context.width
        grid = [[' ' for _ in range(width)] for _ in range(context.height)]

        for row in context.background:
            if 0 <= row.y < len(grid):
                grid[row.y] = [self.band_symbols.get(row.band, " ")] * width

        for text in context.texts:
            self._put(grid, text.x, text.y, text.text)

        if context.versus is not None:
            self._put(grid, context.versus.x, context.versus.y, context.versus.text)

        for creature in context.creatures:
            self._put(grid, creature.x, creature.y, self.creature_symbol(creature))
            self._put(grid, CreatureRenderData.label_x(creature.x, creature.health), creature.y + 1, str(creature.health))
            self._put(grid, CreatureRenderData.label_x(creature.x, creature.attack), creature.y + 2, str(creature.attack))

        log_start = (max((text.y for text in context.texts), default=0)) + 1
        for offset, line in enumerate(context.log_messages):
            self._put(grid, 0, log_start + offset, line)

        self.last_frame = [''.join(row).rstrip() for row in grid]
        self._buffer = [f"--- Frame {self._frame_count} ---"] + self.last_frame

    @staticmethod
    def creature_symbol(creature: CreatureRenderData) -> str:
        """ASCII stand-in for the icon: first letter, upper case for the front creature."""
        letter = (creature.name[:1] or "?")
        return letter.upper() if creature.is_front else letter.lower()

    @staticmethod
    def _put(grid: list[list[str]], x: int, y: int, text: str) -> None:
        if not 0 <= y < len(grid):
            return
        row = grid[y]
        for offset, char in enumerate(text):
            if 0 <= x + offset < len(row):
                row[x + offset] = char

    def get_input_events(self) -> list[InputEvent]:
        if self._demo_mode:
            if self._frame_count >= self._auto_quit_at:
                return [InputEvent.quit()]
            return [InputEvent.key_press(Key.ENTER)]

        line = self._input.readline()
        if line == "":
            return [InputEvent.quit()]
        return [parse_line(line)]
