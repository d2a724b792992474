import sys
from typing import Optional, TextIO

from ..core.renderer import Renderer, RendererConfig
from ..core.renderable import CreatureRenderData, RenderContext
from ..core.input import InputEvent, parse_line


class TerminalRenderer(Renderer):
    """ANSI terminal renderer.

    Draws with absolute cursor positioning so wide emoji icons do not push
    the rest of a row out of place. Input is line based: the player presses
    enter to advance a round.
    """

    def __init__(
        self,
        config: Optional[RendererConfig] = None,
        output: Optional[TextIO] = None,
        input_stream: Optional[TextIO] = None
    ):
        super().__init__(config)
        self._output = output or sys.stdout
        self._input = input_stream or sys.stdin
        self._buffer: list[str] = []

        # Background band colors (ANSI background codes)
        self.band_colors = {
            "blank": "\033[49m",
            "sky": "\033[44m",      # Blue
            "grass": "\033[42m",    # Green
            "lane": "\033[43m",     # Yellow
        }

        self.terminal_codes = {
            "reset": "\033[0m",
            "clear_screen": "\033[2J",
            "cursor_home": "\033[H",
            "hide_cursor": "\033[?25l",
            "show_cursor": "\033[?25h",
            "bg_reset": "\033[49m",
            "bg_lane": "\033[43m",
            "bg_stats": "\033[42m",
            "fg_black": "\033[30m",
            "text_bright": "\033[1;97m",
            "text_dim": "\033[37m",
            "text_success": "\033[92m",
        }

        self.stat_symbols = {
            "health": "❤️",
            "attack": "⚔️",
        }

    @staticmethod
    def goto(x: int, y: int) -> str:
        """Cursor move escape for zero-based column x, row y."""
        return f"\033[{y + 1};{x + 1}H"

    def initialize(self) -> None:
        print(self.terminal_codes["hide_cursor"], end='', file=self._output, flush=True)
        self.clear()

    def cleanup(self) -> None:
        print(self.terminal_codes["show_cursor"], end='', file=self._output, flush=True)
        print(self.terminal_codes["reset"], end='', file=self._output, flush=True)

    def clear(self) -> None:
        print(
            self.terminal_codes["clear_screen"] + self.terminal_codes["cursor_home"],
            end='', file=self._output, flush=True
        )

    def present(self) -> None:
        print(''.join(self._buffer), end='', file=self._output, flush=True)
        self._buffer.clear()

    def render_frame(self, context: RenderContext) -> None:
        self._buffer.clear()
        codes = self.terminal_codes

        self._buffer.append(codes["clear_screen"] + codes["cursor_home"])

        for row in context.background:
            color = self.band_colors.get(row.band, codes["bg_reset"])
            self._buffer.append(self.goto(0, row.y) + color + row.fill(context.width))
        self._buffer.append(codes["reset"])

        for text in context.texts:
            self._buffer.append(self.goto(text.x, text.y) + self._text_color(text.text, context) + text.text + codes["reset"])

        if context.versus is not None:
            versus = context.versus
            self._buffer.append(
                self.goto(versus.x, versus.y) + codes["bg_lane"] + codes["fg_black"]
                + versus.text + codes["reset"]
            )

        for creature in context.creatures:
            self._render_creature(creature)

        log_start = (max((text.y for text in context.texts), default=0)) + 1
        for offset, line in enumerate(context.log_messages):
            y = log_start + offset
            if y >= context.height:
                break
            self._buffer.append(self.goto(0, y) + codes["text_dim"] + line[:context.width] + codes["reset"])

        self._buffer.append(self.goto(0, context.height))

    def _render_creature(self, creature: CreatureRenderData) -> None:
        codes = self.terminal_codes
        self._buffer.append(
            self.goto(creature.x, creature.y) + codes["bg_lane"] + creature.icon + codes["reset"]
        )
        for row_offset, (value, symbol) in enumerate(
            ((creature.health, self.stat_symbols["health"]), (creature.attack, self.stat_symbols["attack"])),
            start=1
        ):
            x = CreatureRenderData.label_x(creature.x, value)
            self._buffer.append(
                self.goto(x, creature.y + row_offset) + codes["bg_stats"] + f"{value}{symbol}" + codes["reset"]
            )

    def _text_color(self, text: str, context: RenderContext) -> str:
        if text == context.title:
            return self.terminal_codes["text_bright"]
        if text == context.status_text and context.is_finished:
            return self.terminal_codes["text_success"]
        return ""

    def get_input_events(self) -> list[InputEvent]:
        """Block until the player enters a line. EOF counts as quitting."""
        line = self._input.readline()
        if line == "":
            return [InputEvent.quit()]
        return [parse_line(line)]
