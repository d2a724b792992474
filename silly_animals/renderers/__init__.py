"""Renderer implementations for the battle scene."""

from .simple_renderer import SimpleRenderer
from .terminal_renderer import TerminalRenderer

__all__ = ["SimpleRenderer", "TerminalRenderer"]
