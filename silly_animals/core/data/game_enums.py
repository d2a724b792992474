"""Centralized game enums and constants.

This module contains the core enums shared across the engine, the
managers and the renderers.
"""

from enum import Enum


class Side(Enum):
    """The two sides of a battle."""
    LEFT = 0
    RIGHT = 1


SIDE_NAMES = {
    Side.LEFT: "Left",
    Side.RIGHT: "Right",
}
