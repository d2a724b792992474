"""Core data definitions.

This package contains fundamental game definitions:
- game_enums.py: Centralized enums for battle sides and their display names
"""

from .game_enums import Side, SIDE_NAMES

__all__ = [
    "Side",
    "SIDE_NAMES",
]
