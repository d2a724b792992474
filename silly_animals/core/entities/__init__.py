"""Creature and roster model.

This package contains the combatant data model:
- creature.py: Creature identity, display class and combat stats
- roster.py: Ordered per-side rosters with lookup and removal by id
"""

from .creature import Creature, CreatureClass
from .roster import Roster

__all__ = [
    "Creature",
    "CreatureClass",
    "Roster",
]
