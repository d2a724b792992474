"""Ordered team rosters.

A roster keeps one side's creatures in fighting order. The creature at the
front is the active combatant; removing a creature never reorders the rest.
"""

from typing import Iterable, Iterator, Optional, TYPE_CHECKING

import numpy as np

from ..data import Side
from .creature import Creature

if TYPE_CHECKING:
    from ...game.entities.bestiary import CreatureTemplate


class Roster:
    """Ordered sequence of creatures for one side of a battle."""

    def __init__(self, side: Side, creatures: Iterable[Creature] = ()):
        self.side = side
        self._creatures: list[Creature] = list(creatures)

    @classmethod
    def from_templates(cls, side: Side, templates: Iterable["CreatureTemplate"]) -> "Roster":
        """Build a roster by spawning a fresh creature from each template."""
        return cls(side, (template.spawn() for template in templates))

    def __len__(self) -> int:
        return len(self._creatures)

    def __iter__(self) -> Iterator[Creature]:
        return iter(self._creatures)

    def __repr__(self) -> str:
        return f"Roster({self.side.name}, {self._creatures!r})"

    @property
    def is_empty(self) -> bool:
        return not self._creatures

    @property
    def front(self) -> Optional[Creature]:
        """The active combatant, or None for an empty roster."""
        return self._creatures[0] if self._creatures else None

    def ids(self) -> list[str]:
        return [creature.creature_id for creature in self._creatures]

    def entries(self) -> list[tuple[str, Creature]]:
        """(identifier, creature) pairs in roster order."""
        return [(creature.creature_id, creature) for creature in self._creatures]

    def find(self, creature_id: str) -> Optional[Creature]:
        for creature in self._creatures:
            if creature.creature_id == creature_id:
                return creature
        return None

    def remove(self, creature_id: str) -> bool:
        """Remove every entry with the given id.

        Returns:
            True if anything was removed, False if the id was absent
        """
        remaining = [c for c in self._creatures if c.creature_id != creature_id]
        removed = len(remaining) != len(self._creatures)
        self._creatures = remaining
        return removed

    def healths(self) -> np.ndarray:
        return np.fromiter(
            (creature.health for creature in self._creatures),
            dtype=np.int64,
            count=len(self._creatures)
        )

    def defeated_ids(self) -> list[str]:
        """Identifiers of creatures with health <= 0, in roster order."""
        if not self._creatures:
            return []
        defeated_indices = np.flatnonzero(self.healths() <= 0)
        return [self._creatures[i].creature_id for i in defeated_indices]
