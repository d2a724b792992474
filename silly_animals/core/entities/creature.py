"""Creature model for battle rosters.

A creature is the smallest combat unit: a stable identity, an immutable
class tag used for display, a mutable health pool and a fixed attack value.
"""

from dataclasses import dataclass
from typing import Optional
import uuid


@dataclass(frozen=True)
class CreatureClass:
    """Display tag for a creature. Carries no combat behavior."""
    name: str
    icon: str


class Creature:
    """A combatant with health and attack.

    Health is signed and is never clamped: a creature hit for more than its
    remaining health keeps the negative value until it is removed from its
    roster at the end of the wave.
    """

    def __init__(
        self,
        creature_class: CreatureClass,
        health: int,
        attack: int,
        creature_id: Optional[str] = None
    ):
        """Initialize a creature.

        Args:
            creature_class: Display class (name and icon)
            health: Starting health
            attack: Damage dealt per exchange
            creature_id: Optional fixed identifier; a fresh uuid4 is used otherwise
        """
        self._creature_id: str = creature_id if creature_id is not None else str(uuid.uuid4())
        self._creature_class = creature_class
        self._attack = attack
        self.health = health

    @property
    def creature_id(self) -> str:
        return self._creature_id

    @property
    def creature_class(self) -> CreatureClass:
        return self._creature_class

    @property
    def attack(self) -> int:
        return self._attack

    @property
    def name(self) -> str:
        return self._creature_class.name

    @property
    def icon(self) -> str:
        return self._creature_class.icon

    @property
    def is_defeated(self) -> bool:
        """A creature is defeated once its health drops to zero or below."""
        return self.health <= 0

    def take_damage(self, amount: int) -> int:
        """Subtract damage from health and return the new health."""
        self.health -= amount
        return self.health

    def __repr__(self) -> str:
        return (
            f"Creature({self.name!r}, health={self.health}, attack={self.attack}, "
            f"id={self._creature_id[:8]})"
        )
