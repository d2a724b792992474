"""Battle state, snapshots and round reports.

The battle state is never stored: it is derived from roster emptiness every
time it is asked for. Snapshots are frozen copies handed to the
presentation layer so it can never reach the live rosters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, TYPE_CHECKING

from ..data import Side

if TYPE_CHECKING:
    from ..entities import Creature


class BattleStatus(Enum):
    """High level battle status."""

    BATTLING = auto()
    FINISHED = auto()


@dataclass(frozen=True)
class BattleState:
    """Battling, or Finished with a winner (None for a draw)."""

    status: BattleStatus
    winner: Optional[Side] = None

    @classmethod
    def battling(cls) -> BattleState:
        return cls(BattleStatus.BATTLING)

    @classmethod
    def finished(cls, winner: Optional[Side]) -> BattleState:
        return cls(BattleStatus.FINISHED, winner)

    @classmethod
    def from_roster_presence(cls, left_alive: bool, right_alive: bool) -> BattleState:
        """Derive the state from which rosters still hold creatures."""
        if left_alive and right_alive:
            return cls.battling()
        if left_alive:
            return cls.finished(Side.LEFT)
        if right_alive:
            return cls.finished(Side.RIGHT)
        return cls.finished(None)

    @property
    def is_battling(self) -> bool:
        return self.status is BattleStatus.BATTLING

    @property
    def is_finished(self) -> bool:
        return self.status is BattleStatus.FINISHED

    @property
    def is_draw(self) -> bool:
        return self.is_finished and self.winner is None


@dataclass(frozen=True)
class CreatureSnapshot:
    """Read-only view of a creature at snapshot time."""

    creature_id: str
    name: str
    icon: str
    health: int
    attack: int

    @classmethod
    def of(cls, creature: Creature) -> CreatureSnapshot:
        return cls(
            creature_id=creature.creature_id,
            name=creature.name,
            icon=creature.icon,
            health=creature.health,
            attack=creature.attack,
        )


@dataclass(frozen=True)
class BattleSnapshot:
    """Immutable copy of both rosters in order plus the derived state."""

    left: tuple[CreatureSnapshot, ...]
    right: tuple[CreatureSnapshot, ...]
    round_number: int
    state: BattleState

    def roster(self, side: Side) -> tuple[CreatureSnapshot, ...]:
        return self.left if side is Side.LEFT else self.right


@dataclass
class RoundReport:
    """What happened during one round advance."""

    round_number: int
    damage_dealt: list[tuple[str, int]] = field(default_factory=list)
    removed_ids: list[str] = field(default_factory=list)
    waves: int = 0
    state: BattleState = field(default_factory=BattleState.battling)
    skipped: bool = False  # advance requested on a finished battle
