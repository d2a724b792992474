"""
Battle resolution engine.

The battle owns the left and right rosters and advances the fight one round
at a time. A round seeds an event queue with the two front creatures
hitting each other, then drains the queue in waves: every event of a wave
is applied before the rosters are scanned for defeated creatures, whose
removals form the next wave.
"""
from collections import deque
from typing import Optional, TYPE_CHECKING

from ..data import Side
from ..entities import Creature, Roster
from ..events import (
    BattleFinished,
    BattleStarted,
    CreatureDamaged,
    CreatureDefeated,
    LogMessage,
    RoundCompleted,
    RoundStarted,
)
from .battle_state import BattleSnapshot, BattleState, CreatureSnapshot, RoundReport
from .round_events import DamageEvent, RemoveEvent, RoundEvent

if TYPE_CHECKING:
    from ..events import EventManager, GameEvent


class Battle:
    """Two rosters fighting until at least one is empty."""

    def __init__(
        self,
        left: Roster,
        right: Roster,
        event_manager: Optional["EventManager"] = None
    ):
        """Initialize the battle.

        Args:
            left: Left side roster; its front creature fights first
            right: Right side roster
            event_manager: Optional event bus receiving battle events
        """
        self.left = left
        self.right = right
        self.event_manager = event_manager
        self.round_number = 0

        self._publish(BattleStarted(
            round_number=0,
            left_count=len(left),
            right_count=len(right),
        ))

    @property
    def rosters(self) -> tuple[Roster, Roster]:
        return (self.left, self.right)

    def roster(self, side: Side) -> Roster:
        return self.left if side is Side.LEFT else self.right

    def state(self) -> BattleState:
        """Current state, recomputed from the rosters on every call."""
        return BattleState.from_roster_presence(not self.left.is_empty, not self.right.is_empty)

    def snapshot(self) -> BattleSnapshot:
        return BattleSnapshot(
            left=tuple(CreatureSnapshot.of(c) for c in self.left),
            right=tuple(CreatureSnapshot.of(c) for c in self.right),
            round_number=self.round_number,
            state=self.state(),
        )

    def find_creature(self, creature_id: str) -> Optional[Creature]:
        """Look a creature up in both rosters, left first."""
        for roster in self.rosters:
            creature = roster.find(creature_id)
            if creature is not None:
                return creature
        return None

    def side_of(self, creature_id: str) -> Optional[Side]:
        for roster in self.rosters:
            if roster.find(creature_id) is not None:
                return roster.side
        return None

    def remove_creature(self, creature_id: str) -> bool:
        """Remove the id from both rosters. Absent ids are a no-op.

        Returns:
            True if a creature was removed
        """
        removed = False
        for roster in self.rosters:
            removed = roster.remove(creature_id) or removed
        return removed

    def advance_round(self) -> RoundReport:
        """Resolve one round of combat.

        Must only be called while the battle is battling. On a finished
        battle this logs a warning and returns a skipped report without
        touching the rosters.
        """
        state = self.state()
        if state.is_finished:
            self._emit_log(
                "advance_round called on a finished battle; ignoring",
                category="WARNING",
                level="WARNING",
            )
            return RoundReport(round_number=self.round_number, state=state, skipped=True)

        self.round_number += 1
        report = RoundReport(round_number=self.round_number)
        self._publish(RoundStarted(round_number=self.round_number))

        left_front = self.left.front
        right_front = self.right.front
        assert left_front is not None and right_front is not None

        # Both amounts come from pre-round attack values
        queue: deque[RoundEvent] = deque([
            DamageEvent(left_front.creature_id, right_front.attack),
            DamageEvent(right_front.creature_id, left_front.attack),
        ])

        while queue:
            wave, queue = queue, deque()
            report.waves += 1

            for event in wave:
                self._apply_event(event, report)

            for roster in self.rosters:
                queue.extend(RemoveEvent(creature_id) for creature_id in roster.defeated_ids())

        report.state = self.state()
        self._publish(RoundCompleted(round_number=self.round_number, report=report))
        if report.state.is_finished:
            self._publish(BattleFinished(round_number=self.round_number, winner=report.state.winner))

        return report

    def _apply_event(self, event: RoundEvent, report: RoundReport) -> None:
        if isinstance(event, DamageEvent):
            target = self.find_creature(event.target_id)
            if target is None:
                # Removed earlier this round
                return
            health_after = target.take_damage(event.amount)
            report.damage_dealt.append((event.target_id, event.amount))
            self._publish(CreatureDamaged(
                round_number=self.round_number,
                creature_id=target.creature_id,
                creature_name=target.name,
                side=self._require_side(target.creature_id),
                amount=event.amount,
                health_after=health_after,
            ))
        elif isinstance(event, RemoveEvent):
            target = self.find_creature(event.target_id)
            if target is None:
                return
            side = self._require_side(event.target_id)
            self.remove_creature(event.target_id)
            report.removed_ids.append(event.target_id)
            self._publish(CreatureDefeated(
                round_number=self.round_number,
                creature_id=target.creature_id,
                creature_name=target.name,
                side=side,
            ))

    def _require_side(self, creature_id: str) -> Side:
        side = self.side_of(creature_id)
        if side is None:
            raise RuntimeError(f"Creature {creature_id} is not on any roster")
        return side

    def _publish(self, event: "GameEvent") -> None:
        if self.event_manager is not None:
            self.event_manager.publish(event, source="Battle")

    def _emit_log(self, message: str, category: str = "BATTLE", level: str = "INFO") -> None:
        """Emit a log message event."""
        self._publish(LogMessage(
            round_number=self.round_number,
            message=message,
            category=category,
            level=level,
            source="Battle",
        ))
