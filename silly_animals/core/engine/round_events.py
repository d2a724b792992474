"""Transient events used inside a single battle round.

These never leave the engine: they are produced and consumed by one call to
``Battle.advance_round`` and are not part of the observable battle state.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class DamageEvent:
    """Subtract ``amount`` from the health of ``target_id`` if it is still present."""
    target_id: str
    amount: int


@dataclass(frozen=True)
class RemoveEvent:
    """Remove ``target_id`` from whichever roster holds it."""
    target_id: str


RoundEvent = Union[DamageEvent, RemoveEvent]
