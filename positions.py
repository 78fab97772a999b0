# positions.py
#
# Position taxonomy for the draft board.
#   - concrete positions (what a player actually plays)
#   - query groups the user cycles through with left/right

from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, Tuple


class Position(str, Enum):
    ANY = "ANY"
    PG = "PG"
    SG = "SG"
    SF = "SF"
    PF = "PF"
    C = "C"
    F = "F"
    G = "G"
    TALL = "TALL"
    SHORT = "SHORT"

    def __str__(self) -> str:
        return self.value


CONCRETE_POSITIONS: Tuple[Position, ...] = (
    Position.PG,
    Position.SG,
    Position.SF,
    Position.PF,
    Position.C,
)

# concrete position -> every group it satisfies
ELIGIBILITY: Dict[Position, FrozenSet[Position]] = {
    Position.PG: frozenset({Position.PG, Position.G, Position.SHORT, Position.ANY}),
    Position.SG: frozenset({Position.SG, Position.G, Position.SHORT, Position.ANY}),
    Position.SF: frozenset({Position.SF, Position.F, Position.TALL, Position.ANY}),
    Position.PF: frozenset({Position.PF, Position.F, Position.TALL, Position.ANY}),
    Position.C: frozenset({Position.C, Position.TALL, Position.ANY}),
}

# Left/right navigation ring.
GROUP_CYCLE: Tuple[Position, ...] = (
    Position.ANY,
    Position.PG,
    Position.SG,
    Position.SF,
    Position.PF,
    Position.C,
    Position.F,
    Position.G,
    Position.TALL,
    Position.SHORT,
)


def is_concrete(position: Position) -> bool:
    return position in ELIGIBILITY


def belongs(concrete: Position, group: Position) -> bool:
    """
    Return True if a player listed at `concrete` can be picked when the
    user filters by `group`.

    Query-only groups (ANY, F, G, TALL, SHORT) are not concrete positions and
    belong to nothing.
    """
    return group in ELIGIBILITY.get(concrete, frozenset())


def _step(group: Position, offset: int) -> Position:
    idx = GROUP_CYCLE.index(group)
    return GROUP_CYCLE[(idx + offset) % len(GROUP_CYCLE)]


def next_group(group: Position) -> Position:
    """Group to the right of `group`, wrapping SHORT -> ANY."""
    return _step(group, 1)


def previous_group(group: Position) -> Position:
    """Group to the left of `group`, wrapping ANY -> SHORT."""
    return _step(group, -1)
