# models.py

from dataclasses import dataclass
from typing import Optional, Tuple

from config import EMPTY_SLOT_LABEL  # type: ignore[import]
from positions import Position, belongs  # type: ignore[import]


@dataclass(frozen=True)
class Player:
    name: str
    team: str
    positions: Tuple[Position, ...]   # concrete only: PG, SG, SF, PF, C
    pick_avg: float                   # average overall pick
    round_avg: float                  # average round taken
    draft_percent: str                # display only, e.g. "98.7%"

    def is_eligible(self, group: Position) -> bool:
        return any(belongs(p, group) for p in self.positions)

    @property
    def positions_label(self) -> str:
        return "/".join(p.value for p in self.positions)


@dataclass
class Slot:
    group: Position
    capacity: int


@dataclass
class SlotAssignment:
    group: Position
    player: Optional[Player] = None

    @property
    def is_empty(self) -> bool:
        return self.player is None

    @property
    def name(self) -> str:
        return EMPTY_SLOT_LABEL if self.player is None else self.player.name

    @property
    def positions(self) -> Tuple[Position, ...]:
        return () if self.player is None else self.player.positions

    @property
    def is_exact_fit(self) -> bool:
        """Filled by a single-position player (no flexibility left on the table)."""
        return self.player is not None and len(self.player.positions) == 1
