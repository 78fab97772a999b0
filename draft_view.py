# draft_view.py
#
# Read-only snapshot of the draft that the renderer draws each frame.
# The renderer never looks at DraftState directly.

from typing import List, Optional, Sequence

from pydantic import BaseModel  # type: ignore[import]

from catalog import Catalog  # type: ignore[import]
from draft_state import DraftState, Mode  # type: ignore[import]
from keymap import HELP_TEXT  # type: ignore[import]
from models import Player, Slot  # type: ignore[import]
from positions import GROUP_CYCLE, Position  # type: ignore[import]
from roster_slots import DEFAULT_SLOTS, assign_slots  # type: ignore[import]


# ---------------------------------------------------------------------------
# Pydantic view models
# ---------------------------------------------------------------------------

class CandidateView(BaseModel):
    number: int                   # 1-based, what the digit keys refer to
    name: str
    team: str
    positions: List[Position]
    pick_avg: float
    round_avg: float
    draft_percent: str
    selected: bool = False


class SlotView(BaseModel):
    group: Position
    name: str                     # player name or the empty marker
    positions: List[Position]
    empty: bool
    exact_fit: bool               # single-position player


class DraftView(BaseModel):
    mode: Mode
    query: str
    group: Position
    groups: List[Position]
    candidates: List[CandidateView]
    selected: Optional[int] = None
    candidate: Optional[str] = None
    slots: Optional[List[SlotView]] = None    # Listing mode only
    help: str
    status_message: Optional[str] = None


# ---------------------------------------------------------------------------
# Helper functions to map engine state -> view models
# ---------------------------------------------------------------------------

def _mk_candidate_view(i: int, p: Player, selected: Optional[int]) -> CandidateView:
    return CandidateView(
        number=i + 1,
        name=p.name,
        team=p.team,
        positions=list(p.positions),
        pick_avg=p.pick_avg,
        round_avg=p.round_avg,
        draft_percent=p.draft_percent,
        selected=(i == selected),
    )


def build_view(
    state: DraftState,
    catalog: Catalog,
    slots: Sequence[Slot] = DEFAULT_SLOTS,
) -> DraftView:
    candidates: List[CandidateView] = []
    for i, name in enumerate(state.filtered):
        p = catalog.get(name)
        if p is not None:
            candidates.append(_mk_candidate_view(i, p, state.selected))

    slot_views = None
    if state.mode is Mode.LISTING:
        slot_views = [
            SlotView(
                group=a.group,
                name=a.name,
                positions=list(a.positions),
                empty=a.is_empty,
                exact_fit=a.is_exact_fit,
            )
            for a in assign_slots(catalog, state.mine, slots)
        ]

    return DraftView(
        mode=state.mode,
        query=state.query,
        group=state.group,
        groups=list(GROUP_CYCLE),
        candidates=candidates,
        selected=state.selected,
        candidate=state.candidate,
        slots=slot_views,
        help=HELP_TEXT[state.mode],
        status_message=state.status_message,
    )
