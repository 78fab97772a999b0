# draft_state.py
#
# Draft state machine.
#   Idle -> Searching -> Picking -> Searching ...
#   Idle <-> Listing
#
# dispatch() is the only place the state changes. It never touches the disk
# or the terminal: anything the host has to do (save a roster, quit) comes
# back as a list of effects.

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Union

from catalog import Catalog  # type: ignore[import]
from player_filter import filter_players  # type: ignore[import]
from positions import Position, next_group, previous_group  # type: ignore[import]

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    PICKING = "picking"
    LISTING = "listing"


class EventKind(str, Enum):
    START_SEARCH = "start_search"
    START_LISTING = "start_listing"
    EXIT_LISTING = "exit_listing"
    QUIT = "quit"
    CHARACTER = "character"
    DIGIT = "digit"
    BACKSPACE = "backspace"
    CONFIRM = "confirm"
    SELECT_FIRST = "select_first"
    CANCEL = "cancel"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    GROUP_NEXT = "group_next"
    GROUP_PREV = "group_prev"
    ASSIGN_MINE = "assign_mine"
    ASSIGN_OTHER = "assign_other"


@dataclass(frozen=True)
class InputEvent:
    kind: EventKind
    char: Optional[str] = None    # CHARACTER / DIGIT payload


class Side(str, Enum):
    MINE = "mine"
    OTHERS = "others"


# ---------------------------------------------------------------------------
# Effects handed back to the host
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SaveRoster:
    side: Side
    names: List[str]


@dataclass(frozen=True)
class Quit:
    pass


Effect = Union[SaveRoster, Quit]


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------

@dataclass
class DraftState:
    query: str = ""
    mode: Mode = Mode.IDLE
    group: Position = Position.ANY
    mine: List[str] = field(default_factory=list)
    others: List[str] = field(default_factory=list)
    filtered: List[str] = field(default_factory=list)
    selected: Optional[int] = None
    candidate: Optional[str] = None
    status_message: Optional[str] = None

    def refilter(self, catalog: Catalog) -> None:
        """Recompute the candidate list; any selection is dropped."""
        self.filtered = filter_players(catalog, self.query, self.group, self.mine, self.others)
        self.selected = None

    @property
    def selected_name(self) -> Optional[str]:
        if self.selected is None:
            return None
        return self.filtered[self.selected]

    def drafted(self) -> List[str]:
        return self.mine + self.others

    def roster(self, side: Side) -> List[str]:
        return self.mine if side is Side.MINE else self.others


def new_state(
    catalog: Catalog,
    mine: Iterable[str] = (),
    others: Iterable[str] = (),
) -> DraftState:
    state = DraftState(mine=list(mine), others=list(others))
    both = sorted(set(state.mine) & set(state.others))
    if both:
        raise ValueError(f"Players on both rosters: {', '.join(both)}")
    for name in state.drafted():
        if name not in catalog:
            logger.warning("Drafted player %s is not in the catalog", name)
    state.refilter(catalog)
    return state


# ---------------------------------------------------------------------------
# Shared actions
# ---------------------------------------------------------------------------

def _lock_in(state: DraftState, catalog: Catalog, index: int) -> None:
    """
    Make the index-th candidate the literal query.

    The list is recomputed for the new query, and the selection follows the
    locked-in name (index 0 unless an earlier catalog name contains it).
    """
    name = state.filtered[index]
    state.query = name
    state.refilter(catalog)
    if name in state.filtered:
        state.selected = state.filtered.index(name)


def _reset_search(state: DraftState, catalog: Catalog) -> None:
    state.query = ""
    state.candidate = None
    state.refilter(catalog)


def _change_group(state: DraftState, catalog: Catalog, group: Position) -> None:
    state.group = group
    state.refilter(catalog)


def _assign(state: DraftState, catalog: Catalog, side: Side) -> List[Effect]:
    name = state.candidate
    if name is None:
        return []
    if name in state.mine or name in state.others:
        # Only reachable if someone hands us a stale candidate.
        logger.warning("Refusing to draft %s twice", name)
        state.status_message = f"{name} is already drafted"
        return []

    roster = state.roster(side)
    roster.append(name)
    logger.info("Drafted %s to %s (%d on that roster)", name, side.value, len(roster))

    _reset_search(state, catalog)
    state.mode = Mode.SEARCHING
    return [SaveRoster(side=side, names=list(roster))]


# ---------------------------------------------------------------------------
# Per-mode handlers
# ---------------------------------------------------------------------------

def _on_idle(state: DraftState, event: InputEvent, catalog: Catalog) -> List[Effect]:
    if event.kind is EventKind.START_SEARCH:
        state.mode = Mode.SEARCHING
        state.refilter(catalog)
    elif event.kind is EventKind.START_LISTING:
        state.mode = Mode.LISTING
    elif event.kind is EventKind.QUIT:
        return [Quit()]
    return []


def _on_listing(state: DraftState, event: InputEvent, catalog: Catalog) -> List[Effect]:
    if event.kind is EventKind.EXIT_LISTING:
        state.mode = Mode.IDLE
    return []


def _on_searching(state: DraftState, event: InputEvent, catalog: Catalog) -> List[Effect]:
    kind = event.kind

    if kind is EventKind.CHARACTER and event.char:
        state.query += event.char
        state.refilter(catalog)

    elif kind is EventKind.BACKSPACE:
        state.query = state.query[:-1]
        state.refilter(catalog)

    elif kind is EventKind.SELECT_FIRST:
        if state.filtered:
            _lock_in(state, catalog, 0)

    elif kind is EventKind.DIGIT and event.char and event.char.isdecimal():
        n = int(event.char)
        # 1-based; "0" never matches anything.
        if 1 <= n <= len(state.filtered):
            _lock_in(state, catalog, n - 1)

    elif kind is EventKind.MOVE_UP:
        if state.selected is not None:
            state.selected = max(0, state.selected - 1)

    elif kind is EventKind.MOVE_DOWN:
        if state.selected is not None:
            state.selected = min(len(state.filtered) - 1, state.selected + 1)
        elif state.filtered:
            state.selected = 0

    elif kind is EventKind.CONFIRM:
        if state.selected is not None:
            state.candidate = state.filtered[state.selected]
            state.mode = Mode.PICKING
        elif state.filtered:
            _lock_in(state, catalog, 0)

    elif kind is EventKind.CANCEL:
        _reset_search(state, catalog)
        state.mode = Mode.IDLE

    return []


def _on_picking(state: DraftState, event: InputEvent, catalog: Catalog) -> List[Effect]:
    if event.kind is EventKind.ASSIGN_MINE:
        return _assign(state, catalog, Side.MINE)
    if event.kind is EventKind.ASSIGN_OTHER:
        return _assign(state, catalog, Side.OTHERS)
    if event.kind is EventKind.CANCEL:
        _reset_search(state, catalog)
        state.mode = Mode.SEARCHING
    return []


_HANDLERS: Dict[Mode, Callable[[DraftState, InputEvent, Catalog], List[Effect]]] = {
    Mode.IDLE: _on_idle,
    Mode.SEARCHING: _on_searching,
    Mode.PICKING: _on_picking,
    Mode.LISTING: _on_listing,
}


def dispatch(state: DraftState, event: InputEvent, catalog: Catalog) -> List[Effect]:
    """
    Apply one input event to `state` and return the effects the host must
    carry out. Events that make no sense in the current mode are ignored.
    """
    state.status_message = None

    # Group navigation works in every mode and never changes the mode.
    if event.kind is EventKind.GROUP_NEXT:
        _change_group(state, catalog, next_group(state.group))
        return []
    if event.kind is EventKind.GROUP_PREV:
        _change_group(state, catalog, previous_group(state.group))
        return []

    return _HANDLERS[state.mode](state, event, catalog)
