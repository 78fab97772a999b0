# keymap.py
#
# Key names -> abstract draft events, per mode.
#
# Keys are single printable characters or one of the names produced by
# terminal_ui.KeyReader: enter, esc, tab, backspace, up, down, left, right.

from typing import Dict, Mapping, Optional

from draft_state import EventKind, InputEvent, Mode  # type: ignore[import]

Bindings = Mapping[Mode, Mapping[str, EventKind]]

# Left/right cycle the position group whatever the mode.
_GROUP_KEYS: Dict[str, EventKind] = {
    "left": EventKind.GROUP_PREV,
    "right": EventKind.GROUP_NEXT,
}

DEFAULT_BINDINGS: Dict[Mode, Dict[str, EventKind]] = {
    Mode.IDLE: {
        **_GROUP_KEYS,
        "s": EventKind.START_SEARCH,
        "enter": EventKind.START_SEARCH,
        "up": EventKind.START_SEARCH,
        "down": EventKind.START_SEARCH,
        "l": EventKind.START_LISTING,
        "q": EventKind.QUIT,
    },
    Mode.SEARCHING: {
        **_GROUP_KEYS,
        "enter": EventKind.CONFIRM,
        "tab": EventKind.SELECT_FIRST,
        "esc": EventKind.CANCEL,
        "up": EventKind.MOVE_UP,
        "down": EventKind.MOVE_DOWN,
        "backspace": EventKind.BACKSPACE,
    },
    Mode.PICKING: {
        **_GROUP_KEYS,
        "a": EventKind.ASSIGN_MINE,
        "A": EventKind.ASSIGN_MINE,
        "enter": EventKind.ASSIGN_MINE,
        "b": EventKind.ASSIGN_OTHER,
        "B": EventKind.ASSIGN_OTHER,
        "esc": EventKind.CANCEL,
    },
    Mode.LISTING: {
        **_GROUP_KEYS,
        "q": EventKind.EXIT_LISTING,
        "esc": EventKind.EXIT_LISTING,
    },
}

HELP_TEXT: Dict[Mode, str] = {
    Mode.IDLE: "Press q to exit, s or Enter to start searching, l to list my roster.",
    Mode.SEARCHING: (
        "Press Esc to stop searching, Tab or 1-8 to lock in a player, "
        "Up/Down to select, Enter to pick the player."
    ),
    Mode.PICKING: "Press A or Enter to add to my team, B to add to other team, Esc to go back to searching.",
    Mode.LISTING: "Press q to go back.",
}


def translate(mode: Mode, key: str, bindings: Bindings = DEFAULT_BINDINGS) -> Optional[InputEvent]:
    """
    Map a key to an event for `mode`, or None if the key means nothing there.

    While searching, any unbound printable character is query input: digits
    pick the n-th candidate, everything else is appended to the query.
    """
    kind = bindings.get(mode, {}).get(key)
    if kind is not None:
        return InputEvent(kind)

    if mode is Mode.SEARCHING and len(key) == 1 and key.isprintable():
        if key.isdecimal():
            return InputEvent(EventKind.DIGIT, key)
        return InputEvent(EventKind.CHARACTER, key)

    return None
