import pytest

from draft_state import EventKind, InputEvent, Mode
from keymap import DEFAULT_BINDINGS, HELP_TEXT, translate

E = EventKind


@pytest.mark.parametrize("key", ["s", "enter", "up", "down"])
def test_idle_keys_start_search(key):
    assert translate(Mode.IDLE, key) == InputEvent(E.START_SEARCH)


def test_idle_commands():
    assert translate(Mode.IDLE, "q") == InputEvent(E.QUIT)
    assert translate(Mode.IDLE, "l") == InputEvent(E.START_LISTING)
    assert translate(Mode.IDLE, "x") is None


def test_searching_keys():
    assert translate(Mode.SEARCHING, "enter") == InputEvent(E.CONFIRM)
    assert translate(Mode.SEARCHING, "tab") == InputEvent(E.SELECT_FIRST)
    assert translate(Mode.SEARCHING, "esc") == InputEvent(E.CANCEL)
    assert translate(Mode.SEARCHING, "backspace") == InputEvent(E.BACKSPACE)
    assert translate(Mode.SEARCHING, "up") == InputEvent(E.MOVE_UP)
    assert translate(Mode.SEARCHING, "down") == InputEvent(E.MOVE_DOWN)


def test_searching_letters_are_query_text():
    # "s", "q" and "l" are commands only when idle
    assert translate(Mode.SEARCHING, "s") == InputEvent(E.CHARACTER, "s")
    assert translate(Mode.SEARCHING, "q") == InputEvent(E.CHARACTER, "q")
    assert translate(Mode.SEARCHING, " ") == InputEvent(E.CHARACTER, " ")
    assert translate(Mode.SEARCHING, "é") == InputEvent(E.CHARACTER, "é")


def test_searching_digits_pick_by_number():
    assert translate(Mode.SEARCHING, "3") == InputEvent(E.DIGIT, "3")


@pytest.mark.parametrize("key", ["a", "A", "enter"])
def test_picking_mine(key):
    assert translate(Mode.PICKING, key) == InputEvent(E.ASSIGN_MINE)


@pytest.mark.parametrize("key", ["b", "B"])
def test_picking_other(key):
    assert translate(Mode.PICKING, key) == InputEvent(E.ASSIGN_OTHER)


def test_picking_ignores_other_letters():
    assert translate(Mode.PICKING, "c") is None
    assert translate(Mode.PICKING, "esc") == InputEvent(E.CANCEL)


def test_listing_exit():
    assert translate(Mode.LISTING, "q") == InputEvent(E.EXIT_LISTING)
    assert translate(Mode.LISTING, "esc") == InputEvent(E.EXIT_LISTING)
    assert translate(Mode.LISTING, "s") is None


@pytest.mark.parametrize("mode", list(Mode))
def test_left_right_everywhere(mode):
    assert translate(mode, "left") == InputEvent(E.GROUP_PREV)
    assert translate(mode, "right") == InputEvent(E.GROUP_NEXT)
    assert mode in HELP_TEXT


@pytest.mark.parametrize("mode", list(Mode))
def test_unknown_key_names_are_ignored(mode):
    assert translate(mode, "") is None
    assert translate(mode, "f13") is None


def test_custom_bindings():
    bindings = {**DEFAULT_BINDINGS, Mode.IDLE: {"/": E.START_SEARCH}}
    assert translate(Mode.IDLE, "/", bindings) == InputEvent(E.START_SEARCH)
    assert translate(Mode.IDLE, "s", bindings) is None
