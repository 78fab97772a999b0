# terminal_ui.py
#
# Terminal plumbing for the interactive draft:
#   KeyReader         raw keypresses from stdin -> key names
#   TerminalRenderer  DraftView -> rich widgets on screen
#
# Nothing in here knows about draft rules.

from __future__ import annotations

import codecs
import os
import select
import sys
import termios
from typing import Dict, List, Optional, TextIO

from rich.console import Console, Group  # type: ignore[import]
from rich.panel import Panel  # type: ignore[import]
from rich.table import Table  # type: ignore[import]
from rich.text import Text  # type: ignore[import]

from draft_state import Mode  # type: ignore[import]
from draft_view import CandidateView, DraftView, SlotView  # type: ignore[import]

# ---------------------------------------------------------------------------
# Keyboard
# ---------------------------------------------------------------------------

# Bytes following ESC for the keys we care about (xterm and vt100 flavours).
_ESCAPE_SEQUENCES: Dict[bytes, str] = {
    b"[A": "up",
    b"[B": "down",
    b"[C": "right",
    b"[D": "left",
    b"OA": "up",
    b"OB": "down",
    b"OC": "right",
    b"OD": "left",
}

_CONTROL_KEYS: Dict[bytes, str] = {
    b"\r": "enter",
    b"\n": "enter",
    b"\t": "tab",
    b"\x7f": "backspace",
    b"\x08": "backspace",
}

# How long to wait for the rest of an escape sequence before treating ESC as
# a lone keypress.
ESC_TIMEOUT = 0.05


class KeyReader:
    """
    Read one key at a time from a terminal.

    Use as a context manager: on entry the terminal is switched to
    non-canonical, no-echo mode; on exit the original settings come back.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._fd = (stream or sys.stdin).fileno()
        self._orig: Optional[List] = None
        self._pushback = b""
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="ignore")

    def __enter__(self) -> "KeyReader":
        self._orig = termios.tcgetattr(self._fd)
        new = termios.tcgetattr(self._fd)
        # one byte at a time, no echo
        new[3] = new[3] & ~(termios.ICANON | termios.ECHO)
        new[6][termios.VMIN] = 1
        new[6][termios.VTIME] = 0
        termios.tcsetattr(self._fd, termios.TCSAFLUSH, new)
        return self

    def __exit__(self, *exc_info) -> None:
        if self._orig is not None:
            termios.tcsetattr(self._fd, termios.TCSAFLUSH, self._orig)
            self._orig = None

    def _pending(self) -> bool:
        if self._pushback:
            return True
        ready, _, _ = select.select([self._fd], [], [], ESC_TIMEOUT)
        return bool(ready)

    def _read_byte(self) -> bytes:
        if self._pushback:
            byte, self._pushback = self._pushback[:1], self._pushback[1:]
            return byte
        return os.read(self._fd, 1)

    def _read_escape(self) -> str:
        """Decode what follows a lone ESC byte, consuming one key only."""
        if not self._pending():
            return "esc"

        intro = self._read_byte()
        if intro not in (b"[", b"O"):
            # ESC then an ordinary key: keep that key for the next call.
            self._pushback = intro + self._pushback
            return "esc"

        if not self._pending():
            return ""
        final = self._read_byte()
        if intro + final in _ESCAPE_SEQUENCES:
            return _ESCAPE_SEQUENCES[intro + final]

        # Longer CSI sequences (Delete is ESC [ 3 ~): skip parameter bytes up
        # to and including the final byte.
        while intro == b"[" and final and 0x30 <= final[0] <= 0x3F and self._pending():
            final = self._read_byte()
        return ""

    def read_key(self) -> str:
        """
        Block until a key is pressed and return its name.

        Exactly one key is consumed per call. Unknown escape sequences come
        back as "" so callers can ignore them.
        """
        while True:
            raw = self._read_byte()
            if not raw:
                raise EOFError("stdin closed")

            if raw == b"\x1b":
                return self._read_escape()

            if raw in _CONTROL_KEYS:
                return _CONTROL_KEYS[raw]

            # Multi-byte characters arrive one byte per read.
            text = self._decoder.decode(raw)
            if text:
                return text


# ---------------------------------------------------------------------------
# Screen
# ---------------------------------------------------------------------------

_MODE_COLOURS: Dict[Mode, str] = {
    Mode.IDLE: "default",
    Mode.SEARCHING: "yellow",
    Mode.PICKING: "blue",
    Mode.LISTING: "red",
}

_LIST_TITLES: Dict[Mode, str] = {
    Mode.IDLE: "Doing nothing",
    Mode.SEARCHING: "Searching players",
    Mode.PICKING: "Picking a player",
    Mode.LISTING: "My players",
}


def _candidate_line(c: CandidateView, mode: Mode) -> Text:
    positions = "/".join(p.value for p in c.positions)
    line = Text(
        f"{c.number}: {c.name} ({c.team}) [{positions}]  "
        f"ADP {c.pick_avg:.1f}  RND {c.round_avg:.1f}  {c.draft_percent}"
    )
    if c.selected and mode in (Mode.SEARCHING, Mode.PICKING):
        line.stylize(_MODE_COLOURS[mode])
    return line


def _slot_style(s: SlotView) -> str:
    if s.empty:
        return "red"
    return "green" if s.exact_fit else "yellow"


def _slot_table(slots: List[SlotView]) -> Table:
    table = Table(show_header=True, header_style="bold", expand=True)
    table.add_column("Slot", width=6)
    table.add_column("Player")
    table.add_column("Positions")
    for s in slots:
        table.add_row(
            s.group.value,
            s.name,
            "/".join(p.value for p in s.positions),
            style=_slot_style(s),
        )
    return table


def _position_bar(view: DraftView) -> Text:
    bar = Text("Pos: ")
    for g in view.groups:
        style = "bold yellow reverse" if g is view.group else ""
        bar.append(f" {g.value} ", style=style)
        bar.append(" ")
    return bar


class TerminalRenderer:
    """Draws a DraftView on the alternate screen."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def __enter__(self) -> "TerminalRenderer":
        self.console.set_alt_screen(True)
        self.console.show_cursor(False)
        return self

    def __exit__(self, *exc_info) -> None:
        self.console.show_cursor(True)
        self.console.set_alt_screen(False)

    def render(self, view: DraftView) -> Group:
        colour = _MODE_COLOURS[view.mode]
        title = _LIST_TITLES[view.mode]

        help_line = Text(view.help, style="bold")
        query = Panel(Text(view.query, style=colour), title="Input", border_style=colour)

        if view.mode is Mode.LISTING and view.slots is not None:
            body = Panel(_slot_table(view.slots), title=title)
        else:
            lines = [_candidate_line(c, view.mode) for c in view.candidates]
            body = Panel(Group(*lines) if lines else Text("No players match."), title=title)

        parts = [help_line, query, body, _position_bar(view)]
        if view.candidate and view.mode is Mode.PICKING:
            parts.append(Text(f"Candidate: {view.candidate}", style="bold blue"))
        if view.status_message:
            parts.append(Text(view.status_message, style="bold red"))
        return Group(*parts)

    def draw(self, view: DraftView) -> None:
        self.console.clear()
        self.console.print(self.render(view))
