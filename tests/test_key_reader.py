import os

import pytest

from terminal_ui import KeyReader


@pytest.fixture
def feed():
    """KeyReader over a pipe that already holds `data` (write end closed)"""
    opened = []

    def _feed(data: bytes) -> KeyReader:
        r, w = os.pipe()
        os.write(w, data)
        os.close(w)
        stream = os.fdopen(r, "rb")
        opened.append(stream)
        return KeyReader(stream)

    yield _feed
    for stream in opened:
        stream.close()


def read_all(reader: KeyReader, count: int):
    return [reader.read_key() for _ in range(count)]


def test_back_to_back_arrows_are_separate_keys(feed):
    reader = feed(b"\x1b[B\x1b[B")
    assert read_all(reader, 2) == ["down", "down"]


def test_arrow_flavours(feed):
    reader = feed(b"\x1b[A\x1bOD\x1b[C\x1bOB")
    assert read_all(reader, 4) == ["up", "left", "right", "down"]


def test_escape_followed_by_letter_keeps_both(feed):
    reader = feed(b"\x1bs")
    assert read_all(reader, 2) == ["esc", "s"]


def test_escape_then_escape(feed):
    reader = feed(b"\x1b\x1b[D")
    assert read_all(reader, 2) == ["esc", "left"]


def test_lone_escape(feed):
    reader = feed(b"\x1b")
    assert reader.read_key() == "esc"
    with pytest.raises(EOFError):
        reader.read_key()


def test_unknown_sequence_is_swallowed_whole(feed):
    # Delete key, then a letter
    reader = feed(b"\x1b[3~x")
    assert read_all(reader, 2) == ["", "x"]


def test_control_keys(feed):
    reader = feed(b"\r\n\t\x7f\x08")
    assert read_all(reader, 5) == ["enter", "enter", "tab", "backspace", "backspace"]


def test_multibyte_characters(feed):
    reader = feed("é".encode("utf-8") + b"a")
    assert read_all(reader, 2) == ["é", "a"]


def test_closed_input(feed):
    with pytest.raises(EOFError):
        feed(b"").read_key()
