# app.py
#
# Interactive HoopDraft entrypoint.
#
#   hoopdraft            start with empty rosters, leave files alone
#   hoopdraft load       pick up my_players.json / other_players.json
#   hoopdraft delete     remove both roster files, then start empty
#
# The loop is single-threaded: draw, block on one key, apply it, repeat.

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Protocol, Tuple

from catalog import Catalog, CatalogError, load_catalog  # type: ignore[import]
from config import CATALOG_PATH, LOG_LEVEL, LOG_PATH  # type: ignore[import]
from draft_state import DraftState, Effect, Quit, SaveRoster, Side, dispatch, new_state  # type: ignore[import]
from draft_view import build_view  # type: ignore[import]
from keymap import translate  # type: ignore[import]
from roster_store import RosterStore, RosterStoreError  # type: ignore[import]

logger = logging.getLogger(__name__)


class Reader(Protocol):
    def read_key(self) -> str: ...


class Renderer(Protocol):
    def draw(self, view) -> None: ...


def setup_logging() -> None:
    """Configure logging settings"""
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.FileHandler(LOG_PATH, encoding="utf-8")],
    )


# ---------------------------------------------------------------------------
# Startup
# ---------------------------------------------------------------------------

def prepare_rosters(store: RosterStore, command: Optional[str]) -> Tuple[List[str], List[str]]:
    """
    Resolve the optional command-line word into the starting rosters.

    Only "load" reads files and only "delete" removes them; anything else
    starts a fresh draft without touching the disk.
    """
    if command == "load":
        mine, others = store.load(Side.MINE), store.load(Side.OTHERS)
        both = sorted(set(mine) & set(others))
        if both:
            raise RosterStoreError(f"Players saved on both rosters: {', '.join(both)}")
        return mine, others
    if command == "delete":
        store.delete_all()
    elif command:
        logger.info("Ignoring unknown command %r", command)
    return [], []


# ---------------------------------------------------------------------------
# Main loop
# ---------------------------------------------------------------------------

def apply_effects(state: DraftState, effects: List[Effect], store: RosterStore) -> bool:
    """
    Carry out what dispatch() asked for. Returns False once the user quits.

    A failed save keeps the pick in memory and says so on the status line;
    the next successful save of that side rewrites the whole list anyway.
    """
    keep_going = True
    for effect in effects:
        if isinstance(effect, SaveRoster):
            try:
                store.save(effect.side, effect.names)
            except RosterStoreError as exc:
                logger.error("%s", exc)
                state.status_message = f"WARNING: pick kept but not saved ({exc})"
        elif isinstance(effect, Quit):
            keep_going = False
    return keep_going


def run(
    state: DraftState,
    catalog: Catalog,
    store: RosterStore,
    reader: Reader,
    renderer: Renderer,
) -> DraftState:
    while True:
        renderer.draw(build_view(state, catalog))

        event = translate(state.mode, reader.read_key())
        if event is None:
            continue

        effects = dispatch(state, event, catalog)
        if not apply_effects(state, effects, store):
            logger.info("Quit with %d mine, %d others", len(state.mine), len(state.others))
            return state


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="hoopdraft",
        description="HoopDraft: track a live fantasy basketball draft from the terminal.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help="'load' to resume saved rosters, 'delete' to wipe them before starting",
    )
    # Only the first word matters; anything after it (or any dashed word) is
    # ignored rather than rejected.
    args, extra = parser.parse_known_args(argv)

    setup_logging()
    if extra:
        logger.info("Ignoring extra arguments %r", extra)

    store = RosterStore()
    try:
        catalog = load_catalog(CATALOG_PATH)
        mine, others = prepare_rosters(store, args.command)
    except (CatalogError, RosterStoreError) as exc:
        logger.error("Startup failed: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    state = new_state(catalog, mine, others)

    from terminal_ui import KeyReader, TerminalRenderer  # type: ignore[import]

    try:
        with KeyReader() as reader, TerminalRenderer() as renderer:
            run(state, catalog, store, reader, renderer)
    except (KeyboardInterrupt, EOFError):
        logger.info("Interrupted")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
