# roster_slots.py
#
# Roster summary for HoopDraft.
# - Greedily places drafted players into the fixed roster template
# - Reports every slot, filled or empty
#
# Used both by the Listing screen of the interactive app AND the
# hoopdraft-roster CLI entrypoint below.

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Set

from catalog import Catalog  # type: ignore[import]
from config import ROSTER_SLOTS  # type: ignore[import]
from models import Slot, SlotAssignment  # type: ignore[import]
from positions import Position  # type: ignore[import]

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants / helpers
# ---------------------------------------------------------------------------

DEFAULT_SLOTS: List[Slot] = [Slot(Position(code), capacity) for code, capacity in ROSTER_SLOTS]


def total_capacity(slots: Sequence[Slot]) -> int:
    return sum(s.capacity for s in slots)


# ---------------------------------------------------------------------------
# Slot assignment
# ---------------------------------------------------------------------------


def assign_slots(
    catalog: Catalog,
    drafted: Sequence[str],
    slots: Sequence[Slot] = DEFAULT_SLOTS,
) -> List[SlotAssignment]:
    """
    Simple greedy placement:
    - walks the slots in template order
    - fills each slot with the earliest drafted players that are eligible
      and not already placed
    - pads whatever capacity is left with empty entries

    Order is significant. A PF/C player drafted early lands in a C slot and is
    no longer available for PF or F. Players that fit nowhere are left out.
    """
    players = []
    for name in drafted:
        p = catalog.get(name)
        if p is None:
            logger.warning("Drafted player %s is not in the catalog; skipping", name)
            continue
        players.append(p)

    placed: Set[str] = set()
    out: List[SlotAssignment] = []

    for slot in slots:
        left = slot.capacity
        for p in players:
            if left <= 0:
                break
            if p.name in placed or not p.is_eligible(slot.group):
                continue
            out.append(SlotAssignment(slot.group, p))
            placed.add(p.name)
            left -= 1

        while left > 0:
            out.append(SlotAssignment(slot.group, None))
            left -= 1

    return out


def slot_report(assignments: Sequence[SlotAssignment]) -> List[Dict[str, Any]]:
    """JSON-serializable rows, one per slot."""
    return [
        {
            "group": a.group.value,
            "name": a.name,
            "positions": [p.value for p in a.positions],
        }
        for a in assignments
    ]


# ---------------------------------------------------------------------------
# CLI entrypoint
# ---------------------------------------------------------------------------


def print_roster_report(catalog: Catalog, drafted: Sequence[str]) -> None:
    """Pretty-print the same info the Listing screen shows."""
    assignments = assign_slots(catalog, drafted)
    filled = sum(1 for a in assignments if not a.is_empty)

    print(f"\n============ MY ROSTER ({filled}/{total_capacity(DEFAULT_SLOTS)}) ============")
    for a in assignments:
        if a.is_empty:
            print(f"{a.group.value:5} -> [EMPTY]")
        else:
            print(f"{a.group.value:5} -> {a.name:<24} {a.player.positions_label}")

    placed = {a.name for a in assignments if not a.is_empty}
    leftovers = [n for n in drafted if n not in placed]
    if leftovers:
        print("\n-- Drafted but without a slot --")
        for n in leftovers:
            print(n)
    print()


def main(argv: Optional[List[str]] = None) -> int:
    import argparse
    import sys
    import json

    from catalog import CatalogError, load_catalog  # type: ignore[import]
    from config import CATALOG_PATH, MY_PLAYERS_PATH  # type: ignore[import]
    from roster_store import RosterStoreError, load_names  # type: ignore[import]

    parser = argparse.ArgumentParser(
        description="HoopDraft: show how your drafted players fill the roster template."
    )
    parser.add_argument(
        "--catalog",
        default=str(CATALOG_PATH),
        help=f"Player catalog JSON (default: {CATALOG_PATH})",
    )
    parser.add_argument(
        "--roster",
        default=str(MY_PLAYERS_PATH),
        help=f"Drafted player names JSON (default: {MY_PLAYERS_PATH})",
    )
    parser.add_argument(
        "--json-out",
        help="If set, write the slot report as JSON to this file instead of pretty-printing.",
    )

    args = parser.parse_args(argv)
    try:
        catalog = load_catalog(args.catalog)
        drafted = load_names(args.roster)
    except (CatalogError, RosterStoreError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json_out:
        rows = slot_report(assign_slots(catalog, drafted))
        with open(args.json_out, "w") as f:
            json.dump(rows, f, indent=2)
        print(f"Wrote roster report to {args.json_out}")
    else:
        print_roster_report(catalog, drafted)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
