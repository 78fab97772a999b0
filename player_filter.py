# player_filter.py
#
# Candidate list shown while searching. Results keep catalog order on
# purpose; there is no ranking beyond the order of data.json.

from __future__ import annotations

from typing import Collection, List

from catalog import Catalog  # type: ignore[import]
from config import FILTER_LIMIT  # type: ignore[import]
from positions import Position  # type: ignore[import]


def filter_players(
    catalog: Catalog,
    query: str,
    group: Position,
    *excluded: Collection[str],
    limit: int = FILTER_LIMIT,
) -> List[str]:
    """
    Return up to `limit` player names, in catalog order, that
      - contain `query` (case-insensitive) in their name
      - are not in any of the `excluded` collections (already drafted)
      - have at least one position eligible for `group`
    """
    needle = query.lower()
    out: List[str] = []

    for p in catalog:
        if len(out) >= limit:
            break
        if needle not in p.name.lower():
            continue
        if any(p.name in names for names in excluded):
            continue
        if not p.is_eligible(group):
            continue
        out.append(p.name)

    return out
