# roster_store.py
#
# Drafted-name lists on disk: my_players.json and other_players.json.
# Each file is a plain JSON list of names, rewritten after every pick.

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, Union

from config import MY_PLAYERS_PATH, OTHER_PLAYERS_PATH  # type: ignore[import]
from draft_state import Side  # type: ignore[import]

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class RosterStoreError(RuntimeError):
    """A roster file could not be read, parsed or written."""


def load_names(path: PathLike) -> List[str]:
    """
    Read a JSON list of player names.

    A file that does not exist simply means nothing was drafted yet. A file
    that exists but is not a list of strings is an error: loading half a
    roster could hand out the same player twice.
    """
    path = Path(path)
    if not path.exists():
        return []
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise RosterStoreError(f"Could not read roster {path}: {exc}") from exc

    if not isinstance(data, list) or not all(isinstance(n, str) for n in data):
        raise RosterStoreError(f"Roster {path} is not a JSON list of player names")
    return data


class RosterStore:
    """The two drafted-name lists, one JSON file per side."""

    def __init__(
        self,
        mine_path: PathLike = MY_PLAYERS_PATH,
        others_path: PathLike = OTHER_PLAYERS_PATH,
    ) -> None:
        self._paths: Dict[Side, Path] = {
            Side.MINE: Path(mine_path),
            Side.OTHERS: Path(others_path),
        }

    def path_for(self, side: Side) -> Path:
        return self._paths[side]

    def load(self, side: Side) -> List[str]:
        names = load_names(self.path_for(side))
        logger.info("Loaded %d %s players from %s", len(names), side.value, self.path_for(side))
        return names

    def save(self, side: Side, names: List[str]) -> None:
        """Overwrite the file for `side` with `names`."""
        path = self.path_for(side)
        try:
            with path.open("w", encoding="utf-8") as f:
                json.dump(list(names), f, ensure_ascii=False)
        except OSError as exc:
            raise RosterStoreError(f"Could not write roster {path}: {exc}") from exc

    def delete_all(self) -> None:
        for path in self._paths.values():
            try:
                path.unlink()
                logger.info("Deleted %s", path)
            except FileNotFoundError:
                pass
            except OSError as exc:
                raise RosterStoreError(f"Could not delete roster {path}: {exc}") from exc
