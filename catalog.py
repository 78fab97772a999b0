# catalog.py
#
# Load the draft catalog (data.json) and map it into HoopDraft models.
# The catalog is read once at startup and never changes during a session.

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator  # type: ignore[import]

from models import Player  # type: ignore[import]
from positions import Position, is_concrete  # type: ignore[import]

logger = logging.getLogger(__name__)


class CatalogError(RuntimeError):
    """The catalog file is missing or cannot be parsed."""


# ---------------------------------------------------------------------------
# On-disk record
# ---------------------------------------------------------------------------

class PlayerRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    team: str
    positions: List[Position] = Field(alias="position")
    pick_avg: float
    round_avg: float
    draft_percent: str

    @field_validator("positions")
    @classmethod
    def _concrete_only(cls, value: List[Position]) -> List[Position]:
        bad = [p.value for p in value if not is_concrete(p)]
        if bad:
            raise ValueError(f"query-only groups are not player positions: {bad}")
        return value

    def to_player(self) -> Player:
        return Player(
            name=self.name,
            team=self.team,
            positions=tuple(self.positions),
            pick_avg=self.pick_avg,
            round_avg=self.round_avg,
            draft_percent=self.draft_percent,
        )


_RECORDS = TypeAdapter(List[PlayerRecord])


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

class Catalog:
    """Ordered, read-only collection of every draftable player."""

    def __init__(self, players: Iterable[Player]) -> None:
        self._players: Tuple[Player, ...] = tuple(players)
        self._by_name: Dict[str, Player] = {}
        for p in self._players:
            if p.name in self._by_name:
                raise CatalogError(f"Duplicate player name in catalog: '{p.name}'")
            self._by_name[p.name] = p

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> "Catalog":
        try:
            parsed = _RECORDS.validate_python(list(records))
        except ValidationError as exc:
            raise CatalogError(f"Invalid player records: {exc}") from exc
        return cls(r.to_player() for r in parsed)

    @property
    def players(self) -> Tuple[Player, ...]:
        return self._players

    def get(self, name: str) -> Optional[Player]:
        return self._by_name.get(name)

    def names(self) -> List[str]:
        return [p.name for p in self._players]

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)

    def __len__(self) -> int:
        return len(self._players)


def load_catalog(path: Path) -> Catalog:
    """
    Read the catalog file at `path`.

    Any problem here is fatal for the app: a missing file, broken JSON, a
    record that does not match the schema, or two players sharing a name all
    raise CatalogError.
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise CatalogError(f"Could not read catalog {path}: {exc}") from exc

    try:
        records = _RECORDS.validate_json(raw)
    except ValidationError as exc:
        raise CatalogError(f"Could not parse catalog {path}: {exc}") from exc

    catalog = Catalog(r.to_player() for r in records)
    logger.info("Loaded %d players from %s", len(catalog), path)
    return catalog
