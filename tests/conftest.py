import json
from pathlib import Path
from typing import Any, Dict, List

import pytest

from catalog import Catalog
from roster_store import RosterStore


def _record(name: str, positions: List[str], team: str = "BOS") -> Dict[str, Any]:
    return {
        "name": name,
        "team": team,
        "position": positions,
        "pick_avg": 12.5,
        "round_avg": 2.1,
        "draft_percent": "99.0%",
    }


@pytest.fixture
def make_record():
    """Build one catalog record as it appears in data.json"""
    return _record


@pytest.fixture
def make_catalog():
    """Build a Catalog from (name, [positions]) pairs, in order"""
    def _make(*entries) -> Catalog:
        return Catalog.from_records(_record(name, list(pos)) for name, pos in entries)
    return _make


@pytest.fixture
def catalog(make_catalog) -> Catalog:
    return make_catalog(
        ("Joe Smith", ["PG"]),
        ("Anna Cole", ["C"]),
        ("Bob Jones", ["PF"]),
        ("Carl Smith", ["SG", "SF"]),
        ("Dan Jones", ["PF", "C"]),
    )


@pytest.fixture
def write_catalog(tmp_path):
    """Write records to a catalog file and return its path"""
    def _write(records, name: str = "data.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(records), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def store(tmp_path) -> RosterStore:
    return RosterStore(tmp_path / "my_players.json", tmp_path / "other_players.json")
