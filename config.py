# config.py
from pathlib import Path
from typing import List, Tuple
import os

# ====== Files ======
# All paths can be overridden through the environment so several drafts can
# live side by side (one directory per league).
CATALOG_PATH = Path(os.environ.get("HOOPDRAFT_CATALOG", "data.json"))
MY_PLAYERS_PATH = Path(os.environ.get("HOOPDRAFT_MY_PLAYERS", "my_players.json"))
OTHER_PLAYERS_PATH = Path(os.environ.get("HOOPDRAFT_OTHER_PLAYERS", "other_players.json"))

# The terminal belongs to the renderer, so logs always go to a file.
LOG_PATH = Path(os.environ.get("HOOPDRAFT_LOG", "hoopdraft.log"))
LOG_LEVEL: str = os.environ.get("HOOPDRAFT_LOG_LEVEL", "INFO")

# ====== Search ======
# Max number of candidates shown while searching.
FILTER_LIMIT: int = 8

# ====== Roster template ======
EMPTY_SLOT_LABEL: str = "Empty"

# Order matters: narrow slots are filled before the wide ANY bucket.
ROSTER_SLOTS: List[Tuple[str, int]] = [
    ("C", 3),
    ("PF", 1),
    ("PG", 1),
    ("SG", 1),
    ("SF", 1),
    ("G", 1),
    ("F", 1),
    ("ANY", 7),
]
