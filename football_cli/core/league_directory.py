"""
League directory: league code -> competition id and caption.

The directory is an explicit, read-only value. It is loaded once at startup
from the bundled YAML table (or an override path) and passed to whatever
needs it. `refresh` never mutates an existing directory; it builds a new one
from a competitions payload.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Union

import yaml

logger = logging.getLogger(__name__)

DEFAULT_LEAGUE_IDS_PATH = Path(__file__).parent.parent / 'config' / 'league_ids.yaml'


@dataclass(frozen=True)
class LeagueEntry:
    code: str
    id: int
    caption: str


class LeagueDirectory(Mapping):
    """Immutable mapping of league code to LeagueEntry."""

    def __init__(self, entries: Optional[Mapping[str, LeagueEntry]] = None):
        self._entries = MappingProxyType(dict(entries or {}))

    def __getitem__(self, code: str) -> LeagueEntry:
        return self._entries[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"LeagueDirectory({list(self._entries)})"

    def find_by_id(self, league_id: Union[int, str]) -> Optional[LeagueEntry]:
        """Linear scan for the entry whose id equals league_id (compared as text)."""
        for entry in self._entries.values():
            if str(entry.id) == str(league_id):
                return entry
        return None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Mapping]) -> 'LeagueDirectory':
        """Build from {code: {'id': ..., 'caption': ...}}."""
        return cls({
            code: LeagueEntry(code=code, id=int(values['id']), caption=values['caption'])
            for code, values in raw.items()
        })


# ============================================
# LOADING / REFRESH
# ============================================

def load_league_directory(path: Optional[Union[str, Path]] = None) -> LeagueDirectory:
    """
    Load the league table from YAML.

    Raises:
        FileNotFoundError: If the table file doesn't exist
        yaml.YAMLError: If YAML is malformed
    """
    table_path = Path(path) if path else DEFAULT_LEAGUE_IDS_PATH

    if not table_path.exists():
        raise FileNotFoundError(f"League table not found at {table_path}")

    with open(table_path, 'r', encoding='utf-8') as f:
        raw = yaml.safe_load(f) or {}

    directory = LeagueDirectory.from_mapping(raw)
    logger.info(f"Loaded {len(directory)} leagues from {table_path}")
    return directory


def refresh(body: str) -> LeagueDirectory:
    """
    Build a fresh directory from a competitions response body.

    The body is a JSON array of objects with `league`, `id` and `caption`.
    Previous directories are not consulted: the result holds exactly the
    payload's entries. Invalid JSON raises json.JSONDecodeError; a payload
    that is not a list of objects raises ValueError.
    """
    competitions = json.loads(body)
    if not isinstance(competitions, list) or not all(isinstance(c, dict) for c in competitions):
        raise ValueError("Competitions payload is not a list of objects")

    entries: Dict[str, LeagueEntry] = {}

    for comp in competitions:
        code = comp['league']
        entries[code] = LeagueEntry(code=code, id=comp['id'], caption=comp['caption'])

    logger.info(f"Refreshed league directory with {len(entries)} competitions")
    return LeagueDirectory(entries)


def resolve_league_name(fixture, directory: LeagueDirectory) -> str:
    """
    Caption of the league a fixture belongs to, or '' when unknown.

    The competition id is the last path segment of the fixture's
    competition link.
    """
    link = fixture.competition_link or ''
    league_id = link.rstrip('/').split('/')[-1]

    entry = directory.find_by_id(league_id)
    return entry.caption if entry else ""
