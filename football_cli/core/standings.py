"""
League table payloads.

The API answers a league table request in one of two shapes:

- `standing`: a flat list of rows (position, teamName, ...)
- `standings`: a mapping of group code to rows (rank, team, ...)

`parse_standings` decides the shape once and returns FlatStandings or
GroupedStandings; renderers never look at raw field names.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Union


@dataclass(frozen=True)
class StandingRow:
    rank: int
    team: str
    played: int
    goal_difference: int
    points: int

    @classmethod
    def from_flat(cls, raw: Dict[str, Any]) -> 'StandingRow':
        return cls(
            rank=raw.get('position'),
            team=raw.get('teamName'),
            played=raw.get('playedGames'),
            goal_difference=raw.get('goalDifference'),
            points=raw.get('points'),
        )

    @classmethod
    def from_group(cls, raw: Dict[str, Any]) -> 'StandingRow':
        return cls(
            rank=raw.get('rank'),
            team=raw.get('team'),
            played=raw.get('playedGames'),
            goal_difference=raw.get('goalDifference'),
            points=raw.get('points'),
        )


@dataclass(frozen=True)
class FlatStandings:
    rows: List[StandingRow]


@dataclass(frozen=True)
class GroupedStandings:
    # Group order is the order the API listed them in
    groups: Dict[str, List[StandingRow]]


Standings = Union[FlatStandings, GroupedStandings]


def _rows(raw: Any) -> List[Dict[str, Any]]:
    if not isinstance(raw, list) or not all(isinstance(row, dict) for row in raw):
        raise ValueError("League table rows are not a list of objects")
    return raw


def parse_standings(body: Union[str, Dict[str, Any]]) -> Standings:
    """
    Parse a league table response into FlatStandings or GroupedStandings.

    Raises:
        json.JSONDecodeError: If body is not valid JSON
        ValueError: If the payload has neither `standing` nor `standings`,
            or either of them has the wrong shape
    """
    data = json.loads(body) if isinstance(body, str) else body
    if not isinstance(data, dict):
        raise ValueError(f"League table payload is not an object: {type(data).__name__}")

    if data.get('standing') is not None:
        return FlatStandings(rows=[StandingRow.from_flat(row) for row in _rows(data['standing'])])

    if data.get('standings') is not None:
        groups = data['standings']
        if not isinstance(groups, dict):
            raise ValueError("League table 'standings' is not a mapping of groups")
        return GroupedStandings(groups={
            code: [StandingRow.from_group(row) for row in _rows(rows)]
            for code, rows in groups.items()
        })

    raise ValueError("League table payload has neither 'standing' nor 'standings'")
