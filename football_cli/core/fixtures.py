"""
Fixture records and the team/status filters applied to them.

Team matching is a case-insensitive substring test against either side's
name. An empty query matches every fixture. A short query can match more
than one club ("united"), which is the intended matching rule.
"""

import json
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

# Shown in place of goals the API has not recorded yet
MISSING_GOALS = -1


def goals_or_missing(goals: Optional[int]) -> int:
    return MISSING_GOALS if goals is None else goals


class FixtureStatus(str, Enum):
    SCHEDULED = "SCHEDULED"
    TIMED = "TIMED"
    IN_PLAY = "IN_PLAY"
    FINISHED = "FINISHED"
    POSTPONED = "POSTPONED"
    CANCELED = "CANCELED"


@dataclass(frozen=True)
class Fixture:
    home_team: str
    away_team: str
    goals_home: Optional[int]
    goals_away: Optional[int]
    status: str
    date: Optional[str] = None
    competition_link: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> 'Fixture':
        result = raw.get('result') or {}
        links = raw.get('_links') or {}
        competition = links.get('competition') or {}

        return cls(
            home_team=raw.get('homeTeamName', ''),
            away_team=raw.get('awayTeamName', ''),
            goals_home=result.get('goalsHomeTeam'),
            goals_away=result.get('goalsAwayTeam'),
            status=raw.get('status', ''),
            date=raw.get('date'),
            competition_link=competition.get('href'),
        )

    @property
    def is_live(self) -> bool:
        return self.status == FixtureStatus.IN_PLAY

    @property
    def is_finished(self) -> bool:
        return self.status == FixtureStatus.FINISHED

    @property
    def display_goals(self) -> Tuple[int, int]:
        return goals_or_missing(self.goals_home), goals_or_missing(self.goals_away)

    @property
    def kickoff(self) -> Optional[datetime]:
        """Fixture date as an aware datetime (API timestamps are UTC, 'Z' suffixed)."""
        if not self.date:
            return None
        return datetime.fromisoformat(self.date.replace('Z', '+00:00'))


def parse_fixtures(body: str) -> List[Fixture]:
    """
    Parse a fixtures response body.

    Raises:
        json.JSONDecodeError: If body is not valid JSON
        ValueError: If the payload is not an object with a list of fixtures
    """
    data = json.loads(body)
    if not isinstance(data, dict):
        raise ValueError(f"Fixtures payload is not an object: {type(data).__name__}")

    raw_fixtures = data.get('fixtures') or []
    if not isinstance(raw_fixtures, list) or not all(isinstance(raw, dict) for raw in raw_fixtures):
        raise ValueError("Fixtures payload 'fixtures' is not a list of objects")

    return [Fixture.from_dict(raw) for raw in raw_fixtures]


# ============================================
# FILTERS
# ============================================

def matches_team(fixture: Fixture, team: Optional[str]) -> bool:
    query = (team or '').lower()
    return query in fixture.home_team.lower() or query in fixture.away_team.lower()


def filter_by_team(fixtures: Sequence[Fixture], team: Optional[str]) -> List[Fixture]:
    """Fixtures of any status whose home or away team contains `team`."""
    return [fixture for fixture in fixtures if matches_team(fixture, team)]


def partition_scores(fixtures: Sequence[Fixture], team: Optional[str]) -> Tuple[List[Fixture], List[Fixture]]:
    """
    Split team matches into (live, scores).

    live holds IN_PLAY matches; scores holds IN_PLAY and FINISHED matches.
    Both keep the source order. Other statuses are dropped.
    """
    live: List[Fixture] = []
    scores: List[Fixture] = []

    for fixture in fixtures:
        if not matches_team(fixture, team):
            continue
        if fixture.is_live:
            live.append(fixture)
            scores.append(fixture)
        elif fixture.is_finished:
            scores.append(fixture)

    return live, scores


def classify_and_filter(fixtures: Sequence[Fixture], team: Optional[str], live_only: bool) -> List[Fixture]:
    """Live team matches when live_only, otherwise live and finished team matches."""
    live, scores = partition_scores(fixtures, team)
    return live if live_only else scores
