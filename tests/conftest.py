"""
Pytest Configuration and Fixtures

Provides shared fixtures for all tests including:
- Sample fixtures / competitions / league table payloads
- A league directory
- A console writing to a string buffer
"""

import io
import json
from datetime import datetime, timezone

import pytest
from rich.console import Console

from football_cli.core.league_directory import LeagueDirectory


COMPETITION_URL = "http://api.football-data.org/v1/competitions/{}"

# Sunday 18 September 2016, noon UTC
NOW = datetime(2016, 9, 18, 12, 0, tzinfo=timezone.utc)


def make_fixture(home, away, status, goals_home=None, goals_away=None,
                 date="2016-09-18T15:00:00Z", competition_id=426):
    return {
        "_links": {
            "competition": {"href": COMPETITION_URL.format(competition_id)},
        },
        "date": date,
        "status": status,
        "homeTeamName": home,
        "awayTeamName": away,
        "result": {"goalsHomeTeam": goals_home, "goalsAwayTeam": goals_away},
    }


# ============================================================
# Payload Fixtures
# ============================================================

@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def sample_fixtures() -> list:
    """Mixed statuses across two competitions, in API order."""
    return [
        make_fixture("Arsenal FC", "Chelsea FC", "IN_PLAY", 1, 0),
        make_fixture("Manchester United FC", "Leicester City FC", "FINISHED", 4, 1,
                     date="2016-09-17T17:00:00Z"),
        make_fixture("Real Madrid CF", "Villarreal CF", "SCHEDULED",
                     date="2016-09-19T19:45:00Z", competition_id=436),
        make_fixture("Hull City FC", "Arsenal FC", "FINISHED", 1, 4,
                     date="2016-09-17T14:00:00Z"),
        make_fixture("Watford FC", "Manchester United FC", "TIMED",
                     date="2016-09-23T11:30:00Z"),
    ]


@pytest.fixture
def fixtures_body(sample_fixtures) -> str:
    return json.dumps({"count": len(sample_fixtures), "fixtures": sample_fixtures})


@pytest.fixture
def empty_fixtures_body() -> str:
    return json.dumps({"count": 0, "fixtures": []})


@pytest.fixture
def competitions_body() -> str:
    return json.dumps([
        {"id": 426, "caption": "Premier League 2016/17", "league": "PL"},
        {"id": 436, "caption": "Primera Division 2016/17", "league": "PD"},
        {"id": 440, "caption": "Champions League 2016/17", "league": "CL"},
    ])


@pytest.fixture
def flat_standings_body() -> str:
    return json.dumps({
        "leagueCaption": "Premier League 2016/17",
        "matchday": 5,
        "standing": [
            {"position": 1, "teamName": "Manchester City FC", "playedGames": 5,
             "goalDifference": 10, "points": 15},
            {"position": 2, "teamName": "Tottenham Hotspur FC", "playedGames": 5,
             "goalDifference": 6, "points": 11},
            {"position": 3, "teamName": "Arsenal FC", "playedGames": 5,
             "goalDifference": 5, "points": 10},
        ],
    })


@pytest.fixture
def grouped_standings_body() -> str:
    # Groups not in alphabetical order
    return json.dumps({
        "leagueCaption": "Champions League 2016/17",
        "matchday": 2,
        "standings": {
            "C": [
                {"group": "C", "rank": 1, "team": "FC Barcelona", "playedGames": 2,
                 "goalDifference": 8, "points": 6},
                {"group": "C", "rank": 2, "team": "Manchester City FC", "playedGames": 2,
                 "goalDifference": 3, "points": 4},
            ],
            "A": [
                {"group": "A", "rank": 1, "team": "Paris Saint-Germain", "playedGames": 2,
                 "goalDifference": 3, "points": 4},
                {"group": "A", "rank": 2, "team": "Arsenal FC", "playedGames": 2,
                 "goalDifference": 2, "points": 4},
            ],
        },
    })


# ============================================================
# Directory / Output Fixtures
# ============================================================

@pytest.fixture
def league_directory() -> LeagueDirectory:
    return LeagueDirectory.from_mapping({
        "PL": {"id": 426, "caption": "Premier League 2016/17"},
        "PD": {"id": 436, "caption": "Primera Division 2016/17"},
    })


@pytest.fixture
def console() -> Console:
    """Plain-text console; read output with console.file.getvalue()."""
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def output_lines(console):
    """Non-blank printed lines, right-stripped."""
    def read():
        return [line.rstrip() for line in console.file.getvalue().splitlines() if line.strip()]
    return read
