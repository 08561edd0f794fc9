"""
Entry points fed with a fetched response body.

Each helper parses the body, filters the records and prints to the console.
Empty results are reported as UPDATE messages and the helper returns
normally. Bodies that are not valid JSON, or not shaped like the expected
payload, raise ValueError (json.JSONDecodeError included) for the CLI to report.
"""

import logging
from datetime import datetime
from typing import Optional

from rich.console import Console

from football_cli.core.fixtures import classify_and_filter, filter_by_team, parse_fixtures
from football_cli.core.league_directory import LeagueDirectory, refresh, resolve_league_name
from football_cli.core.messages import MessageKind, report_message
from football_cli.core.standings import parse_standings
from football_cli.visualization.formatter import LIVE_LABEL, print_score, render_standings, time_label

logger = logging.getLogger(__name__)

NO_FIXTURES = "Sorry, no fixtures to show right now"
NO_LIVE_MATCHES = "Sorry, no live match right now"
NO_SCORES = "Sorry, no scores to show right now"


def fixtures_helper(
    body: str,
    directory: LeagueDirectory,
    league_code: Optional[str] = None,
    team: Optional[str] = None,
    console: Optional[Console] = None,
    now: Optional[datetime] = None,
):
    """
    Print upcoming or past fixtures.

    Args:
        body: Fixtures response body
        directory: League directory used for league captions
        league_code: League the fixtures were requested for; when None the
            caption is resolved per fixture from its competition link
        team: Optional team name substring
        console: Output sink
        now: Reference time for calendar labels (defaults to now)
    """
    console = console or Console()
    fixtures = parse_fixtures(body)

    if not fixtures:
        report_message(MessageKind.UPDATE, NO_FIXTURES, console)
        return

    league_name = None
    if league_code is not None:
        entry = directory.get(league_code)
        league_name = entry.caption if entry else ""

    matched = filter_by_team(fixtures, team)
    logger.debug(f"{len(matched)} of {len(fixtures)} fixtures match team {team!r}")

    for fixture in matched:
        name = league_name if league_name is not None else resolve_league_name(fixture, directory)
        print_score(console, name, fixture, time_label(fixture, now))


def scores_helper(
    body: str,
    directory: LeagueDirectory,
    team: Optional[str] = "",
    live: bool = False,
    console: Optional[Console] = None,
    now: Optional[datetime] = None,
):
    """
    Print live scores, or live and finished scores.

    Args:
        body: Fixtures response body
        directory: League directory used for league captions
        team: Team name substring ('' matches every team)
        live: Only show matches in play
        console: Output sink
        now: Reference time for calendar labels (defaults to now)
    """
    console = console or Console()
    matches = classify_and_filter(parse_fixtures(body), team, live)

    if not matches:
        report_message(MessageKind.UPDATE, NO_LIVE_MATCHES if live else NO_SCORES, console)
        return

    for fixture in matches:
        label = LIVE_LABEL if live else time_label(fixture, now)
        print_score(console, resolve_league_name(fixture, directory), fixture, label)


def standings_helper(body: str, console: Optional[Console] = None):
    """Print the league table(s) in a league table response body."""
    console = console or Console()
    render_standings(parse_standings(body), console)


def refresh_helper(body: str, directory: Optional[LeagueDirectory] = None) -> LeagueDirectory:
    """
    Rebuild the league directory from a competitions response body.

    The previous directory is left as it was; the returned one replaces it.
    """
    updated = refresh(body)
    if directory is not None:
        dropped = set(directory) - set(updated)
        if dropped:
            logger.info(f"Leagues no longer listed: {sorted(dropped)}")
    return updated
