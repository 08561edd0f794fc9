"""
Terminal Formatting - visualization/formatter.py

RESPONSIBILITIES:
-----------------
Turn fixtures and standings into score lines and rich tables.

RULES:
------
- Plain-text layout lives in format_score_line / calendar_label so it can be
  tested on strings; styling is layered on by role (ROLE_STYLES)
- Never mutate the records passed in
- Printing to the console is the only side effect
"""

from datetime import datetime, timedelta, timezone
from typing import List, Optional, Tuple

from rich.console import Console
from rich.table import Table
from rich.text import Text

from football_cli.core.fixtures import Fixture, goals_or_missing
from football_cli.core.league_directory import LeagueDirectory
from football_cli.core.messages import MessageRole, ROLE_STYLES
from football_cli.core.standings import FlatStandings, GroupedStandings, Standings, StandingRow

LIVE_LABEL = "LIVE"

HEADER_STYLE = "bold white on cyan"

# (header, width, cell style)
STANDINGS_COLUMNS = [
    ("Rank", 7, "bold magenta"),
    ("Team", 25, "bold cyan"),
    ("Played", 10, "bold yellow"),
    ("Goal Diff", 15, "bold blue"),
    ("Points", 10, "bold green"),
]


# ============================================================================
# SCORE LINES
# ============================================================================

def _goals(value: Optional[int]) -> str:
    return str(goals_or_missing(value))


def _score_segments(
    league_name: str,
    home_team: str,
    goals_home: Optional[int],
    goals_away: Optional[int],
    away_team: str,
    time_label: str,
) -> List[Tuple[str, Optional[MessageRole]]]:
    return [
        (league_name, MessageRole.SUCCESS),
        (home_team, MessageRole.INFO),
        (_goals(goals_home), MessageRole.INFO),
        ("vs.", None),
        (_goals(goals_away), MessageRole.ERROR),
        (away_team, MessageRole.ERROR),
        (time_label, MessageRole.WARNING),
    ]


def format_score_line(
    league_name: str,
    home_team: str,
    goals_home: Optional[int],
    goals_away: Optional[int],
    away_team: str,
    time_label: str,
) -> str:
    """
    Plain score line: "<league> <home> <goalsHome> vs. <goalsAway> <away> <time>".

    Goals the API has not recorded (None) are shown as -1.

    Example:
        >>> format_score_line("Premier League", "Arsenal FC", 2, None, "Chelsea FC", "LIVE")
        'Premier League Arsenal FC 2 vs. -1 Chelsea FC LIVE'
    """
    segments = _score_segments(league_name, home_team, goals_home, goals_away, away_team, time_label)
    return " ".join(text for text, _ in segments)


def score_line_text(
    league_name: str,
    home_team: str,
    goals_home: Optional[int],
    goals_away: Optional[int],
    away_team: str,
    time_label: str,
) -> Text:
    """Styled version of format_score_line; `.plain` equals the plain line."""
    line = Text()
    segments = _score_segments(league_name, home_team, goals_home, goals_away, away_team, time_label)

    for i, (text, role) in enumerate(segments):
        if i:
            line.append(" ")
        line.append(text, style=ROLE_STYLES[role] if role else None)

    return line


# ============================================================================
# TIME LABELS
# ============================================================================

def _clock(moment: datetime) -> str:
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {suffix}"


def calendar_label(when: datetime, now: Optional[datetime] = None) -> str:
    """
    Calendar-style label relative to now.

    Day difference is measured between the start of today and `when`:

        < -6  -> 10/02/2026
        < -1  -> Last Sunday at 5:00 PM
        <  0  -> Yesterday at 5:00 PM
        <  1  -> Today at 3:00 PM
        <  2  -> Tomorrow at 3:00 PM
        <  7  -> Friday at 3:00 PM
        else  -> 10/30/2026

    `when` is shown in the time zone of an aware `now`. Otherwise it is shown
    in local time, using the local UTC offset in force at `when`.
    Naive `when` values are taken as UTC, naive `now` values as local time.
    """
    local = now is None or now.tzinfo is None
    if now is None:
        now = datetime.now().astimezone()
    elif now.tzinfo is None:
        now = now.astimezone()

    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    when = when.astimezone() if local else when.astimezone(now.tzinfo)

    start_of_today = now.replace(hour=0, minute=0, second=0, microsecond=0)
    diff = (when - start_of_today) / timedelta(days=1)

    clock = _clock(when)
    weekday = when.strftime("%A")

    if diff < -6:
        return when.strftime("%m/%d/%Y")
    if diff < -1:
        return f"Last {weekday} at {clock}"
    if diff < 0:
        return f"Yesterday at {clock}"
    if diff < 1:
        return f"Today at {clock}"
    if diff < 2:
        return f"Tomorrow at {clock}"
    if diff < 7:
        return f"{weekday} at {clock}"
    return when.strftime("%m/%d/%Y")


def time_label(fixture: Fixture, now: Optional[datetime] = None) -> str:
    """LIVE for matches in play, otherwise the calendar label of the kickoff."""
    if fixture.is_live:
        return LIVE_LABEL

    kickoff = fixture.kickoff
    return calendar_label(kickoff, now) if kickoff else ""


def print_score(console: Console, league_name: str, fixture: Fixture, label: str):
    goals_home, goals_away = fixture.display_goals
    console.print(score_line_text(
        league_name,
        fixture.home_team,
        goals_home,
        goals_away,
        fixture.away_team,
        label,
    ))


# ============================================================================
# TABLES
# ============================================================================

def create_standings_table() -> Table:
    """Empty league table with the Rank/Team/Played/Goal Diff/Points columns."""
    table = Table(show_header=True, header_style=HEADER_STYLE)
    for header, width, style in STANDINGS_COLUMNS:
        table.add_column(header, width=width, style=style)
    return table


def _fill(table: Table, rows: List[StandingRow]) -> Table:
    for row in rows:
        table.add_row(
            str(row.rank),
            str(row.team),
            str(row.played),
            str(row.goal_difference),
            str(row.points),
        )
    return table


def build_standings_tables(standings: Standings) -> List[Tuple[Optional[str], Table]]:
    """
    One (group header, table) pair per table to print.

    Flat standings give a single pair with no header; grouped standings give
    one pair per group in payload order.
    """
    if isinstance(standings, FlatStandings):
        return [(None, _fill(create_standings_table(), standings.rows))]

    if isinstance(standings, GroupedStandings):
        return [
            (group_code, _fill(create_standings_table(), rows))
            for group_code, rows in standings.groups.items()
        ]

    raise TypeError(f"Unsupported standings type: {type(standings).__name__}")


def render_standings(standings: Standings, console: Console):
    for group_code, table in build_standings_tables(standings):
        if group_code is not None:
            console.print(Text(group_code, style=HEADER_STYLE))
        console.print(table)


def build_leagues_table(directory: LeagueDirectory) -> Table:
    """League caption / code listing for `football lists`."""
    table = Table(show_header=True, header_style=HEADER_STYLE)
    table.add_column("League", width=40, style="bold cyan")
    table.add_column("League Code", width=15, style="bold green")

    for code, entry in directory.items():
        table.add_row(entry.caption, code)

    return table
