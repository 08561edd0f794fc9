"""
Football CLI

Fixtures, live scores and league tables from football-data.org:
- fixtures: upcoming or past fixtures, optionally by league and team
- scores: live and finished scores
- standings: league table(s) of a competition
- lists: league codes usable with --league
"""

import logging
from contextlib import contextmanager

import click
import yaml
from rich.console import Console

from football_cli.config import Config
from football_cli.core.league_directory import load_league_directory
from football_cli.core.messages import (
    FootballCLIError,
    MessageKind,
    RequestError,
    report_message,
)
from football_cli.helpers import fixtures_helper, refresh_helper, scores_helper, standings_helper
from football_cli.scrapers.football_data.client import FootballDataClient
from football_cli.utils.logging_config import setup_logging
from football_cli.visualization.formatter import build_leagues_table

logger = logging.getLogger(__name__)
console = Console()


@contextmanager
def handle_errors():
    """Report failures of the current command and abort it."""
    try:
        yield
    except RequestError as e:
        logger.error(f"Request failed: {e.cause}")
        report_message(MessageKind.REQUEST_ERROR, console=console)
        raise click.Abort()
    except FootballCLIError as e:
        console.print(e.message.to_text())
        raise click.Abort()
    except (ValueError, KeyError) as e:
        # Malformed or unexpected response body
        logger.error(f"Could not read API response: {e}", exc_info=True)
        report_message(MessageKind.REQUEST_ERROR, console=console)
        raise click.Abort()


def _league_entry(ctx, league):
    entry = ctx.obj['directory'].get(league)
    if entry is None:
        report_message(MessageKind.LEAGUE_NOT_FOUND, console=console)
    return entry


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
@click.pass_context
def cli(ctx, verbose):
    """Football fixtures, scores and standings in your terminal."""
    setup_logging(
        level='DEBUG' if verbose else Config.LOG_LEVEL,
        json_logs=Config.JSON_LOGS,
        log_file=Config.LOG_FILE,
    )

    try:
        directory = load_league_directory(Config.LEAGUE_IDS_PATH)
    except (FileNotFoundError, yaml.YAMLError) as e:
        console.print(f"[bold red]✗ Could not load league table: {e}[/bold red]")
        raise click.Abort()

    ctx.ensure_object(dict)
    ctx.obj['directory'] = directory


@cli.command('fixtures')
@click.option('--league', '-l', default=None, help='League code, see `football lists`')
@click.option('--team', '-t', default=None, help='Team name or part of it')
@click.option('--days', '-d', default=10, type=int, help='Number of days to look at')
@click.option('--next/--prev', '-n/-p', 'upcoming', default=False, help='Upcoming or past fixtures')
@click.pass_context
def fixtures(ctx, league, team, days, upcoming):
    """
    Show fixtures of the next or past days.

    Example:
        football fixtures --league PL --days 5 --next
        football fixtures --team arsenal
    """
    with handle_errors():
        if days < 0:
            report_message(MessageKind.INVALID_FIXTURE_INPUT, console=console)

        time_frame = f"{'n' if upcoming else 'p'}{days}"

        if league:
            entry = _league_entry(ctx, league)
            endpoint = f"competitions/{entry.id}/fixtures?timeFrame={time_frame}"
        else:
            endpoint = f"fixtures?timeFrame={time_frame}"

        with FootballDataClient() as client, console.status("[bold green]Fetching fixtures..."):
            body = client.get(endpoint)

        fixtures_helper(body, ctx.obj['directory'], league_code=league, team=team, console=console)


@cli.command('scores')
@click.option('--live', '-l', is_flag=True, help='Only matches being played now')
@click.option('--team', '-t', default='', help='Team name or part of it')
@click.pass_context
def scores(ctx, live, team):
    """
    Show live and finished scores.

    Example:
        football scores --live
        football scores --team "real madrid"
    """
    with handle_errors():
        with FootballDataClient() as client, console.status("[bold green]Fetching scores..."):
            body = client.get('fixtures')

        scores_helper(body, ctx.obj['directory'], team=team, live=live, console=console)


@cli.command('standings')
@click.option('--league', '-l', required=True, help='League code, see `football lists`')
@click.pass_context
def standings(ctx, league):
    """
    Show the league table of a competition.

    Example:
        football standings --league PL
    """
    with handle_errors():
        entry = _league_entry(ctx, league)

        with FootballDataClient() as client, console.status("[bold green]Fetching standings..."):
            body = client.get(f"competitions/{entry.id}/leagueTable")

        standings_helper(body, console=console)


@cli.command('lists')
@click.option('--refresh', '-r', is_flag=True, help='Fetch the current competitions first')
@click.pass_context
def lists(ctx, refresh):
    """
    List league codes.

    Example:
        football lists
        football lists --refresh
    """
    with handle_errors():
        if refresh:
            with FootballDataClient() as client, console.status("[bold green]Refreshing leagues..."):
                body = client.get('competitions')

            ctx.obj['directory'] = refresh_helper(body, ctx.obj['directory'])
            report_message(MessageKind.UPDATE, "New list fetched", console)

        console.print(build_leagues_table(ctx.obj['directory']))


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
