# Core modules
from .messages import (
    MessageKind,
    MessageRole,
    Message,
    report_message,
    FootballCLIError,
    LeagueNotFoundError,
    InvalidFixtureInputError,
    RequestError,
)
from .league_directory import (
    LeagueEntry,
    LeagueDirectory,
    load_league_directory,
    refresh,
    resolve_league_name,
)
from .fixtures import (
    Fixture,
    FixtureStatus,
    parse_fixtures,
    filter_by_team,
    partition_scores,
    classify_and_filter,
    goals_or_missing,
)
from .standings import (
    StandingRow,
    FlatStandings,
    GroupedStandings,
    parse_standings,
)
