"""
User-facing messages and terminating errors.

Every message the CLI shows outside of score lines and tables goes through
`report_message`. Each kind has a fixed behavior:

- UPDATE: print the supplied text (informational, the command carries on)
- REQUEST_ERROR: print a fixed diagnostic pointing at the issue tracker
- LEAGUE_NOT_FOUND: raise LeagueNotFoundError
- INVALID_FIXTURE_INPUT: raise InvalidFixtureInputError

Messages carry plain text plus a semantic role. Styling is applied by the
rendering layer (see ROLE_STYLES), so callers and tests deal in plain strings.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional

from rich.console import Console
from rich.text import Text

from football_cli.config import Config

logger = logging.getLogger(__name__)


# ============================================
# MESSAGE TYPES
# ============================================

class MessageKind(Enum):
    """Closed set of message kinds understood by report_message."""
    UPDATE = "update"
    REQUEST_ERROR = "request_error"
    LEAGUE_NOT_FOUND = "league_not_found"
    INVALID_FIXTURE_INPUT = "invalid_fixture_input"


class MessageRole(Enum):
    """Semantic role of a piece of output text."""
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


ROLE_STYLES = {
    MessageRole.SUCCESS: "bold green",
    MessageRole.INFO: "bold cyan",
    MessageRole.WARNING: "bold yellow",
    MessageRole.ERROR: "bold red",
}

LEAGUE_NOT_FOUND_TEXT = (
    "No league found. Please check the League Code entered with the list `football lists`."
)
INVALID_FIXTURE_INPUT_TEXT = "Days cannot be a negative value."
FALLBACK_TEXT = "ERROR OCCURED."


@dataclass(frozen=True)
class Message:
    """Plain message text tagged with its presentation role."""
    text: str
    role: MessageRole = MessageRole.INFO

    def to_text(self) -> Text:
        return Text(self.text, style=ROLE_STYLES[self.role])


def request_error_text(bugs_url: Optional[str] = None) -> str:
    return (
        f"Sorry, an error occured. Please report issues to "
        f"{bugs_url or Config.BUGS_URL} if problem persists."
    )


# ============================================
# ERRORS
# ============================================

class FootballCLIError(Exception):
    """Base error for conditions that must halt the current command."""

    def __init__(self, message: Message):
        self.message = message
        super().__init__(message.text)


class LeagueNotFoundError(FootballCLIError):
    """Raised when a league code is not present in the league directory."""
    pass


class InvalidFixtureInputError(FootballCLIError):
    """Raised when the fixture day count is negative."""
    pass


class RequestError(FootballCLIError):
    """Raised when the API could not be reached or answered with an error."""

    def __init__(self, message: Message, cause: Optional[Exception] = None):
        self.cause = cause
        super().__init__(message)


# ============================================
# DISPATCH
# ============================================

def _print(console: Console, message: Message):
    console.print(message.to_text())


def _on_update(console: Console, text: str):
    _print(console, Message(text, MessageRole.INFO))


def _on_request_error(console: Console, text: str):
    # Caller-supplied text is not shown
    _print(console, Message(request_error_text(), MessageRole.ERROR))


def _on_league_not_found(console: Console, text: str):
    raise LeagueNotFoundError(Message(LEAGUE_NOT_FOUND_TEXT, MessageRole.ERROR))


def _on_invalid_fixture_input(console: Console, text: str):
    raise InvalidFixtureInputError(Message(INVALID_FIXTURE_INPUT_TEXT, MessageRole.ERROR))


_HANDLERS: Dict[MessageKind, Callable[[Console, str], None]] = {
    MessageKind.UPDATE: _on_update,
    MessageKind.REQUEST_ERROR: _on_request_error,
    MessageKind.LEAGUE_NOT_FOUND: _on_league_not_found,
    MessageKind.INVALID_FIXTURE_INPUT: _on_invalid_fixture_input,
}

_missing = set(MessageKind) - set(_HANDLERS)
if _missing:
    raise RuntimeError(f"No message handler for: {sorted(k.name for k in _missing)}")


def report_message(kind: MessageKind, message: str = "", console: Optional[Console] = None):
    """
    Show or raise a message according to its kind.

    Args:
        kind: One of MessageKind
        message: Text for UPDATE; ignored by the other kinds
        console: Output sink (defaults to a stdout Console)

    Raises:
        LeagueNotFoundError: for LEAGUE_NOT_FOUND
        InvalidFixtureInputError: for INVALID_FIXTURE_INPUT
    """
    console = console or Console()
    handler = _HANDLERS.get(kind)

    if handler is None:
        logger.warning(f"Unknown message kind: {kind!r}")
        console.print(FALLBACK_TEXT)
        return

    logger.debug(f"Reporting {kind.name}: {message}")
    handler(console, message)
