"""
Utility modules for the football CLI.

Includes:
- logging_config: console and file logging, API request logging
"""

from .logging_config import (
    setup_logging,
    get_logger,
    JSONFormatter,
    ConsoleFormatter,
    APIRequestLogger,
)

__all__ = [
    'setup_logging',
    'get_logger',
    'JSONFormatter',
    'ConsoleFormatter',
    'APIRequestLogger',
]
