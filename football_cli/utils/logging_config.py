"""
Logging Configuration for the football CLI.

Features:
- Colored console output on stderr (stdout carries scores and tables)
- Optional rotating log file, plain or JSON
- API request logging with timing and status
"""

import sys
import json
import logging
import logging.handlers
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Dict, Union
import traceback


# ============================================
# FORMATTERS
# ============================================

class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line."""

    RESERVED = {
        'name', 'msg', 'args', 'created', 'filename', 'funcName',
        'levelname', 'levelno', 'lineno', 'module', 'msecs',
        'pathname', 'process', 'processName', 'relativeCreated',
        'stack_info', 'exc_info', 'exc_text', 'thread', 'threadName',
        'message', 'taskName'
    }

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": traceback.format_exception(*record.exc_info) if record.exc_info[0] else None
            }

        extra_fields = {}
        for key, value in record.__dict__.items():
            if key in self.RESERVED:
                continue
            try:
                json.dumps(value)
                extra_fields[key] = value
            except (TypeError, ValueError):
                extra_fields[key] = str(value)

        if extra_fields:
            log_data["extra"] = extra_fields

        return json.dumps(log_data, default=str)


class ConsoleFormatter(logging.Formatter):
    """Console formatter with ANSI colors per level."""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S')

        formatted = f"{color}{timestamp} | {record.levelname:8} | {record.name:20} | {record.getMessage()}{self.RESET}"

        if record.exc_info:
            formatted += f"\n{color}{self.formatException(record.exc_info)}{self.RESET}"

        return formatted


# ============================================
# SETUP
# ============================================

def setup_logging(
    level: str = "WARNING",
    json_logs: bool = False,
    log_file: Optional[Union[str, Path]] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> logging.Logger:
    """
    Configure the root logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Use JSON format for the log file
        log_file: Path of a rotating log file; no file logging when None
        max_bytes: Max log file size before rotation
        backup_count: Number of backup files to keep

    Returns:
        Configured root logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(ConsoleFormatter())
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        if json_logs:
            file_handler.setFormatter(JSONFormatter())
        else:
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s'
            ))
        root_logger.addHandler(file_handler)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


# ============================================
# API REQUEST LOGGER
# ============================================

class APIRequestLogger:
    """
    Logger for API requests with timing and response info.
    """

    def __init__(self, api_name: str, logger: Optional[logging.Logger] = None):
        self.api_name = api_name
        self.logger = logger or get_logger(f"api.{api_name}")

    def log_request(
        self,
        endpoint: str,
        method: str = "GET",
        params: Optional[Dict] = None,
        response_status: Optional[int] = None,
        response_time_ms: Optional[float] = None,
        error: Optional[str] = None
    ):
        """Log an API request."""
        log_data = {
            "api": self.api_name,
            "endpoint": endpoint,
            "method": method,
            "params": params,
            "response_status": response_status,
            "response_time_ms": response_time_ms,
        }

        if error:
            log_data["error"] = error
            self.logger.error(
                f"API request failed: {method} {endpoint}",
                extra=log_data
            )
        else:
            self.logger.info(
                f"API request: {method} {endpoint}",
                extra=log_data
            )
