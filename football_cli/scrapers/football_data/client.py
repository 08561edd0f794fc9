"""
football-data.org client.

Thin transport: one GET per call, body returned as text for the helpers to
parse. No authentication, retries or rate limiting.
"""

import logging
import time
from typing import Dict, Optional

import requests

from football_cli.config import Config
from football_cli.core.messages import Message, MessageRole, RequestError, request_error_text
from football_cli.utils.logging_config import APIRequestLogger

logger = logging.getLogger(__name__)


def build_url(endpoint: str, base_url: Optional[str] = None) -> str:
    """API base URL followed by the endpoint path, unmodified."""
    return (base_url or Config.get_api_url()) + endpoint


class FootballDataClient:
    """
    Client for the football-data.org JSON API.
    """

    DEFAULT_HEADERS = {
        'Accept': 'application/json',
        'User-Agent': 'football-cli',
    }

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        """
        Initialize client.

        Args:
            base_url: API root ending in '/' (defaults to Config.API_URL)
            timeout: Request timeout in seconds (defaults to Config.REQUEST_TIMEOUT)
        """
        self.base_url = base_url or Config.get_api_url()
        self.timeout = timeout or Config.REQUEST_TIMEOUT

        self.session = requests.Session()
        self.session.headers.update(self.DEFAULT_HEADERS)
        self.api_logger = APIRequestLogger("football_data")

    def get(self, endpoint: str, params: Optional[Dict] = None) -> str:
        """
        Fetch an endpoint and return the response body.

        Raises:
            RequestError: On connection errors, timeouts and non-2xx responses
        """
        url = build_url(endpoint, self.base_url)
        start_time = time.time()

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            response_time_ms = (time.time() - start_time) * 1000
            status = e.response.status_code if e.response is not None else None
            self.api_logger.log_request(
                endpoint=endpoint,
                params=params,
                response_status=status,
                response_time_ms=response_time_ms,
                error=str(e)
            )
            raise RequestError(Message(request_error_text(), MessageRole.ERROR), cause=e) from e

        response_time_ms = (time.time() - start_time) * 1000
        self.api_logger.log_request(
            endpoint=endpoint,
            params=params,
            response_status=response.status_code,
            response_time_ms=round(response_time_ms, 1)
        )
        return response.text

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
