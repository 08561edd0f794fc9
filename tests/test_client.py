"""
Tests for the football-data.org client and URL building.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from football_cli.config import Config
from football_cli.core.messages import RequestError
from football_cli.scrapers.football_data.client import FootballDataClient, build_url

BASE = "https://api.example.test/v1/"


class TestBuildURL:
    """Tests for endpoint URL building."""

    def test_concatenates_base_and_endpoint(self):
        assert build_url("competitions/426/leagueTable", BASE) == BASE + "competitions/426/leagueTable"

    def test_endpoint_used_verbatim(self):
        assert build_url("fixtures?timeFrame=n10", BASE) == "https://api.example.test/v1/fixtures?timeFrame=n10"

    def test_default_base(self):
        assert build_url("competitions") == Config.get_api_url() + "competitions"
        assert Config.get_api_url().endswith("/")


class TestFootballDataClient:
    """Tests for the HTTP client wrapper."""

    @pytest.fixture
    def client(self):
        with FootballDataClient(base_url=BASE, timeout=5) as client:
            yield client

    def test_returns_body_text(self, client):
        response = MagicMock(status_code=200, text='{"fixtures": []}')

        with patch.object(client.session, "get", return_value=response) as mock_get:
            body = client.get("fixtures")

        assert body == '{"fixtures": []}'
        mock_get.assert_called_once_with(BASE + "fixtures", params=None, timeout=5)

    def test_http_error_becomes_request_error(self, client):
        response = MagicMock(status_code=404)
        error = requests.exceptions.HTTPError("404 Client Error", response=response)
        response.raise_for_status.side_effect = error

        with patch.object(client.session, "get", return_value=response):
            with pytest.raises(RequestError) as exc_info:
                client.get("competitions/999/leagueTable")

        assert exc_info.value.cause is error
        assert Config.BUGS_URL in str(exc_info.value)

    def test_connection_error_becomes_request_error(self, client):
        with patch.object(client.session, "get", side_effect=requests.exceptions.ConnectionError("down")):
            with pytest.raises(RequestError) as exc_info:
                client.get("fixtures")

        assert isinstance(exc_info.value.cause, requests.exceptions.ConnectionError)

    def test_defaults_from_config(self):
        client = FootballDataClient()

        assert client.base_url == Config.get_api_url()
        assert client.timeout == Config.REQUEST_TIMEOUT
        client.close()
