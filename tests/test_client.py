"""
Tests for page downloads and error classification.
"""

from unittest.mock import Mock, patch

import pytest
import requests

from src.timetable.client import fetch_html
from src.timetable.errors import (
    DocumentNotFound,
    PermanentError,
    RateLimitError,
    TransientError,
)

URL = "https://plan.example.edu/plany/plany/o6.html"


def _response(status: int, content: bytes = b"") -> Mock:
    return Mock(status_code=status, content=content)


@pytest.fixture
def no_wait():
    with patch("tenacity.nap.time.sleep"):
        yield


class TestFetchHtml:
    """Status and exception mapping."""

    def test_returns_body_bytes(self, config):
        with patch("src.timetable.client.requests.get") as get:
            get.return_value = _response(200, b"<html></html>")

            assert fetch_html(URL, config) == b"<html></html>"

        get.assert_called_once_with(
            URL,
            headers={"User-Agent": config.user_agent},
            timeout=config.request_timeout,
        )

    def test_not_found_is_not_retried(self, config):
        with patch("src.timetable.client.requests.get") as get:
            get.return_value = _response(404)

            with pytest.raises(DocumentNotFound):
                fetch_html(URL, config)

        assert get.call_count == 1

    def test_client_error_is_permanent(self, config):
        with patch("src.timetable.client.requests.get") as get:
            get.return_value = _response(403)

            with pytest.raises(PermanentError):
                fetch_html(URL, config)

        assert get.call_count == 1

    def test_server_error_retried_then_raised(self, config, no_wait):
        with patch("src.timetable.client.requests.get") as get:
            get.return_value = _response(503)

            with pytest.raises(TransientError):
                fetch_html(URL, config)

        assert get.call_count == config.max_retries

    def test_connection_error_recovers(self, config, no_wait):
        with patch("src.timetable.client.requests.get") as get:
            get.side_effect = [
                requests.ConnectionError("refused"),
                _response(200, b"ok"),
            ]

            assert fetch_html(URL, config) == b"ok"

        assert get.call_count == 2

    def test_timeout_is_transient(self, config, no_wait):
        with patch("src.timetable.client.requests.get") as get:
            get.side_effect = requests.Timeout("slow")

            with pytest.raises(TransientError) as exc_info:
                fetch_html(URL, config)

        assert isinstance(exc_info.value.__cause__, requests.Timeout)

    def test_rate_limit(self, config, no_wait):
        with patch("src.timetable.client.requests.get") as get:
            get.return_value = _response(429)

            with pytest.raises(RateLimitError):
                fetch_html(URL, config)
