"""Tests for API request logger."""

from unittest.mock import patch

import pytest

from kmb_route_browser.adapters.api_request_logger import (
    log_api_request,
    log_api_response,
    should_log_requests,
)


class TestShouldLogRequests:
    """Tests for should_log_requests function."""

    def test_when_env_not_set_then_returns_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given KMB_LOG_REQUESTS not set, when checking, then returns False."""
        monkeypatch.delenv("KMB_LOG_REQUESTS", raising=False)

        assert should_log_requests() is False

    @pytest.mark.parametrize("value", ["true", "True", "TRUE"])
    def test_when_env_set_to_true_then_returns_true(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        """Given KMB_LOG_REQUESTS=true in any case, when checking, then returns True."""
        monkeypatch.setenv("KMB_LOG_REQUESTS", value)

        assert should_log_requests() is True

    def test_when_env_set_to_false_then_returns_false(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given KMB_LOG_REQUESTS=false, when checking, then returns False."""
        monkeypatch.setenv("KMB_LOG_REQUESTS", "false")

        assert should_log_requests() is False


class TestLogApiRequest:
    """Tests for log_api_request function."""

    @patch("kmb_route_browser.adapters.api_request_logger.should_log_requests")
    @patch("kmb_route_browser.adapters.api_request_logger.logger")
    def test_when_logging_disabled_then_does_not_log(
        self, mock_logger: object, mock_should_log: object
    ) -> None:
        """Given logging disabled, when calling log_api_request, then does not log."""
        mock_should_log.return_value = False

        log_api_request("GET", "https://example.com/api")

        mock_logger.info.assert_not_called()

    @patch("kmb_route_browser.adapters.api_request_logger.should_log_requests")
    @patch("kmb_route_browser.adapters.api_request_logger.logger")
    def test_when_logging_enabled_then_logs_method_and_url(
        self, mock_logger: object, mock_should_log: object
    ) -> None:
        """Given logging enabled, when calling with method and URL, then logs them."""
        mock_should_log.return_value = True

        log_api_request("GET", "https://example.com/route/")

        mock_logger.info.assert_called_once()
        call_args = mock_logger.info.call_args[0][0]
        assert "GET https://example.com/route/" in call_args
        assert "Headers:" not in call_args

    @patch("kmb_route_browser.adapters.api_request_logger.should_log_requests")
    @patch("kmb_route_browser.adapters.api_request_logger.logger")
    def test_when_logging_enabled_with_headers_then_logs_headers(
        self, mock_logger: object, mock_should_log: object
    ) -> None:
        """Given logging enabled with headers, when calling, then logs headers."""
        mock_should_log.return_value = True

        log_api_request("GET", "https://example.com/api", headers={"Accept": "application/json"})

        call_args = mock_logger.info.call_args[0][0]
        assert "Headers:" in call_args
        assert "Accept" in call_args
        assert "application/json" in call_args

    @pytest.mark.parametrize(
        ("header", "secret"),
        [
            ("Authorization", "Bearer secret-token"),
            ("Cookie", "session=abc123"),
            ("X-API-Key", "secret-key"),
        ],
    )
    @patch("kmb_route_browser.adapters.api_request_logger.should_log_requests")
    @patch("kmb_route_browser.adapters.api_request_logger.logger")
    def test_when_logging_sensitive_header_then_redacts_it(
        self, mock_logger: object, mock_should_log: object, header: str, secret: str
    ) -> None:
        """Given a sensitive header, when logging, then its value is redacted."""
        mock_should_log.return_value = True

        log_api_request("GET", "https://example.com/api", headers={header: secret})

        call_args = mock_logger.info.call_args[0][0]
        assert header in call_args
        assert "***REDACTED***" in call_args
        assert secret not in call_args


class TestLogApiResponse:
    """Tests for log_api_response function."""

    @patch("kmb_route_browser.adapters.api_request_logger.should_log_requests")
    @patch("kmb_route_browser.adapters.api_request_logger.logger")
    def test_when_logging_disabled_then_does_not_log(
        self, mock_logger: object, mock_should_log: object
    ) -> None:
        """Given logging disabled, when logging a response, then does not log."""
        mock_should_log.return_value = False

        log_api_response("https://example.com/api", 200, {"data": []})

        mock_logger.info.assert_not_called()

    @patch("kmb_route_browser.adapters.api_request_logger.should_log_requests")
    @patch("kmb_route_browser.adapters.api_request_logger.logger")
    def test_when_logging_enabled_then_logs_status_and_size(
        self, mock_logger: object, mock_should_log: object
    ) -> None:
        """Given logging enabled, when logging a response, then logs status, URL and size."""
        mock_should_log.return_value = True

        log_api_response("https://example.com/route/", 200, [1, 2, 3])

        call_args = mock_logger.info.call_args[0][0]
        assert "200 https://example.com/route/" in call_args
        assert "(3 item(s))" in call_args
