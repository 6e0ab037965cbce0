"""Tests for API request logger."""

from unittest.mock import patch

import pytest

from london_departures.adapters.api_request_logger import (
    REDACTED,
    log_api_request,
    redact_soap_token,
    should_log_requests,
)


class TestShouldLogRequests:
    """Tests for should_log_requests function."""

    def test_when_env_not_set_then_returns_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given LDB_LOG_REQUESTS not set, when checking, then returns False."""
        monkeypatch.delenv("LDB_LOG_REQUESTS", raising=False)

        assert should_log_requests() is False

    def test_when_env_set_to_true_capitalized_then_returns_true(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given LDB_LOG_REQUESTS=True (capitalized), when checking, then returns True."""
        monkeypatch.setenv("LDB_LOG_REQUESTS", "True")

        assert should_log_requests() is True


class TestLogApiRequest:
    """Tests for log_api_request function."""

    @patch("london_departures.adapters.api_request_logger.should_log_requests")
    @patch("london_departures.adapters.api_request_logger.logger")
    def test_when_logging_disabled_then_does_not_log(
        self, mock_logger: object, mock_should_log: object
    ) -> None:
        """Given logging disabled, when calling log_api_request, then does not log."""
        mock_should_log.return_value = False

        log_api_request("GET", "https://api.tfl.gov.uk/Mode/dlr/Arrivals")

        mock_logger.info.assert_not_called()

    @patch("london_departures.adapters.api_request_logger.should_log_requests")
    @patch("london_departures.adapters.api_request_logger.logger")
    def test_when_params_contain_credentials_then_they_are_redacted(
        self, mock_logger: object, mock_should_log: object
    ) -> None:
        """Given TfL credentials in params, when logging, then their values are redacted."""
        mock_should_log.return_value = True

        log_api_request(
            "GET",
            "https://api.tfl.gov.uk/Mode/dlr/Arrivals",
            params={"app_id": "id123", "app_key": "key456", "mode": "dlr"},
        )

        message = mock_logger.info.call_args[0][0]
        assert "id123" not in message
        assert "key456" not in message
        assert f"app_key={REDACTED}" in message
        assert "mode=dlr" in message

    @patch("london_departures.adapters.api_request_logger.should_log_requests")
    @patch("london_departures.adapters.api_request_logger.logger")
    def test_when_soap_payload_then_token_is_redacted(
        self, mock_logger: object, mock_should_log: object
    ) -> None:
        """Given a SOAP envelope, when logging, then the access token is not logged."""
        mock_should_log.return_value = True

        log_api_request(
            "POST",
            "https://lite.realtime.nationalrail.co.uk/OpenLDBWS/ldb12.asmx",
            headers={"SOAPAction": "GetDepartureBoard", "X-Access-Token": "abc"},
            payload="<ldb:TokenValue>user:secret</ldb:TokenValue><ldb:crs>SRA</ldb:crs>",
        )

        message = mock_logger.info.call_args[0][0]
        assert "user:secret" not in message
        assert '"X-Access-Token": "***REDACTED***"' in message
        assert "<ldb:crs>SRA</ldb:crs>" in message


def test_redact_soap_token_handles_unprefixed_tags() -> None:
    """Given an unprefixed TokenValue, when redacting, then the value is replaced."""
    assert redact_soap_token("<TokenValue>t</TokenValue>") == f"<TokenValue>{REDACTED}</TokenValue>"
