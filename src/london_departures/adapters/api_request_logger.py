"""Utility for logging upstream API requests when LDB_LOG_REQUESTS is enabled."""

import json
import logging
import os
import re
from typing import Any

logger = logging.getLogger(__name__)

REDACTED = "***REDACTED***"

_SENSITIVE_HEADERS = {"authorization", "cookie", "x-api-key", "x-access-token"}
_SENSITIVE_PARAMS = {"app_key", "app_id"}
_TOKEN_VALUE_RE = re.compile(r"(<(?:\w+:)?TokenValue>)(.*?)(</(?:\w+:)?TokenValue>)", re.DOTALL)


def should_log_requests() -> bool:
    """Check if request logging is enabled via LDB_LOG_REQUESTS environment variable."""
    return os.getenv("LDB_LOG_REQUESTS", "").lower() == "true"


def _build_url_with_params(url: str, params: dict[str, Any] | None) -> str:
    """Build full URL with query parameters, redacting credentials."""
    if not params:
        return url
    safe_params = {k: REDACTED if k in _SENSITIVE_PARAMS else v for k, v in params.items()}
    param_str = "&".join(f"{k}={v}" for k, v in sorted(safe_params.items()))
    return f"{url}?{param_str}" if "?" not in url else f"{url}&{param_str}"


def _redact_sensitive_headers(headers: dict[str, str]) -> dict[str, str]:
    """Redact sensitive headers from logging."""
    return {k: REDACTED if k.lower() in _SENSITIVE_HEADERS else v for k, v in headers.items()}


def redact_soap_token(payload: str) -> str:
    """Replace the Darwin access token inside a SOAP envelope."""
    return _TOKEN_VALUE_RE.sub(rf"\g<1>{REDACTED}\g<3>", payload)


def _format_payload(payload: Any) -> str:
    """Format payload for logging."""
    if isinstance(payload, str):
        return redact_soap_token(payload)
    try:
        return json.dumps(payload, indent=2) if isinstance(payload, dict) else str(payload)
    except (TypeError, ValueError):
        return str(payload)


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    payload: Any = None,
) -> None:
    """Log API request details if LDB_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Request URL.
        params: Query parameters (optional, credentials are redacted).
        headers: Request headers (optional, sensitive headers are redacted).
        payload: Request payload/body (optional, SOAP tokens are redacted).
    """
    if not should_log_requests():
        return

    full_url = _build_url_with_params(url, params)
    log_parts = [f"{method} {full_url}"]

    if headers:
        safe_headers = _redact_sensitive_headers(headers)
        log_parts.append(f"Headers: {json.dumps(safe_headers, indent=2)}")

    if payload is not None:
        log_parts.append(f"Payload: {_format_payload(payload)}")

    logger.info("API Request:\n" + "\n".join(log_parts))
