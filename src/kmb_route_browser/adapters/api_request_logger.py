"""Utility for logging KMB API requests when KMB_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)


def should_log_requests() -> bool:
    """Check if request logging is enabled via KMB_LOG_REQUESTS environment variable."""
    return os.getenv("KMB_LOG_REQUESTS", "").lower() == "true"


def _redact_sensitive_headers(headers: dict[str, str]) -> dict[str, str]:
    """Redact sensitive headers from logging."""
    sensitive_keys = {"authorization", "cookie", "x-api-key"}
    return {k: "***REDACTED***" if k.lower() in sensitive_keys else v for k, v in headers.items()}


def log_api_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
) -> None:
    """Log API request details if KMB_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Request URL.
        headers: Request headers (optional, sensitive headers are redacted).
    """
    if not should_log_requests():
        return

    log_parts = [f"{method} {url}"]
    if headers:
        safe_headers = _redact_sensitive_headers(headers)
        log_parts.append(f"Headers: {json.dumps(safe_headers, indent=2, ensure_ascii=False)}")

    logger.info("API Request:\n" + "\n".join(log_parts))


def log_api_response(url: str, status: int, payload: Any = None) -> None:
    """Log a summary of an API response if KMB_LOG_REQUESTS is enabled."""
    if not should_log_requests():
        return

    size = len(payload) if isinstance(payload, list | dict) else 0
    logger.info(f"API Response: {status} {url} ({size} item(s))")
