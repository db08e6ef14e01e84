# seller_api/api_utils.py
from __future__ import annotations

import logging
from typing import Dict, Optional

import requests
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from core.config import get_api_url

# ------------------------------ HTTP helpers -------------------------------- #
# Only transport failures are retried; an HTTP error status is an answer.
transient_retry = retry(
    reraise=True,
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=8),
    retry=retry_if_exception_type((requests.ConnectionError, requests.Timeout)),
)


def build_url(path: str) -> str:
    return f"{get_api_url()}/{path.lstrip('/')}"


def auth_headers(token: Optional[str] = None) -> Dict[str, str]:
    headers = {
        "Accept": "application/json",
        "Content-Type": "application/json",
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers



# ------------------------------ Safe logging -------------------------------- #
# Matched case-insensitively at any depth of a request payload.
_SECRET_KEYS = frozenset({
    "password",
    "authorization",
    "token",
    "access_token",
    "accesstoken",
    "refresh_token",
    "refreshtoken",
})


def _mask_phone(number) -> str:
    digits = str(number)
    return "*" * max(len(digits) - 3, 0) + digits[-3:]


def _scrub(data):
    """
    Copy of a seller API payload that is safe to log.

    Secrets become "[REDACTED]". A login body carrying `phoneCode` is a phone
    login, so its `username` is a phone number and only its last 3 digits are
    kept; e-mail usernames stay readable.
    """
    if isinstance(data, dict):
        phone_login = "phoneCode" in data
        safe = {}
        for key, value in data.items():
            if isinstance(key, str) and key.lower() in _SECRET_KEYS:
                safe[key] = "[REDACTED]"
            elif phone_login and key == "username":
                safe[key] = _mask_phone(value)
            else:
                safe[key] = _scrub(value)
        return safe
    if isinstance(data, (list, tuple)):
        return [_scrub(v) for v in data]
    return data


def log_api_call(method: str, path: str, payload=None, level=logging.INFO, logger=None):
    """Log an outgoing seller API request as `METHOD path body`, secrets removed."""
    logger = logger or logging.getLogger("sellerqa.api")
    if payload is None:
        logger.log(level, "api_call %s %s", method, path)
    else:
        logger.log(level, "api_call %s %s %s", method, path, _scrub(payload))
