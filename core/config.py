# core/config.py
from __future__ import annotations

import os

from dotenv import load_dotenv

# Load environment once (safe if imported multiple times)
load_dotenv(override=False)

DEFAULT_API_URL = "https://api.beecow.info"
DEFAULT_ENV = "STAG"
DEFAULT_LANG_KEY = "vi"
DEFAULT_PHONE_CODE = "+84"
DEFAULT_TIMEOUT = 30.0

# Everything below reads at call-time (not import-time) so monkeypatched env is honored.


def get_api_url() -> str:
    return os.getenv("SELLER_API_URL", DEFAULT_API_URL).rstrip("/")


def get_env() -> str:
    return os.getenv("SELLER_ENV", DEFAULT_ENV)


def get_lang_key() -> str:
    return os.getenv("SELLER_LANG_KEY", DEFAULT_LANG_KEY)


def is_biz_env() -> bool:
    """BIZ shops have a single display language."""
    return "BIZ" in get_env().upper()


def get_display_language() -> str:
    return "en" if is_biz_env() else get_lang_key()


def get_timeout() -> float:
    raw = os.getenv("SELLER_API_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        raise RuntimeError(f"SELLER_API_TIMEOUT must be a number of seconds, got {raw!r}")


def get_login() -> tuple[str, str, str]:
    username = os.getenv("SELLER_USERNAME")
    password = os.getenv("SELLER_PASSWORD")
    if not username or not password:
        raise RuntimeError("Set SELLER_USERNAME and SELLER_PASSWORD environment variables.")
    return username, password, os.getenv("SELLER_PHONE_CODE", DEFAULT_PHONE_CODE)
