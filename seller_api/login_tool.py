# seller_api/login_tool.py
from __future__ import annotations

import logging
from typing import Optional

import requests
from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.config import DEFAULT_PHONE_CODE, get_login, get_timeout
from core.telemetry import log_api_event
from seller_api.api_utils import auth_headers, build_url, log_api_call, transient_retry

logger = logging.getLogger(__name__)

LOGIN_PATH = "/api/authenticate/store/email/gosell"


# ------------------------------- Schemas ----------------------------------- #
class Credentials(BaseModel):
    """Seller dashboard login (email or phone number + password)."""

    username: str = Field(..., description="Email or phone number of the seller account.")
    password: str = Field(..., description="Account password.")
    phone_code: str = Field(DEFAULT_PHONE_CODE, description="Country calling code for phone logins.")

    @field_validator("username")
    @classmethod
    def _strip_username(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("username must be non-empty")
        return v.strip()

    @field_validator("password")
    @classmethod
    def _nonempty_password(cls, v: str) -> str:
        if not v:
            raise ValueError("password must be non-empty")
        return v

    @property
    def is_phone(self) -> bool:
        return "@" not in self.username

    def to_payload(self) -> dict:
        if self.is_phone:
            return {"username": self.username, "password": self.password, "phoneCode": self.phone_code}
        return {"username": self.username, "password": self.password}


class SellerInformation(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    access_token: str = Field(..., alias="accessToken")
    refresh_token: Optional[str] = Field(None, alias="refreshToken")
    store_id: int = Field(0, alias="store")
    user_id: int = Field(0, alias="id")
    store_name: Optional[str] = Field(None, alias="storeName")
    lang_key: Optional[str] = Field(None, alias="langKey")


def credentials_from_env() -> Credentials:
    username, password, phone_code = get_login()
    return Credentials(username=username, password=password, phone_code=phone_code)


# ------------------------------- Public API --------------------------------- #
@transient_retry
def get_seller_information(credentials: Credentials) -> SellerInformation:
    """
    Log in to the seller dashboard API.

    Raises requests.HTTPError on any non-2xx answer (wrong password, locked
    account, ...); only connection failures are retried.
    """
    payload = credentials.to_payload()
    log_api_call("POST", LOGIN_PATH, payload, logger=logger)

    resp = requests.post(build_url(LOGIN_PATH), headers=auth_headers(), json=payload, timeout=get_timeout())
    resp.raise_for_status()

    info = SellerInformation.model_validate(resp.json())
    log_api_event("seller_login", LOGIN_PATH, resp.status_code, store_id=info.store_id, user_id=info.user_id)
    return info
