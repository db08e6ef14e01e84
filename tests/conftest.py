import sys, pathlib
sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

import pytest
import requests

from catalog.product_models import Product
from tests.helpers import mk_product, mk_variation_product


@pytest.fixture(autouse=True)
def _seller_env(monkeypatch):
    # never hit a real environment from tests
    monkeypatch.setenv("SELLER_API_URL", "https://api.test.local")
    monkeypatch.setenv("SELLER_ENV", "STAG")
    monkeypatch.setenv("SELLER_LANG_KEY", "vi")
    monkeypatch.setenv("SELLER_USERNAME", "qa@example.com")
    monkeypatch.setenv("SELLER_PASSWORD", "Abc@12345")
    monkeypatch.delenv("SELLER_API_TIMEOUT", raising=False)
    monkeypatch.delenv("SELLER_PHONE_CODE", raising=False)


@pytest.fixture
def simple_product() -> Product:
    """No variations; branches 1 -> 7 units, 2 -> 5 units."""
    return Product.model_validate(mk_product())


@pytest.fixture
def variation_product() -> Product:
    """Two variations (101, 102); 101 has vi+en texts, 102 only vi."""
    return Product.model_validate(mk_variation_product())


class FakeResp:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else ""

    def json(self):
        if self._payload is None:
            raise ValueError("no json body")
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)


@pytest.fixture
def fake_resp():
    return FakeResp
