# seller_api/product_detail_tool.py
from __future__ import annotations

import logging
from typing import Optional

import requests

from catalog.errors import ProductFetchError
from catalog.product_models import Product
from catalog.product_view import main_name
from core.config import get_display_language, get_timeout
from core.telemetry import log_api_event
from seller_api.api_utils import auth_headers, build_url, log_api_call, transient_retry
from seller_api.login_tool import (
    Credentials,
    SellerInformation,
    credentials_from_env,
    get_seller_information,
)

logger = logging.getLogger(__name__)

PRODUCT_DETAIL_PATH = "/itemservice/api/beehive-items/{product_id}"


def _response_body(resp: requests.Response):
    try:
        return resp.json()
    except ValueError:
        return resp.text


class ProductDetailClient:
    """
    Fetches product details from the item service as `Product` records.

    Logs in on first use (credentials from the environment unless given) and
    reuses the access token afterwards.
    """

    def __init__(
        self,
        credentials: Optional[Credentials] = None,
        seller_information: Optional[SellerInformation] = None,
    ):
        self._credentials = credentials
        self._seller_information = seller_information

    @property
    def seller_information(self) -> SellerInformation:
        if self._seller_information is None:
            credentials = self._credentials or credentials_from_env()
            self._seller_information = get_seller_information(credentials)
        return self._seller_information

    # The login has its own retry policy; only the GET is retried here.
    @transient_retry
    def _get(self, path: str, token: str) -> requests.Response:
        return requests.get(build_url(path), headers=auth_headers(token), timeout=get_timeout())

    def get_product_information(self, product_id: int) -> Product:
        """
        200 -> decoded Product; 404 -> deleted placeholder carrying only the id;
        anything else -> ProductFetchError with the response body attached.
        """
        logger.info("Get information of productId: %s", product_id)
        token = self.seller_information.access_token
        path = PRODUCT_DETAIL_PATH.format(product_id=product_id)
        log_api_call("GET", path, logger=logger)
        resp = self._get(path, token)

        if resp.status_code == 404:
            logger.warning("Product %s not found, treating it as deleted.", product_id)
            log_api_event("product_detail", path, 404, product_id=product_id, deleted=True)
            return Product.deleted_placeholder(product_id)

        if resp.status_code != 200:
            log_api_event("product_detail", path, resp.status_code, product_id=product_id)
            raise ProductFetchError(product_id, resp.status_code, _response_body(resp))

        product = Product.model_validate(resp.json())
        log_api_event(
            "product_detail",
            path,
            200,
            product_id=product_id,
            has_variations=product.has_variations,
            variations=len(product.variations),
        )
        return product

    def get_product_name(self, product_id: int, lang: Optional[str] = None) -> str:
        """Product name as the dashboard shows it (BIZ shops display `en`)."""
        return main_name(self.get_product_information(product_id), lang or get_display_language())


def get_product_information(product_id: int, credentials: Optional[Credentials] = None) -> Product:
    """One-shot helper for tests that only need a single product."""
    return ProductDetailClient(credentials=credentials).get_product_information(product_id)
