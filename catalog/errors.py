# catalog/errors.py
from __future__ import annotations

from typing import Any, Optional


class StockLookupError(KeyError):
    """A model or branch key is missing from the derived stock structure."""


class UnknownModelError(StockLookupError):
    def __init__(self, model_id: Optional[int]):
        self.model_id = model_id
        super().__init__(f"Unknown model: {model_id!r}")


class UnknownBranchError(StockLookupError):
    def __init__(self, model_id: Optional[int], branch_id: int):
        self.model_id = model_id
        self.branch_id = branch_id
        super().__init__(f"Unknown branch {branch_id!r} for model {model_id!r}")


class ProductFetchError(RuntimeError):
    """
    Product detail API answered with something other than 200/404.

    The raw response body is kept for diagnosis.
    """

    def __init__(self, product_id: int, status_code: int, body: Any):
        self.product_id = product_id
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"Get product detail failed for productId {product_id}: "
            f"HTTP {status_code}, body: {body}"
        )
