# catalog/product_view.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, TypeVar, Union

from catalog.errors import UnknownBranchError, UnknownModelError
from catalog.product_models import (
    Attribute,
    BranchStock,
    Product,
    ProductLanguage,
    Variation,
    VariationLanguage,
)

_Lang = TypeVar("_Lang", ProductLanguage, VariationLanguage)


# ---- Stock keys ----
@dataclass(frozen=True)
class NoVariation:
    """Stock key of a product without variations (stock lives on the root)."""


@dataclass(frozen=True)
class VariationKey:
    id: int


StockKey = Union[NoVariation, VariationKey]
StockByModel = Dict[StockKey, Dict[int, int]]

NO_VARIATION = NoVariation()


def stock_key(model_id: Optional[int]) -> StockKey:
    return NO_VARIATION if model_id is None else VariationKey(model_id)


# ---- Helpers ----
def _find_language(entries: Sequence[_Lang], lang: str) -> Optional[_Lang]:
    return next((e for e in entries if e.language_code == lang), None)


def _find_variation(product: Product, model_id: Optional[int]) -> Optional[Variation]:
    return next((v for v in product.variations if v.id == model_id), None)


def _variation_at(product: Product, index: int) -> Variation:
    # Unchecked by contract, but negative indexes must not wrap around.
    if index < 0:
        raise IndexError(f"variation index out of range: {index}")
    return product.variations[index]


def _in_bounds(index: int, size: int) -> bool:
    return 0 <= index < size


# ---- Localized text ----
def _main_field(product: Product, lang: str, field: str) -> str:
    entry = _find_language(product.localized_texts, lang)
    value = getattr(entry, field) if entry is not None else None
    return "" if value is None else value


def main_name(product: Product, lang: str) -> str:
    return _main_field(product, lang, "name")


def main_description(product: Product, lang: str) -> str:
    return _main_field(product, lang, "description")


def main_seo_title(product: Product, lang: str) -> str:
    return _main_field(product, lang, "seo_title")


def main_seo_description(product: Product, lang: str) -> str:
    return _main_field(product, lang, "seo_description")


def main_seo_keywords(product: Product, lang: str) -> str:
    return _main_field(product, lang, "seo_keywords")


def variation_group_label(product: Product, lang: str) -> str:
    """
    Label of the variation group (e.g. "Color|Size") taken from the first variation.

    Raises IndexError when the product has no variations.
    """
    first = product.variations[0]
    entry = _find_language(first.localized_texts, lang)
    if entry is None or entry.label is None:
        return ""
    return entry.label


def _version_field(product: Product, model_id: Optional[int], lang: str, field: str) -> Optional[str]:
    variation = _find_variation(product, model_id)
    if variation is None:
        return None
    entry = _find_language(variation.localized_texts, lang)
    return getattr(entry, field) if entry is not None else None


def version_name(product: Product, model_id: Optional[int], lang: str) -> str:
    """
    Version name of a variation, or the product name when the variation,
    its `lang` entry or the field itself is missing.
    """
    value = _version_field(product, model_id, lang, "version_name")
    return main_name(product, lang) if value is None else value


def version_description(product: Product, model_id: Optional[int], lang: str) -> str:
    value = _version_field(product, model_id, lang, "description")
    return main_description(product, lang) if value is None else value


def variation_values(product: Product, lang: str) -> List[str]:
    """Names of every variation that has a `lang` entry, in variation order."""
    values = []
    for variation in product.variations:
        entry = _find_language(variation.localized_texts, lang)
        if entry is not None:
            values.append(entry.name or "")
    return values


def variation_value(product: Product, lang: str, index: int) -> str:
    values = variation_values(product, lang)
    return values[index] if _in_bounds(index, len(values)) else ""


# ---- Pricing & identity ----
def listing_prices(product: Product) -> List[int]:
    return [v.original_price for v in product.variations]


def listing_price(product: Product, index: int) -> int:
    return _variation_at(product, index).original_price


def selling_prices(product: Product) -> List[int]:
    return [v.new_price for v in product.variations]


def selling_price(product: Product, index: int) -> int:
    return _variation_at(product, index).new_price


def cost_prices(product: Product) -> List[int]:
    return [v.cost_price for v in product.variations]


def cost_price(product: Product, index: int) -> int:
    return _variation_at(product, index).cost_price


def variation_ids(product: Product) -> List[int]:
    return [v.id for v in product.variations]


def variation_id(product: Product, index: int) -> int:
    # Out of range gives -1 here, unlike the price accessors.
    ids = variation_ids(product)
    return ids[index] if _in_bounds(index, len(ids)) else -1


def barcodes(product: Product) -> List[Optional[str]]:
    return [v.barcode for v in product.variations]


def variation_status(product: Product, index: int) -> str:
    if not _in_bounds(index, len(product.variations)):
        return ""
    return product.variations[index].status or ""


# ---- Stock ----
def _branch_map(branches: Sequence[BranchStock]) -> Dict[int, int]:
    return {b.branch_id: b.available for b in branches}


def stock_by_model(product: Product) -> StockByModel:
    """
    Available units per branch, keyed by model.

    Variation products are keyed by `VariationKey(id)` and read only from their
    variations; other products have the single key `NO_VARIATION`.
    """
    if product.has_variations:
        return {VariationKey(v.id): _branch_map(v.branch_stocks) for v in product.variations}
    return {NO_VARIATION: _branch_map(product.branch_stocks)}


def _model_stock(product: Product, model_id: Optional[int]) -> Dict[int, int]:
    stocks = stock_by_model(product)
    key = stock_key(model_id)
    if key not in stocks:
        raise UnknownModelError(model_id)
    return stocks[key]


def stock_by_model_and_branch(product: Product, model_id: Optional[int], branch_id: int) -> int:
    branches = _model_stock(product, model_id)
    if branch_id not in branches:
        raise UnknownBranchError(model_id, branch_id)
    return branches[branch_id]


def branch_stocks(product: Product, model_id: Optional[int]) -> List[int]:
    """
    Available units of every branch of a model, in branch order.

    Pass `model_id=None` for products without variations. A model that exists
    but has no branches gives [], an unknown model raises UnknownModelError.
    """
    return list(_model_stock(product, model_id).values())


def product_stock_quantity_map(product: Product) -> Dict[int, List[int]]:
    return {v.id: [b.available for b in v.branch_stocks] for v in product.variations}


def total_stock_quantity(product: Product) -> int:
    return sum(units for branches in stock_by_model(product).values() for units in branches.values())


def is_in_stock(product: Product) -> bool:
    return any(units > 0 for branches in stock_by_model(product).values() for units in branches.values())


# ---- Attributes ----
def _attributes(product: Product, variation_index: int) -> Sequence[Attribute]:
    if product.has_variations:
        return _variation_at(product, variation_index).attributes
    return product.attributes


def displayed_attribute_flags(product: Product, variation_index: int) -> List[bool]:
    return [a.is_displayed for a in _attributes(product, variation_index)]


def attribute_names(product: Product, variation_index: int) -> List[Optional[str]]:
    return [a.name for a in _attributes(product, variation_index)]


def attribute_values(product: Product, variation_index: int) -> List[Optional[str]]:
    return [a.value for a in _attributes(product, variation_index)]
