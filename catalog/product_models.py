# catalog/product_models.py
from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ------------------------------- Base -------------------------------------- #
class _Record(BaseModel):
    """
    Immutable record decoded from the seller API.

    Fields are declared with the upstream camelCase names as aliases; anything
    the API adds later is dropped on decode.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


# ------------------------------ Shared parts -------------------------------- #
class BranchStock(_Record):
    branch_id: int = Field(0, alias="branchId")
    total_units: int = Field(0, alias="totalItem")
    sold_units: int = Field(0, alias="soldItem")

    @property
    def available(self) -> int:
        # Upstream data can be inconsistent; negative values pass through.
        return self.total_units - self.sold_units


class Attribute(_Record):
    name: Optional[str] = Field(None, alias="attributeName")
    value: Optional[str] = Field(None, alias="attributeValue")
    is_displayed: bool = Field(False, alias="isDisplay")


class ShippingInfo(_Record):
    weight: int = 0
    width: int = 0
    height: int = 0
    length: int = 0


# ------------------------------ Localized text ------------------------------ #
class ProductLanguage(_Record):
    language_code: str = Field(..., alias="language")
    name: Optional[str] = None
    description: Optional[str] = None
    seo_title: Optional[str] = Field(None, alias="seoTitle")
    seo_description: Optional[str] = Field(None, alias="seoDescription")
    seo_keywords: Optional[str] = Field(None, alias="seoKeywords")


class VariationLanguage(_Record):
    language_code: str = Field(..., alias="language")
    name: Optional[str] = None
    label: Optional[str] = None
    description: Optional[str] = None
    version_name: Optional[str] = Field(None, alias="versionName")


# -------------------------------- Variation --------------------------------- #
class Variation(_Record):
    """A purchasable model of a product (price, stock and texts of its own)."""

    id: int
    name: Optional[str] = None
    sku: Optional[str] = None
    original_price: int = Field(0, alias="orgPrice")
    new_price: int = Field(0, alias="newPrice")
    cost_price: int = Field(0, alias="costPrice")
    label: Optional[str] = None
    org_name: Optional[str] = Field(None, alias="orgName")
    description: Optional[str] = None
    barcode: Optional[str] = None
    version_name: Optional[str] = Field(None, alias="versionName")
    use_product_description: bool = Field(False, alias="useProductDescription")
    reuse_attributes: bool = Field(False, alias="reuseAttributes")
    status: Optional[str] = None
    branch_stocks: Tuple[BranchStock, ...] = Field((), alias="branches")
    localized_texts: Tuple[VariationLanguage, ...] = Field((), alias="languages")
    attributes: Tuple[Attribute, ...] = Field((), alias="modelAttributes")

    @field_validator("branch_stocks", "localized_texts", "attributes", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        # The item service sends null instead of [] for some sequences.
        return () if v is None else v


# --------------------------------- Product ---------------------------------- #
class Product(_Record):
    """
    Product detail as returned by the item service.

    When `has_variations` is set, stock and attributes live on `variations`;
    otherwise they live on the product itself.
    """

    id: int
    last_modified_date: Optional[str] = Field(None, alias="lastModifiedDate")
    name: Optional[str] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    original_price: int = Field(0, alias="orgPrice")
    discount: int = 0
    new_price: int = Field(0, alias="newPrice")
    cost_price: int = Field(0, alias="costPrice")
    shipping_info: Optional[ShippingInfo] = Field(None, alias="shippingInfo")
    deleted: bool = False
    variations: Tuple[Variation, ...] = Field((), alias="models")
    has_variations: bool = Field(False, alias="hasModel")
    show_out_of_stock: bool = Field(False, alias="showOutOfStock")
    seo_title: Optional[str] = Field(None, alias="seoTitle")
    seo_description: Optional[str] = Field(None, alias="seoDescription")
    seo_keywords: Optional[str] = Field(None, alias="seoKeywords")
    barcode: Optional[str] = None
    seo_url: Optional[str] = Field(None, alias="seoUrl")
    branch_stocks: Tuple[BranchStock, ...] = Field((), alias="branches")
    localized_texts: Tuple[ProductLanguage, ...] = Field((), alias="languages")
    attributes: Tuple[Attribute, ...] = Field((), alias="itemAttributes")
    tax_id: int = Field(0, alias="taxId")
    tax_name: Optional[str] = Field(None, alias="taxName")
    tax_rate: float = Field(0.0, alias="taxRate")
    tax_amount: float = Field(0.0, alias="taxAmount")
    on_app: bool = Field(False, alias="onApp")
    on_web: bool = Field(False, alias="onWeb")
    in_store: bool = Field(False, alias="inStore")
    in_go_social: bool = Field(False, alias="inGoSocial")
    enabled_listing: bool = Field(False, alias="enabledListing")
    is_hide_stock: bool = Field(False, alias="isHideStock")
    inventory_manage_type: Optional[str] = Field(None, alias="inventoryManageType")
    bh_status: Optional[str] = Field(None, alias="bhStatus")
    lot_available: bool = Field(False, alias="lotAvailable")
    expired_quality: bool = Field(False, alias="expiredQuality")

    @field_validator(
        "variations", "branch_stocks", "localized_texts", "attributes", mode="before"
    )
    @classmethod
    def none_as_empty(cls, v):
        return () if v is None else v

    @classmethod
    def deleted_placeholder(cls, product_id: int) -> "Product":
        """Stand-in for a product the item service no longer knows about."""
        return cls(id=product_id, deleted=True)
