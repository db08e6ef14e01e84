import pytest
from pydantic import ValidationError

from catalog.product_models import BranchStock, Product
from tests.helpers import branch, mk_product, mk_variation, mk_variation_product


def test_decodes_wire_names(variation_product):
    p = variation_product
    assert p.id == 1234
    assert p.has_variations is True
    assert [v.id for v in p.variations] == [101, 102]
    v = p.variations[0]
    assert v.original_price == 200_000
    assert v.localized_texts[1].version_name == "Red shirt"
    assert v.attributes[1].is_displayed is False
    assert v.branch_stocks[0].branch_id == 1


def test_unknown_fields_are_ignored():
    raw = mk_product(brandNewField={"x": 1}, models=[], hasModel=False)
    raw["branches"][0]["lotCount"] = 3
    p = Product.model_validate(raw)
    assert not hasattr(p, "brandNewField")
    assert p.branch_stocks[0].available == 7


def test_null_sequences_decode_as_empty():
    raw = mk_product(branches=None)
    raw["branches"] = None
    raw["models"] = None
    raw["itemAttributes"] = None
    p = Product.model_validate(raw)
    assert p.branch_stocks == ()
    assert p.variations == ()
    assert p.attributes == ()


def test_variation_null_sequences_decode_as_empty():
    model = mk_variation()
    model["branches"] = None
    model["languages"] = None
    p = Product.model_validate(mk_variation_product(models=[model]))
    assert p.variations[0].branch_stocks == ()
    assert p.variations[0].localized_texts == ()


def test_product_is_immutable(simple_product):
    with pytest.raises(ValidationError):
        simple_product.has_variations = True
    assert isinstance(simple_product.branch_stocks, tuple)


def test_available_is_not_clamped():
    stock = BranchStock.model_validate(branch(3, 2, 5))
    assert stock.available == -3


def test_deleted_placeholder_carries_only_id():
    p = Product.deleted_placeholder(99)
    assert p.id == 99
    assert p.deleted is True
    assert p.variations == ()
    assert p.localized_texts == ()


def test_missing_id_is_rejected():
    raw = mk_product()
    del raw["id"]
    with pytest.raises(ValidationError):
        Product.model_validate(raw)


def test_channel_and_tax_fields():
    p = Product.model_validate(
        mk_product(onWeb=True, onApp=True, taxRate=10.0, taxName="VAT", shippingInfo={"weight": 300})
    )
    assert p.on_web and p.on_app and not p.in_store
    assert p.tax_rate == 10.0
    assert p.shipping_info.weight == 300
    assert p.shipping_info.length == 0
