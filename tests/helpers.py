# tests/helpers.py
# Builders for item-service JSON, shaped like GET /itemservice/api/beehive-items/{id}.


def lang(language, name=None, description=None, **extra):
    entry = {"language": language, "name": name, "description": description}
    entry.update(extra)
    return entry


def branch(branch_id, total, sold=0):
    return {"branchId": branch_id, "totalItem": total, "soldItem": sold}


def attribute(name, value, display=True):
    return {"attributeName": name, "attributeValue": value, "isDisplay": display}


def mk_variation(
    model_id=101,
    org_price=200_000,
    new_price=180_000,
    cost_price=150_000,
    barcode=None,
    status="ACTIVE",
    branches=None,
    languages=None,
    attributes=None,
    **extra,
):
    model = {
        "id": model_id,
        "orgPrice": org_price,
        "newPrice": new_price,
        "costPrice": cost_price,
        "barcode": barcode or f"{model_id}-BC",
        "status": status,
        "branches": [branch(1, 10, 2)] if branches is None else branches,
        "languages": (
            [lang("vi", name="Đỏ", label="Màu", versionName="Áo đỏ", description="Mô tả đỏ")]
            if languages is None
            else languages
        ),
        "modelAttributes": attributes or [],
    }
    model.update(extra)
    return model


def mk_product(
    product_id=1234,
    has_model=False,
    models=None,
    branches=None,
    languages=None,
    attributes=None,
    **extra,
):
    product = {
        "id": product_id,
        "name": "Áo thun",
        "currency": "VND",
        "orgPrice": 200_000,
        "newPrice": 180_000,
        "costPrice": 150_000,
        "discount": 10,
        "deleted": False,
        "hasModel": has_model,
        "models": models or [],
        "branches": [branch(1, 10, 3), branch(2, 5, 0)] if branches is None else branches,
        "languages": (
            [
                lang("vi", name="Áo thun", description="Mô tả", seoTitle="SEO vi"),
                lang("en", name="T-shirt", description="Description", seoTitle="SEO en"),
            ]
            if languages is None
            else languages
        ),
        "itemAttributes": attributes or [],
    }
    product.update(extra)
    return product


def mk_variation_product(models=None, **extra):
    if models is None:
        models = [
            mk_variation(
                model_id=101,
                org_price=200_000,
                new_price=180_000,
                cost_price=150_000,
                branches=[branch(1, 10, 2), branch(2, 4, 4)],
                languages=[
                    lang("vi", name="Đỏ", label="Màu", versionName="Áo đỏ", description="Mô tả đỏ"),
                    lang("en", name="Red", label="Color", versionName="Red shirt", description="Red desc"),
                ],
                attributes=[attribute("Material", "Cotton"), attribute("Origin", "VN", display=False)],
            ),
            mk_variation(
                model_id=102,
                org_price=210_000,
                new_price=190_000,
                cost_price=160_000,
                status="INACTIVE",
                branches=[branch(1, 3, 1), branch(2, 0, 0)],
                languages=[lang("vi", name="Xanh", label="Màu")],
                attributes=[attribute("Material", "Linen")],
            ),
        ]
    return mk_product(has_model=True, models=models, branches=[], **extra)
