import json
from decimal import Decimal

import pytest
from werkzeug.datastructures import MultiDict

from storefront import create_app
from storefront.catalog import Catalog
from storefront.models import Product
from storefront.pricing import TaxTable

PRODUCTS = [
    {"name": "Widget", "price": 5.00},
    {"name": "Gadget", "price": 12.50},
    {"name": "Café Crème", "price": 3.75},
]


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "products.json"
    path.write_text(json.dumps({"products": PRODUCTS}), encoding="utf-8")
    return path


@pytest.fixture
def app(catalog_file):
    app = create_app({
        "TESTING": True,
        "CATALOG_PATH": str(catalog_file),
        "CATALOG_URL": None,
        "RECEIPT_RENDERER": "template",
    })
    return app


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def catalog():
    return Catalog(Product(p["name"], Decimal(str(p["price"]))) for p in PRODUCTS)


@pytest.fixture
def tax_table():
    return TaxTable({"ON": "0.13", "QC": "0.14975", "BC": "0.12"})


@pytest.fixture
def order_form():
    """Returns a builder for a valid posted form, fields overridable."""
    def build(products=("Widget",), quantities=("3",), **fields):
        data = {
            "name": "Jane Doe",
            "address": "123 Main St",
            "city": "Toronto",
            "province": "ON",
            "phone": "4165550123",
        }
        data.update(fields)
        form = MultiDict(data)
        for p in products:
            form.add("products", p)
        for q in quantities:
            form.add("quantities", q)
        return form
    return build
