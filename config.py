import os
from decimal import Decimal

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


class Config:
    DEBUG = os.environ.get("FLASK_DEBUG", "0") == "1"
    PORT = int(os.environ.get("PORT", 3000))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Catalog source: a local JSON file, or a remote URL when set
    CATALOG_PATH = os.environ.get(
        "CATALOG_PATH", os.path.join(BASE_DIR, "storefront", "data", "products.json")
    )
    CATALOG_URL = os.environ.get("CATALOG_URL")

    # Combined sales tax per province (QC = GST 5% + QST 9.975%)
    TAX_RATES = {"ON": "0.13", "QC": "0.14975", "BC": "0.12"}
    MINIMUM_ORDER_TOTAL = Decimal("10.00")

    RECEIPT_RENDERER = os.environ.get("RECEIPT_RENDERER", "template")


config = Config()
