from decimal import Decimal

import click
from flask import Flask, jsonify
from flask.json.provider import DefaultJSONProvider

from .catalog import load_catalog
from .logging_config import get_logger, setup_logging
from .pricing import TaxTable
from .receipt import format_money, get_renderer

log = get_logger(__name__)


# Prices go out as JSON numbers, names keep their accents
class ShopJSONProvider(DefaultJSONProvider):
    @staticmethod
    def default(o):
        if isinstance(o, Decimal):
            return float(o)
        return DefaultJSONProvider.default(o)

    def dumps(self, obj, **kwargs):
        kwargs.setdefault("ensure_ascii", False)
        return super().dumps(obj, **kwargs)


def create_app(test_config=None):
    app = Flask(__name__)

    app.config.from_object("config.config")
    if test_config:
        app.config.update(test_config)
    app.json = ShopJSONProvider(app)

    setup_logging(app.config["LOG_LEVEL"])

    # --- Read-only state shared by every request ---
    app.extensions["storefront"] = {
        "catalog": load_catalog(app.config["CATALOG_PATH"], app.config.get("CATALOG_URL")),
        "tax_table": TaxTable(app.config["TAX_RATES"]),
        "renderer": get_renderer(app.config["RECEIPT_RENDERER"]),
    }

    # --- Blueprints ---
    from .routes import shop_bp
    app.register_blueprint(shop_bp)

    # ---------- Global error handlers ----------
    @app.errorhandler(404)
    def not_found(err):
        return jsonify({
            "errors": [{"field": "url", "message": "The requested resource was not found"}]
        }), 404

    @app.errorhandler(500)
    def internal_error(err):
        log.error("Unhandled error while processing request: %s", getattr(err, "original_exception", err))
        return jsonify({
            "errors": [{"field": "server", "message": "An internal error occurred"}]
        }), 500
    # --------------------------------------------

    # --- show-catalog command ---
    @app.cli.command("show-catalog")
    def show_catalog():
        """List the products and their prices."""
        for product in app.extensions["storefront"]["catalog"]:
            click.echo(f"{product.name}: {format_money(product.price)}")

    return app


app = create_app()
