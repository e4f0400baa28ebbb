"""storefront.routes – order form and order endpoint

Amounts
-------
Prices, subtotal, tax and total are unrounded ``Decimal`` values until the
receipt is rendered; only the receipt shows them rounded to the cent.
"""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, render_template, request

from .catalog import catalog_as_dicts
from .logging_config import get_logger
from .pricing import calculate_tax, compute_total, validate_order_value
from .receipt import build_receipt, format_money
from .validation import error, parse_order_form

log = get_logger(__name__)

MINIMUM_MESSAGE = "Minimum purchase should be $10 or more."
ORDER_FORM_ROWS = 3

# ---------------------------------------------------------------------------
# Blueprint
# ---------------------------------------------------------------------------
shop_bp = Blueprint("shop", __name__)


def _ext(name):
    return current_app.extensions["storefront"][name]


# ---------------------------------------------------------------------------
# GET / – order form
# ---------------------------------------------------------------------------
@shop_bp.route("/", methods=["GET"])
def order_form():
    return render_template(
        "order_form.html",
        products=_ext("catalog"),
        provinces=sorted(_ext("tax_table").rates),
        rows=ORDER_FORM_ROWS,
        money=format_money,
    )


# ---------------------------------------------------------------------------
# GET /products – catalog listing
# ---------------------------------------------------------------------------
@shop_bp.route("/products", methods=["GET"])
def list_products():
    """Returns every product of the catalog."""
    return jsonify({"products": catalog_as_dicts(_ext("catalog"))})


# ---------------------------------------------------------------------------
# POST /order – price the order and return the receipt
# ---------------------------------------------------------------------------
@shop_bp.route("/order", methods=["POST"])
def create_order():
    order, errors = parse_order_form(request.form)
    if errors:
        log.info("Order rejected, invalid fields: %s", ", ".join(e["field"] for e in errors))
        error(errors)

    catalog, tax_table = _ext("catalog"), _ext("tax_table")

    subtotal = compute_total(order.lines, catalog)
    total_with_tax = subtotal + calculate_tax(subtotal, order.province, tax_table)

    if not validate_order_value(total_with_tax, current_app.config["MINIMUM_ORDER_TOTAL"]):
        log.info("Order rejected, total %s below minimum (%s)", total_with_tax, order.province)
        return MINIMUM_MESSAGE, 400, {"Content-Type": "text/plain; charset=utf-8"}

    receipt = build_receipt(order, catalog, tax_table)
    log.info("Order accepted: %d line(s), %s, total %s",
             len(receipt.lines), order.province, format_money(receipt.total_with_tax))
    return _ext("renderer").render(receipt)
