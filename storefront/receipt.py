"""
storefront/receipt.py
---------------------

Builds the receipt for an accepted order and renders it to HTML.

Two interchangeable renderers produce the same page:

* ``TemplateReceiptRenderer`` goes through ``templates/receipt.html``.
* ``InlineReceiptRenderer`` assembles the markup in Python.

Both receive a fully computed :class:`~storefront.models.Receipt`; neither does
any arithmetic besides formatting.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Type

from flask import render_template, url_for
from markupsafe import escape

from .catalog import Catalog
from .models import OrderRequest, Receipt, ReceiptLine
from .pricing import ZERO, TaxTable

CENT = Decimal("0.01")


def format_money(amount: Decimal) -> str:
    """``Decimal("15")`` -> ``"$15.00"``."""
    return f"${amount.quantize(CENT, rounding=ROUND_HALF_UP)}"


def format_percent(rate: Decimal) -> str:
    """``Decimal("0.14975")`` -> ``"15%"``."""
    return f"{(rate * 100).quantize(Decimal('1'), rounding=ROUND_HALF_UP)}%"


def build_receipt(order: OrderRequest, catalog: Catalog, tax_table: TaxTable) -> Receipt:
    """Itemizes the order lines with a positive quantity and totals them."""
    lines = []
    subtotal = ZERO
    for line in order.lines:
        if line.quantity <= 0:
            continue
        total = catalog.price_of(line.product_name) * line.quantity
        lines.append(ReceiptLine(line.product_name, line.quantity, total))
        subtotal += total

    tax_rate = tax_table.rate_for(order.province)
    return Receipt(
        customer=order,
        lines=tuple(lines),
        subtotal=subtotal,
        province=order.province,
        tax_rate=tax_rate,
        tax_amount=subtotal * tax_rate,
    )


# ---------------------------------------------------------------------------
# Renderers
# ---------------------------------------------------------------------------
class ReceiptRenderer:
    name = ""

    def render(self, receipt: Receipt) -> str:
        raise NotImplementedError


class TemplateReceiptRenderer(ReceiptRenderer):
    name = "template"

    def __init__(self, template: str = "receipt.html"):
        self.template = template

    def render(self, receipt: Receipt) -> str:
        return render_template(
            self.template,
            receipt=receipt,
            money=format_money,
            percent=format_percent,
        )


class InlineReceiptRenderer(ReceiptRenderer):
    name = "inline"

    def _rows(self, receipt: Receipt) -> str:
        return "".join(
            f"""
                <tr>
                    <td>{escape(line.product_name)}</td>
                    <td>{line.quantity}</td>
                    <td>{format_money(line.line_total)}</td>
                </tr>"""
            for line in receipt.lines
        )

    def render(self, receipt: Receipt) -> str:
        c = receipt.customer
        return f"""<!doctype html>
<html>
<head>
    <title>Order Receipt</title>
    <link rel="stylesheet" href="{url_for('static', filename='css/style.css')}">
</head>
<body>
    <div class="receipt">
        <h1>Order Receipt</h1>
        <p class="customer">{escape(c.name)}<br>{escape(c.address)}, {escape(c.city)}, {escape(c.province)}<br>{escape(c.phone)}</p>
        <table class="receipt-table">
            <tr>
                <th>Item</th>
                <th>Quantity</th>
                <th>Price</th>
            </tr>{self._rows(receipt)}
        </table>
        <p>Subtotal: {format_money(receipt.subtotal)}</p>
        <p>Tax ({escape(receipt.province)}): {format_percent(receipt.tax_rate)}: {format_money(receipt.tax_amount)}</p>
        <p><strong>Total Amount with Tax: {format_money(receipt.total_with_tax)}</strong></p>
        <a href="{url_for('shop.order_form')}">Place another order</a>
    </div>
</body>
</html>
"""


RENDERERS: Dict[str, Type[ReceiptRenderer]] = {
    TemplateReceiptRenderer.name: TemplateReceiptRenderer,
    InlineReceiptRenderer.name: InlineReceiptRenderer,
}


def get_renderer(name: str) -> ReceiptRenderer:
    try:
        return RENDERERS[name]()
    except KeyError:
        raise ValueError(f"Unknown receipt renderer {name!r}, expected one of {sorted(RENDERERS)}") from None
