"""Structural validation of the order form.

Runs before any pricing: every problem found is reported as a
``{"field": ..., "message": ...}`` entry and the request stops there.
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Sequence, Tuple

from flask import abort, jsonify

from .models import OrderLine, OrderRequest

PHONE_RE = re.compile(r"^[0-9]{10}$")
PROVINCE_RE = re.compile(r"^[A-Za-z]{2}$")
INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")

REQUIRED_FIELDS = (
    ("name", "Name is required"),
    ("address", "Address is required"),
    ("city", "City is required"),
    ("province", "Province is required"),
)

FieldError = Dict[str, str]


def field_error(field: str, message: str) -> FieldError:
    return {"field": field, "message": message}


def _getlist(form, key: str) -> List[str]:
    # HTML forms sometimes post arrays as `key[]`
    return form.getlist(key) or form.getlist(f"{key}[]")


def parse_quantity(raw) -> Optional[int]:
    """Whole number from a form value, None if it isn't one."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    if not isinstance(raw, str) or not INTEGER_RE.match(raw.strip()):
        return None
    try:
        return int(raw.strip())
    except ValueError:
        # longer than the interpreter will convert
        return None


def pair_lines(products: Sequence[str], quantities: Sequence) -> Tuple[List[OrderLine], List[FieldError]]:
    """Zips the parallel `products` / `quantities` arrays into order lines."""
    if len(products) != len(quantities):
        return [], [field_error("quantities", "Each selected product needs a quantity")]

    lines, errors = [], []
    for product, raw in zip(products, quantities):
        qty = parse_quantity(raw)
        if qty is None:
            errors.append(field_error("quantities", "Quantity must be a whole number"))
            continue
        lines.append(OrderLine(product_name=product, quantity=qty))
    if errors:
        # one message is enough for the whole field
        return [], errors[:1]
    return lines, []


def parse_order_form(form) -> Tuple[Optional[OrderRequest], List[FieldError]]:
    """Validates the posted form and builds the order, or lists what's wrong."""
    errors: List[FieldError] = []
    values = {}

    for key, message in REQUIRED_FIELDS:
        value = (form.get(key) or "").strip()
        if not value:
            errors.append(field_error(key, message))
        values[key] = value

    if values["province"] and not PROVINCE_RE.match(values["province"]):
        errors.append(field_error("province", "Province must be a 2-letter code"))

    phone = (form.get("phone") or "").strip()
    if not PHONE_RE.match(phone):
        errors.append(field_error("phone", "Phone number must be 10 digits"))

    products = _getlist(form, "products")
    quantities = _getlist(form, "quantities")
    lines: List[OrderLine] = []
    if not products:
        errors.append(field_error("products", "At least one product must be selected"))
    else:
        lines, line_errors = pair_lines(products, quantities)
        errors.extend(line_errors)

    if errors:
        return None, errors

    order = OrderRequest(
        name=values["name"],
        address=values["address"],
        city=values["city"],
        province=values["province"].upper(),
        phone=phone,
        lines=tuple(lines),
    )
    return order, []


# --- Error responses ---
def error(errors: List[FieldError], http=400):
    """Aborts the request with the JSON list of field errors."""
    resp = jsonify({"errors": errors})
    resp.status_code = http
    abort(resp)
