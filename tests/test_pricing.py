from decimal import Decimal

import pytest

from storefront.models import OrderLine
from storefront.pricing import (
    TaxTable,
    calculate_tax,
    compute_total,
    tax_rate_for,
    validate_order_value,
)


def test_tax_rate_is_case_insensitive(tax_table):
    assert tax_table.rate_for("on") == tax_table.rate_for("ON") == Decimal("0.13")
    assert tax_table.rate_for(" qc ") == Decimal("0.14975")


@pytest.mark.parametrize("code", ["AB", "", "Ontario", "1", None])
def test_unknown_province_is_not_taxed(tax_table, code):
    assert tax_table.rate_for(code) == 0


def test_tax_rate_for_uses_given_table(tax_table):
    assert tax_rate_for("bc", tax_table) == Decimal("0.12")
    assert tax_rate_for("bc", TaxTable({"BC": "0.07"})) == Decimal("0.07")


def test_tax_table_is_read_only(tax_table):
    with pytest.raises(TypeError):
        tax_table.rates["AB"] = Decimal("0.05")


@pytest.mark.parametrize("rate", ["1", "-0.01", "1.5"])
def test_tax_table_rejects_out_of_range_rates(rate):
    with pytest.raises(ValueError):
        TaxTable({"XX": rate})


def test_compute_total(catalog):
    lines = [OrderLine("Widget", 3), OrderLine("Gadget", 2)]
    assert compute_total(lines, catalog) == Decimal("40.00")


def test_compute_total_ignores_unknown_products(catalog):
    assert compute_total([OrderLine("Mystery", 4), OrderLine("Widget", 1)], catalog) == Decimal("5")


def test_compute_total_skips_non_positive_quantities(catalog):
    lines = [OrderLine("Widget", 3), OrderLine("Gadget", 0), OrderLine("Gadget", -2)]
    assert compute_total(lines, catalog) == Decimal("15")


def test_compute_total_empty(catalog):
    assert compute_total([], catalog) == 0


def test_total_with_tax_ontario(catalog, tax_table):
    subtotal = compute_total([OrderLine("Widget", 3)], catalog)
    tax = calculate_tax(subtotal, "ON", tax_table)
    assert subtotal == Decimal("15")
    assert tax == Decimal("1.95")
    assert subtotal + tax == Decimal("16.95")


def test_unconfigured_province_total_equals_subtotal(catalog, tax_table):
    subtotal = compute_total([OrderLine("Gadget", 1)], catalog)
    assert subtotal + calculate_tax(subtotal, "AB", tax_table) == subtotal


@pytest.mark.parametrize("total,accepted", [
    (Decimal("10.00"), True),
    (Decimal("16.95"), True),
    (Decimal("9.999"), False),
    (Decimal("5.60"), False),
    (Decimal("0"), False),
])
def test_validate_order_value(total, accepted):
    assert validate_order_value(total, Decimal("10.00")) is accepted


def test_validate_order_value_custom_minimum():
    assert validate_order_value(Decimal("5"), minimum=Decimal("5"))
