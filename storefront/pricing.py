"""Subtotal, provincial sales tax and the minimum-order rule.

All amounts are unrounded ``Decimal`` values; rounding happens only when a
receipt is formatted for display.
"""

from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType
from typing import Iterable, Mapping, Union

from .catalog import Catalog
from .models import OrderLine

ZERO = Decimal("0")

Rate = Union[str, int, float, Decimal]


class TaxTable:
    """Immutable province code -> tax rate mapping."""

    def __init__(self, rates: Mapping[str, Rate]):
        table = {}
        for code, rate in rates.items():
            rate = Decimal(str(rate))
            if not ZERO <= rate < 1:
                raise ValueError(f"Tax rate for {code!r} must be in [0, 1), got {rate}")
            table[code.strip().upper()] = rate
        self._rates = MappingProxyType(table)

    @property
    def rates(self) -> Mapping[str, Decimal]:
        return self._rates

    def rate_for(self, province_code) -> Decimal:
        """Rate for `province_code` (any case); 0 for unknown or malformed codes."""
        if not isinstance(province_code, str):
            return ZERO
        return self._rates.get(province_code.strip().upper(), ZERO)


def tax_rate_for(province_code, table: TaxTable) -> Decimal:
    return table.rate_for(province_code)


def line_total(line: OrderLine, catalog: Catalog) -> Decimal:
    return catalog.price_of(line.product_name) * line.quantity


def compute_total(lines: Iterable[OrderLine], catalog: Catalog) -> Decimal:
    """Subtotal of the order. Lines with a quantity of 0 or less don't count."""
    return sum((line_total(l, catalog) for l in lines if l.quantity > 0), ZERO)


def calculate_tax(subtotal: Decimal, province_code, table: TaxTable) -> Decimal:
    return subtotal * tax_rate_for(province_code, table)


def validate_order_value(total_with_tax: Decimal, minimum: Decimal) -> bool:
    """True if the order may be accepted. No rounding: 9.999 is below 10."""
    return total_with_tax >= minimum
