from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Tuple


@dataclass(frozen=True)
class Product:
    name: str
    price: Decimal


@dataclass(frozen=True)
class OrderLine:
    product_name: str
    quantity: int


@dataclass(frozen=True)
class OrderRequest:
    name: str
    address: str
    city: str
    province: str  # uppercased 2-letter code
    phone: str
    lines: Tuple[OrderLine, ...] = ()


@dataclass(frozen=True)
class ReceiptLine:
    product_name: str
    quantity: int
    line_total: Decimal


@dataclass(frozen=True)
class Receipt:
    customer: OrderRequest
    lines: Tuple[ReceiptLine, ...]
    subtotal: Decimal
    province: str
    tax_rate: Decimal
    tax_amount: Decimal
    total_with_tax: Decimal = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "total_with_tax", self.subtotal + self.tax_amount)
