"""
storefront/catalog.py
---------------------

Read-only product catalog.

The catalog is loaded once when the application starts, either from a local
JSON file or from a remote URL, and is never modified afterwards.
"""

from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, Iterator, List, Optional

import requests

from .logging_config import get_logger
from .models import Product

log = get_logger(__name__)

ZERO = Decimal("0")


class CatalogError(Exception):
    """Raised when the catalog document is malformed."""


class Catalog:
    """Products in load order, looked up by exact name."""

    def __init__(self, products: Iterable[Product]):
        self._products = tuple(products)
        self._prices: Dict[str, Decimal] = {}
        for p in self._products:
            # first entry wins on duplicate names
            self._prices.setdefault(p.name, p.price)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def price_of(self, product_name: str) -> Decimal:
        """Unit price of `product_name`, 0 when the catalog doesn't know it."""
        return self._prices.get(product_name, ZERO)


def _to_product(raw: Dict[str, Any]) -> Product:
    try:
        name = raw["name"]
        price = Decimal(str(raw["price"]))
    except (KeyError, TypeError, InvalidOperation) as exc:
        raise CatalogError(f"Invalid catalog entry: {raw!r}") from exc
    if not isinstance(name, str) or not name:
        raise CatalogError(f"Invalid product name: {raw!r}")
    if not price.is_finite():
        raise CatalogError(f"Product {name!r} has an invalid price")
    if price < 0:
        raise CatalogError(f"Product {name!r} has a negative price")
    return Product(name=name, price=price)


def parse_catalog(document: Any) -> Catalog:
    """Builds a catalog from `[{name, price}, ...]` or `{"products": [...]}`."""
    if isinstance(document, dict):
        document = document.get("products")
    if not isinstance(document, list):
        raise CatalogError("Catalog must be a list of products")
    return Catalog(_to_product(p) for p in document)


def fetch_remote_products(url: str) -> Any:
    """Downloads the catalog document from `url`."""
    r = requests.get(url, timeout=10)
    r.raise_for_status()
    return r.json()


def load_catalog(path: Optional[str] = None, url: Optional[str] = None) -> Catalog:
    """Loads the catalog from `url` when given, otherwise from the file at `path`."""
    if url:
        catalog = parse_catalog(fetch_remote_products(url))
        source = url
    elif path:
        with open(path, encoding="utf-8") as fh:
            catalog = parse_catalog(json.load(fh))
        source = path
    else:
        raise CatalogError("No catalog source configured")

    log.info("Catalog loaded: %d products from %s", len(catalog), source)
    return catalog


def catalog_as_dicts(catalog: Catalog) -> List[Dict[str, Any]]:
    return [{"name": p.name, "price": p.price} for p in catalog]
