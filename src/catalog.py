"""Catalog records, demo stock and YAML catalog loading used to seed a machine."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

import yaml

from money import MoneyParseError, parse_pennies

if TYPE_CHECKING:  # pragma: no cover
    from inventory import Inventory
    from suggestions import SuggestionEngine

logger = logging.getLogger(__name__)


def normalize_code(raw: str) -> str:
    return raw.strip().upper()


@dataclass
class Item:
    code: str
    name: str
    category: str
    price: int
    stock: int


class CatalogError(ValueError):
    """Raised when a catalog file is missing or malformed."""


@dataclass
class CatalogConfig:
    items: List[Item] = field(default_factory=list)
    suggestions: Dict[str, str] = field(default_factory=dict)


DEMO_ITEMS: List[Item] = [
    Item(code="A1", name="Espresso", category="Hot Drinks", price=150, stock=5),
    Item(code="A2", name="Tea", category="Hot Drinks", price=120, stock=8),
    Item(code="A3", name="Latte", category="Hot Drinks", price=190, stock=4),
    Item(code="B1", name="Cola", category="Cold Drinks", price=180, stock=6),
    Item(code="B2", name="Orange Juice", category="Cold Drinks", price=200, stock=4),
    Item(code="B3", name="Water", category="Cold Drinks", price=100, stock=9),
    Item(code="C1", name="Crisps", category="Snacks", price=130, stock=10),
    Item(code="C2", name="Biscuits", category="Snacks", price=140, stock=7),
    Item(code="C3", name="Nuts", category="Snacks", price=150, stock=5),
    Item(code="D1", name="Chocolate Bar", category="Chocolate", price=160, stock=5),
    Item(code="D2", name="Dark Choc", category="Chocolate", price=170, stock=3),
    Item(code="D3", name="Milk Choc", category="Chocolate", price=150, stock=6),
]

DEMO_SUGGESTIONS: Dict[str, str] = {
    "A1": "C2",
    "A2": "C2",
    "A3": "C3",
    "B1": "C1",
    "B2": "D1",
    "B3": "C1",
}


def demo_catalog() -> CatalogConfig:
    # Fresh Item objects so seeding never shares state between machines.
    items = [
        Item(code=i.code, name=i.name, category=i.category, price=i.price, stock=i.stock)
        for i in DEMO_ITEMS
    ]
    return CatalogConfig(items=items, suggestions=dict(DEMO_SUGGESTIONS))


def _parse_price(value: Any, code: str) -> int:
    if isinstance(value, bool):
        raise CatalogError(f"Invalid price for {code}: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise CatalogError(f"Invalid price for {code}: {value!r}")
        return value
    if isinstance(value, str):
        try:
            return parse_pennies(value)
        except MoneyParseError as exc:
            raise CatalogError(f"Invalid price for {code}: {exc}") from exc
    raise CatalogError(f"Invalid price for {code}: {value!r}")


def _parse_item(entry: Any) -> Item:
    if not isinstance(entry, dict):
        raise CatalogError(f"Catalog item must be a mapping, got {entry!r}")

    missing = [key for key in ("code", "name", "category", "price", "stock") if key not in entry]
    if missing:
        raise CatalogError(f"Catalog item {entry!r} is missing: {', '.join(missing)}")

    code = normalize_code(str(entry["code"]))
    if not code:
        raise CatalogError("Catalog item has an empty code")

    stock = entry["stock"]
    if isinstance(stock, bool) or not isinstance(stock, int) or stock < 0:
        raise CatalogError(f"Invalid stock for {code}: {stock!r}")

    return Item(
        code=code,
        name=str(entry["name"]),
        category=str(entry["category"]),
        price=_parse_price(entry["price"], code),
        stock=stock,
    )


def load_catalog(path: Optional[Union[str, Path]] = None) -> CatalogConfig:
    """Load a catalog from YAML, or the built-in demo catalog when no path is given.

    The file holds an ``items`` list of ``code/name/category/price/stock``
    mappings and an optional ``suggestions`` mapping of code to code.
    Prices may be pence integers or money text such as ``"£1.50"``.
    """
    if path is None:
        return demo_catalog()

    catalog_path = Path(path)
    if not catalog_path.is_file():
        raise CatalogError(f"Catalog file not found: {catalog_path}")

    try:
        with open(catalog_path, "r", encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogError(f"Could not read {catalog_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise CatalogError(f"Could not parse {catalog_path}: {exc}") from exc

    if not isinstance(document, dict) or "items" not in document:
        raise CatalogError(f"{catalog_path} must define an 'items' list")
    if not isinstance(document["items"], list):
        raise CatalogError(f"'items' in {catalog_path} must be a list")

    items = [_parse_item(entry) for entry in document["items"]]

    raw_suggestions = document.get("suggestions") or {}
    if not isinstance(raw_suggestions, dict):
        raise CatalogError(f"'suggestions' in {catalog_path} must be a mapping")
    suggestions = {
        normalize_code(str(src)): normalize_code(str(dst)) for src, dst in raw_suggestions.items()
    }

    logger.info("Loaded %d items and %d suggestions from %s", len(items), len(suggestions), catalog_path)
    return CatalogConfig(items=items, suggestions=suggestions)


def seed(inventory: "Inventory", suggestions: "SuggestionEngine", config: CatalogConfig) -> None:
    for item in config.items:
        inventory.add_item(item)
    for src, dst in config.suggestions.items():
        suggestions.set(src, dst)
