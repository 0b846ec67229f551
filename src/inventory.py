"""Inventory domain objects and stock access."""
from __future__ import annotations

import threading
from dataclasses import replace
from typing import Dict, List, Optional

from catalog import Item, normalize_code


class Inventory:
    """In-memory stock store used by the vending service."""

    def __init__(self) -> None:
        self._items: Dict[str, Item] = {}
        self._by_category: Dict[str, List[str]] = {}
        self._lock = threading.Lock()

    def add_item(self, item: Item) -> None:
        """Store ``item`` under its code, replacing any previous entry.

        The code is appended to the category listing every time, so adding
        the same code twice lists it twice.
        """
        code = normalize_code(item.code)
        self._items[code] = replace(item, code=code)
        self._by_category.setdefault(item.category, []).append(code)

    def get(self, code: str) -> Optional[Item]:
        item = self._items.get(normalize_code(code))
        return replace(item) if item else None

    def exists(self, code: str) -> bool:
        return normalize_code(code) in self._items

    def in_stock(self, code: str) -> bool:
        item = self._items.get(normalize_code(code))
        return bool(item and item.stock > 0)

    def take_one(self, code: str) -> bool:
        with self._lock:
            item = self._items.get(normalize_code(code))
            if not item or item.stock <= 0:
                return False
            item.stock -= 1
            return True

    def categories(self) -> Dict[str, List[str]]:
        return {category: sorted(codes) for category, codes in sorted(self._by_category.items())}
