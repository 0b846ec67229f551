"""Cross-sell suggestions offered after a purchase."""
from __future__ import annotations

from typing import Dict, Optional

from catalog import normalize_code


class SuggestionEngine:
    """One suggested code per purchased code. Stock is not checked here."""

    def __init__(self) -> None:
        self._suggestions: Dict[str, str] = {}

    def set(self, from_code: str, suggest_code: str) -> None:
        self._suggestions[normalize_code(from_code)] = normalize_code(suggest_code)

    def lookup(self, from_code: str) -> Optional[str]:
        return self._suggestions.get(normalize_code(from_code))
