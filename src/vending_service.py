"""Session logic for the vending machine: funds, purchases and checkout."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from audit import AuditLogger
from catalog import Item, normalize_code
from change import ChangeMaker
from inventory import Inventory
from money import MoneyParseError, format_pennies, parse_pennies
from suggestions import SuggestionEngine

logger = logging.getLogger(__name__)


@dataclass
class FundsResult:
    status: str
    added: int = 0
    balance: int = 0
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "added"


@dataclass
class PurchaseResult:
    status: str
    code: str
    balance: int
    item: Optional[Item] = None
    suggestion: Optional[Item] = None
    shortfall: int = 0
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "dispensed"


@dataclass
class ChangeReceipt:
    amount: int
    breakdown: List[Tuple[int, int]] = field(default_factory=list)


class VendingService:
    """Owns the session balance and coordinates inventory, suggestions and change."""

    def __init__(
        self,
        inventory: Inventory,
        suggestions: SuggestionEngine,
        change_maker: Optional[ChangeMaker] = None,
        audit: Optional[AuditLogger] = None,
    ) -> None:
        self._inventory = inventory
        self._suggestions = suggestions
        self._change_maker = change_maker or ChangeMaker()
        self._audit = audit or AuditLogger()
        self._balance = 0

    @property
    def balance(self) -> int:
        return self._balance

    @property
    def inventory(self) -> Inventory:
        return self._inventory

    @property
    def audit(self) -> AuditLogger:
        return self._audit

    def add_funds(self, raw_text: str) -> FundsResult:
        try:
            amount = parse_pennies(raw_text)
        except MoneyParseError as exc:
            logger.info("Rejected amount %r: %s", raw_text, exc)
            self._audit.log("funds_rejected", self._balance, reason=str(exc))
            return FundsResult(status="invalid_amount", balance=self._balance, reason=str(exc))

        if amount <= 0:
            logger.info("Rejected non-positive amount %r", raw_text)
            self._audit.log("funds_rejected", self._balance, amount=amount, reason="non_positive_amount")
            return FundsResult(status="invalid_amount", balance=self._balance, reason="non_positive_amount")

        self._balance += amount
        self._audit.log("funds_added", self._balance, amount=amount)
        return FundsResult(status="added", added=amount, balance=self._balance)

    def purchase(self, raw_code: str) -> PurchaseResult:
        """Sell one unit of the item with ``raw_code`` if funds and stock allow.

        Failures leave balance and stock untouched. If the stock decrement
        fails after the checks passed, the balance charge is reverted and the
        result carries ``status="stock_error"``.
        """
        code = normalize_code(raw_code)
        item = self._inventory.get(code)
        if item is None:
            return self._reject(code, "unknown_code")

        if item.stock <= 0:
            return self._reject(code, "out_of_stock", item=item)

        if self._balance < item.price:
            shortfall = item.price - self._balance
            return self._reject(code, "insufficient_funds", item=item, shortfall=shortfall)

        self._balance -= item.price
        if not self._inventory.take_one(code):
            self._balance += item.price
            logger.error("Stock for %s vanished after availability check; charge of %s reverted",
                         code, format_pennies(item.price))
            self._audit.log("purchase_stock_error", self._balance, code=code, amount=item.price,
                            reason="stock_changed_during_purchase")
            return PurchaseResult(
                status="stock_error",
                code=code,
                balance=self._balance,
                item=item,
                reason="stock_changed_during_purchase",
            )

        sold = self._inventory.get(code)
        self._audit.log("purchase_completed", self._balance, code=code, amount=item.price)
        return PurchaseResult(
            status="dispensed",
            code=code,
            balance=self._balance,
            item=sold,
            suggestion=self._suggest_for(code),
        )

    def finalize(self) -> ChangeReceipt:
        """Return the whole balance as change. The balance itself is left as is."""
        breakdown = self._change_maker.breakdown(self._balance)
        self._audit.log("session_finalized", self._balance, amount=self._balance)
        return ChangeReceipt(amount=self._balance, breakdown=breakdown)

    def _suggest_for(self, code: str) -> Optional[Item]:
        suggested_code = self._suggestions.lookup(code)
        if suggested_code is None or not self._inventory.in_stock(suggested_code):
            return None
        return self._inventory.get(suggested_code)

    def _reject(
        self,
        code: str,
        status: str,
        item: Optional[Item] = None,
        shortfall: int = 0,
    ) -> PurchaseResult:
        logger.info("Purchase of %r rejected: %s", code, status)
        self._audit.log("purchase_rejected", self._balance, code=code, reason=status)
        return PurchaseResult(
            status=status,
            code=code,
            balance=self._balance,
            item=item,
            shortfall=shortfall,
            reason=status,
        )
