"""Simple in-memory audit log for vending session events."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional


@dataclass
class AuditEntry:
    event: str
    code: Optional[str]
    amount: int
    balance: int
    reason: Optional[str]
    at: datetime


class AuditLogger:
    def __init__(self) -> None:
        self._entries: List[AuditEntry] = []

    def log(
        self,
        event: str,
        balance: int,
        code: Optional[str] = None,
        amount: int = 0,
        reason: Optional[str] = None,
    ) -> None:
        """Record ``event``; ``amount`` and ``balance`` are in pence."""
        self._entries.append(
            AuditEntry(
                event=event,
                code=code,
                amount=amount,
                balance=balance,
                reason=reason,
                at=datetime.now(timezone.utc),
            )
        )

    def entries(self) -> List[AuditEntry]:
        return list(self._entries)

    def events(self) -> List[str]:
        return [entry.event for entry in self._entries]
