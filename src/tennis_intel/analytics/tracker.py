"""In-memory payment tracker for priced capability invocations."""

from __future__ import annotations

import csv
import io
import logging
import threading
import uuid
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Optional, Protocol

logger = logging.getLogger(__name__)

CSV_COLUMNS = ["id", "timestamp", "direction", "entrypoint", "amount"]


class Direction(str, Enum):
    """Which way money moved."""

    incoming = "incoming"
    outgoing = "outgoing"


@dataclass(frozen=True)
class Transaction:
    """A single recorded payment, amount in the smallest currency unit."""

    entrypoint: str
    amount: int
    direction: Direction = Direction.incoming
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=timezone.utc))
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def to_dict(self) -> dict[str, Any]:
        """JSON-safe representation (amount stringified)."""
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "direction": self.direction.value,
            "entrypoint": self.entrypoint,
            "amount": str(self.amount),
        }


@dataclass
class PaymentSummary:
    """Aggregate totals over a time window."""

    incoming_total: int
    outgoing_total: int
    incoming_count: int
    outgoing_count: int
    window_start: Optional[datetime]
    window_end: datetime

    @property
    def net_total(self) -> int:
        return self.incoming_total - self.outgoing_total

    @property
    def transaction_count(self) -> int:
        return self.incoming_count + self.outgoing_count


class PaymentTracker(Protocol):
    """Collaborator interface used by the analytics capabilities."""

    def record(self, entrypoint: str, amount: int, direction: Direction = Direction.incoming) -> Transaction: ...

    def transactions(self, window_ms: int | None = None) -> list[Transaction]: ...

    def summary(self, window_ms: int | None = None) -> PaymentSummary: ...

    def export_csv(self, window_ms: int | None = None) -> str: ...


class InMemoryPaymentTracker:
    """Thread-safe in-memory payment ledger.

    Records live only for the lifetime of the process. When
    ``max_transactions`` is set, the oldest records are dropped once the
    ledger is full, and windows and totals cover only what is retained.
    """

    def __init__(self, max_transactions: int | None = None):
        self._transactions: deque[Transaction] = deque(maxlen=max_transactions)
        self._lock = threading.RLock()

    def record(
        self,
        entrypoint: str,
        amount: int,
        direction: Direction = Direction.incoming,
    ) -> Transaction:
        """Append a transaction to the ledger."""
        tx = Transaction(entrypoint=entrypoint, amount=amount, direction=direction)
        with self._lock:
            self._transactions.append(tx)
        logger.debug(f"Recorded {direction.value} payment of {amount} for {entrypoint}")
        return tx

    def _window_start(self, window_ms: int | None, now: datetime) -> datetime | None:
        if window_ms is None:
            return None
        return now - timedelta(milliseconds=window_ms)

    def transactions(self, window_ms: int | None = None) -> list[Transaction]:
        """
        Transactions inside the window, newest first.

        Args:
            window_ms: Only include transactions from the last N milliseconds
                       (all transactions if None)
        """
        start = self._window_start(window_ms, datetime.now(tz=timezone.utc))
        with self._lock:
            selected = [
                tx for tx in self._transactions
                if start is None or tx.timestamp >= start
            ]
        return sorted(selected, key=lambda tx: tx.timestamp, reverse=True)

    def summary(self, window_ms: int | None = None) -> PaymentSummary:
        """Totals and counts per direction inside the window."""
        now = datetime.now(tz=timezone.utc)
        txs = self.transactions(window_ms)
        incoming = [tx.amount for tx in txs if tx.direction is Direction.incoming]
        outgoing = [tx.amount for tx in txs if tx.direction is Direction.outgoing]
        return PaymentSummary(
            incoming_total=sum(incoming),
            outgoing_total=sum(outgoing),
            incoming_count=len(incoming),
            outgoing_count=len(outgoing),
            window_start=self._window_start(window_ms, now),
            window_end=now,
        )

    def export_csv(self, window_ms: int | None = None) -> str:
        """All transactions inside the window as CSV text with a header row."""
        buffer = io.StringIO()
        writer = csv.DictWriter(buffer, fieldnames=CSV_COLUMNS, lineterminator="\n")
        writer.writeheader()
        for tx in self.transactions(window_ms):
            writer.writerow(tx.to_dict())
        return buffer.getvalue()
