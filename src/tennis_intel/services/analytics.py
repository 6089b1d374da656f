"""
Analytics service - thin passthroughs to the payment tracker.

When no tracker is configured each function still returns a well-formed
payload instead of raising.
"""

from __future__ import annotations

import logging
from typing import Any

from ..analytics import PaymentTracker

logger = logging.getLogger(__name__)

DEFAULT_TRANSACTION_LIMIT = 50
UNAVAILABLE_MESSAGE = "Analytics not available"


def get_summary(tracker: PaymentTracker | None, window_ms: int | None = None) -> dict[str, Any]:
    """Aggregate totals, stringified so large amounts keep full precision."""
    if tracker is None:
        logger.debug("Analytics summary requested without a tracker")
        return {"error": UNAVAILABLE_MESSAGE, "payments": []}

    summary = tracker.summary(window_ms)
    return {
        "incomingTotal": str(summary.incoming_total),
        "outgoingTotal": str(summary.outgoing_total),
        "netTotal": str(summary.net_total),
        "incomingCount": summary.incoming_count,
        "outgoingCount": summary.outgoing_count,
        "transactionCount": summary.transaction_count,
        "windowMs": window_ms,
        "windowStart": summary.window_start.isoformat() if summary.window_start else None,
        "windowEnd": summary.window_end.isoformat(),
    }


def get_transactions(
    tracker: PaymentTracker | None,
    window_ms: int | None = None,
    limit: int = DEFAULT_TRANSACTION_LIMIT,
) -> dict[str, Any]:
    """Most recent transactions, newest first."""
    if tracker is None:
        return {"transactions": []}

    txs = tracker.transactions(window_ms)[:limit]
    return {"transactions": [tx.to_dict() for tx in txs]}


def export_csv(tracker: PaymentTracker | None, window_ms: int | None = None) -> dict[str, Any]:
    """Full export of the window as a single CSV blob."""
    if tracker is None:
        return {"csv": ""}

    return {"csv": tracker.export_csv(window_ms)}
