"""Payment analytics collaborator."""

from .tracker import (
    Direction,
    InMemoryPaymentTracker,
    PaymentSummary,
    PaymentTracker,
    Transaction,
)

__all__ = [
    "Direction",
    "InMemoryPaymentTracker",
    "PaymentSummary",
    "PaymentTracker",
    "Transaction",
]
