"""Per-application dependencies handed to every capability handler."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..analytics import InMemoryPaymentTracker, PaymentTracker
from ..core.config import Settings, get_settings
from ..providers import ESPNTennisClient


@dataclass
class AgentContext:
    """
    Service handles for capability handlers.

    Built once by the app (or the CLI) and passed to every invocation.
    ``tracker`` is None when analytics is disabled.
    """

    espn: ESPNTennisClient
    tracker: Optional[PaymentTracker] = None
    settings: Settings = field(default_factory=get_settings)

    async def close(self) -> None:
        await self.espn.close()


def build_context(settings: Settings | None = None) -> AgentContext:
    """Create the ESPN client and, when enabled, the payment tracker."""
    settings = settings or get_settings()
    tracker = (
        InMemoryPaymentTracker(max_transactions=settings.analytics_max_transactions)
        if settings.analytics_enabled
        else None
    )
    return AgentContext(
        espn=ESPNTennisClient(timeout=settings.upstream_timeout),
        tracker=tracker,
        settings=settings,
    )
