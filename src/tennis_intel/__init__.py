"""
Tennis Intel

Professional tennis intelligence served as priced agent entrypoints.
Fetches ATP/WTA rankings, news and scoreboards from ESPN's public site
API and reshapes them into simple, stable records.

Key Features:
- Free overview plus paid rankings, news, live matches and player search
- Concurrent ATP/WTA fetches with fail-fast aggregation
- News merged across tours, newest first, deduplicated by article id
- In-memory payment analytics with CSV export
- ERC-8004 / A2A discovery documents

Usage:
    from tennis_intel import create_app, build_context, build_registry

    app = create_app()

    # Or invoke a capability directly
    ctx = build_context()
    output = await build_registry().invoke("atp-rankings", {"limit": 10}, ctx)
"""

from .api.capabilities import build_registry
from .api.main import create_app
from .core.config import Settings, get_settings
from .core.http import UpstreamError
from .core.types import Tour, TourSelector
from .providers import ESPNTennisClient
from .services.context import AgentContext, build_context

__version__ = "1.0.0"

__all__ = [
    # App
    "create_app",
    "build_registry",
    # Context
    "AgentContext",
    "build_context",
    # Config
    "Settings",
    "get_settings",
    # Upstream
    "ESPNTennisClient",
    "UpstreamError",
    # Types
    "Tour",
    "TourSelector",
]
