"""
Capability handlers for Tennis Intel.

Each handler fetches from ESPN through an explicitly passed client,
reshapes the payload and returns a result envelope.

Usage:
    from tennis_intel.services import get_news, AgentContext

    result = await get_news(ctx.espn, TourSelector.both, limit=10)
"""

from .analytics import export_csv, get_summary, get_transactions
from .context import AgentContext, build_context
from .matches import get_live_matches, order_matches
from .news import get_news, merge_articles
from .rankings import get_overview, get_tour_rankings
from .search import matches_query, search_players

__all__ = [
    "AgentContext",
    "build_context",
    "export_csv",
    "get_live_matches",
    "get_news",
    "get_overview",
    "get_summary",
    "get_tour_rankings",
    "get_transactions",
    "matches_query",
    "merge_articles",
    "order_matches",
    "search_players",
]
