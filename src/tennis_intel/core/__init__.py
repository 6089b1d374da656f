"""
Core module for Tennis Intel.

This module provides the foundational components:
- Configuration management (config.py)
- Data models (models.py)
- Tour types and ESPN endpoint registry (types.py)
- Shared HTTP client infrastructure (http.py)
- ESPN shape transformers (transform.py)

Usage:
    from tennis_intel.core import Settings, get_settings
    from tennis_intel.core import Tour, TourSelector, get_tour_config
    from tennis_intel.core.http import BaseApiClient, UpstreamError
"""

# Configuration
from .config import Settings, get_settings

# Types
from .types import (
    DATA_SOURCE,
    ESPN_BASE_URL,
    TOUR_REGISTRY,
    Resource,
    Tour,
    TourConfig,
    TourSelector,
    get_tour_config,
)

# HTTP
from .http import ExternalAPIError, UpstreamError

# Models
from .models import (
    LiveMatchesResult,
    Match,
    MatchPlayer,
    NewsArticle,
    NewsResult,
    OverviewResult,
    PlayerSearchResult,
    RankingEntry,
    RankingsResult,
    RankingSummary,
    SearchHit,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Types
    "DATA_SOURCE",
    "ESPN_BASE_URL",
    "TOUR_REGISTRY",
    "Resource",
    "Tour",
    "TourConfig",
    "TourSelector",
    "get_tour_config",
    # Errors
    "ExternalAPIError",
    "UpstreamError",
    # Models
    "LiveMatchesResult",
    "Match",
    "MatchPlayer",
    "NewsArticle",
    "NewsResult",
    "OverviewResult",
    "PlayerSearchResult",
    "RankingEntry",
    "RankingsResult",
    "RankingSummary",
    "SearchHit",
]
