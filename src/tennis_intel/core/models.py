"""
Pydantic models for reshaped ESPN data and capability envelopes.

These models are used for:
- Stable, simplified records built from provider-specific JSON
- Result envelopes returned by each capability
- Response serialization (camelCase keys via alias)

Fields that ESPN may omit are Optional and default to None.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialising field names in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Rankings
# =============================================================================


class RankingSummary(CamelModel):
    """Reduced ranking record used by the free overview."""

    rank: Optional[int] = None
    name: Optional[str] = None
    points: Optional[int | float] = None


class RankingEntry(CamelModel):
    """One player's position in a tour ranking."""

    rank: Optional[int] = None
    previous_rank: Optional[int] = None
    movement: Optional[int] = None
    trend: Optional[str] = None
    name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    id: Optional[str | int] = None
    points: Optional[int | float] = None
    profile_url: Optional[str] = None


class SearchHit(RankingEntry):
    """Ranking entry matched by a player search, tagged with its tour."""

    tour: str


class TourTopPlayers(CamelModel):
    label: str
    players: list[RankingSummary]


class OverviewResult(CamelModel):
    atp: TourTopPlayers
    wta: TourTopPlayers
    fetched_at: str
    data_source: str


class RankingsResult(CamelModel):
    tour: str
    total_ranked: int
    rankings: list[RankingEntry]
    fetched_at: str


class PlayerSearchResult(CamelModel):
    query: str
    tour: str
    found: int
    players: list[SearchHit]
    fetched_at: str


# =============================================================================
# News
# =============================================================================


class NewsArticle(CamelModel):
    """Normalized news article from an ESPN tour feed."""

    id: Optional[str | int] = None
    headline: Optional[str] = None
    description: Optional[str] = None
    published: Optional[str] = None
    last_modified: Optional[str] = None
    type: Optional[str] = None
    image_url: Optional[str] = None
    link: Optional[str] = None
    categories: list[str] = []


class NewsResult(CamelModel):
    tour: str
    count: int
    articles: list[NewsArticle]
    fetched_at: str


# =============================================================================
# Matches
# =============================================================================


class MatchPlayer(CamelModel):
    """A competitor in a match with per-set scores."""

    name: str = "Unknown"
    seed: Optional[Any] = None
    is_winner: bool = False
    sets: list[Optional[float]] = []


class Match(CamelModel):
    """A single competition from a tour scoreboard."""

    tour: str
    tournament: str = "Tournament"
    round: str = ""
    status: str = "Unknown"
    is_live: bool = False
    is_complete: bool = False
    players: list[MatchPlayer] = []
    start_time: Optional[str] = None
    venue: str = ""


class LiveMatchesResult(CamelModel):
    tour: str
    total_matches: int
    live_count: int
    matches: list[Match]
    fetched_at: str
