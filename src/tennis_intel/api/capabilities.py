"""
Capability catalog - every entrypoint this agent exposes.

| key                     | price | handler                          |
|-------------------------|-------|----------------------------------|
| overview                | 0     | services.rankings.get_overview   |
| atp-rankings            | 1000  | services.rankings.get_tour_rankings |
| wta-rankings            | 1000  | services.rankings.get_tour_rankings |
| news                    | 2000  | services.news.get_news           |
| live-matches            | 2000  | services.matches.get_live_matches |
| player-search           | 3000  | services.search.search_players   |
| analytics               | 0     | services.analytics.get_summary   |
| analytics-transactions  | 0     | services.analytics.get_transactions |
| analytics-csv           | 0     | services.analytics.export_csv    |

Prices are in the smallest currency unit. The analytics entrypoints are
operator tools: they are not counted in the public FREE/PAID tally.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.types import Tour, TourSelector
from ..services import analytics, matches, news, rankings, search
from ..services.context import AgentContext
from .registry import Entrypoint, EntrypointRegistry


# =============================================================================
# Input schemas
# =============================================================================


class EmptyInput(BaseModel):
    model_config = ConfigDict(extra="ignore")


class RankingsInput(BaseModel):
    limit: int = Field(
        default=rankings.DEFAULT_LIMIT,
        ge=1,
        description=f"Number of players to return (max {rankings.MAX_LIMIT})",
    )


class NewsInput(BaseModel):
    tour: TourSelector = TourSelector.both
    limit: int = Field(
        default=news.DEFAULT_LIMIT,
        ge=1,
        description=f"Number of articles (max {news.MAX_LIMIT})",
    )


class TourInput(BaseModel):
    tour: TourSelector = TourSelector.both


class PlayerSearchInput(BaseModel):
    query: str = Field(min_length=1, description="Player name or partial name to search")
    tour: TourSelector = TourSelector.both


class AnalyticsInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    window_ms: Optional[int] = Field(
        default=None,
        gt=0,
        alias="windowMs",
        description="Time window in ms",
    )


class TransactionsInput(AnalyticsInput):
    limit: int = Field(default=analytics.DEFAULT_TRANSACTION_LIMIT, ge=1)


# =============================================================================
# Handlers
# =============================================================================


async def _overview(params: EmptyInput, ctx: AgentContext):
    return await rankings.get_overview(ctx.espn)


async def _atp_rankings(params: RankingsInput, ctx: AgentContext):
    return await rankings.get_tour_rankings(ctx.espn, Tour.ATP, params.limit)


async def _wta_rankings(params: RankingsInput, ctx: AgentContext):
    return await rankings.get_tour_rankings(ctx.espn, Tour.WTA, params.limit)


async def _news(params: NewsInput, ctx: AgentContext):
    return await news.get_news(ctx.espn, params.tour, params.limit)


async def _live_matches(params: TourInput, ctx: AgentContext):
    return await matches.get_live_matches(ctx.espn, params.tour)


async def _player_search(params: PlayerSearchInput, ctx: AgentContext):
    return await search.search_players(ctx.espn, params.query, params.tour)


async def _analytics(params: AnalyticsInput, ctx: AgentContext):
    return analytics.get_summary(ctx.tracker, params.window_ms)


async def _analytics_transactions(params: TransactionsInput, ctx: AgentContext):
    return analytics.get_transactions(ctx.tracker, params.window_ms, params.limit)


async def _analytics_csv(params: AnalyticsInput, ctx: AgentContext):
    return analytics.export_csv(ctx.tracker, params.window_ms)


ENTRYPOINTS: list[Entrypoint] = [
    Entrypoint(
        key="overview",
        description="Free overview - current tennis landscape summary",
        input_model=EmptyInput,
        price=0,
        handler=_overview,
    ),
    Entrypoint(
        key="atp-rankings",
        description="Full ATP rankings - top 100 players with points, movement, and stats",
        input_model=RankingsInput,
        price=1000,
        handler=_atp_rankings,
    ),
    Entrypoint(
        key="wta-rankings",
        description="Full WTA rankings - top 100 players with points, movement, and stats",
        input_model=RankingsInput,
        price=1000,
        handler=_wta_rankings,
    ),
    Entrypoint(
        key="news",
        description="Latest tennis news from ESPN - ATP and WTA coverage",
        input_model=NewsInput,
        price=2000,
        handler=_news,
    ),
    Entrypoint(
        key="live-matches",
        description="Current live tennis matches and today's schedule",
        input_model=TourInput,
        price=2000,
        handler=_live_matches,
    ),
    Entrypoint(
        key="player-search",
        description="Search ATP and WTA rankings for players by name",
        input_model=PlayerSearchInput,
        price=3000,
        handler=_player_search,
    ),
    Entrypoint(
        key="analytics",
        description="Payment analytics summary",
        input_model=AnalyticsInput,
        price=0,
        handler=_analytics,
        listed=False,
    ),
    Entrypoint(
        key="analytics-transactions",
        description="Recent payment transactions",
        input_model=TransactionsInput,
        price=0,
        handler=_analytics_transactions,
        listed=False,
    ),
    Entrypoint(
        key="analytics-csv",
        description="Export payment data as CSV",
        input_model=AnalyticsInput,
        price=0,
        handler=_analytics_csv,
        listed=False,
    ),
]


def build_registry() -> EntrypointRegistry:
    """Create a registry holding every capability."""
    registry = EntrypointRegistry()
    for entrypoint in ENTRYPOINTS:
        registry.add(entrypoint)
    return registry
