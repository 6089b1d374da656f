"""
Rankings service - free overview and full per-tour rankings.

totalRanked reports the length of the returned (truncated) list,
not the number of players ESPN ranks.
"""

from __future__ import annotations

import logging

from ..core.models import OverviewResult, RankingsResult, TourTopPlayers
from ..core.transform import (
    build_ranking_entry,
    build_ranking_summary,
    extract_ranks,
    utc_now_iso,
)
from ..core.types import DATA_SOURCE, Resource, Tour
from ..providers import ESPNTennisClient

logger = logging.getLogger(__name__)

OVERVIEW_TOP_N = 5
DEFAULT_LIMIT = 50
MAX_LIMIT = 100


async def get_overview(client: ESPNTennisClient) -> OverviewResult:
    """Top 5 of both tours with rank, name and points only."""
    results = dict(await client.fetch_tours([Tour.ATP, Tour.WTA], Resource.rankings))

    def top(tour: Tour) -> TourTopPlayers:
        ranks = extract_ranks(results[tour])[:OVERVIEW_TOP_N]
        return TourTopPlayers(
            label=f"{tour.value} Top {OVERVIEW_TOP_N}",
            players=[build_ranking_summary(r) for r in ranks if isinstance(r, dict)],
        )

    return OverviewResult(
        atp=top(Tour.ATP),
        wta=top(Tour.WTA),
        fetched_at=utc_now_iso(),
        data_source=DATA_SOURCE,
    )


async def get_tour_rankings(
    client: ESPNTennisClient,
    tour: Tour,
    limit: int = DEFAULT_LIMIT,
) -> RankingsResult:
    """
    Full rankings for one tour.

    Args:
        client: ESPN client
        tour: ATP or WTA
        limit: Maximum players to return (clamped to MAX_LIMIT)

    Returns:
        RankingsResult with movement computed per player
    """
    limit = min(limit, MAX_LIMIT)
    data = await client.get_rankings(tour)

    ranks = extract_ranks(data)[:limit]
    rankings = [build_ranking_entry(r) for r in ranks if isinstance(r, dict)]
    logger.debug(f"{tour.value} rankings: returning {len(rankings)} players")

    return RankingsResult(
        tour=tour.value,
        total_ranked=len(rankings),
        rankings=rankings,
        fetched_at=utc_now_iso(),
    )
