"""
Player search service.

Case-insensitive substring search over the ATP/WTA ranking lists.
A player matches when the query appears in the display name, the first
name or the last name. Results are not truncated.
"""

from __future__ import annotations

import logging
from typing import Any

from ..core.models import PlayerSearchResult, SearchHit
from ..core.transform import as_dict, build_search_hit, extract_ranks, utc_now_iso
from ..core.types import Resource, TourSelector
from ..providers import ESPNTennisClient

logger = logging.getLogger(__name__)


def _normalize(text: Any) -> str:
    """Lowercase, treating missing values as empty."""
    return text.lower() if isinstance(text, str) else ""


def matches_query(rank: dict[str, Any], query: str) -> bool:
    """Check a ranking entry's athlete names against a lowercased query."""
    athlete = as_dict(rank.get("athlete"))
    return any(
        query in _normalize(athlete.get(key))
        for key in ("displayName", "firstName", "lastName")
    )


def _rank_key(hit: SearchHit) -> tuple[bool, int]:
    return (hit.rank is None, hit.rank or 0)


async def search_players(
    client: ESPNTennisClient,
    query: str,
    tour: TourSelector = TourSelector.both,
) -> PlayerSearchResult:
    """
    Search ranked players by name.

    Args:
        client: ESPN client
        query: Full or partial player name (non-empty)
        tour: atp, wta or both

    Returns:
        PlayerSearchResult sorted by rank ascending
    """
    needle = query.lower()
    results = await client.fetch_tours(tour.tours, Resource.rankings)

    players: list[SearchHit] = []
    for t, data in results:
        for rank in extract_ranks(data):
            if isinstance(rank, dict) and matches_query(rank, needle):
                players.append(build_search_hit(rank, t.value))

    players.sort(key=_rank_key)
    logger.debug(f"Player search '{query}' ({tour.value}): {len(players)} found")

    return PlayerSearchResult(
        query=query,
        tour=tour.value,
        found=len(players),
        players=players,
        fetched_at=utc_now_iso(),
    )
