"""Live matches service - today's scoreboard across tours, live matches first."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from ..core.models import LiveMatchesResult, Match
from ..core.transform import extract_matches, parse_timestamp, utc_now_iso
from ..core.types import Resource, TourSelector
from ..providers import ESPNTennisClient

logger = logging.getLogger(__name__)

_LATEST = datetime.max.replace(tzinfo=timezone.utc)


def order_matches(matches: list[Match]) -> list[Match]:
    """Live matches first, then by start time ascending (untimed last)."""
    def sort_key(match: Match) -> tuple[bool, datetime]:
        return (not match.is_live, parse_timestamp(match.start_time) or _LATEST)

    return sorted(matches, key=sort_key)


async def get_live_matches(
    client: ESPNTennisClient,
    tour: TourSelector = TourSelector.both,
) -> LiveMatchesResult:
    """Flatten every competition on the selected scoreboards into one ordered list."""
    results = await client.fetch_tours(tour.tours, Resource.scoreboard)

    matches: list[Match] = []
    for t, data in results:
        matches.extend(extract_matches(data, t.value))

    matches = order_matches(matches)
    live_count = sum(1 for m in matches if m.is_live)
    logger.debug(f"Scoreboard ({tour.value}): {len(matches)} matches, {live_count} live")

    return LiveMatchesResult(
        tour=tour.value,
        total_matches=len(matches),
        live_count=live_count,
        matches=matches,
        fetched_at=utc_now_iso(),
    )
