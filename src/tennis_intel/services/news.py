"""
Tennis news service.

Combines the ATP and WTA ESPN news feeds into a single list:
- Fetched concurrently, one request per selected tour
- Sorted newest first (articles without a usable date sort last)
- Deduplicated by article id, keeping the newest copy
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from ..core.models import NewsArticle, NewsResult
from ..core.transform import (
    build_news_article,
    extract_articles,
    parse_timestamp,
    utc_now_iso,
)
from ..core.types import Resource, TourSelector
from ..providers import ESPNTennisClient

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10
MAX_LIMIT = 25

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _sort_by_date(articles: list[NewsArticle]) -> list[NewsArticle]:
    """Sort articles by publish date, newest first. Stable for equal dates."""
    def get_date(article: NewsArticle) -> datetime:
        return parse_timestamp(article.published) or _OLDEST

    return sorted(articles, key=get_date, reverse=True)


def _deduplicate(articles: list[NewsArticle]) -> list[NewsArticle]:
    """Remove duplicate articles by id, keeping the first occurrence."""
    seen_ids = set()
    unique = []

    for article in articles:
        if article.id is not None:
            if article.id in seen_ids:
                continue
            seen_ids.add(article.id)
        unique.append(article)

    return unique


def merge_articles(articles: list[NewsArticle], limit: int) -> list[NewsArticle]:
    """Sort, dedupe and truncate a flattened multi-feed article list."""
    return _deduplicate(_sort_by_date(articles))[:limit]


async def get_news(
    client: ESPNTennisClient,
    tour: TourSelector = TourSelector.both,
    limit: int = DEFAULT_LIMIT,
) -> NewsResult:
    """
    Get the latest tennis news.

    Args:
        client: ESPN client
        tour: atp, wta or both
        limit: Maximum articles to return (clamped to MAX_LIMIT)

    Returns:
        NewsResult with merged articles
    """
    limit = min(limit, MAX_LIMIT)
    results = await client.fetch_tours(tour.tours, Resource.news)

    all_articles = [
        build_news_article(article)
        for _, data in results
        for article in extract_articles(data)
    ]
    articles = merge_articles(all_articles, limit)
    logger.debug(f"News ({tour.value}): {len(all_articles)} fetched, {len(articles)} returned")

    return NewsResult(
        tour=tour.value,
        count=len(articles),
        articles=articles,
        fetched_at=utc_now_iso(),
    )
