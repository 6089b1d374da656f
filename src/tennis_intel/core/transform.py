"""
Shape transformers - convert ESPN JSON into simplified records.

Used by every capability handler in ``tennis_intel.services``.

Contains pure functions only - no HTTP, no I/O. Extraction is permissive:
a missing sub-object or key yields None (or the documented default),
never an exception.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from .models import (
    Match,
    MatchPlayer,
    NewsArticle,
    RankingEntry,
    RankingSummary,
    SearchHit,
)


# =============================================================================
# Helpers
# =============================================================================

def dig(data: Any, *path: str | int) -> Any:
    """Walk nested dicts/lists, returning None as soon as a step is missing."""
    current = data
    for step in path:
        if isinstance(step, int):
            if not isinstance(current, list) or not -len(current) <= step < len(current):
                return None
            current = current[step]
        else:
            if not isinstance(current, dict):
                return None
            current = current.get(step)
        if current is None:
            return None
    return current


def as_dict(value: Any) -> dict[str, Any]:
    """The value itself if it is a dict, otherwise an empty dict."""
    return value if isinstance(value, dict) else {}


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ESPN ISO-8601 timestamp into an aware UTC datetime."""
    if not value or not isinstance(value, str):
        return None

    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def utc_now_iso() -> str:
    """Response timestamp in ISO-8601 with millisecond precision."""
    return datetime.now(tz=timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


# =============================================================================
# Rankings
# =============================================================================

def extract_ranks(data: Any) -> list[dict[str, Any]]:
    """Return the first ranking list of a rankings payload (empty if absent)."""
    ranks = dig(data, "rankings", 0, "ranks")
    return ranks if isinstance(ranks, list) else []


def _movement(previous: Any, current: Any) -> int | None:
    if isinstance(previous, (int, float)) and isinstance(current, (int, float)):
        return int(previous - current)
    return None


def build_ranking_entry(rank: dict[str, Any]) -> RankingEntry:
    """Build a full ranking record.

    Movement is ``previous - current``; positive means the player climbed.
    """
    athlete = as_dict(rank.get("athlete"))
    return RankingEntry(
        rank=rank.get("current"),
        previous_rank=rank.get("previous"),
        movement=_movement(rank.get("previous"), rank.get("current")),
        trend=rank.get("trend"),
        name=athlete.get("displayName"),
        first_name=athlete.get("firstName"),
        last_name=athlete.get("lastName"),
        id=athlete.get("id"),
        points=rank.get("points"),
        profile_url=dig(athlete, "links", 0, "href"),
    )


def build_ranking_summary(rank: dict[str, Any]) -> RankingSummary:
    """Build the reduced {rank, name, points} record."""
    return RankingSummary(
        rank=rank.get("current"),
        name=dig(rank, "athlete", "displayName"),
        points=rank.get("points"),
    )


def build_search_hit(rank: dict[str, Any], tour: str) -> SearchHit:
    """Build a ranking record tagged with the tour it came from."""
    entry = build_ranking_entry(rank)
    return SearchHit(tour=tour, **entry.model_dump())


# =============================================================================
# News
# =============================================================================

def extract_articles(data: Any) -> list[dict[str, Any]]:
    """Return the article objects of a news payload (empty if absent)."""
    articles = data.get("articles") if isinstance(data, dict) else None
    if not isinstance(articles, list):
        return []
    return [a for a in articles if isinstance(a, dict)]


def build_news_article(article: dict[str, Any]) -> NewsArticle:
    """Build a news record from an ESPN article."""
    categories = article.get("categories") or []
    return NewsArticle(
        id=article.get("id"),
        headline=article.get("headline"),
        description=article.get("description"),
        published=article.get("published"),
        last_modified=article.get("lastModified"),
        type=article.get("type"),
        image_url=dig(article, "images", 0, "url"),
        link=dig(article, "links", "web", "href") or dig(article, "links", "mobile", "href"),
        categories=[
            c["description"]
            for c in categories
            if isinstance(c, dict) and c.get("description")
        ],
    )


# =============================================================================
# Matches
# =============================================================================

def build_match_player(competitor: dict[str, Any]) -> MatchPlayer:
    """Build a player record with the per-set scores of one competitor."""
    linescores = competitor.get("linescores") or []
    return MatchPlayer(
        name=dig(competitor, "athlete", "displayName") or "Unknown",
        seed=competitor.get("seed"),
        is_winner=bool(competitor.get("winner")),
        sets=[score.get("value") for score in linescores if isinstance(score, dict)],
    )


def build_match(event: dict[str, Any], competition: dict[str, Any], tour: str) -> Match:
    """Build a match record from one competition of a scoreboard event."""
    status_type = as_dict(dig(competition, "status", "type"))
    competitors = competition.get("competitors") or []
    return Match(
        tour=tour,
        tournament=event.get("name") or "Tournament",
        round=dig(competition, "round", "displayName") or "",
        status=status_type.get("description") or "Unknown",
        is_live=status_type.get("state") == "in",
        is_complete=bool(status_type.get("completed")),
        players=[build_match_player(c) for c in competitors if isinstance(c, dict)],
        start_time=competition.get("startDate"),
        venue=(
            dig(event, "venue", "fullName")
            or dig(competition, "venue", "fullName")
            or ""
        ),
    )


def extract_matches(data: Any, tour: str) -> list[Match]:
    """Flatten every competition of every event in a scoreboard payload."""
    matches: list[Match] = []
    events = data.get("events") if isinstance(data, dict) else None
    for event in events or []:
        if not isinstance(event, dict):
            continue
        for competition in event.get("competitions") or []:
            if isinstance(competition, dict):
                matches.append(build_match(event, competition, tour))
    return matches
