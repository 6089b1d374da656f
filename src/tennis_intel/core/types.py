"""
Core types and constants for Tennis Intel.

This module provides:
- Tour and TourSelector enums
- TourConfig dataclass for tour-specific settings
- TOUR_REGISTRY for centralized tour configurations
- The fixed ESPN endpoint layout
"""

from dataclasses import dataclass
from enum import Enum


ESPN_BASE_URL = "https://site.api.espn.com/apis/site/v2/sports/tennis"
DATA_SOURCE = "ESPN Tennis API (live)"


class Tour(str, Enum):
    """Professional tennis circuits."""

    ATP = "ATP"
    WTA = "WTA"


class TourSelector(str, Enum):
    """Tour filter accepted by multi-tour capabilities."""

    atp = "atp"
    wta = "wta"
    both = "both"

    @property
    def tours(self) -> list[Tour]:
        """Tours covered by this selector, ATP first."""
        if self is TourSelector.atp:
            return [Tour.ATP]
        if self is TourSelector.wta:
            return [Tour.WTA]
        return [Tour.ATP, Tour.WTA]


class Resource(str, Enum):
    """ESPN resources available per tour."""

    rankings = "rankings"
    news = "news"
    scoreboard = "scoreboard"


@dataclass(frozen=True)
class TourConfig:
    """Configuration for a tour."""

    id: str
    name: str
    slug: str

    def path(self, resource: Resource) -> str:
        """Path of a resource relative to ESPN_BASE_URL."""
        return f"/{self.slug}/{resource.value}"

    def url(self, resource: Resource) -> str:
        """Absolute URL of a resource."""
        return f"{ESPN_BASE_URL}{self.path(resource)}"


# =============================================================================
# TOUR REGISTRY - Central configuration for both tours
# =============================================================================

TOUR_REGISTRY: dict[str, TourConfig] = {
    Tour.ATP.value: TourConfig(
        id="ATP",
        name="Association of Tennis Professionals",
        slug="atp",
    ),
    Tour.WTA.value: TourConfig(
        id="WTA",
        name="Women's Tennis Association",
        slug="wta",
    ),
}


def get_tour_config(tour: str | Tour) -> TourConfig:
    """
    Get configuration for a tour.

    Args:
        tour: Tour ID string or Tour enum

    Returns:
        TourConfig for the requested tour

    Raises:
        KeyError: If tour is not in registry
    """
    tour_id = tour.value if isinstance(tour, Tour) else tour.upper()
    return TOUR_REGISTRY[tour_id]
