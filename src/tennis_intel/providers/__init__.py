"""
Upstream data providers.

Usage:
    from tennis_intel.providers import ESPNTennisClient

    async with ESPNTennisClient() as client:
        data = await client.get_rankings(Tour.ATP)
"""

from .espn import ESPNTennisClient

__all__ = [
    "ESPNTennisClient",
]
