"""
Pytest configuration for tennis-intel tests.

ESPN is replaced by an httpx.MockTransport serving canned payloads, so the
suite never touches the network.
"""

import asyncio

import httpx
import pytest

from tennis_intel.providers import ESPNTennisClient


# =========================================================================
# Payload builders
# =========================================================================


def make_rank(current, previous, display, first, last, athlete_id, points, trend="-"):
    """One entry of an ESPN rankings list."""
    return {
        "current": current,
        "previous": previous,
        "trend": trend,
        "points": points,
        "athlete": {
            "id": athlete_id,
            "displayName": display,
            "firstName": first,
            "lastName": last,
            "links": [{"href": f"https://www.espn.com/tennis/player/_/id/{athlete_id}"}],
        },
    }


def rankings_payload(ranks):
    return {"rankings": [{"name": "Singles", "ranks": ranks}]}


def make_article(article_id, published, headline="Headline", **extra):
    article = {
        "id": article_id,
        "headline": headline,
        "description": f"{headline} description",
        "published": published,
        "lastModified": published,
        "type": "Story",
        "images": [{"url": f"https://a.espncdn.com/{article_id}.jpg"}],
        "links": {"web": {"href": f"https://www.espn.com/tennis/story/{article_id}"}},
        "categories": [{"description": "Tennis"}, {"description": ""}, {"type": "league"}],
    }
    if published is None:
        del article["published"]
    article.update(extra)
    return article


def make_competition(comp_id, state, start, completed=False, round_name="Round 1", players=("A", "B")):
    return {
        "id": comp_id,
        "startDate": start,
        "round": {"displayName": round_name},
        "status": {
            "type": {
                "state": state,
                "completed": completed,
                "description": {"in": "In Progress", "post": "Final", "pre": "Scheduled"}[state],
            }
        },
        "competitors": [
            {
                "athlete": {"displayName": name},
                "seed": str(i + 1),
                "winner": completed and i == 0,
                "linescores": [{"value": 6.0}, {"value": 4.0 + i}],
            }
            for i, name in enumerate(players)
        ],
    }


ATP_RANKS = [
    make_rank(1, 2, "Novak Djokovic", "Novak", "Djokovic", "296", 9855),
    make_rank(2, 1, "Jannik Sinner", "Jannik", "Sinner", "3623", 8710),
    make_rank(3, 3, "Carlos Alcaraz", "Carlos", "Alcaraz", "3782", 8130),
    make_rank(4, 5, "Alexander Zverev", "Alexander", "Zverev", "3019", 6905),
    make_rank(5, 4, "Daniil Medvedev", "Daniil", "Medvedev", "2383", 6740),
    make_rank(6, 7, "Andrey Rublev", "Andrey", "Rublev", "2978", 4805),
    make_rank(7, 6, "Holger Rune", "Holger", "Rune", "4104", 3660),
]

WTA_RANKS = [
    make_rank(1, 1, "Iga Swiatek", "Iga", "Swiatek", "8402", 10715),
    make_rank(2, 2, "Aryna Sabalenka", "Aryna", "Sabalenka", "7305", 8725),
    make_rank(3, 4, "Coco Gauff", "Coco", "Gauff", "9089", 7200),
    make_rank(4, 3, "Elena Rybakina", "Elena", "Rybakina", "8185", 6516),
    make_rank(5, 5, "Jessica Pegula", "Jessica", "Pegula", "7082", 4870),
    make_rank(6, 8, "Ekaterina Alexandrova", "Ekaterina", "Alexandrova", "6899", 2000),
]

ATP_NEWS = {
    "articles": [
        make_article(1, "2024-01-02T10:00:00Z", headline="ATP story one"),
        make_article(3, "2024-01-01T08:00:00Z", headline="ATP copy of shared story"),
        make_article(4, None, headline="Undated story"),
    ]
}

WTA_NEWS = {
    "articles": [
        make_article(3, "2024-01-03T09:00:00Z", headline="WTA copy of shared story"),
        make_article(5, "2024-01-02T12:00:00Z", headline="WTA story five"),
    ]
}

ATP_SCOREBOARD = {
    "events": [
        {
            "name": "Australian Open",
            "venue": {"fullName": "Melbourne Park"},
            "competitions": [
                make_competition("c1", "post", "2024-01-15T08:00Z", completed=True),
                make_competition("c2", "in", "2024-01-15T10:00Z"),
                make_competition("c3", "pre", "2024-01-15T06:00Z"),
            ],
        },
        {"name": "Exhibition", "competitions": []},
    ]
}

WTA_SCOREBOARD = {
    "events": [
        {
            "name": "Australian Open",
            "competitions": [
                dict(make_competition("c4", "in", "2024-01-15T09:00Z"), venue={"fullName": "Rod Laver Arena"}),
            ],
        },
    ]
}


# =========================================================================
# Fake ESPN
# =========================================================================


class FakeESPN:
    """Routes ESPN paths ``/{tour}/{resource}`` to canned JSON responses."""

    def __init__(self):
        self.routes: dict[tuple[str, str], tuple[int, object]] = {}
        self.requests: list[httpx.Request] = []

    def set(self, tour: str, resource: str, payload, status: int = 200) -> None:
        self.routes[(tour, resource)] = (status, payload)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        tour, resource = request.url.path.rstrip("/").split("/")[-2:]
        status, payload = self.routes.get((tour, resource), (404, {"error": "not found"}))
        return httpx.Response(status, json=payload)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def espn():
    """Fake ESPN loaded with both tours' rankings, news and scoreboards."""
    fake = FakeESPN()
    fake.set("atp", "rankings", rankings_payload(ATP_RANKS))
    fake.set("wta", "rankings", rankings_payload(WTA_RANKS))
    fake.set("atp", "news", ATP_NEWS)
    fake.set("wta", "news", WTA_NEWS)
    fake.set("atp", "scoreboard", ATP_SCOREBOARD)
    fake.set("wta", "scoreboard", WTA_SCOREBOARD)
    return fake


@pytest.fixture
def run(espn):
    """Run ``fn(client)`` against the fake ESPN inside a fresh event loop."""

    def _run(fn):
        async def scenario():
            async with ESPNTennisClient(transport=espn.transport) as client:
                return await fn(client)

        return asyncio.run(scenario())

    return _run
