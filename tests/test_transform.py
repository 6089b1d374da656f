"""
Tests for the ESPN shape transformers.

Pure functions only - no HTTP involved.
"""

from datetime import datetime, timezone

from tennis_intel.core.transform import (
    build_match,
    build_news_article,
    build_ranking_entry,
    build_ranking_summary,
    build_search_hit,
    dig,
    extract_articles,
    extract_matches,
    extract_ranks,
    parse_timestamp,
)

from conftest import ATP_SCOREBOARD, make_article, make_competition, make_rank, rankings_payload


class TestHelpers:
    def test_dig_walks_dicts_and_lists(self):
        data = {"a": [{"b": "x"}]}
        assert dig(data, "a", 0, "b") == "x"

    def test_dig_missing_steps_return_none(self):
        assert dig({"a": []}, "a", 0, "b") is None
        assert dig({"a": None}, "a", "b") is None
        assert dig("not a dict", "a") is None

    def test_parse_timestamp_variants(self):
        expected = datetime(2024, 1, 15, 8, 0, tzinfo=timezone.utc)
        assert parse_timestamp("2024-01-15T08:00Z") == expected
        assert parse_timestamp("2024-01-15T08:00:00+00:00") == expected
        assert parse_timestamp("2024-01-02") == datetime(2024, 1, 2, tzinfo=timezone.utc)

    def test_parse_timestamp_invalid(self):
        assert parse_timestamp(None) is None
        assert parse_timestamp("") is None
        assert parse_timestamp("yesterday") is None
        assert parse_timestamp(12345) is None


class TestRankingTransform:
    def test_movement_is_previous_minus_current(self):
        entry = build_ranking_entry(make_rank(3, 7, "Coco Gauff", "Coco", "Gauff", "9089", 7200))
        assert entry.rank == 3
        assert entry.previous_rank == 7
        assert entry.movement == 4

    def test_drop_gives_negative_movement(self):
        entry = build_ranking_entry(make_rank(5, 4, "Daniil Medvedev", "Daniil", "Medvedev", "2383", 6740))
        assert entry.movement == -1

    def test_athlete_fields(self):
        entry = build_ranking_entry(make_rank(1, 1, "Iga Swiatek", "Iga", "Swiatek", "8402", 10715))
        assert entry.name == "Iga Swiatek"
        assert entry.first_name == "Iga"
        assert entry.last_name == "Swiatek"
        assert entry.id == "8402"
        assert entry.points == 10715
        assert entry.profile_url == "https://www.espn.com/tennis/player/_/id/8402"

    def test_missing_athlete_is_permissive(self):
        entry = build_ranking_entry({"current": 9, "points": 100})
        assert entry.rank == 9
        assert entry.name is None
        assert entry.profile_url is None
        assert entry.previous_rank is None
        assert entry.movement is None

    def test_camel_case_serialization(self):
        entry = build_ranking_entry(make_rank(1, 2, "N", "N", "D", "1", 10))
        dumped = entry.model_dump(by_alias=True)
        assert dumped["previousRank"] == 2
        assert dumped["firstName"] == "N"
        assert dumped["profileUrl"].endswith("/1")

    def test_summary_has_three_fields(self):
        summary = build_ranking_summary(make_rank(1, 2, "Novak Djokovic", "Novak", "Djokovic", "296", 9855))
        assert summary.model_dump() == {"rank": 1, "name": "Novak Djokovic", "points": 9855}

    def test_search_hit_carries_tour(self):
        hit = build_search_hit(make_rank(2, 1, "Jannik Sinner", "Jannik", "Sinner", "3623", 8710), "ATP")
        assert hit.tour == "ATP"
        assert hit.movement == -1

    def test_extract_ranks(self):
        ranks = [make_rank(1, 1, "A", "A", "A", "1", 1)]
        assert extract_ranks(rankings_payload(ranks)) == ranks
        assert extract_ranks({}) == []
        assert extract_ranks({"rankings": []}) == []
        assert extract_ranks({"rankings": [{}]}) == []

    def test_non_object_athlete(self):
        entry = build_ranking_entry({"current": 1, "athlete": "Novak"})
        assert entry.rank == 1
        assert entry.name is None


class TestNewsTransform:
    def test_article_fields(self):
        article = build_news_article(make_article(42, "2024-01-02T10:00:00Z", headline="Final"))
        assert article.id == 42
        assert article.headline == "Final"
        assert article.published == "2024-01-02T10:00:00Z"
        assert article.last_modified == "2024-01-02T10:00:00Z"
        assert article.image_url == "https://a.espncdn.com/42.jpg"
        assert article.link == "https://www.espn.com/tennis/story/42"

    def test_categories_keep_truthy_descriptions(self):
        article = build_news_article(make_article(1, "2024-01-02"))
        assert article.categories == ["Tennis"]

    def test_link_falls_back_to_mobile(self):
        raw = make_article(1, "2024-01-02", links={"mobile": {"href": "https://m.espn.com/1"}})
        assert build_news_article(raw).link == "https://m.espn.com/1"

    def test_sparse_article(self):
        article = build_news_article({"id": "x"})
        assert article.headline is None
        assert article.image_url is None
        assert article.link is None
        assert article.categories == []


class TestMatchTransform:
    def test_live_match(self):
        event = {"name": "Australian Open", "venue": {"fullName": "Melbourne Park"}}
        match = build_match(event, make_competition("c2", "in", "2024-01-15T10:00Z"), "ATP")
        assert match.tour == "ATP"
        assert match.tournament == "Australian Open"
        assert match.round == "Round 1"
        assert match.status == "In Progress"
        assert match.is_live is True
        assert match.is_complete is False
        assert match.venue == "Melbourne Park"
        assert match.start_time == "2024-01-15T10:00Z"

    def test_players_and_sets(self):
        comp = make_competition("c1", "post", "2024-01-15T08:00Z", completed=True, players=("Sinner", "Medvedev"))
        match = build_match({"name": "AO"}, comp, "ATP")
        assert [p.name for p in match.players] == ["Sinner", "Medvedev"]
        assert match.players[0].is_winner is True
        assert match.players[1].is_winner is False
        assert match.players[0].sets == [6.0, 4.0]
        assert match.players[1].seed == "2"
        assert match.is_complete is True

    def test_defaults_for_sparse_competition(self):
        match = build_match({}, {"competitors": [{}]}, "WTA")
        assert match.tournament == "Tournament"
        assert match.round == ""
        assert match.status == "Unknown"
        assert match.is_live is False
        assert match.venue == ""
        assert match.players[0].name == "Unknown"
        assert match.players[0].sets == []

    def test_venue_falls_back_to_competition(self):
        comp = {"venue": {"fullName": "Court 3"}}
        assert build_match({"name": "X"}, comp, "WTA").venue == "Court 3"

    def test_extract_matches_flattens_competitions(self):
        matches = extract_matches(ATP_SCOREBOARD, "ATP")
        assert len(matches) == 3
        assert extract_matches({}, "ATP") == []
        assert extract_matches({"events": [{"name": "Empty"}]}, "ATP") == []

    def test_extract_matches_skips_non_object_entries(self):
        data = {"events": [None, "x", {"name": "AO", "competitions": [None, make_competition("c1", "in", None)]}]}
        matches = extract_matches(data, "ATP")
        assert len(matches) == 1
        assert matches[0].tournament == "AO"

    def test_non_object_status_type(self):
        match = build_match({"name": "AO"}, {"status": {"type": "live"}}, "ATP")
        assert match.status == "Unknown"
        assert match.is_live is False


class TestArticleExtraction:
    def test_articles_list(self):
        article = make_article(1, "2024-01-02")
        assert extract_articles({"articles": [article]}) == [article]

    def test_non_object_payloads(self):
        assert extract_articles([]) == []
        assert extract_articles(None) == []
        assert extract_articles({"articles": None}) == []
        assert extract_articles({"articles": {"id": 1}}) == []

    def test_non_object_entries_are_dropped(self):
        article = make_article(2, "2024-01-02")
        assert extract_articles({"articles": [None, "x", 3, article]}) == [article]
