"""Tests for the in-memory payment tracker and the analytics passthroughs."""

from dataclasses import replace
from datetime import datetime, timedelta, timezone

from tennis_intel.analytics import Direction, InMemoryPaymentTracker
from tennis_intel.core.config import Settings
from tennis_intel.services.analytics import export_csv, get_summary, get_transactions
from tennis_intel.services.context import build_context


def _backdate(tracker: InMemoryPaymentTracker, index: int, minutes: int) -> None:
    """Move one recorded transaction into the past."""
    tx = tracker._transactions[index]
    tracker._transactions[index] = replace(
        tx, timestamp=datetime.now(tz=timezone.utc) - timedelta(minutes=minutes)
    )


class TestInMemoryPaymentTracker:
    def test_record_and_summary(self):
        tracker = InMemoryPaymentTracker()
        tracker.record("atp-rankings", 1000)
        tracker.record("player-search", 3000)
        tracker.record("refund", 500, Direction.outgoing)

        summary = tracker.summary()

        assert summary.incoming_total == 4000
        assert summary.outgoing_total == 500
        assert summary.net_total == 3500
        assert summary.incoming_count == 2
        assert summary.outgoing_count == 1
        assert summary.transaction_count == 3
        assert summary.window_start is None

    def test_transactions_newest_first(self):
        tracker = InMemoryPaymentTracker()
        tracker.record("news", 2000)
        tracker.record("live-matches", 2000)
        _backdate(tracker, 1, minutes=5)

        assert [tx.entrypoint for tx in tracker.transactions()] == ["news", "live-matches"]

    def test_window_excludes_older_transactions(self):
        tracker = InMemoryPaymentTracker()
        tracker.record("news", 2000)
        tracker.record("atp-rankings", 1000)
        _backdate(tracker, 0, minutes=120)

        one_hour = 60 * 60 * 1000
        assert [tx.entrypoint for tx in tracker.transactions(one_hour)] == ["atp-rankings"]

        summary = tracker.summary(one_hour)
        assert summary.incoming_total == 1000
        assert summary.window_start is not None
        assert summary.window_end - summary.window_start == timedelta(hours=1)

    def test_export_csv(self):
        tracker = InMemoryPaymentTracker()
        tx = tracker.record("wta-rankings", 1000)

        lines = tracker.export_csv().splitlines()

        assert lines[0] == "id,timestamp,direction,entrypoint,amount"
        assert lines[1] == f"{tx.id},{tx.timestamp.isoformat()},incoming,wta-rankings,1000"

    def test_export_csv_empty_ledger_has_header_only(self):
        assert InMemoryPaymentTracker().export_csv() == "id,timestamp,direction,entrypoint,amount\n"


class TestAnalyticsService:
    def test_summary_without_tracker(self):
        assert get_summary(None) == {"error": "Analytics not available", "payments": []}

    def test_transactions_without_tracker(self):
        assert get_transactions(None) == {"transactions": []}

    def test_csv_without_tracker(self):
        assert export_csv(None) == {"csv": ""}

    def test_summary_amounts_are_strings(self):
        tracker = InMemoryPaymentTracker()
        tracker.record("news", 2000)
        tracker.record("news", 2000)

        summary = get_summary(tracker, 60_000)

        assert summary["incomingTotal"] == "4000"
        assert summary["outgoingTotal"] == "0"
        assert summary["netTotal"] == "4000"
        assert summary["incomingCount"] == 2
        assert summary["windowMs"] == 60_000

    def test_transactions_respect_limit(self):
        tracker = InMemoryPaymentTracker()
        for _ in range(5):
            tracker.record("atp-rankings", 1000)

        result = get_transactions(tracker, limit=3)

        assert len(result["transactions"]) == 3
        assert result["transactions"][0]["amount"] == "1000"
        assert result["transactions"][0]["direction"] == "incoming"

    def test_csv_passthrough(self):
        tracker = InMemoryPaymentTracker()
        tracker.record("overview", 0)
        csv_text = export_csv(tracker)["csv"]
        assert csv_text.startswith("id,timestamp,direction,entrypoint,amount\n")
        assert ",overview,0" in csv_text


class TestRetention:
    def test_oldest_transactions_are_dropped_past_the_cap(self):
        tracker = InMemoryPaymentTracker(max_transactions=3)
        for key in ("a", "b", "c", "d", "e"):
            tracker.record(key, 1000)

        assert sorted(tx.entrypoint for tx in tracker.transactions()) == ["c", "d", "e"]
        assert tracker.summary().incoming_total == 3000
        assert len(tracker.export_csv().splitlines()) == 4

    def test_unbounded_by_default(self):
        tracker = InMemoryPaymentTracker()
        for _ in range(50):
            tracker.record("news", 2000)
        assert tracker.summary().incoming_count == 50

    def test_context_applies_configured_cap(self):
        settings = Settings(analytics_max_transactions=2)
        ctx = build_context(settings)
        for _ in range(4):
            ctx.tracker.record("news", 2000)
        assert len(ctx.tracker.transactions()) == 2

    def test_context_without_analytics(self):
        assert build_context(Settings(analytics_enabled=False)).tracker is None
