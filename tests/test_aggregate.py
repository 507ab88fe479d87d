from __future__ import annotations

import datetime as dt

from infer_git_meta.aggregate import aggregate_history, contributors_by_email, history_bounds
from infer_git_meta.history import HistoryOrder
from infer_git_meta.models import CommitRecord

NOW = dt.datetime(2026, 1, 1, tzinfo=dt.timezone.utc)


def _day(d: int) -> dt.datetime:
    return dt.datetime(2025, 1, d, tzinfo=dt.timezone.utc)


def test_contributors_by_email_counts_and_keeps_first_name() -> None:
    commits = [
        CommitRecord("alice", "alice@example.com", _day(3)),
        CommitRecord("Bob", "bob@example.com", _day(2)),
        CommitRecord("Alice Liddell", "alice@example.com", _day(1)),
    ]
    stats = contributors_by_email(commits)
    assert set(stats) == {"alice@example.com", "bob@example.com"}
    assert stats["alice@example.com"].commits == 2
    assert stats["alice@example.com"].name == "alice"
    assert stats["bob@example.com"].commits == 1


def test_history_bounds_newest_first() -> None:
    commits = [CommitRecord("A", "a@e", _day(9)), CommitRecord("B", "b@e", _day(5)), CommitRecord("C", "c@e", _day(1))]
    published, modified = history_bounds(commits, now=NOW)
    assert published == _day(1)
    assert modified == _day(9)
    assert modified >= published


def test_history_bounds_oldest_first_is_declared_not_guessed() -> None:
    commits = [CommitRecord("C", "c@e", _day(1)), CommitRecord("A", "a@e", _day(9))]
    published, modified = history_bounds(commits, now=NOW, order=HistoryOrder.OLDEST_FIRST)
    assert published == _day(1)
    assert modified == _day(9)


def test_history_bounds_single_commit() -> None:
    published, modified = history_bounds([CommitRecord("A", "a@e", _day(4))], now=NOW)
    assert published == modified == _day(4)


def test_aggregate_empty_history_uses_one_now() -> None:
    stats, published, modified = aggregate_history([], now=NOW)
    assert stats == {}
    assert published is modified
    assert published == NOW
