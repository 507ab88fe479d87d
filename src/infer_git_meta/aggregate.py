from __future__ import annotations

import datetime as dt

from .history import HistoryOrder
from .models import CommitRecord, ContributorStat


def contributors_by_email(commits: list[CommitRecord]) -> dict[str, ContributorStat]:
    out: dict[str, ContributorStat] = {}
    for c in commits:
        st = out.get(c.email)
        if st is None:
            # First name seen for an email sticks, later spellings are ignored.
            st = ContributorStat(email=c.email, name=c.name)
            out[c.email] = st
        st.commits += 1
    return out


def history_bounds(
    commits: list[CommitRecord],
    *,
    now: dt.datetime,
    order: HistoryOrder = HistoryOrder.NEWEST_FIRST,
) -> tuple[dt.datetime | None, dt.datetime | None]:
    """
    Return (published, modified) for a commit sequence in the declared order.

    An empty history yields `now` for both, the same instant.
    """
    if not commits:
        return now, now
    oldest, newest = commits[-1], commits[0]
    if order is HistoryOrder.OLDEST_FIRST:
        oldest, newest = newest, oldest
    return oldest.date, newest.date


def aggregate_history(
    commits: list[CommitRecord],
    *,
    now: dt.datetime,
    order: HistoryOrder = HistoryOrder.NEWEST_FIRST,
) -> tuple[dict[str, ContributorStat], dt.datetime | None, dt.datetime | None]:
    published, modified = history_bounds(commits, now=now, order=order)
    return contributors_by_email(commits), published, modified
