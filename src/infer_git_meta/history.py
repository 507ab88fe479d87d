from __future__ import annotations

import csv
import datetime as dt
import enum
import logging
from pathlib import Path
from typing import Protocol

from dateutil import parser as date_parser

from .git import get_file_log
from .models import CommitRecord

logger = logging.getLogger(__name__)


class HistoryOrder(enum.Enum):
    NEWEST_FIRST = "newest-first"
    OLDEST_FIRST = "oldest-first"


class HistoryProvider(Protocol):
    """
    Anything that can list the commits touching one file.

    `order` declares how the returned sequence is sorted; consumers rely on
    it to tell the first commit from the last one and never look at the
    dates to guess.
    """

    order: HistoryOrder

    async def commits(self, path: str, cwd: Path) -> list[CommitRecord]: ...


def parse_commit_date(value: str) -> dt.datetime | None:
    s = (value or "").strip()
    if not s:
        return None
    try:
        return date_parser.parse(s)
    except (ValueError, OverflowError):
        return None


def parse_commit_row(row: list[str]) -> CommitRecord:
    cells = list(row)
    if len(cells) > 3:
        # An unquoted comma in the author name splits it over several cells.
        cells = [",".join(cells[:-2]), cells[-2], cells[-1]]
    while len(cells) < 3:
        cells.append("")
    name, email, date = cells
    return CommitRecord(name=name or "", email=email or "", date=parse_commit_date(date))


def parse_commit_rows(text: str) -> list[CommitRecord]:
    lines = [line for line in (text or "").splitlines() if line.strip()]
    commits = [parse_commit_row(row) for row in csv.reader(lines)]
    bad_dates = sum(1 for c in commits if c.date is None)
    if bad_dates:
        logger.debug("%d of %d commit rows had no usable date", bad_dates, len(commits))
    return commits


class GitHistoryProvider:
    order = HistoryOrder.NEWEST_FIRST

    def __init__(self, timeout_s: float | None = None) -> None:
        self.timeout_s = timeout_s

    async def commits(self, path: str, cwd: Path) -> list[CommitRecord]:
        out = await get_file_log(path, cwd=cwd, timeout_s=self.timeout_s)
        commits = parse_commit_rows(out)
        logger.debug("parsed %d commits for %s", len(commits), path)
        return commits
