from __future__ import annotations

import dataclasses
import datetime as dt
from pathlib import Path
from typing import Any


@dataclasses.dataclass(frozen=True)
class CommitRecord:
    name: str = ""
    email: str = ""
    date: dt.datetime | None = None  # None when git emitted an unparsable date


@dataclasses.dataclass
class ContributorStat:
    email: str = ""
    name: str = ""
    commits: int = 0


@dataclasses.dataclass(frozen=True)
class AuthorMeta:
    published: dt.datetime | None
    modified: dt.datetime | None
    author: str | None = None


@dataclasses.dataclass
class ContentFile:
    """
    A content file as seen by a processing pipeline.

    `data["matter"]` holds values from the file's front matter and takes
    precedence over anything inferred; `data["meta"]` is the bag this
    package fills in.
    """

    path: str
    cwd: Path = dataclasses.field(default_factory=Path.cwd)
    data: dict[str, Any] = dataclasses.field(default_factory=dict)

    @property
    def matter(self) -> dict[str, Any]:
        matter = self.data.get("matter")
        return matter if isinstance(matter, dict) else {}

    @property
    def meta(self) -> dict[str, Any]:
        meta = self.data.get("meta")
        if not isinstance(meta, dict):
            meta = {}
            self.data["meta"] = meta
        return meta
