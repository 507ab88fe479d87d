"""Pipeline step that fills `published`, `modified` and `author` from git."""

from __future__ import annotations

import datetime as dt
import logging
from pathlib import Path
from typing import Any

from .aggregate import aggregate_history
from .authors import infer_author
from .config import InferOptions, options_from_dict
from .history import GitHistoryProvider, HistoryProvider
from .merge import write_meta
from .models import AuthorMeta, ContentFile

logger = logging.getLogger(__name__)


class InferGitMeta:
    """
    Async callable run once per file.

    Sets `meta["published"]` to the date the file was first committed,
    `meta["modified"]` to the date it was last committed and `meta["author"]`
    to an abbreviated list of its top authors. Values already present in
    `meta` or in the file's front matter (`data["matter"]`) are kept.
    Instances hold no per-file state and can serve concurrent files.
    """

    def __init__(self, options: InferOptions, history: HistoryProvider) -> None:
        self.options = options
        self.history = history

    async def infer(self, path: str, cwd: Path) -> AuthorMeta:
        now = dt.datetime.now(dt.timezone.utc)
        commits = await self.history.commits(path, cwd)
        stats, published, modified = aggregate_history(commits, now=now, order=self.history.order)
        author = infer_author(stats, self.options)
        logger.debug("%s: %d commits from %d contributors", path, len(commits), len(stats))
        return AuthorMeta(published=published, modified=modified, author=author)

    async def __call__(self, file: ContentFile) -> None:
        computed = await self.infer(file.path, Path(file.cwd))
        write_meta(file, computed)


def infer_git_meta(
    options: InferOptions | dict[str, Any] | None = None,
    *,
    history: HistoryProvider | None = None,
) -> InferGitMeta:
    if not isinstance(options, InferOptions):
        options = options_from_dict(options)
    return InferGitMeta(options, history if history is not None else GitHistoryProvider())
