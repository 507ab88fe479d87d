from __future__ import annotations

import functools

from .config import UNLIMITED, InferOptions
from .i18n import BabelListFormatter, Collator, IcuCollator
from .models import ContributorStat


def rank_contributors(stats: dict[str, ContributorStat], collator: Collator) -> list[str]:
    """Names ordered by commit count (high first), ties broken by collated name."""

    def cmp(a: ContributorStat, b: ContributorStat) -> int:
        if a.commits != b.commits:
            return b.commits - a.commits
        return collator.compare(a.name, b.name)

    return [st.name for st in sorted(stats.values(), key=functools.cmp_to_key(cmp))]


def abbreviate_authors(names: list[str], limit: int, rest: str) -> list[str]:
    if limit == UNLIMITED or len(names) <= limit:
        return list(names)
    if limit == 1:
        return [names[0]]
    return [*names[: limit - 1], rest]


def format_authors(names: list[str], options: InferOptions) -> str | None:
    if options.format is not None:
        text = options.format(list(names))
    else:
        joiner = options.list_formatter if options.list_formatter is not None else BabelListFormatter(options.locales)
        text = joiner.format(list(names))
    return text or None


def infer_author(stats: dict[str, ContributorStat], options: InferOptions) -> str | None:
    collator = options.collator if options.collator is not None else IcuCollator(options.locales)
    ranked = rank_contributors(stats, collator)
    return format_authors(abbreviate_authors(ranked, options.limit, options.author_rest), options)
