from __future__ import annotations

import dataclasses
import json
from pathlib import Path
from typing import Any, Callable, Optional

from .i18n import Collator, ListFormatter, normalize_locales

DEFAULT_LIMIT = 3
DEFAULT_AUTHOR_REST = "others"
UNLIMITED = -1

FormatFn = Callable[[list[str]], str]


@dataclasses.dataclass(frozen=True)
class InferOptions:
    """
    Settings for one plugin instance.

    `limit` caps how many authors are shown (`-1` shows all of them);
    `author_rest` replaces the names left out. `format`, when set, renders
    the abbreviated name list instead of the locale's list pattern.
    `collator` and `list_formatter` replace the locale services built from
    `locales` for tie-break ordering and list joining.
    """

    locales: tuple[str, ...] = ("en",)
    limit: int = DEFAULT_LIMIT
    author_rest: str = DEFAULT_AUTHOR_REST
    format: Optional[FormatFn] = None
    collator: Optional[Collator] = None
    list_formatter: Optional[ListFormatter] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "locales", normalize_locales(self.locales))
        limit = self.limit
        if isinstance(limit, bool) or not isinstance(limit, int):
            raise ValueError(f"limit must be an integer, got {limit!r}")
        if limit == 0:
            limit = DEFAULT_LIMIT
        if limit < UNLIMITED:
            raise ValueError(f"limit must be -1 (unlimited) or a positive integer, got {limit}")
        object.__setattr__(self, "limit", limit)
        if not self.author_rest:
            object.__setattr__(self, "author_rest", DEFAULT_AUTHOR_REST)


def options_from_dict(raw: dict[str, Any] | None) -> InferOptions:
    raw = dict(raw or {})
    rest = raw.get("author_rest", raw.get("authorRest"))
    limit = raw.get("limit")
    return InferOptions(
        locales=raw.get("locales") or ("en",),
        limit=DEFAULT_LIMIT if limit is None else limit,
        author_rest=str(rest or DEFAULT_AUTHOR_REST),
        format=raw.get("format"),
        collator=raw.get("collator"),
        list_formatter=raw.get("list_formatter"),
    )


def load_config(config_path: Path) -> dict:
    if not config_path.exists():
        return {}
    return json.loads(config_path.read_text(encoding="utf-8"))


def load_options(config_path: Path, **overrides: Any) -> InferOptions:
    """
    Read options from a JSON file. Callables (`format`, `collator`) can't be
    stored there and are passed as keyword overrides.
    """
    raw = load_config(config_path)
    if not isinstance(raw, dict):
        raise ValueError(f"config must be a JSON object: {config_path}")
    raw.update(overrides)
    return options_from_dict(raw)
