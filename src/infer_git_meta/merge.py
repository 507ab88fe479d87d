from __future__ import annotations

from typing import Any

from .models import AuthorMeta, ContentFile

META_FIELDS = ("published", "modified", "author")


def merge_field(override: Any, existing: Any, computed: Any) -> Any:
    """
    Value the meta bag should end up holding for one field.

    Front matter (`override`) wins, then whatever is already in the bag;
    the computed value only fills a gap. When front matter wins the bag is
    left as it was.
    """
    if override:
        return existing
    if existing:
        return existing
    return computed


def write_meta(file: ContentFile, computed: AuthorMeta) -> None:
    matter = file.matter
    meta = file.meta
    for key in META_FIELDS:
        value = merge_field(matter.get(key), meta.get(key), getattr(computed, key))
        if value is meta.get(key):
            continue
        if value:
            meta[key] = value
