from __future__ import annotations

import json
from pathlib import Path

import pytest

from infer_git_meta.config import InferOptions, load_options, options_from_dict


def test_defaults() -> None:
    opts = InferOptions()
    assert opts.locales == ("en",)
    assert opts.limit == 3
    assert opts.author_rest == "others"
    assert opts.format is None
    assert opts.collator is None
    assert opts.list_formatter is None


def test_falsy_values_fall_back_to_defaults() -> None:
    opts = options_from_dict({"locales": "", "limit": 0, "authorRest": ""})
    assert opts.locales == ("en",)
    assert opts.limit == 3
    assert opts.author_rest == "others"


def test_options_from_dict_accepts_both_key_styles() -> None:
    assert options_from_dict({"authorRest": "другие"}).author_rest == "другие"
    assert options_from_dict({"author_rest": "et al."}).author_rest == "et al."
    assert options_from_dict({"locales": ["en-GB", "en"]}).locales == ("en-GB", "en")
    assert options_from_dict({"limit": -1}).limit == -1


@pytest.mark.parametrize("limit", [-2, "3", 1.5, True])
def test_invalid_limit(limit: object) -> None:
    with pytest.raises(ValueError):
        options_from_dict({"limit": limit})


def test_load_options_from_json(tmp_path: Path) -> None:
    p = tmp_path / "infer-git-meta.json"
    p.write_text(json.dumps({"locales": "ru", "limit": 2, "authorRest": "другие"}) + "\n", encoding="utf-8")
    fmt = "|".join
    opts = load_options(p, format=fmt)
    assert opts.locales == ("ru",)
    assert opts.limit == 2
    assert opts.author_rest == "другие"
    assert opts.format is fmt


def test_load_options_missing_file_gives_defaults(tmp_path: Path) -> None:
    assert load_options(tmp_path / "nope.json") == InferOptions()


def test_load_options_rejects_non_object(tmp_path: Path) -> None:
    p = tmp_path / "bad.json"
    p.write_text("[1, 2]\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_options(p)
