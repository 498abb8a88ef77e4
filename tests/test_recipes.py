# flake8: noqa
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))  # noqa: E402

import json

import pytest

from recipebook.recipes import load_recipes


def test_missing_file_gives_empty_list(tmp_path):
    assert load_recipes(tmp_path / "nope.json") == []


def test_loads_objects_and_skips_other_entries(tmp_path):
    p = tmp_path / "recipes.json"
    p.write_text(json.dumps([{"name": "Ramen", "ingredience": "soba"}, "junk", 3]), encoding="utf-8")
    assert load_recipes(p) == [{"name": "Ramen", "ingredience": "soba"}]


def test_rejects_non_array(tmp_path):
    p = tmp_path / "recipes.json"
    p.write_text(json.dumps({"name": "Ramen"}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_recipes(p)


def test_bundled_seed_file_is_valid():
    data_file = Path(__file__).resolve().parent.parent / "data" / "recipes.json"
    recipes = load_recipes(data_file)
    assert recipes
    assert all(r["name"] and r["ingredience"] for r in recipes)
