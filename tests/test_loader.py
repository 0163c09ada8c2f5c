from __future__ import annotations

import json
from pathlib import Path

import pytest

from route_i18n.i18n.errors import DuplicateKey, MalformedCatalogEntry
from route_i18n.i18n.loader import (
    CatalogStore,
    find_locales_directory,
    get_effective_locales_dir,
    load_catalogs,
    load_locale_tree,
)
from route_i18n.i18n.catalog import flatten_catalog


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_find_locales_directory_in_base(tmp_path):
    (tmp_path / "locales").mkdir()
    assert find_locales_directory(tmp_path) == tmp_path / "locales"


def test_find_locales_directory_checks_other_candidates(tmp_path):
    (tmp_path / "static" / "locales").mkdir(parents=True)
    assert find_locales_directory(tmp_path) == tmp_path / "static" / "locales"


def test_find_locales_directory_defaults_to_cwd(tmp_path, monkeypatch):
    (tmp_path / "locales").mkdir()
    monkeypatch.chdir(tmp_path)
    assert find_locales_directory() == Path.cwd() / "locales"


def test_find_locales_directory_returns_none_when_not_found(tmp_path):
    assert find_locales_directory(tmp_path) is None


def test_effective_dir_prefers_existing_path(tmp_path):
    custom = tmp_path / "custom-locales"
    custom.mkdir()
    assert get_effective_locales_dir(custom) == custom
    assert get_effective_locales_dir("custom-locales", base=tmp_path) == custom


def test_effective_dir_falls_back_to_search(tmp_path):
    (tmp_path / "locales").mkdir()
    assert get_effective_locales_dir("./nonexistent", base=tmp_path) == tmp_path / "locales"
    assert get_effective_locales_dir(None, base=tmp_path) == tmp_path / "locales"


def test_load_locale_tree_json_and_yaml(tmp_path):
    en = tmp_path / "en"
    _write(en / "common.json", json.dumps({"actions": {"save": "Save"}}))
    _write(en / "features" / "user-profile.yaml", "title: Profile\nfirst-name: First name\n")
    _write(en / "features" / "empty.yml", "")
    _write(en / "README.md", "ignored")
    _write(en / ".hidden.json", "{not json")

    flat = flatten_catalog(load_locale_tree(en))
    assert flat == {
        "common.actions.save": "Save",
        "features.userProfile.title": "Profile",
        "features.userProfile.first-name": "First name",
    }


def test_file_must_hold_an_object(tmp_path):
    _write(tmp_path / "en" / "common.json", json.dumps(["a", "b"]))
    with pytest.raises(MalformedCatalogEntry) as exc:
        load_locale_tree(tmp_path / "en")
    assert exc.value.path == ("common",)


def test_non_string_value_in_file(tmp_path):
    _write(tmp_path / "en" / "common.json", json.dumps({"count": 3}))
    with pytest.raises(MalformedCatalogEntry) as exc:
        load_locale_tree(tmp_path / "en")
    assert exc.value.path == ("common", "count")


def test_colliding_file_names_are_rejected(tmp_path):
    _write(tmp_path / "en" / "user-profile.json", json.dumps({"title": "A"}))
    _write(tmp_path / "en" / "userProfile.json", json.dumps({"title": "B"}))
    with pytest.raises(DuplicateKey):
        load_catalogs(tmp_path, ["en"])


def test_load_catalogs_missing_locale_is_empty(locales_dir):
    catalogs = load_catalogs(locales_dir, ["en", "de"])
    assert catalogs["de"] == {}
    assert catalogs["en"]["features.admin.title"] == "Administration"


def test_store_reload_swaps_snapshot(locales_dir):
    store = CatalogStore(locales_dir, ["en", "es"])
    assert not store.loaded
    first = store.reload()
    assert store.loaded
    assert first["en"]["common.title"] == "Demo"

    _write(locales_dir / "en" / "extra.json", json.dumps({"key": "Value"}))
    second = store.reload()

    assert "extra.key" in second["en"]
    # a snapshot handed out earlier never changes
    assert "extra.key" not in first["en"]
    assert store.snapshot() is second


def test_store_failed_reload_keeps_previous_snapshot(locales_dir):
    store = CatalogStore(locales_dir, ["en"])
    good = store.reload()

    _write(locales_dir / "en" / "broken.json", json.dumps({"n": 1}))
    with pytest.raises(MalformedCatalogEntry):
        store.reload()
    assert store.snapshot() is good


def test_store_snapshot_is_read_only(locales_dir):
    store = CatalogStore(locales_dir, ["en"])
    snapshot = store.reload()
    with pytest.raises(TypeError):
        snapshot["en"]["common.title"] = "changed"  # type: ignore[index]


def test_store_without_directory_has_empty_catalogs():
    store = CatalogStore(None, ["en", "es"])
    assert dict(store.reload()) == {"en": {}, "es": {}}
