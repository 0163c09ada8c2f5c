from __future__ import annotations

import pytest

from route_i18n.i18n.catalog import (
    Leaf,
    Node,
    flatten_catalog,
    flatten_mapping,
    nested_from_mapping,
    to_camel_case,
    unflatten_catalog,
)
from route_i18n.i18n.errors import DuplicateKey, MalformedCatalogEntry


@pytest.mark.parametrize(
    "segment,expected",
    [
        ("common", "common"),
        ("user-profile", "userProfile"),
        ("user-profile-card", "userProfileCard"),
        ("User-Profile", "userProfile"),
        ("api--keys", "apiKeys"),
        ("camelAlready", "camelAlready"),
    ],
)
def test_to_camel_case(segment, expected):
    assert to_camel_case(segment) == expected


def test_flatten_nested_mapping():
    data = {
        "common": {"actions": {"save": "Save", "cancel": "Cancel"}, "title": "Title"},
        "root": "Root",
    }
    assert flatten_mapping(data) == {
        "common.actions.save": "Save",
        "common.actions.cancel": "Cancel",
        "common.title": "Title",
        "root": "Root",
    }


def test_casing_applies_to_file_segments_only():
    content = nested_from_mapping({"first-name": "First name"})
    tree = Node((("user-profile", content),), normalize=True)

    # file name normalized, key inside the document kept verbatim
    assert flatten_catalog(tree) == {"userProfile.first-name": "First name"}


def test_nested_directory_nodes_are_normalized():
    admin = nested_from_mapping({"title": "Admin"})
    features = Node((("admin-panel", admin),), normalize=True)
    tree = Node((("features", features),), normalize=True)

    assert flatten_catalog(tree) == {"features.adminPanel.title": "Admin"}


@pytest.mark.parametrize("bad", [1, 2.5, True, None, ["a", "b"]])
def test_non_string_leaf_is_malformed(bad):
    with pytest.raises(MalformedCatalogEntry) as exc:
        nested_from_mapping({"common": {"count": bad}})
    assert exc.value.path == ("common", "count")
    assert "common.count" in str(exc.value)


def test_flatten_rejects_non_string_leaf_built_by_hand():
    tree = Node((("broken", Leaf(42)),))  # type: ignore[arg-type]
    with pytest.raises(MalformedCatalogEntry):
        flatten_catalog(tree)


def test_root_must_be_an_object():
    with pytest.raises(MalformedCatalogEntry):
        nested_from_mapping(["not", "an", "object"])
    with pytest.raises(MalformedCatalogEntry):
        flatten_catalog(Leaf("lonely"))


def test_dotted_key_colliding_with_nested_key():
    with pytest.raises(DuplicateKey) as exc:
        flatten_mapping({"a.b": "flat", "a": {"b": "nested"}})
    err = exc.value
    assert err.key == "a.b"
    assert err.first == ("a.b",)
    assert err.second == ("a", "b")


def test_file_names_colliding_after_normalization():
    one = nested_from_mapping({"title": "One"})
    two = nested_from_mapping({"title": "Two"})
    tree = Node((("user-profile", one), ("userProfile", two)), normalize=True)

    with pytest.raises(DuplicateKey) as exc:
        flatten_catalog(tree)
    assert exc.value.key == "userProfile.title"
    assert "user-profile/title" in str(exc.value)
    assert "userProfile/title" in str(exc.value)


def test_file_and_directory_with_same_name_merge():
    file_part = nested_from_mapping({"title": "Features"})
    dir_part = Node((("admin", nested_from_mapping({"title": "Admin"})),), normalize=True)
    tree = Node((("features", dir_part), ("features", file_part)), normalize=True)

    assert flatten_catalog(tree) == {
        "features.admin.title": "Admin",
        "features.title": "Features",
    }


def test_flatten_then_unflatten_round_trip():
    data = {
        "common": {"actions": {"save": "Save"}, "title": "Title"},
        "features": {"admin": {"users": {"empty": "No users"}}},
        "single": "Value",
    }
    assert unflatten_catalog(flatten_mapping(data)) == data


def test_unflatten_conflict_is_reported():
    with pytest.raises(ValueError):
        unflatten_catalog({"common": "Root", "common.save": "Save"})
