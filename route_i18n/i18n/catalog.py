"""
Catalog trees and their flattened, dotted-key form.

A locale catalog is loaded as a tree (``NestedCatalog``): ``Node`` values hold
ordered ``(segment, child)`` entries and ``Leaf`` values hold the text.
Nodes built from directory and file names set ``normalize`` so their
hyphenated segments become camel-case keys (``user-profile`` ->
``userProfile``); keys written inside a JSON document are kept as-is.

``flatten_catalog`` turns such a tree into a ``FlatCatalog``: a plain mapping
of ``"common.actions.save" -> "Save"``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from route_i18n.i18n.errors import DuplicateKey, MalformedCatalogEntry

FlatCatalog = Mapping[str, str]

KEY_SEPARATOR = "."


@dataclass(frozen=True)
class Leaf:
    text: str


@dataclass(frozen=True)
class Node:
    entries: tuple[tuple[str, NestedCatalog], ...] = ()
    # Segments come from file/directory names and need casing normalization
    normalize: bool = False


NestedCatalog = Leaf | Node


def to_camel_case(segment: str) -> str:
    """Convert a hyphenated name to camel-case: ``User-profile-card`` -> ``userProfileCard``."""
    words = [w for w in segment.split("-") if w]
    if not words:
        return segment
    head, *tail = words
    return head[:1].lower() + head[1:] + "".join(w[:1].upper() + w[1:] for w in tail)


def nested_from_mapping(
    data: Any,
    path: tuple[str, ...] = (),
    *,
    normalize: bool = False,
) -> Node:
    """
    Build a ``Node`` from raw decoded data (JSON/YAML objects).

    Raises:
        MalformedCatalogEntry: if ``data`` is not a mapping or any leaf is not a string.
    """
    if not isinstance(data, Mapping):
        raise MalformedCatalogEntry(path, data)

    entries: list[tuple[str, NestedCatalog]] = []
    for segment, value in data.items():
        child_path = path + (str(segment),)
        if isinstance(value, str):
            entries.append((str(segment), Leaf(value)))
        elif isinstance(value, Mapping):
            entries.append((str(segment), nested_from_mapping(value, child_path)))
        else:
            raise MalformedCatalogEntry(child_path, value)
    return Node(tuple(entries), normalize=normalize)


def flatten_catalog(nested: NestedCatalog) -> dict[str, str]:
    """
    Flatten a catalog tree into dotted keys.

    Raises:
        MalformedCatalogEntry: a leaf holds something other than text, or the
            root itself is a leaf.
        DuplicateKey: two different source paths end up with the same key.
    """
    if not isinstance(nested, Node):
        raise MalformedCatalogEntry((), nested)

    flat: dict[str, str] = {}
    # key -> source path that produced it, for collision reports
    sources: dict[str, tuple[str, ...]] = {}

    def walk(node: NestedCatalog, key_parts: tuple[str, ...], source: tuple[str, ...]) -> None:
        if isinstance(node, Leaf):
            if not isinstance(node.text, str):
                raise MalformedCatalogEntry(source, node.text)
            key = KEY_SEPARATOR.join(key_parts)
            if key in sources:
                raise DuplicateKey(key, sources[key], source)
            sources[key] = source
            flat[key] = node.text
            return

        if not isinstance(node, Node):
            raise MalformedCatalogEntry(source, node)

        for segment, child in node.entries:
            part = to_camel_case(segment) if node.normalize else segment
            walk(child, key_parts + (part,), source + (segment,))

    walk(nested, (), ())
    return flat


def flatten_mapping(data: Any) -> dict[str, str]:
    """Shortcut for ``flatten_catalog(nested_from_mapping(data))``."""
    return flatten_catalog(nested_from_mapping(data))


def unflatten_catalog(flat: FlatCatalog) -> dict[str, Any]:
    """Re-nest a flat catalog by splitting every key on ``.``."""
    tree: dict[str, Any] = {}
    for key, text in flat.items():
        *parents, last = key.split(KEY_SEPARATOR)
        cur = tree
        for part in parents:
            nxt = cur.setdefault(part, {})
            if not isinstance(nxt, dict):
                raise ValueError(f"Key '{key}' nests under the text entry '{part}'")
            cur = nxt
        if isinstance(cur.get(last), dict):
            raise ValueError(f"Key '{key}' is both a text entry and a namespace")
        cur[last] = text
    return tree
