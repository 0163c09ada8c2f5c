"""
Namespace selection over a flat catalog.

A selection is one of three variants:

- ``AllNamespaces``: no filtering, the whole catalog.
- ``SpecificNamespaces(names)``: keys equal to a name or below ``name + "."``.
- ``NoInjection``: nothing at all.

Plain lists of names are still accepted at the edges: an empty list means
"all", and a list holding ``SKIP_INJECTION`` (or an empty string) means
"nothing".
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from route_i18n.i18n.catalog import KEY_SEPARATOR, FlatCatalog

SKIP_INJECTION = "__SKIP_INJECTION__"
_SKIP_MARKERS = frozenset({SKIP_INJECTION, ""})


@dataclass(frozen=True)
class AllNamespaces:
    pass


@dataclass(frozen=True)
class SpecificNamespaces:
    names: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Keep first-seen order, drop duplicates
        object.__setattr__(self, "names", tuple(dict.fromkeys(as_names(self.names))))


@dataclass(frozen=True)
class NoInjection:
    pass


NamespaceSelection = AllNamespaces | SpecificNamespaces | NoInjection

ALL_NAMESPACES = AllNamespaces()
NO_INJECTION = NoInjection()


def is_skip_marker(name: str) -> bool:
    return name in _SKIP_MARKERS


def as_names(names: Iterable[str]) -> tuple[str, ...]:
    """Return ``names`` as a tuple; a bare string is rejected, not split."""
    if isinstance(names, str):
        raise TypeError(f"expected a collection of namespace names, got str {names!r}")
    return tuple(names)


def selection_from_names(names: Iterable[str]) -> NamespaceSelection:
    """Translate a plain list of names into a selection variant."""
    names = as_names(names)
    if not names:
        return ALL_NAMESPACES
    if any(is_skip_marker(n) for n in names):
        return NO_INJECTION
    return SpecificNamespaces(names)


def key_in_namespace(key: str, namespace: str) -> bool:
    return key == namespace or key.startswith(namespace + KEY_SEPARATOR)


def extract_namespaces(
    catalog: FlatCatalog,
    selection: NamespaceSelection | Iterable[str],
) -> dict[str, str]:
    """
    Return the entries of ``catalog`` covered by ``selection``.

    ``"common"`` selects ``common`` and ``common.save`` but never
    ``commonExtra``.
    """
    if not isinstance(selection, (AllNamespaces, SpecificNamespaces, NoInjection)):
        selection = selection_from_names(selection)

    if isinstance(selection, NoInjection):
        return {}
    if isinstance(selection, AllNamespaces):
        return dict(catalog)

    return {
        key: text
        for key, text in catalog.items()
        if any(key_in_namespace(key, ns) for ns in selection.names)
    }
