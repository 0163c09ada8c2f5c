"""
Default-locale overlay.

A target catalog is completed with the entries it lacks from the default
locale. The keys filled in that way are reported so the translator can mark
them and the client can be told which texts are not really translated.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from route_i18n.i18n.catalog import FlatCatalog


@dataclass(frozen=True)
class FallbackEntry:
    text: str
    is_fallback: bool = False


@dataclass(frozen=True)
class FallbackOverlay:
    """Result of ``overlay_fallback``: the merged catalog and the borrowed keys."""

    catalog: dict[str, str]
    fallback_keys: frozenset[str] = field(default_factory=frozenset)


def overlay_entries(target: FlatCatalog, default: FlatCatalog) -> dict[str, FallbackEntry]:
    """Merge ``default`` under ``target``, tagging every entry with its origin."""
    merged = {key: FallbackEntry(text) for key, text in target.items()}
    for key, text in default.items():
        if key not in target:
            merged[key] = FallbackEntry(text, is_fallback=True)
    return merged


def overlay_fallback(target: FlatCatalog, default: FlatCatalog) -> FallbackOverlay:
    """
    Fill the gaps of ``target`` with entries from ``default``.

    The result holds the union of both key sets; target texts always win and
    target-only keys are kept.
    """
    entries = overlay_entries(target, default)
    return FallbackOverlay(
        catalog={key: entry.text for key, entry in entries.items()},
        fallback_keys=frozenset(key for key, entry in entries.items() if entry.is_fallback),
    )


def resolve_locale_catalog(
    catalogs: Mapping[str, FlatCatalog],
    locale: str,
    default_locale: str | None = None,
) -> FallbackOverlay:
    """
    Return the catalog to use for ``locale``.

    Without a default locale, or when the default is the requested locale,
    the overlay is disabled: the target catalog is used unmodified and no key
    is reported as fallback.
    """
    target = catalogs.get(locale, {})
    if not default_locale or default_locale == locale:
        return FallbackOverlay(catalog=dict(target))
    return overlay_fallback(target, catalogs.get(default_locale, {}))


def fallback_keys_to_payload(keys: Iterable[str]) -> list[str]:
    """Serialize fallback keys as a stable, ordered list."""
    return sorted(set(keys))


def fallback_keys_from_payload(payload: Iterable[str] | None) -> frozenset[str]:
    """Rebuild the fallback key set from its serialized list form."""
    return frozenset(payload or ())
