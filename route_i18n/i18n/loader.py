"""
Load locale catalogs from disk.

Expected layout::

    locales/
      en/
        common.json              -> common.*
        features/
          admin.json             -> features.admin.*
          user-profile.yaml      -> features.userProfile.*
      es/
        ...

File and directory names are hyphen-case on disk and become camel-case key
segments. Keys inside the files are taken verbatim.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from route_i18n.core.logging import get_logger
from route_i18n.i18n.catalog import FlatCatalog, NestedCatalog, Node, flatten_catalog, nested_from_mapping
from route_i18n.i18n.errors import MalformedCatalogEntry

logger = get_logger(__name__)

LOCALES_DIR_CANDIDATES = ("locales", "static/locales", "src/locales", "app/locales")
CATALOG_SUFFIXES = (".json", ".yaml", ".yml")


def find_locales_directory(base: Path | str | None = None) -> Path | None:
    """Return the first conventional locales directory under ``base`` (default: CWD)."""
    root = Path(base) if base is not None else Path.cwd()
    for candidate in LOCALES_DIR_CANDIDATES:
        path = root / candidate
        if path.is_dir():
            return path
    return None


def get_effective_locales_dir(
    preferred: Path | str | None,
    base: Path | str | None = None,
) -> Path | None:
    """Use ``preferred`` when it exists, otherwise search the usual places."""
    if preferred:
        path = Path(preferred)
        if not path.is_absolute() and base is not None:
            path = Path(base) / path
        if path.is_dir():
            return path
    return find_locales_directory(base)


def _read_document(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if path.suffix == ".json":
        return json.loads(text)
    # Empty YAML documents load as None; treat them as empty catalogs
    return yaml.safe_load(text) or {}


def _load_file(path: Path, source: tuple[str, ...]) -> Node:
    data = _read_document(path)
    if not isinstance(data, Mapping):
        raise MalformedCatalogEntry(source, data)
    return nested_from_mapping(data, source)


def _load_directory(directory: Path, source: tuple[str, ...]) -> Node:
    entries: list[tuple[str, NestedCatalog]] = []
    for child in sorted(directory.iterdir()):
        if child.name.startswith("."):
            continue
        if child.is_dir():
            entries.append((child.name, _load_directory(child, source + (child.name,))))
        elif child.suffix in CATALOG_SUFFIXES:
            entries.append((child.stem, _load_file(child, source + (child.stem,))))
    return Node(tuple(entries), normalize=True)


def load_locale_tree(locale_dir: Path | str) -> Node:
    """Read every catalog file below ``locale_dir`` into one tree."""
    return _load_directory(Path(locale_dir), ())


def load_catalogs(locales_dir: Path | str, languages: Iterable[str]) -> dict[str, dict[str, str]]:
    """
    Load and flatten the catalog of each language.

    A language without a directory gets an empty catalog. Malformed files and
    duplicate keys raise and abort the whole load.
    """
    root = Path(locales_dir)
    catalogs: dict[str, dict[str, str]] = {}
    for lang in languages:
        locale_dir = root / lang
        if not locale_dir.is_dir():
            logger.warning("locale_directory_missing", locale=lang, path=str(locale_dir))
            catalogs[lang] = {}
            continue
        catalogs[lang] = flatten_catalog(load_locale_tree(locale_dir))
    logger.info(
        "catalogs_loaded",
        path=str(root),
        locales={lang: len(cat) for lang, cat in catalogs.items()},
    )
    return catalogs


class CatalogStore:
    """
    Holds the current snapshot of flattened catalogs.

    ``reload`` builds a complete new snapshot before swapping it in, so a
    request that grabbed ``snapshot()`` keeps a consistent view and a failed
    reload leaves the previous snapshot active.
    """

    def __init__(self, locales_dir: Path | str | None, languages: Iterable[str]) -> None:
        self.locales_dir = Path(locales_dir) if locales_dir is not None else None
        self.languages = tuple(languages)
        self._snapshot: Mapping[str, FlatCatalog] = MappingProxyType({})
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    def snapshot(self) -> Mapping[str, FlatCatalog]:
        return self._snapshot

    def reload(self) -> Mapping[str, FlatCatalog]:
        if self.locales_dir is None:
            catalogs: dict[str, dict[str, str]] = {lang: {} for lang in self.languages}
            logger.warning("locales_directory_not_found", languages=list(self.languages))
        else:
            try:
                catalogs = load_catalogs(self.locales_dir, self.languages)
            except Exception:
                logger.exception("catalog_reload_failed", path=str(self.locales_dir))
                raise
        self._snapshot = MappingProxyType(
            {lang: MappingProxyType(cat) for lang, cat in catalogs.items()}
        )
        self._loaded = True
        return self._snapshot
