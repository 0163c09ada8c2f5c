from __future__ import annotations

from route_i18n.i18n.catalog import (
    FlatCatalog,
    Leaf,
    NestedCatalog,
    Node,
    flatten_catalog,
    flatten_mapping,
    nested_from_mapping,
    to_camel_case,
    unflatten_catalog,
)
from route_i18n.i18n.client_load import (
    ClientLoadConfig,
    FallbackMode,
    resolve_selection,
    select_client_translations,
)
from route_i18n.i18n.errors import DuplicateKey, I18nError, InvalidRoutePattern, MalformedCatalogEntry
from route_i18n.i18n.fallback import FallbackOverlay, overlay_fallback, resolve_locale_catalog
from route_i18n.i18n.namespaces import (
    ALL_NAMESPACES,
    NO_INJECTION,
    SKIP_INJECTION,
    AllNamespaces,
    NoInjection,
    SpecificNamespaces,
    extract_namespaces,
)
from route_i18n.i18n.routing import RoutePattern, match_route_pattern, match_routes, normalize_url_path
from route_i18n.i18n.translator import (
    FallbackIndicator,
    TranslationConfig,
    Translator,
    create_translator,
    namespaced,
)

__all__ = [
    "ALL_NAMESPACES",
    "NO_INJECTION",
    "SKIP_INJECTION",
    "AllNamespaces",
    "ClientLoadConfig",
    "DuplicateKey",
    "FallbackIndicator",
    "FallbackMode",
    "FallbackOverlay",
    "FlatCatalog",
    "I18nError",
    "InvalidRoutePattern",
    "Leaf",
    "MalformedCatalogEntry",
    "NestedCatalog",
    "NoInjection",
    "Node",
    "RoutePattern",
    "SpecificNamespaces",
    "TranslationConfig",
    "Translator",
    "create_translator",
    "extract_namespaces",
    "flatten_catalog",
    "flatten_mapping",
    "match_route_pattern",
    "match_routes",
    "namespaced",
    "nested_from_mapping",
    "normalize_url_path",
    "overlay_fallback",
    "resolve_locale_catalog",
    "resolve_selection",
    "select_client_translations",
    "to_camel_case",
    "unflatten_catalog",
]
