"""
Decide which translations a page ships to the browser.

Example config::

    ClientLoadConfig(
        always=("common",),
        routes={
            "/indicators/*": ["features.indicators"],
            "/admin/*": ["features.admin", "features.users"],
            "/embed/*": [SKIP_INJECTION],
        },
        fallback="always-only",
    )

Route patterns say WHEN to load namespaces, not how catalog files are laid
out: ``features.indicators`` pulls in every ``features.indicators.*`` key.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum

from structlog.stdlib import BoundLogger

from route_i18n.i18n.catalog import FlatCatalog
from route_i18n.i18n.namespaces import (
    ALL_NAMESPACES,
    NO_INJECTION,
    NamespaceSelection,
    NoInjection,
    SpecificNamespaces,
    as_names,
    extract_namespaces,
    is_skip_marker,
)
from route_i18n.i18n.routing import RoutePattern, match_routes


class FallbackMode(str, Enum):
    """What to load when no route pattern matches."""

    NONE = "none"
    ALWAYS_ONLY = "always-only"
    ALL = "all"


RoutesInput = Mapping[str, Iterable[str]] | Iterable[RoutePattern]


def _build_routes(routes: RoutesInput) -> tuple[RoutePattern, ...]:
    if isinstance(routes, Mapping):
        return tuple(RoutePattern(pattern, names) for pattern, names in routes.items())
    return tuple(
        r if isinstance(r, RoutePattern) else RoutePattern(r[0], r[1]) for r in routes
    )


@dataclass(frozen=True)
class ClientLoadConfig:
    """
    Client-side loading rules.

    ``routes`` may be given as a ``{pattern: [namespace, ...]}`` mapping (in
    declaration order) or as ``RoutePattern`` objects. Patterns are validated
    here, so a bad pattern fails when the config is built, never per request.

    Raises:
        InvalidRoutePattern: a pattern has ``*`` anywhere but at its end.
        TypeError: ``always`` or a route's namespaces is a bare string.
        ValueError: unknown ``fallback`` value.
    """

    always: tuple[str, ...] = ()
    routes: tuple[RoutePattern, ...] = ()
    fallback: FallbackMode = FallbackMode.ALWAYS_ONLY
    ignore_trailing_slash: bool = False
    warn_on_overlap: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "always", as_names(self.always))
        object.__setattr__(self, "routes", _build_routes(self.routes))
        object.__setattr__(self, "fallback", FallbackMode(self.fallback))


def resolve_selection(
    path: str,
    config: ClientLoadConfig,
    log: BoundLogger | None = None,
) -> NamespaceSelection:
    """Work out the namespace selection for ``path`` without touching any catalog."""
    match = match_routes(
        path,
        config.routes,
        ignore_trailing_slash=config.ignore_trailing_slash,
        warn_on_overlap=config.warn_on_overlap,
        log=log,
    )

    if match.matched:
        names = list(config.always)
        for route in match.patterns:
            # A matching route that opts out wins over everything else
            if any(is_skip_marker(ns) for ns in route.namespaces):
                return NO_INJECTION
            names.extend(route.namespaces)
        return SpecificNamespaces(tuple(names))

    if config.fallback is FallbackMode.NONE:
        return NO_INJECTION
    if config.fallback is FallbackMode.ALWAYS_ONLY:
        return SpecificNamespaces(config.always) if config.always else NO_INJECTION
    return ALL_NAMESPACES


def select_client_translations(
    path: str,
    catalog: FlatCatalog,
    config: ClientLoadConfig,
    log: BoundLogger | None = None,
) -> dict[str, str] | NoInjection:
    """
    Return the sub-catalog to embed for ``path``, or ``NO_INJECTION``.

    Serialization and escaping are left to the caller.
    """
    selection = resolve_selection(path, config, log)
    if isinstance(selection, NoInjection):
        return NO_INJECTION
    return extract_namespaces(catalog, selection)
