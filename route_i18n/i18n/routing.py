"""
Route pattern matching for client-side translation loading.

Patterns are either exact paths (``/settings``) or prefixes ending in ``*``
(``/indicators/*``). The wildcard is greedy and does not respect segment
boundaries: ``/user*`` matches ``/users/5``. Authors who want segment-exact
matching write the slash themselves (``/user/*``).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from structlog.stdlib import BoundLogger

from route_i18n.core.logging import get_logger
from route_i18n.i18n.errors import InvalidRoutePattern
from route_i18n.i18n.namespaces import as_names

WILDCARD = "*"

logger = get_logger(__name__)


def normalize_url_path(path: str) -> str:
    """Drop one trailing slash, keeping the root path ``/`` intact."""
    if path == "/" or not path.endswith("/"):
        return path
    return path[:-1]


@dataclass(frozen=True)
class RoutePattern:
    pattern: str
    namespaces: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        idx = self.pattern.find(WILDCARD)
        if idx != -1 and idx != len(self.pattern) - 1:
            raise InvalidRoutePattern(self.pattern)
        object.__setattr__(self, "namespaces", as_names(self.namespaces))

    @property
    def is_wildcard(self) -> bool:
        return self.pattern.endswith(WILDCARD)

    @property
    def literal(self) -> str:
        """The part of the pattern before the wildcard (the whole pattern if none)."""
        return self.pattern[:-1] if self.is_wildcard else self.pattern


@dataclass(frozen=True)
class RouteMatch:
    patterns: tuple[RoutePattern, ...] = ()

    @property
    def matched(self) -> bool:
        return bool(self.patterns)

    @property
    def overlap(self) -> bool:
        return len(self.patterns) > 1


def match_route_pattern(
    path: str,
    pattern: RoutePattern | str,
    ignore_trailing_slash: bool = False,
) -> bool:
    """Return True when ``path`` is selected by ``pattern``."""
    if isinstance(pattern, str):
        pattern = RoutePattern(pattern)

    literal = pattern.literal
    if ignore_trailing_slash:
        path = normalize_url_path(path)
        literal = normalize_url_path(literal)

    if pattern.is_wildcard:
        return path.startswith(literal)
    return path == literal


def match_routes(
    path: str,
    routes: Iterable[RoutePattern],
    *,
    ignore_trailing_slash: bool = False,
    warn_on_overlap: bool = False,
    log: BoundLogger | None = None,
) -> RouteMatch:
    """
    Collect every pattern matching ``path``, in declared order.

    With ``warn_on_overlap`` a warning is logged when several patterns match;
    the result is the same either way.
    """
    result = RouteMatch(
        tuple(r for r in routes if match_route_pattern(path, r, ignore_trailing_slash))
    )
    if warn_on_overlap and result.overlap:
        (log or logger).warning(
            "route_pattern_overlap",
            path=path,
            patterns=[r.pattern for r in result.patterns],
        )
    return result
