"""
Translation lookup.

``create_translator`` closes over one flat catalog and returns ``t(key)``.
A missing key is never an error: development shows it as ``[key]`` and logs
a warning, production renders nothing (or the bare key when
``show_keys_in_prod`` is set).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from structlog.stdlib import BoundLogger

from route_i18n.core.logging import get_logger
from route_i18n.i18n.catalog import KEY_SEPARATOR, FlatCatalog

Translator = Callable[[str], str]
IndicatorPredicate = Callable[[str, str], bool]

logger = get_logger(__name__)


def min_words(count: int) -> IndicatorPredicate:
    """Indicator predicate: only mark texts with at least ``count`` words."""

    def predicate(text: str, locale: str) -> bool:
        return len(text.split()) >= count

    return predicate


@dataclass(frozen=True)
class FallbackIndicator:
    """
    Marker appended to texts borrowed from the default locale.

    ``template`` is a ``str.format`` string receiving ``locale`` (requested
    locale) and ``default_locale`` (locale that supplied the text).
    ``predicate(text, locale)`` can limit which texts get marked.
    ``apply_in_dev=False`` hides the marker while developing.
    """

    template: str = " ({default_locale})"
    predicate: IndicatorPredicate | None = None
    apply_in_dev: bool = True

    def applies_to(self, text: str, locale: str) -> bool:
        return self.predicate is None or self.predicate(text, locale)

    def render(self, locale: str, default_locale: str | None) -> str:
        return self.template.format(locale=locale, default_locale=default_locale or "")


@dataclass(frozen=True)
class TranslationConfig:
    locale: str
    default_locale: str | None = None
    fallback_keys: frozenset[str] = field(default_factory=frozenset)
    is_production: bool = False
    show_keys_in_prod: bool = False
    fallback_indicator: FallbackIndicator | None = None

    def __post_init__(self) -> None:
        # Accept any iterable (e.g. a deserialized list) but keep set semantics
        if not isinstance(self.fallback_keys, frozenset):
            object.__setattr__(self, "fallback_keys", frozenset(self.fallback_keys))


def create_translator(
    catalog: FlatCatalog,
    config: TranslationConfig,
    log: BoundLogger | None = None,
) -> Translator:
    """Return ``t(key) -> str`` over ``catalog`` following ``config``'s lookup policy."""
    log = log or logger
    indicator = config.fallback_indicator
    if indicator is not None and not config.is_production and not indicator.apply_in_dev:
        indicator = None

    def t(key: str) -> str:
        text = catalog.get(key)
        if text is not None:
            if (
                indicator is not None
                and key in config.fallback_keys
                and indicator.applies_to(text, config.locale)
            ):
                return text + indicator.render(config.locale, config.default_locale)
            return text

        if not config.is_production:
            log.warning("translation_missing", key=key, locale=config.locale)
            return f"[{key}]"
        if config.show_keys_in_prod:
            return key
        return ""

    return t


def namespaced(translator: Translator, prefix: str) -> Translator:
    """Return a translator that looks keys up under ``prefix``."""

    def t(key: str) -> str:
        return translator(f"{prefix}{KEY_SEPARATOR}{key}")

    return t

