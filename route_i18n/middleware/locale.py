from __future__ import annotations

from collections.abc import Awaitable, Callable

from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from route_i18n.core.config import Settings
from route_i18n.i18n.fallback import resolve_locale_catalog
from route_i18n.i18n.loader import CatalogStore
from route_i18n.i18n.translator import TranslationConfig, create_translator

LANG_COOKIE = "lang"
LANG_COOKIE_MAX_AGE = 60 * 60 * 24 * 365


def parse_accept_language(header: str | None) -> list[str]:
    """Return primary language tags from an Accept-Language header, best first."""
    if not header:
        return []
    weighted: list[tuple[float, str]] = []
    for part in header.split(","):
        tag, _, params = part.strip().partition(";")
        tag = tag.strip().split("-")[0].lower()
        if not tag or tag == "*":
            continue
        q = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                q = float(params[2:])
            except ValueError:
                q = 0.0
        weighted.append((q, tag))
    # sorted() is stable, so equal weights keep header order
    return [tag for _, tag in sorted(weighted, key=lambda item: -item[0])]


class LocaleMiddleware(BaseHTTPMiddleware):
    """Resolve the request locale and bind its translator to ``request.state``.

    Locale precedence: ``?lang=``, ``lang`` cookie, ``Accept-Language``,
    then ``DEFAULT_LOCALE``. The bound state is:

    - ``locale``, ``path``
    - ``translation_data`` (catalog with default-locale fallback applied)
    - ``translation_config`` (``TranslationConfig``)
    - ``t`` (translator for this request)
    """

    def __init__(self, app: ASGIApp, *, store: CatalogStore, settings: Settings) -> None:
        super().__init__(app)
        self.store = store
        self.settings = settings
        self.supported = set(settings.SUPPORTED_LOCALES)

    def resolve_locale(self, request: Request) -> str:
        candidates = [request.query_params.get(LANG_COOKIE), request.cookies.get(LANG_COOKIE)]
        candidates += parse_accept_language(request.headers.get("accept-language"))
        for lang in candidates:
            if lang in self.supported:
                return lang
        return self.settings.DEFAULT_LOCALE

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        settings = self.settings
        if settings.HOT_RELOAD and not settings.is_production:
            await run_in_threadpool(self.store.reload)
        # One snapshot for the whole request
        catalogs = self.store.snapshot()

        locale = self.resolve_locale(request)
        overlay = resolve_locale_catalog(catalogs, locale, settings.DEFAULT_LOCALE)
        config = TranslationConfig(
            locale=locale,
            default_locale=settings.DEFAULT_LOCALE,
            fallback_keys=overlay.fallback_keys,
            is_production=settings.is_production,
            show_keys_in_prod=settings.SHOW_KEYS_IN_PROD,
            fallback_indicator=settings.fallback_indicator(),
        )

        request.state.locale = locale
        request.state.path = request.url.path
        request.state.translation_data = overlay.catalog
        request.state.translation_config = config
        request.state.t = create_translator(overlay.catalog, config)

        response = await call_next(request)
        if request.query_params.get(LANG_COOKIE) == locale:
            response.set_cookie(
                LANG_COOKIE,
                locale,
                max_age=LANG_COOKIE_MAX_AGE,
                httponly=False,
                samesite="lax",
            )
        return response
