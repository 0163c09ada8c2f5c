from __future__ import annotations

from fastapi import FastAPI

from route_i18n.api import health, translations
from route_i18n.core.config import Settings, get_settings
from route_i18n.core.logging import configure_logging
from route_i18n.i18n.loader import CatalogStore, get_effective_locales_dir
from route_i18n.middleware.injection import TranslationInjectionMiddleware
from route_i18n.middleware.locale import LocaleMiddleware
from route_i18n.web import routes as web_routes


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Application factory used by production runners and tests.

    Catalogs and the client-load config are built here, so a malformed
    catalog, a duplicate key or an invalid route pattern stops startup.
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL, is_production=settings.is_production)

    store = CatalogStore(
        get_effective_locales_dir(settings.LOCALES_DIR),
        settings.SUPPORTED_LOCALES,
    )
    store.reload()
    client_load = settings.client_load_config()

    app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION)
    app.state.settings = settings
    app.state.catalog_store = store
    app.state.client_load = client_load

    # Added first = innermost: injection runs after LocaleMiddleware bound the state
    app.add_middleware(
        TranslationInjectionMiddleware,
        config=client_load,
        global_name=settings.INJECTION_GLOBAL,
    )
    app.add_middleware(LocaleMiddleware, store=store, settings=settings)

    # Routers
    app.include_router(health.router)
    app.include_router(translations.router)
    app.include_router(web_routes.router)

    return app


# Default application instance used by ASGI servers (uvicorn route_i18n.main:app).
app = create_app()
