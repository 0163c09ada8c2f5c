from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, Request

from route_i18n.i18n.client_load import select_client_translations
from route_i18n.i18n.fallback import fallback_keys_to_payload, resolve_locale_catalog
from route_i18n.i18n.injection import build_client_payload
from route_i18n.i18n.namespaces import NoInjection

router = APIRouter(prefix="/api/i18n", tags=["i18n"])


def _resolve(request: Request, locale: str):
    settings = request.app.state.settings
    if locale not in settings.SUPPORTED_LOCALES:
        raise HTTPException(status_code=404, detail=f"Unsupported locale '{locale}'")
    return resolve_locale_catalog(
        request.app.state.catalog_store.snapshot(), locale, settings.DEFAULT_LOCALE
    )


@router.get("/locales")
def list_locales(request: Request) -> dict:
    settings = request.app.state.settings
    return {"default": settings.DEFAULT_LOCALE, "supported": settings.SUPPORTED_LOCALES}


@router.get("/{locale}")
def get_catalog(locale: str, request: Request) -> dict:
    """Full flattened catalog for ``locale``, default-locale gaps filled in."""
    overlay = _resolve(request, locale)
    return {
        "locale": locale,
        "translations": overlay.catalog,
        "fallbackKeys": fallback_keys_to_payload(overlay.fallback_keys),
    }


@router.get("/{locale}/client")
def preview_client_payload(
    locale: str,
    request: Request,
    path: str = Query("/", description="Page path to select namespaces for"),
) -> dict:
    """
    Show what a page at ``path`` would get injected.

    ``inject`` is False when the route ships no translations at all.
    """
    overlay = _resolve(request, locale)
    selected = select_client_translations(path, overlay.catalog, request.app.state.client_load)
    if isinstance(selected, NoInjection):
        return {"path": path, "inject": False, "payload": None}
    return {
        "path": path,
        "inject": True,
        "payload": build_client_payload(locale, selected, overlay.fallback_keys),
    }
