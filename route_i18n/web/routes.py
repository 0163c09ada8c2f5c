from __future__ import annotations

from html import escape

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from route_i18n.i18n.translator import namespaced

router = APIRouter(tags=["web"])


def _page(lang: str, title: str, body: str) -> str:
    return (
        f"<!doctype html><html lang='{escape(lang)}'><head>"
        f"<meta charset='utf-8'><title>{escape(title)}</title>"
        "<style>"
        "body{font-family:system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,Helvetica,Arial}"
        "main{max-width:760px;margin:40px auto;padding:0 16px}"
        "</style>"
        f"</head><body><main>{body}</main></body></html>"
    )


@router.get("/", response_class=HTMLResponse)
def home(request: Request) -> str:
    """Landing page rendered with the request translator."""
    t = request.state.t
    nav = namespaced(t, "common.nav")
    body = (
        f"<h1>{escape(t('common.title'))}</h1>"
        f"<p>{escape(t('common.welcome'))}</p>"
        "<ul>"
        f'<li><a href="/admin/">{escape(nav("admin"))}</a></li>'
        f'<li><a href="/docs">{escape(nav("docs"))}</a></li>'
        "</ul>"
    )
    return _page(request.state.locale, t("common.title"), body)


@router.get("/admin/{section:path}", response_class=HTMLResponse)
def admin(section: str, request: Request) -> str:
    t = namespaced(request.state.t, "features.admin")
    body = (
        f"<h1>{escape(t('title'))}</h1>"
        f"<p>{escape(t('description'))}</p>"
        f"<p><code>{escape(section or '/')}</code></p>"
        f'<p><a href="/">{escape(request.state.t("common.nav.home"))}</a></p>'
    )
    return _page(request.state.locale, t("title"), body)
