from __future__ import annotations

from collections.abc import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from route_i18n.i18n.client_load import ClientLoadConfig, select_client_translations
from route_i18n.i18n.injection import (
    DEFAULT_GLOBAL_NAME,
    build_client_payload,
    inject_into_html,
    render_injection_script,
)
from route_i18n.i18n.namespaces import NoInjection


class TranslationInjectionMiddleware(BaseHTTPMiddleware):
    """Embed the route's client translations into HTML responses.

    Needs ``LocaleMiddleware`` to have populated ``request.state``; requests
    without translation state and non-HTML responses pass through untouched.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        config: ClientLoadConfig,
        global_name: str = DEFAULT_GLOBAL_NAME,
    ) -> None:
        super().__init__(app)
        self.config = config
        self.global_name = global_name

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        response = await call_next(request)

        content_type = response.headers.get("content-type", "")
        catalog = getattr(request.state, "translation_data", None)
        if not content_type.startswith("text/html") or catalog is None:
            return response

        selected = select_client_translations(request.state.path, catalog, self.config)
        if isinstance(selected, NoInjection):
            return response

        body = b"".join([chunk async for chunk in response.body_iterator])
        charset = content_type_charset(content_type)
        payload = build_client_payload(
            request.state.locale,
            selected,
            request.state.translation_config.fallback_keys,
        )
        script = render_injection_script(payload, self.global_name)
        try:
            new_body = inject_into_html(body.decode(charset), script).encode(charset)
        except (LookupError, UnicodeError):
            # Unknown charset or body not valid in it: pass the page through as-is
            return _with_body(response, body)
        return _with_body(response, new_body)


def content_type_charset(content_type: str, default: str = "utf-8") -> str:
    """Return the ``charset=`` parameter of a Content-Type header value."""
    for param in content_type.split(";")[1:]:
        name, _, value = param.strip().partition("=")
        if name.strip().lower() == "charset" and value.strip():
            return value.strip().strip('"').strip("'")
    return default


def _with_body(response: Response, body: bytes) -> Response:
    rewritten = Response(content=body, status_code=response.status_code)
    # Keep every original header (repeated Set-Cookie included), fix the length
    rewritten.raw_headers = [
        (k, v) for k, v in response.raw_headers if k.lower() != b"content-length"
    ] + [(b"content-length", str(len(body)).encode("latin-1"))]
    return rewritten
