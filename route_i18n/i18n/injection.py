"""
Render selected translations into an HTML page.

The payload is exposed to client code as ``window.<global_name>``::

    {"locale": "es", "translations": {...}, "fallbackKeys": [...]}
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any

from route_i18n.i18n.fallback import fallback_keys_to_payload

DEFAULT_GLOBAL_NAME = "__I18N__"

# Characters that could close the <script> element
_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
}


def build_client_payload(
    locale: str,
    translations: Mapping[str, str],
    fallback_keys: Iterable[str] = (),
) -> dict[str, Any]:
    """Only fallback keys present in ``translations`` are listed."""
    shipped = [k for k in fallback_keys if k in translations]
    return {
        "locale": locale,
        "translations": dict(translations),
        "fallbackKeys": fallback_keys_to_payload(shipped),
    }


def dumps_html_safe(data: Any) -> str:
    """JSON-encode ``data`` so it can sit inside a ``<script>`` element."""
    # ASCII-only output, so the script encodes in whatever charset the page uses
    text = json.dumps(data, ensure_ascii=True, separators=(",", ":"))
    for char, escaped in _HTML_ESCAPES.items():
        text = text.replace(char, escaped)
    return text


def render_injection_script(payload: Any, global_name: str = DEFAULT_GLOBAL_NAME) -> str:
    if not global_name.isidentifier():
        raise ValueError(f"Invalid global name '{global_name}'")
    return f"<script>window.{global_name} = {dumps_html_safe(payload)};</script>"


def inject_into_html(html: str, script: str) -> str:
    """Insert ``script`` before ``</head>``, else before ``</body>``, else at the end."""
    lowered = html.lower()
    for marker in ("</head>", "</body>"):
        idx = lowered.find(marker)
        if idx != -1:
            return html[:idx] + script + html[idx:]
    return html + script
