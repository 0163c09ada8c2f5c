# ruff: noqa: E402
import json
import sys
from pathlib import Path

# Ensure project root on sys.path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest
from fastapi.testclient import TestClient

from route_i18n.core.config import Settings
from route_i18n.main import create_app

EN = {
    "common.json": {
        "title": "Demo",
        "greeting": "Hello there friend",
        "nav": {"home": "Home", "admin": "Admin"},
        "actions": {"save": "Save", "cancel": "Cancel"},
    },
    "features/admin.json": {"title": "Administration", "users": {"empty": "No users"}},
    "features/indicators.json": {"title": "Indicators", "list": {"empty": "No indicators"}},
}

ES = {
    "common.json": {
        "title": "Demostración",
        "nav": {"home": "Inicio"},
        "actions": {"save": "Guardar"},
    },
    "features/admin.json": {"title": "Administración"},
}


def write_locale(root: Path, lang: str, files: dict) -> None:
    for rel, data in files.items():
        path = root / lang / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")


@pytest.fixture
def locales_dir(tmp_path: Path) -> Path:
    root = tmp_path / "locales"
    write_locale(root, "en", EN)
    write_locale(root, "es", ES)
    return root


@pytest.fixture
def make_settings(locales_dir: Path):
    def _make(**overrides) -> Settings:
        values = {
            "LOCALES_DIR": str(locales_dir),
            "SUPPORTED_LOCALES": ["en", "es"],
            "DEFAULT_LOCALE": "en",
            "CLIENT_ALWAYS": ["common"],
            "CLIENT_ROUTES": {"/admin/*": ["features.admin"]},
            "CLIENT_FALLBACK": "always-only",
        }
        values.update(overrides)
        return Settings(**values)

    return _make


@pytest.fixture
def client(make_settings):
    app = create_app(make_settings())
    with TestClient(app) as c:
        yield c
