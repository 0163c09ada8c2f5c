"""
Application configuration for route-i18n.

It defines strongly-typed settings using Pydantic v2 BaseSettings.
Defaults target local/dev usage; values can be overridden via environment
variables or a .env file at the project root.

Client-load settings (CLIENT_*) describe which translation namespaces are
shipped to the browser for which routes.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from route_i18n.i18n.client_load import ClientLoadConfig
from route_i18n.i18n.translator import FallbackIndicator, min_words


class Settings(BaseSettings):
    """Application settings loaded from environment variables (.env supported)."""

    # Load from .env at repo root; ignore unknown variables to keep flexibility
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # -------------------------------------------------------------------------
    # Core application info
    # -------------------------------------------------------------------------
    APP_NAME: str = "route-i18n"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: Literal["development", "production"] = "development"
    LOG_LEVEL: str = "INFO"

    # -------------------------------------------------------------------------
    # Internationalization / Localization
    # -------------------------------------------------------------------------
    DEFAULT_LOCALE: str = "en"
    SUPPORTED_LOCALES: list[str] = ["en", "es"]
    # Falls back to searching ./locales, ./static/locales, ... when missing
    LOCALES_DIR: str = str(Path(__file__).resolve().parent.parent / "locales")
    # Re-read catalogs on every request (development only)
    HOT_RELOAD: bool = False
    SHOW_KEYS_IN_PROD: bool = False

    # Appended to texts served from the default locale; empty disables it
    FALLBACK_INDICATOR: str = ""
    FALLBACK_INDICATOR_MIN_WORDS: int = 0
    FALLBACK_INDICATOR_IN_DEV: bool = True

    # -------------------------------------------------------------------------
    # Client-side loading
    # -------------------------------------------------------------------------
    CLIENT_ALWAYS: list[str] = ["common"]
    CLIENT_ROUTES: dict[str, list[str]] = {"/admin/*": ["features.admin"]}
    CLIENT_FALLBACK: Literal["none", "always-only", "all"] = "always-only"
    CLIENT_IGNORE_TRAILING_SLASH: bool = False
    CLIENT_WARN_ON_OVERLAP: bool = True
    INJECTION_GLOBAL: str = "__I18N__"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    def client_load_config(self) -> ClientLoadConfig:
        """Build the validated client-load config (raises InvalidRoutePattern)."""
        return ClientLoadConfig(
            always=tuple(self.CLIENT_ALWAYS),
            routes=self.CLIENT_ROUTES,
            fallback=self.CLIENT_FALLBACK,
            ignore_trailing_slash=self.CLIENT_IGNORE_TRAILING_SLASH,
            # Overlap diagnostics are a development aid
            warn_on_overlap=self.CLIENT_WARN_ON_OVERLAP and not self.is_production,
        )

    def fallback_indicator(self) -> FallbackIndicator | None:
        if not self.FALLBACK_INDICATOR:
            return None
        predicate = None
        if self.FALLBACK_INDICATOR_MIN_WORDS > 0:
            predicate = min_words(self.FALLBACK_INDICATOR_MIN_WORDS)
        return FallbackIndicator(
            template=self.FALLBACK_INDICATOR,
            predicate=predicate,
            apply_in_dev=self.FALLBACK_INDICATOR_IN_DEV,
        )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance (singleton-like)."""
    return Settings()
