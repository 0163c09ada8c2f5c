#!/usr/bin/env python3
"""
CLI utility to validate locale catalogs and the client-load configuration.

Loads every supported locale the same way the application does, reports
keys that exist in the default locale but not in another one, and builds the
client-load config so invalid route patterns surface before deployment.

Examples:
    python tools/check_catalogs.py
    python tools/check_catalogs.py --locales-dir ./locales --languages en es de
    python tools/check_catalogs.py --strict   # missing keys fail the check
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# The tool is meant to be run from repository root. Adjust sys.path for route_i18n/*.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from route_i18n.core.config import get_settings  # noqa: E402
from route_i18n.i18n.errors import I18nError  # noqa: E402
from route_i18n.i18n.loader import get_effective_locales_dir, load_catalogs  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = get_settings()
    p = argparse.ArgumentParser(description="Validate translation catalogs")
    p.add_argument("--locales-dir", default=settings.LOCALES_DIR, help="Locales directory")
    p.add_argument(
        "--languages",
        nargs="+",
        default=settings.SUPPORTED_LOCALES,
        help="Languages to check",
    )
    p.add_argument("--default", default=settings.DEFAULT_LOCALE, help="Reference locale")
    p.add_argument("--strict", action="store_true", help="Fail when keys are missing")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    locales_dir = get_effective_locales_dir(args.locales_dir)
    if locales_dir is None:
        print(f"[error] locales directory not found: {args.locales_dir}", file=sys.stderr)
        return 1

    try:
        get_settings().client_load_config()
        catalogs = load_catalogs(locales_dir, args.languages)
    except I18nError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1

    reference = catalogs.get(args.default, {})
    exit_code = 0
    for lang, catalog in catalogs.items():
        missing = sorted(set(reference) - set(catalog))
        if not missing:
            print(f"[ok] {lang}: {len(catalog)} keys")
            continue
        print(f"[warn] {lang}: {len(missing)} keys missing vs '{args.default}'")
        for key in missing:
            print(f"    - {key}")
        if args.strict:
            exit_code = 1

    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
