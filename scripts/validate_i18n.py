"""
Build-time check of the locale tables.

Builds the locale context exactly as the API does, prints the translation
report and optionally exports the resolved tables plus the CMS config as JSON
for the site generator. Exits with status 1 on any configuration error so the
build stops before deployment.

    python -m scripts.validate_i18n --strict
    python -m scripts.validate_i18n --export dist/i18n.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from app.cms.schema import build_cms_config
from app.config import Settings, settings as default_settings
from app.content import build_site_context
from app.exceptions import SiteConfigError
from app.i18n.context import LocaleContext
from app.middleware.logging import setup_structured_logging
from app.schemas.site import dump_payload

logger = logging.getLogger(__name__)


def export_tables(context: LocaleContext, settings: Settings) -> dict[str, Any]:
    """Every table resolved per locale, gaps already filled from the reference."""
    locales = context.list_supported_locales()
    return {
        "locales": list(locales),
        "referenceLocale": context.reference_locale,
        "textTranslations": {locale: context.translations_for(locale) for locale in locales},
        "routeTranslations": {locale: context.routes_for(locale) for locale in locales},
        "localizedCollections": {
            name: {locale: context.resolve_collection_base(name, locale) for locale in locales}
            for name in context.collections
            if context.is_localized_collection(name)
        },
        "dataTranslations": {
            locale: {
                category: dump_payload(context.resolve_data(locale, category))
                for category in context.data_categories()
            }
            for locale in locales
        },
        "cms": build_cms_config(locales, settings),
        "report": context.report().as_dict(),
    }


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Validate the site's locale tables")
    p.add_argument("--strict", action="store_true", help="treat missing translations as errors")
    p.add_argument("--export", type=Path, default=None, help="write resolved tables as JSON to this path")
    p.add_argument("--log-level", default="INFO")
    p.add_argument("--json-logs", action="store_true")
    return p.parse_args(argv)


def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    args = parse_args(argv)
    setup_structured_logging(args.log_level, json_format=args.json_logs)

    settings = settings or default_settings
    if args.strict:
        settings = settings.model_copy(update={"strict_translations": True})

    try:
        context = build_site_context(settings)
    except SiteConfigError as exc:
        logger.error("Locale configuration is invalid: %s %s", exc.message, exc.details or "")
        return 1

    report = context.report()
    if report.complete:
        logger.info("All %d locales are complete", len(report.locales))
    else:
        for locale in report.locales:
            gaps = report.for_locale(locale)
            if gaps:
                logger.warning("%s: %d missing (%s)", locale, len(gaps), ", ".join(f"{g.table}:{g.key}" for g in gaps))

    if args.export:
        args.export.parent.mkdir(parents=True, exist_ok=True)
        args.export.write_text(json.dumps(export_tables(context, settings), indent=2, ensure_ascii=False), encoding="utf-8")
        logger.info("Exported locale tables to %s", args.export)

    return 0


if __name__ == "__main__":
    sys.exit(main())
