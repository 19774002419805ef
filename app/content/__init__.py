"""Static site content tables and the process-wide locale context built from them."""

import logging

from app.config import Settings, settings as default_settings
from app.i18n.context import LocaleContext

from .translations import (
    DATA_TRANSLATIONS,
    INVARIANT_COLLECTIONS,
    LOCALES,
    LOCALIZED_COLLECTIONS,
    REFERENCE_LOCALE,
    ROUTE_TRANSLATIONS,
    TEXT_TRANSLATIONS,
)

logger = logging.getLogger(__name__)


def _enabled(table: dict, locales: tuple[str, ...]) -> dict:
    return {locale: values for locale, values in table.items() if locale in locales}


def build_site_context(settings: Settings | None = None) -> LocaleContext:
    """Build the site's locale context from the static tables.

    ``settings.supported_locales`` selects and orders the enabled locales;
    tables for locales that are not enabled are ignored.
    """
    settings = settings or default_settings
    locales = tuple(settings.supported_locales or LOCALES)
    disabled = [locale for locale in LOCALES if locale not in locales]
    if disabled:
        logger.info("Locales present in tables but not enabled: %s", ", ".join(disabled))

    return LocaleContext.build(
        locales,
        settings.reference_locale or REFERENCE_LOCALE,
        text_translations=_enabled(TEXT_TRANSLATIONS, locales),
        route_translations=_enabled(ROUTE_TRANSLATIONS, locales),
        localized_collections={name: _enabled(bases, locales) for name, bases in LOCALIZED_COLLECTIONS.items()},
        invariant_collections=INVARIANT_COLLECTIONS,
        data_translations=_enabled(DATA_TRANSLATIONS, locales),
        strict=settings.strict_translations,
    )


__all__ = [
    "DATA_TRANSLATIONS",
    "INVARIANT_COLLECTIONS",
    "LOCALES",
    "LOCALIZED_COLLECTIONS",
    "REFERENCE_LOCALE",
    "ROUTE_TRANSLATIONS",
    "TEXT_TRANSLATIONS",
    "build_site_context",
]
