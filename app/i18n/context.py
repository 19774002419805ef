"""
Locale Resolution Table

``LocaleContext`` is built once from static declarations, validated
exhaustively, and then shared read-only by every consumer (request handlers,
the language switcher, the hreflang generator, build scripts).

Fallback policy: exactly one reference locale. A mapping missing from any
other locale resolves to the reference locale's value and is reported as a
``PartialTranslationWarning``. A mapping missing from the reference locale is
an ``UnknownKeyError``.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from app.exceptions import (
    PartialTranslationWarning,
    UnknownCollectionError,
    UnknownKeyError,
    UnknownLocaleError,
)
from app.i18n.validation import (
    COLLECTION_TABLE,
    DATA_TABLE,
    ROUTE_TABLE,
    TEXT_TABLE,
    TranslationReport,
    find_collection_gaps,
    find_key_gaps,
    report_gaps,
    validate_data_categories,
    validate_locales,
)

logger = logging.getLogger(__name__)


def _freeze(table: Mapping[str, Mapping[str, Any]], locales: tuple[str, ...]) -> Mapping[str, Mapping[str, Any]]:
    return MappingProxyType({locale: MappingProxyType(dict(table.get(locale, {}))) for locale in locales})


@dataclass(frozen=True)
class Resolution:
    """A resolved value and the locale it actually came from."""

    value: Any
    locale: str
    fallback: bool


class LocaleContext:
    """Immutable per-locale lookup tables with reference-locale fallback."""

    __slots__ = (
        "_locales",
        "_reference_locale",
        "_texts",
        "_routes",
        "_collections",
        "_invariant_collections",
        "_data",
        "_report",
    )

    def __init__(
        self,
        locales: tuple[str, ...],
        reference_locale: str,
        texts: Mapping[str, Mapping[str, str]],
        routes: Mapping[str, Mapping[str, str]],
        collections: Mapping[str, Mapping[str, str]],
        invariant_collections: Mapping[str, str],
        data: Mapping[str, Mapping[str, Any]],
        report: TranslationReport,
    ):
        self._locales = locales
        self._reference_locale = reference_locale
        self._texts = texts
        self._routes = routes
        self._collections = collections
        self._invariant_collections = invariant_collections
        self._data = data
        self._report = report

    @classmethod
    def build(
        cls,
        locales: Sequence[str],
        reference_locale: str,
        *,
        text_translations: Mapping[str, Mapping[str, str]],
        route_translations: Mapping[str, Mapping[str, str]],
        localized_collections: Mapping[str, Mapping[str, str]] | None = None,
        invariant_collections: Mapping[str, str] | None = None,
        data_translations: Mapping[str, Mapping[str, Any]] | None = None,
        strict: bool = False,
    ) -> LocaleContext:
        """Validate the static tables and return a frozen context.

        Raises:
            ConfigurationError: malformed locale list or tables.
            UnknownLocaleError: a table mentions an undeclared locale.
            UnknownKeyError: a key is missing from the reference locale.
            IncompleteTranslationError: ``strict`` and a locale has gaps.
        """
        ordered = validate_locales(locales, reference_locale)
        localized_collections = localized_collections or {}
        invariant_collections = invariant_collections or {}
        data_translations = data_translations if data_translations is not None else {reference_locale: {}}

        gaps = [
            *find_key_gaps(TEXT_TABLE, text_translations, ordered, reference_locale),
            *find_key_gaps(ROUTE_TABLE, route_translations, ordered, reference_locale),
            *find_collection_gaps(localized_collections, invariant_collections, ordered, reference_locale),
        ]
        data, data_gaps = validate_data_categories(data_translations, ordered, reference_locale)
        gaps.extend(data_gaps)

        report = TranslationReport(reference_locale=reference_locale, locales=ordered, gaps=tuple(gaps))
        report_gaps(report.gaps, reference_locale, strict=strict)

        by_locale: dict[str, dict[str, str]] = {locale: {} for locale in ordered}
        for name, bases in localized_collections.items():
            for locale, base in bases.items():
                if base:
                    by_locale[locale][name] = base

        context = cls(
            locales=ordered,
            reference_locale=reference_locale,
            texts=_freeze(_drop_empty(text_translations), ordered),
            routes=_freeze(_drop_empty(route_translations), ordered),
            collections=_freeze(by_locale, ordered),
            invariant_collections=MappingProxyType(dict(invariant_collections)),
            data=_freeze(data, ordered),
            report=report,
        )
        logger.info(
            "Locale context ready: locales=%s reference=%s gaps=%d",
            ",".join(ordered),
            reference_locale,
            len(report.gaps),
        )
        return context

    # ── Locale set ────────────────────────────────────────────────────────────

    @property
    def reference_locale(self) -> str:
        return self._reference_locale

    def list_supported_locales(self) -> tuple[str, ...]:
        """Supported locales in declaration order."""
        return self._locales

    def is_supported_locale(self, locale: str) -> bool:
        return locale in self._locales

    def ensure_locale(self, locale: str) -> str:
        if locale not in self._locales:
            raise UnknownLocaleError(locale, self._locales)
        return locale

    @property
    def translation_keys(self) -> frozenset[str]:
        """Canonical translation key set, taken from the reference locale."""
        return frozenset(self._texts[self._reference_locale])

    @property
    def route_keys(self) -> frozenset[str]:
        return frozenset(self._routes[self._reference_locale])

    def report(self) -> TranslationReport:
        return self._report

    # ── Lookups ───────────────────────────────────────────────────────────────

    def _lookup(self, table_name: str, table: Mapping[str, Mapping[str, Any]], locale: str, key: str) -> Resolution:
        self.ensure_locale(locale)
        localized = table[locale]
        if key in localized:
            return Resolution(localized[key], locale, fallback=False)

        reference = table[self._reference_locale]
        if key not in reference:
            raise UnknownKeyError(table_name, key, locale)

        warnings.warn(
            PartialTranslationWarning(table_name, key, locale, self._reference_locale),
            stacklevel=3,
        )
        return Resolution(reference[key], self._reference_locale, fallback=True)

    def lookup_translation(self, locale: str, key: str) -> Resolution:
        return self._lookup(TEXT_TABLE, self._texts, locale, key)

    def resolve_translation(self, locale: str, key: str) -> str:
        """Translated UI string for ``key``, falling back to the reference locale."""
        return self._lookup(TEXT_TABLE, self._texts, locale, key).value

    def lookup_route(self, locale: str, route_key: str) -> Resolution:
        return self._lookup(ROUTE_TABLE, self._routes, locale, route_key)

    def resolve_route(self, locale: str, route_key: str) -> str:
        """Localized path segment for a logical route key."""
        return self._lookup(ROUTE_TABLE, self._routes, locale, route_key).value

    def routes_for(self, locale: str) -> dict[str, str]:
        """Every route key resolved for ``locale`` (gaps filled from the reference)."""
        self.ensure_locale(locale)
        merged = dict(self._routes[self._reference_locale])
        merged.update(self._routes[locale])
        return merged

    def translations_for(self, locale: str) -> dict[str, str]:
        """Every translation key resolved for ``locale`` (gaps filled from the reference)."""
        self.ensure_locale(locale)
        merged = dict(self._texts[self._reference_locale])
        merged.update(self._texts[locale])
        return merged

    def collection_bases_for(self, locale: str) -> dict[str, str]:
        """Route base of every localized collection in ``locale`` (gaps filled from the reference)."""
        self.ensure_locale(locale)
        merged = dict(self._collections[self._reference_locale])
        merged.update(self._collections[locale])
        return merged

    def is_localized_collection(self, collection: str) -> bool:
        return collection in self._collections[self._reference_locale]

    def is_invariant_collection(self, collection: str) -> bool:
        return collection in self._invariant_collections

    @property
    def collections(self) -> tuple[str, ...]:
        """Every registered collection, localized ones first."""
        return tuple(self._collections[self._reference_locale]) + tuple(self._invariant_collections)

    def resolve_collection_base(self, collection: str, locale: str) -> str:
        """Route base of ``collection`` in ``locale``.

        Locale-invariant collections return their single base for every
        supported locale. Unregistered collections raise
        ``UnknownCollectionError`` instead of guessing a base.
        """
        self.ensure_locale(locale)
        if collection in self._invariant_collections:
            return self._invariant_collections[collection]
        if not self.is_localized_collection(collection):
            raise UnknownCollectionError(collection)
        return self._lookup(COLLECTION_TABLE, self._collections, locale, collection).value

    def resolve_data(self, locale: str, category: str) -> Any:
        """Validated payload of a data category (siteData, navData, ...)."""
        return self._lookup(DATA_TABLE, self._data, locale, category).value

    def data_categories(self) -> tuple[str, ...]:
        return tuple(self._data[self._reference_locale])

    def translator(self, locale: str) -> Callable[[str], str]:
        """Return ``t(key)`` bound to ``locale``; the locale is checked eagerly."""
        self.ensure_locale(locale)

        def t(key: str) -> str:
            return self.resolve_translation(locale, key)

        return t

    def __repr__(self) -> str:
        return f"LocaleContext(locales={self._locales!r}, reference_locale={self._reference_locale!r})"


def _drop_empty(table: Mapping[str, Mapping[str, str]]) -> dict[str, dict[str, str]]:
    """Empty strings count as missing so lookups fall back to the reference."""
    return {locale: {k: v for k, v in values.items() if v not in (None, "")} for locale, values in table.items()}
