"""
Initialization-time validation of the locale tables

Every table is checked against the reference locale, which is the
completeness oracle for all key sets:

- a key the reference lacks is an authoring error (``UnknownKeyError``)
- a key another locale lacks is a gap, resolved later by falling back to the
  reference value and reported through ``TranslationReport``
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from app.exceptions import (
    ConfigurationError,
    IncompleteTranslationError,
    PartialTranslationWarning,
    UnknownKeyError,
    UnknownLocaleError,
)
from app.schemas.site import DATA_CATEGORY_SCHEMAS

logger = logging.getLogger(__name__)

# Table names used in reports and error details
TEXT_TABLE = "translation"
ROUTE_TABLE = "route"
COLLECTION_TABLE = "collection"
DATA_TABLE = "data"


@dataclass(frozen=True)
class TranslationGap:
    """One key the reference locale defines but another locale does not."""

    table: str
    locale: str
    key: str

    def as_dict(self) -> dict[str, str]:
        return {"table": self.table, "locale": self.locale, "key": self.key}


@dataclass(frozen=True)
class TranslationReport:
    """Outcome of the validation pass."""

    reference_locale: str
    locales: tuple[str, ...]
    gaps: tuple[TranslationGap, ...] = field(default_factory=tuple)

    @property
    def complete(self) -> bool:
        return not self.gaps

    def for_locale(self, locale: str) -> tuple[TranslationGap, ...]:
        return tuple(gap for gap in self.gaps if gap.locale == locale)

    def as_dict(self) -> dict[str, Any]:
        return {
            "reference_locale": self.reference_locale,
            "locales": list(self.locales),
            "complete": self.complete,
            "gaps": [gap.as_dict() for gap in self.gaps],
        }


def validate_locales(locales: Sequence[str], reference_locale: str) -> tuple[str, ...]:
    """Check the declared locale list and return it as a tuple."""
    ordered = tuple(locales)
    if not ordered:
        raise ConfigurationError("At least one locale must be declared")
    duplicates = sorted({code for code in ordered if ordered.count(code) > 1})
    if duplicates:
        raise ConfigurationError("Locales declared more than once", details={"locales": duplicates})
    if reference_locale not in ordered:
        raise ConfigurationError(
            f"Reference locale '{reference_locale}' is not a declared locale",
            details={"reference_locale": reference_locale, "locales": list(ordered)},
        )
    return ordered


def _check_table_locales(
    table: str,
    values: Mapping[str, Any],
    locales: tuple[str, ...],
) -> None:
    for locale in values:
        if locale not in locales:
            raise UnknownLocaleError(locale, locales)


def find_key_gaps(
    table: str,
    values: Mapping[str, Mapping[str, Any]],
    locales: tuple[str, ...],
    reference_locale: str,
) -> list[TranslationGap]:
    """Compare every locale's key set with the reference locale's.

    Raises:
        UnknownLocaleError: the table mentions an undeclared locale.
        UnknownKeyError: a locale defines a key the reference does not. A
            reference locale with no entries at all counts as an empty table.
        ConfigurationError: a reference value is empty.
    """
    _check_table_locales(table, values, locales)

    reference = values.get(reference_locale, {})
    for key, value in reference.items():
        if value is None or value == "":
            raise ConfigurationError(
                f"Reference {table} key '{key}' has an empty value",
                details={"table": table, "key": key, "locale": reference_locale},
            )

    gaps: list[TranslationGap] = []
    for locale in locales:
        if locale == reference_locale:
            continue
        localized = values.get(locale, {})
        for key in localized:
            if key not in reference:
                raise UnknownKeyError(table, key, locale)
        for key in reference:
            if localized.get(key) in (None, ""):
                gaps.append(TranslationGap(table, locale, key))
    return gaps


def find_collection_gaps(
    localized_collections: Mapping[str, Mapping[str, str]],
    invariant_collections: Mapping[str, str],
    locales: tuple[str, ...],
    reference_locale: str,
) -> list[TranslationGap]:
    """Check per-collection route bases; every collection must map the reference locale."""
    overlap = sorted(set(localized_collections) & set(invariant_collections))
    if overlap:
        raise ConfigurationError(
            "Collections cannot be both localized and locale-invariant",
            details={"collections": overlap},
        )
    for name, base in invariant_collections.items():
        if not base:
            raise ConfigurationError(
                f"Locale-invariant collection '{name}' has an empty route base",
                details={"collection": name},
            )

    gaps: list[TranslationGap] = []
    for name, bases in localized_collections.items():
        for locale in bases:
            if locale not in locales:
                raise UnknownLocaleError(locale, locales)
        if not bases.get(reference_locale):
            raise UnknownKeyError(COLLECTION_TABLE, name, reference_locale)
        for locale in locales:
            if locale != reference_locale and not bases.get(locale):
                gaps.append(TranslationGap(COLLECTION_TABLE, locale, name))
    return gaps


def validate_data_categories(
    data_translations: Mapping[str, Mapping[str, Any]],
    locales: tuple[str, ...],
    reference_locale: str,
) -> tuple[dict[str, dict[str, Any]], list[TranslationGap]]:
    """Validate category payloads against their schemas.

    Returns the validated payloads per locale and the category gaps.
    Categories without a registered schema are passed through unchanged.
    """
    _check_table_locales(DATA_TABLE, data_translations, locales)

    validated: dict[str, dict[str, Any]] = {}
    for locale, categories in data_translations.items():
        validated[locale] = {}
        for category, payload in categories.items():
            adapter = DATA_CATEGORY_SCHEMAS.get(category)
            if adapter is None:
                validated[locale][category] = payload
                continue
            try:
                validated[locale][category] = adapter.validate_python(payload)
            except ValidationError as exc:
                raise ConfigurationError(
                    f"Invalid '{category}' data for locale '{locale}'",
                    details={"category": category, "locale": locale, "errors": exc.errors(include_url=False)},
                ) from exc

    reference = validated.get(reference_locale, {})
    gaps: list[TranslationGap] = []
    for locale in locales:
        if locale == reference_locale:
            continue
        localized = validated.get(locale, {})
        for category in localized:
            if category not in reference:
                raise UnknownKeyError(DATA_TABLE, category, locale)
        for category in reference:
            if category not in localized:
                gaps.append(TranslationGap(DATA_TABLE, locale, category))
    return validated, gaps


def report_gaps(gaps: Sequence[TranslationGap], reference_locale: str, *, strict: bool = False) -> None:
    """Make partial translations observable, or fatal in strict mode."""
    if not gaps:
        return
    if strict:
        raise IncompleteTranslationError([gap.as_dict() for gap in gaps])
    for gap in gaps:
        logger.warning(
            "Missing %s key '%s' for locale '%s'; '%s' value will be used",
            gap.table,
            gap.key,
            gap.locale,
            reference_locale,
        )
        warnings.warn(
            PartialTranslationWarning(gap.table, gap.key, gap.locale, reference_locale),
            stacklevel=3,
        )
