"""
i18n (Internationalization) package

Locale resolution tables, their validation pass, the language switcher and
Accept-Language helpers.
"""

from .context import LocaleContext, Resolution
from .locale import (
    LANGUAGE_NAMES,
    RTL_LOCALES,
    get_language_info,
    is_rtl_locale,
    parse_accept_language,
)
from .switcher import LanguageSwitcher
from .validation import TranslationGap, TranslationReport

__all__ = [
    "LANGUAGE_NAMES",
    "RTL_LOCALES",
    "LanguageSwitcher",
    "LocaleContext",
    "Resolution",
    "TranslationGap",
    "TranslationReport",
    "get_language_info",
    "is_rtl_locale",
    "parse_accept_language",
]
