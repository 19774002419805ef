"""
i18n Routes

Read-only access to the locale resolution tables (prefix: /api/v1/i18n)

    GET /locales                                → supported locales, declaration order
    GET /report                                 → translation gaps found at startup
    GET /collections/{collection}/{locale}      → localized route base of a collection
    GET /switch                                 → equivalent path in another locale
    GET /{locale}/translations                  → every UI string, fallbacks marked
    GET /{locale}/translations/{key}            → one UI string with its source locale
    GET /{locale}/routes                        → every route translation, fallbacks marked
    GET /{locale}/routes/{route_key}            → one route translation
    GET /{locale}/data/{category}               → siteData, navData, faqData, testimonialData
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from app.dependencies import get_locale_context, get_path_locale, get_switcher
from app.i18n.context import LocaleContext
from app.i18n.locale import get_language_info
from app.i18n.switcher import LanguageSwitcher
from app.i18n.validation import ROUTE_TABLE, TEXT_TABLE
from app.schemas.site import dump_payload

router = APIRouter(tags=["Internationalization"])
logger = logging.getLogger(__name__)


# ── Pydantic schemas ───────────────────────────────────────────────────────────


class LocaleInfo(BaseModel):
    code: str
    name: str
    is_rtl: bool
    is_reference: bool


class ResolvedValue(BaseModel):
    locale: str
    key: str
    value: str
    source_locale: str
    fallback: bool


class LocaleTable(BaseModel):
    """Every key of one table in one locale.

    ``fallbacks`` maps each key served from another locale to that locale.
    """

    locale: str
    values: dict[str, str]
    fallbacks: dict[str, str]


class CollectionBase(BaseModel):
    collection: str
    locale: str
    base: str
    localized: bool


class SwitcherLink(BaseModel):
    code: str
    name: str
    is_rtl: bool
    href: str
    is_current: bool


class SwitchResponse(BaseModel):
    path: str
    from_locale: str
    to_locale: str
    href: str
    links: list[SwitcherLink]


# ── Routes ─────────────────────────────────────────────────────────────────────


@router.get("/locales", response_model=list[LocaleInfo])
def list_locales(context: LocaleContext = Depends(get_locale_context)) -> list[LocaleInfo]:
    return [
        LocaleInfo(**get_language_info(code), is_reference=code == context.reference_locale)
        for code in context.list_supported_locales()
    ]


@router.get("/report")
def translation_report(context: LocaleContext = Depends(get_locale_context)) -> dict[str, Any]:
    return context.report().as_dict()


@router.get("/collections/{collection}/{locale}", response_model=CollectionBase)
def collection_base(
    collection: str,
    locale: str = Depends(get_path_locale),
    context: LocaleContext = Depends(get_locale_context),
) -> CollectionBase:
    return CollectionBase(
        collection=collection,
        locale=locale,
        base=context.resolve_collection_base(collection, locale),
        localized=context.is_localized_collection(collection),
    )


@router.get("/switch", response_model=SwitchResponse)
def switch_locale(
    path: str = Query(..., description="Current path, including base path and locale prefix"),
    from_locale: str = Query(..., alias="from"),
    to_locale: str = Query(..., alias="to"),
    switcher: LanguageSwitcher = Depends(get_switcher),
) -> SwitchResponse:
    return SwitchResponse(
        path=path,
        from_locale=from_locale,
        to_locale=to_locale,
        href=switcher.switch_path(path, from_locale, to_locale),
        links=[SwitcherLink(**link) for link in switcher.links(path, from_locale)],
    )


def _locale_table(context: LocaleContext, table: str, locale: str, values: dict[str, str]) -> LocaleTable:
    fallbacks = {
        gap.key: context.reference_locale for gap in context.report().for_locale(locale) if gap.table == table
    }
    return LocaleTable(locale=locale, values=values, fallbacks=fallbacks)


@router.get("/{locale}/translations", response_model=LocaleTable)
def get_translations(
    locale: str = Depends(get_path_locale),
    context: LocaleContext = Depends(get_locale_context),
) -> LocaleTable:
    return _locale_table(context, TEXT_TABLE, locale, context.translations_for(locale))


@router.get("/{locale}/translations/{key}", response_model=ResolvedValue)
def get_translation(
    key: str,
    locale: str = Depends(get_path_locale),
    context: LocaleContext = Depends(get_locale_context),
) -> ResolvedValue:
    resolution = context.lookup_translation(locale, key)
    return ResolvedValue(
        locale=locale,
        key=key,
        value=resolution.value,
        source_locale=resolution.locale,
        fallback=resolution.fallback,
    )


@router.get("/{locale}/routes", response_model=LocaleTable)
def get_routes(
    locale: str = Depends(get_path_locale),
    context: LocaleContext = Depends(get_locale_context),
) -> LocaleTable:
    return _locale_table(context, ROUTE_TABLE, locale, context.routes_for(locale))


@router.get("/{locale}/routes/{route_key}", response_model=ResolvedValue)
def get_route(
    route_key: str,
    locale: str = Depends(get_path_locale),
    context: LocaleContext = Depends(get_locale_context),
) -> ResolvedValue:
    resolution = context.lookup_route(locale, route_key)
    return ResolvedValue(
        locale=locale,
        key=route_key,
        value=resolution.value,
        source_locale=resolution.locale,
        fallback=resolution.fallback,
    )


@router.get("/{locale}/data/{category}")
def get_data_category(
    category: str,
    locale: str = Depends(get_path_locale),
    context: LocaleContext = Depends(get_locale_context),
) -> Any:
    return dump_payload(context.resolve_data(locale, category))
