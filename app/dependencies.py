"""FastAPI dependencies shared by the routers."""

from fastapi import Depends, Request, Response

from app.config import Settings
from app.i18n.context import LocaleContext
from app.i18n.switcher import LanguageSwitcher
from app.services.seo_service import SEOService


def get_locale_context(request: Request) -> LocaleContext:
    """The context built at startup; see ``create_app``."""
    return request.app.state.locale_context


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_path_locale(
    locale: str,
    response: Response,
    context: LocaleContext = Depends(get_locale_context),
) -> str:
    """The ``{locale}`` path parameter, checked and echoed as Content-Language."""
    context.ensure_locale(locale)
    response.headers["Content-Language"] = locale
    return locale


def get_switcher(
    context: LocaleContext = Depends(get_locale_context),
    settings: Settings = Depends(get_settings),
) -> LanguageSwitcher:
    return LanguageSwitcher(
        context,
        base_path=settings.base_path,
        prefix_reference_locale=settings.prefix_reference_locale,
    )


def get_seo_service(
    context: LocaleContext = Depends(get_locale_context),
    settings: Settings = Depends(get_settings),
    switcher: LanguageSwitcher = Depends(get_switcher),
) -> SEOService:
    return SEOService(context, base_url=settings.base_url, switcher=switcher)
