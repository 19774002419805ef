"""CMS Routes: the collection schema consumed by the admin UI."""

from typing import Any

from fastapi import APIRouter, Depends

from app.cms.schema import build_cms_config
from app.config import Settings
from app.dependencies import get_locale_context, get_settings
from app.i18n.context import LocaleContext

router = APIRouter(tags=["CMS"])


@router.get("/config")
def get_cms_config(
    context: LocaleContext = Depends(get_locale_context),
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    return build_cms_config(context.list_supported_locales(), settings)
