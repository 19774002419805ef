"""
Language Detection Middleware

Sets request.state.locale from:
  1. X-Language request header (exact match against supported locales)
  2. Accept-Language header (quality-weighted, best-match)
  3. the reference locale (fallback)

Only a default: endpoints with a {locale} path parameter set
Content-Language themselves (see get_path_locale) and keep that value.
The supported set comes from the LocaleContext on app.state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

from app.i18n.locale import parse_accept_language

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastapi import Request
    from starlette.responses import Response


class LanguageMiddleware(BaseHTTPMiddleware):
    """Detect the request locale and attach it to request.state.locale."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        context = getattr(request.app.state, "locale_context", None)
        if context is None:
            return await call_next(request)

        supported = context.list_supported_locales()
        locale = request.headers.get("X-Language", "").strip()
        if locale not in supported:
            locale = (
                parse_accept_language(request.headers.get("Accept-Language", ""), supported)
                or context.reference_locale
            )
        request.state.locale = locale
        response = await call_next(request)
        response.headers.setdefault("Content-Language", locale)
        return response
