import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, settings
from app.content import build_site_context
from app.exception_handlers import register_exception_handlers
from app.i18n.context import LocaleContext
from app.middleware.language import LanguageMiddleware
from app.middleware.logging import StructuredLoggingMiddleware, setup_structured_logging
from app.routes import cms, i18n, seo

logger = logging.getLogger(__name__)


def create_app(context: LocaleContext | None = None, app_settings: Settings | None = None) -> FastAPI:
    """Create the FastAPI application.

    The locale context is built here, before any request is served, so a
    configuration error aborts startup instead of surfacing on a request.
    """
    app_settings = app_settings or settings
    context = context or build_site_context(app_settings)

    app = FastAPI(
        title=app_settings.app_name,
        description="Locale tables, language switcher and hreflang data for the site generator",
        debug=app_settings.debug,
        version=app_settings.app_version,
    )
    app.state.locale_context = context
    app.state.settings = app_settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.allowed_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.add_middleware(LanguageMiddleware)
    app.add_middleware(StructuredLoggingMiddleware)

    register_exception_handlers(app)

    app.include_router(i18n.router, prefix="/api/v1/i18n")
    app.include_router(cms.router, prefix="/api/v1/cms")
    app.include_router(seo.router)

    @app.get("/health", tags=["Root"])
    def health() -> dict[str, str | list[str]]:
        return {"status": "ok", "locales": list(context.list_supported_locales())}

    if app_settings.debug:
        logger.info(f"Running in {app_settings.environment} mode")

    return app


app = create_app()


if __name__ == "__main__":
    setup_structured_logging(settings.log_level, json_format=settings.log_json)
    uvicorn.run(app, host="0.0.0.0", port=8000)  # nosec B104
