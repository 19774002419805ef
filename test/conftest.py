"""
Pytest configuration and fixtures for the site configuration tests
"""

import os
import sys
import warnings

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120

from app.config import Settings  # noqa: E402
from app.content import build_site_context  # noqa: E402
from app.i18n.context import LocaleContext  # noqa: E402
from app.i18n.switcher import LanguageSwitcher  # noqa: E402
from main import create_app  # noqa: E402

SYNTHETIC_SITE_DATA = {
    "name": "Example",
    "title": "Example site",
    "description": "An example site",
    "author": {"name": "Jane Doe", "email": "jane@example.com"},
    "default_image": {"src": "/images/logo.png", "alt": "Logo"},
}


def synthetic_tables() -> dict:
    """Small en/nl tables where "nl" is missing a few reference entries."""
    return {
        "text_translations": {
            "en": {"back_to_all_posts": "Back to all posts", "updated": "Updated", "share_this_article": "Share"},
            "nl": {"updated": "Bijgewerkt", "share_this_article": ""},
        },
        "route_translations": {
            "en": {"blogKey": "blog", "projectsKey": "projects", "categoryKey": "categories", "categoryKey2": "categories/*"},
            "nl": {"blogKey": "blog", "projectsKey": "projecten", "categoryKey": "categorieen", "categoryKey2": "categorieen/*"},
        },
        "localized_collections": {
            "blog": {"en": "blog", "nl": "blog"},
            "projects": {"en": "projects", "nl": "projecten"},
            "services": {"en": "services"},
        },
        "invariant_collections": {"authors": "authors"},
        "data_translations": {
            "en": {"siteData": SYNTHETIC_SITE_DATA, "navData": [{"text": "Blog", "link": "/blog/"}]},
            "nl": {"navData": [{"text": "Blog", "link": "/nl/blog/"}]},
        },
    }


def build_synthetic_context(**overrides) -> LocaleContext:
    tables = synthetic_tables()
    tables.update(overrides)
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        return LocaleContext.build(("en", "nl"), "en", **tables)


@pytest.fixture
def synthetic_context() -> LocaleContext:
    return build_synthetic_context()


@pytest.fixture
def site_settings() -> Settings:
    return Settings(environment="development", base_url="https://example.com", base_path="/optiml-website")


@pytest.fixture
def site_context(site_settings: Settings) -> LocaleContext:
    return build_site_context(site_settings)


@pytest.fixture
def switcher(synthetic_context: LocaleContext) -> LanguageSwitcher:
    return LanguageSwitcher(synthetic_context, base_path="/site")


@pytest.fixture
def client(synthetic_context: LocaleContext):
    """Test client serving the synthetic tables"""
    with TestClient(create_app(synthetic_context)) as test_client:
        yield test_client


@pytest.fixture
def site_client(site_context: LocaleContext, site_settings: Settings):
    """Test client serving the real site tables"""
    with TestClient(create_app(site_context, site_settings)) as test_client:
        yield test_client
