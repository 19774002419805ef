"""
Tests for hreflang links, sitemap and robots.txt generation.
"""

from datetime import date
from xml.etree import ElementTree  # nosec B405

import pytest

from app.exceptions import UnknownCollectionError, UnknownLocaleError
from app.i18n.switcher import LanguageSwitcher
from app.schemas.seo import ContentEntryRef
from app.services.seo_service import SEOService

SITEMAP = "{http://www.sitemaps.org/schemas/sitemap/0.9}"


@pytest.fixture
def seo(synthetic_context) -> SEOService:
    switcher = LanguageSwitcher(synthetic_context, base_path="/site")
    return SEOService(synthetic_context, base_url="https://example.com/", switcher=switcher)


class TestEntryUrls:
    def test_reference_locale_entry(self, seo):
        assert seo.entry_path("blog", "en", "hello") == "/site/blog/hello/"

    def test_localized_base(self, seo):
        assert seo.entry_url("projects", "nl", "planner") == "https://example.com/site/nl/projecten/planner/"

    def test_invariant_collection(self, seo):
        assert seo.entry_path("authors", "nl", "jane") == "/site/nl/authors/jane/"

    def test_unregistered_collection(self, seo):
        with pytest.raises(UnknownCollectionError):
            seo.entry_path("recipes", "en", "soup")


class TestHreflang:
    def test_links_for_all_variants(self, seo):
        links = seo.generate_hreflang_links("projects", {"nl": "planner-nl", "en": "planner"})
        assert links == [
            {"hreflang": "en", "href": "https://example.com/site/projects/planner/"},
            {"hreflang": "nl", "href": "https://example.com/site/nl/projecten/planner-nl/"},
            {"hreflang": "x-default", "href": "https://example.com/site/projects/planner/"},
        ]

    def test_x_default_needs_reference_variant(self, seo):
        links = seo.generate_hreflang_links("blog", {"nl": "alleen-nl"})
        assert [link["hreflang"] for link in links] == ["nl"]

    def test_unsupported_variant_locale(self, seo):
        with pytest.raises(UnknownLocaleError):
            seo.generate_hreflang_links("blog", {"en": "hello", "fr": "bonjour"})

    def test_render_tags(self, seo):
        tags = seo.render_hreflang_tags([{"hreflang": "en", "href": "https://example.com/?a=1&b=2"}])
        assert tags == '<link rel="alternate" hreflang="en" href="https://example.com/?a=1&amp;b=2" />'


class TestSitemap:
    def test_sitemap_with_alternates(self, seo):
        entries = [
            ContentEntryRef(collection="blog", locale="en", slug="hello", mapping_key="hello", lastmod=date(2026, 1, 2)),
            ContentEntryRef(collection="blog", locale="nl", slug="hallo", mapping_key="hello"),
            ContentEntryRef(collection="blog", locale="en", slug="english-only"),
        ]
        xml = seo.generate_sitemap(entries)
        assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')

        root = ElementTree.fromstring(xml)  # nosec B314
        locs = [url.find(f"{SITEMAP}loc").text for url in root.findall(f"{SITEMAP}url")]
        assert locs == [
            "https://example.com/site/",
            "https://example.com/site/nl/",
            "https://example.com/site/blog/hello/",
            "https://example.com/site/nl/blog/hallo/",
            "https://example.com/site/blog/english-only/",
        ]
        assert "<lastmod>2026-01-02</lastmod>" in xml
        assert xml.count('hreflang="x-default"') == 2
        assert 'hreflang="nl" href="https://example.com/site/nl/blog/hallo/"' in xml

    def test_entry_without_translation_has_no_alternates(self, seo):
        xml = seo.generate_sitemap([ContentEntryRef(collection="blog", locale="en", slug="solo", mapping_key="solo")])
        assert "hreflang" not in xml


class TestRobots:
    def test_robots_txt(self, seo):
        robots = seo.generate_robots_txt()
        assert "User-agent: *" in robots
        assert "Disallow: /keystatic/" in robots
        assert "Sitemap: https://example.com/site/sitemap.xml" in robots
