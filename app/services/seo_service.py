"""
SEO Service

Builds localized entry URLs, hreflang alternate links, sitemap.xml with
per-locale alternates, and robots.txt from the locale context.
"""

import logging
from collections import defaultdict
from collections.abc import Iterable, Mapping
from html import escape
from xml.etree.ElementTree import Element, SubElement, tostring  # nosec B405

from app.config import settings
from app.i18n.context import LocaleContext
from app.i18n.switcher import LanguageSwitcher
from app.schemas.seo import ContentEntryRef

logger = logging.getLogger(__name__)

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
XHTML_NS = "http://www.w3.org/1999/xhtml"
X_DEFAULT = "x-default"


class SEOService:
    """Service for generating locale-aware SEO content."""

    def __init__(
        self,
        context: LocaleContext,
        base_url: str | None = None,
        switcher: LanguageSwitcher | None = None,
    ):
        self.context = context
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.switcher = switcher or LanguageSwitcher(
            context,
            base_path=settings.base_path,
            prefix_reference_locale=settings.prefix_reference_locale,
        )

    def entry_path(self, collection: str, locale: str, slug: str) -> str:
        """Path of one entry, e.g. ("blog", "nl", "my-post") → "/base/nl/blog/my-post/"."""
        base = self.context.resolve_collection_base(collection, locale)
        return self.switcher.localize_path(f"{base.strip('/')}/{slug.strip('/')}", locale)

    def entry_url(self, collection: str, locale: str, slug: str) -> str:
        return f"{self.base_url}{self.entry_path(collection, locale, slug)}"

    def generate_hreflang_links(self, collection: str, variants: Mapping[str, str]) -> list[dict[str, str]]:
        """
        Alternate-language links for the variants of one entry.

        Args:
            collection: Collection the entry belongs to
            variants: Locale → slug of every existing variant

        Returns:
            One link per variant in locale declaration order, followed by an
            ``x-default`` link to the reference locale variant when it exists.
        """
        for locale in variants:
            self.context.ensure_locale(locale)

        links = [
            {"hreflang": locale, "href": self.entry_url(collection, locale, variants[locale])}
            for locale in self.context.list_supported_locales()
            if locale in variants
        ]

        reference = self.context.reference_locale
        if reference in variants:
            links.append({"hreflang": X_DEFAULT, "href": self.entry_url(collection, reference, variants[reference])})
        else:
            logger.info("No %s variant for %s entry; x-default omitted", reference, collection)
        return links

    def render_hreflang_tags(self, links: Iterable[Mapping[str, str]]) -> str:
        """Render alternate links as ``<link>`` tags, one per line."""
        return "\n".join(
            f'<link rel="alternate" hreflang="{escape(link["hreflang"])}" href="{escape(link["href"])}" />'
            for link in links
        )

    def generate_sitemap(self, entries: Iterable[ContentEntryRef]) -> str:
        """
        Generate an XML sitemap with ``xhtml:link`` alternates.

        Entries of the same collection sharing a mapping key are treated as
        translations of one another. Entries without a mapping key have no
        alternates.

        Returns:
            XML string in sitemap format
        """
        urlset = Element("urlset")
        urlset.set("xmlns", SITEMAP_NS)
        urlset.set("xmlns:xhtml", XHTML_NS)

        for locale in self.context.list_supported_locales():
            self._add_url(urlset, f"{self.base_url}{self.switcher.localize_path('', locale)}", priority="1.0")

        entries = list(entries)
        groups: dict[tuple[str, str], dict[str, str]] = defaultdict(dict)
        for entry in entries:
            if entry.mapping_key:
                groups[(entry.collection, entry.mapping_key)][entry.locale] = entry.slug

        for entry in entries:
            alternates: list[dict[str, str]] = []
            if entry.mapping_key:
                variants = groups[(entry.collection, entry.mapping_key)]
                if len(variants) > 1:
                    alternates = self.generate_hreflang_links(entry.collection, variants)
            self._add_url(
                urlset,
                self.entry_url(entry.collection, entry.locale, entry.slug),
                lastmod=entry.lastmod.isoformat() if entry.lastmod else None,
                alternates=alternates,
            )

        xml_declaration = '<?xml version="1.0" encoding="UTF-8"?>\n'
        xml_content = tostring(urlset, encoding="unicode")

        logger.info(f"Generated sitemap with {len(entries)} content entries")
        return xml_declaration + xml_content

    def generate_robots_txt(self) -> str:
        """
        Generate robots.txt content.

        Returns:
            robots.txt content string
        """
        lines = [
            "User-agent: *",
            "Allow: /",
            "",
            "# Disallow CMS admin paths",
            "Disallow: /admin/",
            "Disallow: /keystatic/",
            "",
            "# Sitemap",
            f"Sitemap: {self.base_url}{self.switcher.base_path}/sitemap.xml",
        ]
        return "\n".join(lines)

    def _add_url(
        self,
        parent: Element,
        loc: str,
        lastmod: str | None = None,
        priority: str = "0.7",
        alternates: list[dict[str, str]] | None = None,
    ) -> None:
        """Add a URL entry to the sitemap."""
        url = SubElement(parent, "url")

        loc_elem = SubElement(url, "loc")
        loc_elem.text = loc

        if lastmod:
            lastmod_elem = SubElement(url, "lastmod")
            lastmod_elem.text = lastmod

        priority_elem = SubElement(url, "priority")
        priority_elem.text = priority

        for alternate in alternates or []:
            link = SubElement(url, "xhtml:link")
            link.set("rel", "alternate")
            link.set("hreflang", alternate["hreflang"])
            link.set("href", alternate["href"])
