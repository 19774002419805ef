"""
Language switcher

Rewrites a site path into the equivalent path of another locale using the
route translation table. The caller always supplies the locale the path
belongs to; this module never guesses a locale from a URL.

Path layout: ``{base_path}{locale_prefix}/{route}/`` where the prefix is
``/<locale>`` for every locale except the reference locale (unless
``prefix_reference_locale`` is set).
"""

from __future__ import annotations

import logging

from app.i18n.context import LocaleContext
from app.i18n.locale import get_language_info

logger = logging.getLogger(__name__)

WILDCARD = "/*"


class LanguageSwitcher:
    """Builds localized and cross-locale paths for one site."""

    def __init__(self, context: LocaleContext, base_path: str = "", prefix_reference_locale: bool = False):
        self.context = context
        self.base_path = "/" + base_path.strip("/") if base_path.strip("/") else ""
        self.prefix_reference_locale = prefix_reference_locale

    def locale_prefix(self, locale: str) -> str:
        self.context.ensure_locale(locale)
        if locale == self.context.reference_locale and not self.prefix_reference_locale:
            return ""
        return f"/{locale}"

    def localize_path(self, route: str, locale: str) -> str:
        """Absolute path of ``route`` (e.g. "blog/my-post") in ``locale``."""
        route = route.strip("/")
        prefix = self.locale_prefix(locale)
        if not route:
            return f"{self.base_path}{prefix}/"
        return f"{self.base_path}{prefix}/{route}/"

    def route_from_path(self, path: str, locale: str) -> str:
        """Strip base path and ``locale``'s prefix from an absolute path."""
        prefix = self.locale_prefix(locale)
        path = "/" + path.strip("/")
        if self.base_path and (path == self.base_path or path.startswith(self.base_path + "/")):
            path = path[len(self.base_path):] or "/"
        if prefix and (path == prefix or path.startswith(prefix + "/")):
            path = path[len(prefix):] or "/"
        return path.strip("/")

    def translate_route(self, route: str, from_locale: str, to_locale: str) -> str:
        """Rewrite a route from one locale's vocabulary into another's.

        Exact route values are matched first, then wildcard values such as
        ``categories/*`` (longest prefix wins) which keep the trailing part.
        Entry paths such as ``projects/my-project`` then have their leading
        collection base swapped for the target locale's base.
        Routes with no translation are returned unchanged.
        """
        route = route.strip("/")
        if from_locale == to_locale:
            self.context.ensure_locale(from_locale)
            return route

        source = self.context.routes_for(from_locale)
        target = self.context.routes_for(to_locale)

        for key, value in source.items():
            if value.strip("/") == route:
                return target[key].strip("/")

        wildcards = sorted(
            ((key, value[: -len(WILDCARD)].strip("/")) for key, value in source.items() if value.endswith(WILDCARD)),
            key=lambda item: len(item[1]),
            reverse=True,
        )
        for key, prefix in wildcards:
            if route.startswith(prefix + "/"):
                tail = route[len(prefix) + 1 :]
                translated = target[key]
                if translated.endswith(WILDCARD):
                    return f"{translated[: -len(WILDCARD)].strip('/')}/{tail}"
                return translated.strip("/")

        head, _, tail = route.partition("/")
        target_bases = self.context.collection_bases_for(to_locale)
        for collection, base in self.context.collection_bases_for(from_locale).items():
            if base.strip("/") == head:
                translated = target_bases[collection].strip("/")
                return f"{translated}/{tail}" if tail else translated

        logger.debug("No route translation for '%s' (%s → %s)", route, from_locale, to_locale)
        return route

    def switch_path(self, path: str, from_locale: str, to_locale: str) -> str:
        """Equivalent of ``path`` in ``to_locale``; same-locale switches are identity."""
        if from_locale == to_locale:
            self.context.ensure_locale(from_locale)
            return path
        route = self.route_from_path(path, from_locale)
        return self.localize_path(self.translate_route(route, from_locale, to_locale), to_locale)

    def links(self, path: str, current_locale: str) -> list[dict[str, str | bool]]:
        """One switcher entry per supported locale, in declaration order."""
        entries = []
        for locale in self.context.list_supported_locales():
            info = get_language_info(locale)
            entries.append(
                {
                    "code": locale,
                    "name": info["name"],
                    "is_rtl": info["is_rtl"],
                    "href": self.switch_path(path, current_locale, locale),
                    "is_current": locale == current_locale,
                }
            )
        return entries
