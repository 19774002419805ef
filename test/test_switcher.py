"""
Tests for the language switcher
"""

import pytest

from app.exceptions import UnknownLocaleError
from app.i18n.switcher import LanguageSwitcher


class TestLocalizePath:
    def test_reference_locale_has_no_prefix(self, switcher):
        assert switcher.localize_path("blog", "en") == "/site/blog/"

    def test_other_locale_prefixed(self, switcher):
        assert switcher.localize_path("blog/my-post", "nl") == "/site/nl/blog/my-post/"

    def test_home(self, switcher):
        assert switcher.localize_path("", "en") == "/site/"
        assert switcher.localize_path("/", "nl") == "/site/nl/"

    def test_prefix_reference_locale(self, synthetic_context):
        prefixed = LanguageSwitcher(synthetic_context, base_path="/site", prefix_reference_locale=True)
        assert prefixed.localize_path("blog", "en") == "/site/en/blog/"

    def test_without_base_path(self, synthetic_context):
        bare = LanguageSwitcher(synthetic_context)
        assert bare.localize_path("blog", "nl") == "/nl/blog/"
        assert bare.base_path == ""

    def test_base_path_normalized(self, synthetic_context):
        assert LanguageSwitcher(synthetic_context, base_path="site/").base_path == "/site"

    def test_unknown_locale(self, switcher):
        with pytest.raises(UnknownLocaleError):
            switcher.localize_path("blog", "fr")


class TestRouteFromPath:
    def test_strips_base_and_prefix(self, switcher):
        assert switcher.route_from_path("/site/nl/projecten/x/", "nl") == "projecten/x"

    def test_reference_locale_path(self, switcher):
        assert switcher.route_from_path("/site/blog/", "en") == "blog"

    def test_home(self, switcher):
        assert switcher.route_from_path("/site/nl/", "nl") == ""
        assert switcher.route_from_path("/site", "en") == ""

    def test_prefix_only_stripped_as_whole_segment(self, switcher):
        assert switcher.route_from_path("/site/nlnews/", "nl") == "nlnews"


class TestTranslateRoute:
    def test_exact_route(self, switcher):
        assert switcher.translate_route("projects", "en", "nl") == "projecten"
        assert switcher.translate_route("projecten", "nl", "en") == "projects"

    def test_wildcard_route_keeps_tail(self, switcher):
        assert switcher.translate_route("categories/optimization", "en", "nl") == "categorieen/optimization"

    def test_exact_wins_over_wildcard(self, switcher):
        assert switcher.translate_route("categories", "en", "nl") == "categorieen"

    def test_collection_entry_uses_target_base(self, switcher):
        assert switcher.translate_route("projects/my-project", "en", "nl") == "projecten/my-project"
        assert switcher.translate_route("projecten/my-project", "nl", "en") == "projects/my-project"

    def test_collection_base_without_translation_kept(self, switcher):
        """services has no nl base, so the reference base is reused."""
        assert switcher.translate_route("services/audit", "en", "nl") == "services/audit"

    def test_untranslated_route_unchanged(self, switcher):
        assert switcher.translate_route("about", "en", "nl") == "about"

    def test_same_locale_is_identity(self, switcher):
        assert switcher.translate_route("projecten", "nl", "nl") == "projecten"


class TestSwitchPath:
    def test_switch_to_other_locale(self, switcher):
        assert switcher.switch_path("/site/projects/", "en", "nl") == "/site/nl/projecten/"

    def test_switch_collection_entry(self, synthetic_context, switcher):
        switched = switcher.switch_path("/site/projects/my-project/", "en", "nl")
        base = synthetic_context.resolve_collection_base("projects", "nl")
        assert switched == f"/site/nl/{base}/my-project/"
        assert switched == "/site/nl/projecten/my-project/"

    def test_switch_back_to_reference(self, switcher):
        assert switcher.switch_path("/site/nl/categorieen/ml/", "nl", "en") == "/site/categories/ml/"

    @pytest.mark.parametrize("path", ["/site/nl/projecten/", "/site/nl/projecten", "/anything?q=1"])
    def test_same_locale_returns_identical_path(self, switcher, path):
        assert switcher.switch_path(path, "nl", "nl") == path

    def test_unknown_locale(self, switcher):
        with pytest.raises(UnknownLocaleError):
            switcher.switch_path("/site/blog/", "en", "fr")

    def test_collection_base_round_trip(self, synthetic_context, switcher):
        for locale in synthetic_context.list_supported_locales():
            base = synthetic_context.resolve_collection_base("projects", locale)
            path = switcher.localize_path(base, locale)
            assert switcher.switch_path(path, locale, locale) == path
            assert switcher.translate_route(base, locale, locale) == base


class TestLinks:
    def test_one_entry_per_locale(self, switcher):
        links = switcher.links("/site/nl/projecten/", "nl")
        assert [link["code"] for link in links] == ["en", "nl"]
        assert links[0]["href"] == "/site/projects/"
        assert links[0]["name"] == "English"
        assert links[0]["is_current"] is False
        assert links[1]["href"] == "/site/nl/projecten/"
        assert links[1]["is_current"] is True
        assert links[1]["is_rtl"] is False


class TestSiteSwitcher:
    def test_site_blog(self, site_context):
        site_switcher = LanguageSwitcher(site_context, base_path="/optiml-website")
        assert site_switcher.switch_path("/optiml-website/blog/", "en", "nl") == "/optiml-website/nl/blog/"
        assert (
            site_switcher.switch_path("/optiml-website/nl/categories/ml/", "nl", "en")
            == "/optiml-website/categories/ml/"
        )
