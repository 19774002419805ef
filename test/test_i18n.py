"""
Locale helper and language middleware tests

    TestLocaleHelpers: pure helper functions
    TestLanguageMiddleware: request.state.locale detection through the app
"""

from __future__ import annotations

import pytest

# ══════════════════════════════════════════════════════════════════════════════
# 1. TestLocaleHelpers
# ══════════════════════════════════════════════════════════════════════════════


class TestLocaleHelpers:
    def test_is_rtl_arabic(self):
        from app.i18n.locale import is_rtl_locale

        assert is_rtl_locale("ar") is True

    def test_is_rtl_with_region_tag(self):
        """ar-SA should also detect as RTL (strips the region part)."""
        from app.i18n.locale import is_rtl_locale

        assert is_rtl_locale("ar-SA") is True

    def test_is_ltr_dutch(self):
        from app.i18n.locale import is_rtl_locale

        assert is_rtl_locale("nl") is False
        assert is_rtl_locale("nl_BE") is False

    def test_base_language(self):
        from app.i18n.locale import base_language

        assert base_language("nl-BE") == "nl"
        assert base_language("EN_us") == "en"

    def test_parse_accept_language_exact_match(self):
        from app.i18n.locale import parse_accept_language

        assert parse_accept_language("nl", ["en", "nl"]) == "nl"

    def test_parse_accept_language_quality_ordering(self):
        from app.i18n.locale import parse_accept_language

        assert parse_accept_language("de;q=0.9,nl;q=0.8,en;q=0.7", ["en", "nl"]) == "nl"

    def test_parse_accept_language_base_fallback(self):
        """nl-BE is not supported but its base language is."""
        from app.i18n.locale import parse_accept_language

        assert parse_accept_language("nl-BE", ["en", "nl"]) == "nl"

    def test_parse_accept_language_zero_quality_skipped(self):
        from app.i18n.locale import parse_accept_language

        assert parse_accept_language("nl;q=0,en;q=0.5", ["en", "nl"]) == "en"

    def test_parse_accept_language_invalid_quality(self):
        from app.i18n.locale import parse_accept_language

        assert parse_accept_language("nl;q=abc", ["en", "nl"]) == "nl"

    def test_parse_accept_language_preserves_supported_spelling(self):
        from app.i18n.locale import parse_accept_language

        assert parse_accept_language("pt-br", ["en", "pt-BR"]) == "pt-BR"

    def test_parse_accept_language_no_match(self):
        from app.i18n.locale import parse_accept_language

        assert parse_accept_language("ja", ["en", "nl"]) is None

    def test_parse_accept_language_empty_header(self):
        from app.i18n.locale import parse_accept_language

        assert parse_accept_language("", ["en", "nl"]) is None

    def test_get_language_info_structure(self):
        from app.i18n.locale import get_language_info

        info = get_language_info("nl")
        assert info == {"code": "nl", "name": "Nederlands", "is_rtl": False}

    def test_get_language_info_region_uses_base_name(self):
        from app.i18n.locale import get_language_info

        assert get_language_info("nl-BE")["name"] == "Nederlands"

    def test_get_language_info_unknown_locale(self):
        from app.i18n.locale import get_language_info

        info = get_language_info("xx")
        assert info["name"] == "xx"  # falls back to code itself
        assert info["is_rtl"] is False


# ══════════════════════════════════════════════════════════════════════════════
# 2. TestLanguageMiddleware
# ══════════════════════════════════════════════════════════════════════════════


class TestLanguageMiddleware:
    @pytest.mark.parametrize(
        ("headers", "expected"),
        [
            ({"X-Language": "nl"}, "nl"),
            ({"X-Language": "fr", "Accept-Language": "nl-BE,en;q=0.5"}, "nl"),
            ({"Accept-Language": "de,en;q=0.8"}, "en"),
            ({"Accept-Language": "ja"}, "en"),
            ({}, "en"),
        ],
    )
    def test_content_language_header(self, client, headers, expected):
        response = client.get("/api/v1/i18n/locales", headers=headers)
        assert response.status_code == 200
        assert response.headers["Content-Language"] == expected

    def test_request_id_echoed(self, client):
        response = client.get("/health", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"
