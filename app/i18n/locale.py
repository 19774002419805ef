"""
Locale helpers

Pure functions over BCP 47 locale codes:
- Accept-Language header negotiation with quality-value (q=) support
- Language metadata for the language switcher
- RTL (right-to-left) detection for the ``dir`` attribute
"""

from __future__ import annotations

# ── Constants ─────────────────────────────────────────────────────────────────

# BCP 47 base language codes whose scripts read right-to-left
RTL_LOCALES: frozenset[str] = frozenset({"ar", "he", "fa", "ur", "yi", "ku"})

# Native names shown in the language switcher
LANGUAGE_NAMES: dict[str, str] = {
    "en": "English",
    "nl": "Nederlands",
    "fr": "Français",
    "de": "Deutsch",
    "es": "Español",
    "it": "Italiano",
    "pt": "Português",
    "ar": "العربية",
    "ja": "日本語",
    "zh": "中文",
}


# ── Public helpers ────────────────────────────────────────────────────────────


def base_language(locale: str) -> str:
    """Return the lower-cased base language tag, e.g. "nl-BE" → "nl"."""
    return locale.replace("_", "-").split("-")[0].lower()


def is_rtl_locale(locale: str) -> bool:
    """Return True when the given BCP 47 locale is right-to-left."""
    return base_language(locale) in RTL_LOCALES


def parse_accept_language(header: str, supported: list[str] | tuple[str, ...]) -> str | None:
    """Parse an Accept-Language header and return the best supported locale.

    Tags are ordered by q-value (default 1.0, stable for ties). Each tag is
    tried as an exact match first, then by its base language. ``q=0`` marks a
    tag as not acceptable and is skipped.

    Args:
        header:    Value of the Accept-Language HTTP header, e.g.
                   "nl-BE,nl;q=0.9,en;q=0.7".
        supported: Locale codes the site serves, in declaration order.

    Returns:
        The matching code from ``supported`` or None.
    """
    if not header:
        return None

    weighted: list[tuple[float, str]] = []
    for part in header.split(","):
        part = part.strip()
        if not part:
            continue
        tag, _, params = part.partition(";")
        q = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                q = float(params[2:].strip())
            except ValueError:
                q = 1.0
        if q <= 0:
            continue
        weighted.append((q, tag.strip()))

    weighted.sort(key=lambda x: x[0], reverse=True)

    supported_lower = [s.lower() for s in supported]

    for _, tag in weighted:
        tag_lower = tag.lower().replace("_", "-")
        if tag_lower in supported_lower:
            return supported[supported_lower.index(tag_lower)]
        base = base_language(tag_lower)
        if base in supported_lower:
            return supported[supported_lower.index(base)]

    return None


def get_language_info(locale: str) -> dict[str, str | bool]:
    """Return ``code``, ``name`` and ``is_rtl`` for a locale code."""
    return {
        "code": locale,
        "name": LANGUAGE_NAMES.get(locale, LANGUAGE_NAMES.get(base_language(locale), locale)),
        "is_rtl": is_rtl_locale(locale),
    }
