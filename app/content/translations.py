"""
Locale tables consumed through ``LocaleContext``

Every key must exist in the reference locale ("en"); other locales fall back
to it for anything they leave out.
"""

from app.content import en, nl

# Supported locales in declaration order; the first one is the reference.
LOCALES = ("en", "nl")
REFERENCE_LOCALE = "en"

DATA_TRANSLATIONS = {
    "en": {
        "siteData": en.SITE_DATA,
        "navData": en.NAV_DATA,
        "faqData": en.FAQ_DATA,
        "testimonialData": en.TESTIMONIAL_DATA,
    },
    "nl": {
        "siteData": nl.SITE_DATA,
        "navData": nl.NAV_DATA,
        "faqData": nl.FAQ_DATA,
        "testimonialData": nl.TESTIMONIAL_DATA,
    },
}

# Short UI strings, looked up with ``LocaleContext.translator(locale)``
TEXT_TRANSLATIONS = {
    "en": {
        "hero_text_line1": "Decision Intelligence.",
        "hero_text_line2": "Engineered for Impact.",
        "hero_description": (
            "Optimization & Machine Learning Solutions for Planning, Scheduling, and Business Impact."
        ),
        "back_to_all_posts": "Back to all posts",
        "updated": "Updated",
        "share_this_article": "Share this article",
    },
    "nl": {
        "hero_text_line1": "Decision Intelligence.",
        "hero_text_line2": "Ontworpen voor impact.",
        "hero_description": (
            "Ideeën omzetten in mooie, functionele ontwerpen die een blijvende indruk achterlaten."
        ),
        "back_to_all_posts": "Terug naar alle berichten",
        "updated": "Bijgewerkt",
        "share_this_article": "Deel dit artikel",
    },
}

# Route names for the language switcher: everything after the base path,
# e.g. "blog" or "blog/my-post". Keys only need to match across locales.
ROUTE_TRANSLATIONS = {
    "en": {
        "overviewKey": "overview",
        "categoryKey": "categories",
        "categoryKey2": "categories/*",
        "categoryKey3": "categories",
        "blogKey": "blog",
        "projectsKey": "projects",
    },
    "nl": {
        "overviewKey": "overview",
        "categoryKey": "categories",
        "categoryKey2": "categories/*",
        "categoryKey3": "categories",
        "blogKey": "blog",
        "projectsKey": "projects",
    },
}

# Per-collection, per-locale route base used for localized links and hreflang.
# Entries of these collections are matched across locales by "mappingKey".
LOCALIZED_COLLECTIONS = {
    "blog": {"en": "blog", "nl": "blog"},
    "projects": {"en": "projects", "nl": "projects"},
}

# Collections with a single variant for every locale
INVARIANT_COLLECTIONS = {
    "authors": "authors",
}
