from datetime import date

from pydantic import BaseModel, Field


class ContentEntryRef(BaseModel):
    """One locale variant of a content entry, as listed by the site generator."""

    collection: str
    locale: str
    slug: str = Field(min_length=1)
    # Shared by every translation of the same entry
    mapping_key: str | None = None
    lastmod: date | None = None


class HreflangRequest(BaseModel):
    collection: str
    # locale → slug of the variant in that locale
    variants: dict[str, str] = Field(min_length=1)


class HreflangLink(BaseModel):
    hreflang: str
    href: str


class HreflangResponse(BaseModel):
    collection: str
    links: list[HreflangLink]
    tags: str
