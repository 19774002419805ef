"""Schemas for the locale-scoped data categories served to the site generator."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator
from pydantic.alias_generators import to_camel


class SiteModel(BaseModel):
    """Base model: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, extra="forbid")


class SiteAuthor(SiteModel):
    name: str
    email: str
    twitter: str | None = None


class ImageRef(SiteModel):
    src: str
    alt: str


class SiteData(SiteModel):
    """Site-wide meta fields and blog author defaults."""

    name: str = Field(min_length=1)
    title: str = Field(min_length=1)
    description: str
    author: SiteAuthor
    default_image: ImageRef


class NavLink(SiteModel):
    text: str = Field(min_length=1)
    link: str
    new_tab: bool = False
    icon: str | None = None


class NavItem(SiteModel):
    """A top-level navigation entry: a plain link or one level of dropdown."""

    text: str = Field(min_length=1)
    link: str | None = None
    new_tab: bool = False
    icon: str | None = None
    dropdown: tuple[NavLink, ...] | None = None

    @model_validator(mode="after")
    def check_link_or_dropdown(self) -> "NavItem":
        if (self.link is None) == (self.dropdown is None):
            raise ValueError("navigation item needs exactly one of 'link' or 'dropdown'")
        if self.dropdown is not None and not self.dropdown:
            raise ValueError("dropdown must contain at least one link")
        return self


class FaqItem(SiteModel):
    question: str = Field(min_length=1)
    answer: str = Field(min_length=1)


class Testimonial(SiteModel):
    text: str = Field(min_length=1)
    name: str
    title: str
    avatar: str | None = None


# DataCategory name → schema of its per-locale payload
DATA_CATEGORY_SCHEMAS: dict[str, TypeAdapter] = {
    "siteData": TypeAdapter(SiteData),
    "navData": TypeAdapter(tuple[NavItem, ...]),
    "faqData": TypeAdapter(tuple[FaqItem, ...]),
    "testimonialData": TypeAdapter(tuple[Testimonial, ...]),
}


def dump_payload(payload: Any) -> Any:
    """Serialize a validated category payload to JSON-ready camelCase data."""
    if isinstance(payload, BaseModel):
        return payload.model_dump(by_alias=True, exclude_none=True)
    if isinstance(payload, (list, tuple)):
        return [dump_payload(item) for item in payload]
    return payload
