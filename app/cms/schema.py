"""
CMS collection schemas

Typed declarations of the collections and singletons the headless CMS admin
UI edits. Localized collections get one variant per locale ("blogEN",
"blogNL"), stored under ``src/data/<collection>/<locale>/``. These
declarations must stay in step with the site generator's content collections.
"""

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.config import Settings


class FieldType(str, enum.Enum):
    """Types of CMS fields."""

    TEXT = "text"
    TEXTAREA = "textarea"
    SLUG = "slug"
    DATE = "date"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    IMAGE = "image"
    URL = "url"
    MULTISELECT = "multiselect"
    ARRAY = "array"
    RELATIONSHIP = "relationship"
    MARKDOC = "markdoc"


class FieldDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    kind: FieldType
    label: str
    required: bool = False
    description: str | None = None
    options: tuple[str, ...] = ()
    # For relationship fields - which collection is referenced
    collection: str | None = None
    # For image fields - where uploads are written and served from
    directory: str | None = None
    public_path: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class CollectionDefinition(BaseModel):
    """A CMS collection, or a singleton when ``slug_field`` is None."""

    model_config = ConfigDict(frozen=True)

    name: str
    label: str
    path: str
    locale: str | None = None
    slug_field: str | None = None
    entry_layout: str | None = None
    content_field: str | None = None
    fields: tuple[FieldDefinition, ...] = Field(default_factory=tuple)

    @property
    def is_singleton(self) -> bool:
        return self.slug_field is None

    def to_dict(self) -> dict[str, Any]:
        data = self.model_dump(mode="json", exclude={"fields"}, exclude_none=True)
        data["fields"] = [field.to_dict() for field in self.fields]
        return data


def collection_name(base: str, locale: str) -> str:
    """Admin-facing name of a locale variant, e.g. ("blog", "en") → "blogEN"."""
    return f"{base}{locale.upper()}" if locale else base


def _label(base: str, locale: str) -> str:
    return f"{base} ({locale.upper()})" if locale else base


def _image(name: str, label: str, folder: str, required: bool = False) -> FieldDefinition:
    return FieldDefinition(
        name=name,
        kind=FieldType.IMAGE,
        label=label,
        required=required,
        directory=f"src/assets/images/{folder}",
        public_path=f"../../assets/images/{folder}/",
    )


# ── Collection factories ──────────────────────────────────────────────────────


def blog(locale: str) -> CollectionDefinition:
    return CollectionDefinition(
        name=collection_name("blog", locale),
        label=_label("Blog", locale),
        path=f"src/data/blog/{locale}/*/",
        locale=locale,
        slug_field="title",
        entry_layout="content",
        content_field="content",
        fields=(
            FieldDefinition(name="title", kind=FieldType.SLUG, label="Title", required=True),
            FieldDefinition(name="description", kind=FieldType.TEXTAREA, label="Description", required=True),
            FieldDefinition(name="draft", kind=FieldType.BOOLEAN, label="Draft"),
            FieldDefinition(
                name="authors",
                kind=FieldType.RELATIONSHIP,
                label="Authors",
                collection="authors",
                description="Authors are shared by every locale",
            ),
            FieldDefinition(name="pubDate", kind=FieldType.DATE, label="Publish date", required=True),
            FieldDefinition(name="updatedDate", kind=FieldType.DATE, label="Updated date"),
            FieldDefinition(
                name="mappingKey",
                kind=FieldType.TEXT,
                label="Mapping key",
                description="Shared by the translations of this post",
            ),
            _image("heroImage", "Hero image", "blog", required=True),
            FieldDefinition(name="categories", kind=FieldType.ARRAY, label="Categories"),
            FieldDefinition(name="content", kind=FieldType.MARKDOC, label="Content", required=True),
        ),
    )


def authors() -> CollectionDefinition:
    return CollectionDefinition(
        name="authors",
        label="Authors",
        path="src/data/authors/*/",
        slug_field="name",
        content_field="content",
        fields=(
            FieldDefinition(name="name", kind=FieldType.SLUG, label="Name", required=True),
            _image("avatar", "Avatar", "authors", required=True),
            FieldDefinition(name="about", kind=FieldType.TEXTAREA, label="About"),
            FieldDefinition(name="email", kind=FieldType.TEXT, label="Email"),
            FieldDefinition(name="authorLink", kind=FieldType.URL, label="Author website or social link"),
            FieldDefinition(name="content", kind=FieldType.MARKDOC, label="Content"),
        ),
    )


def projects(locale: str) -> CollectionDefinition:
    return CollectionDefinition(
        name=collection_name("projects", locale),
        label=_label("Projects", locale),
        path=f"src/data/projects/{locale}/*/",
        locale=locale,
        slug_field="title",
        entry_layout="content",
        content_field="content",
        fields=(
            FieldDefinition(name="title", kind=FieldType.SLUG, label="Title", required=True),
            FieldDefinition(name="description", kind=FieldType.TEXTAREA, label="Description", required=True),
            FieldDefinition(name="draft", kind=FieldType.BOOLEAN, label="Draft"),
            FieldDefinition(name="mappingKey", kind=FieldType.TEXT, label="Mapping key"),
            _image("image", "Image", "projects", required=True),
            FieldDefinition(name="technologies", kind=FieldType.ARRAY, label="Technologies"),
            FieldDefinition(name="order", kind=FieldType.INTEGER, label="Display order"),
            FieldDefinition(name="content", kind=FieldType.MARKDOC, label="Content", required=True),
        ),
    )


def other_pages(locale: str) -> CollectionDefinition:
    return CollectionDefinition(
        name=collection_name("otherPages", locale),
        label=_label("Other Pages", locale),
        path=f"src/data/otherPages/{locale}/*/",
        locale=locale,
        slug_field="title",
        entry_layout="content",
        content_field="content",
        fields=(
            FieldDefinition(name="title", kind=FieldType.SLUG, label="Title", required=True),
            FieldDefinition(name="description", kind=FieldType.TEXTAREA, label="Description", required=True),
            FieldDefinition(name="draft", kind=FieldType.BOOLEAN, label="Draft"),
            FieldDefinition(name="content", kind=FieldType.MARKDOC, label="Content", required=True),
        ),
    )


def resume(locale: str) -> CollectionDefinition:
    return CollectionDefinition(
        name=collection_name("resume", locale),
        label=_label("Resume", locale),
        path=f"src/data/resume/{locale}/",
        locale=locale,
        content_field="content",
        fields=(
            FieldDefinition(name="title", kind=FieldType.TEXT, label="Title", required=True),
            FieldDefinition(name="diplomas", kind=FieldType.ARRAY, label="Diplomas"),
            FieldDefinition(name="experience", kind=FieldType.ARRAY, label="Experience"),
            FieldDefinition(name="content", kind=FieldType.MARKDOC, label="Content"),
        ),
    )


LOCALIZED_FACTORIES = (blog, projects, other_pages)


def build_collections(locales: tuple[str, ...] | list[str]) -> tuple[CollectionDefinition, ...]:
    """Every collection in admin display order: locale variants grouped per collection."""
    collections: list[CollectionDefinition] = []
    for factory in LOCALIZED_FACTORIES:
        collections.extend(factory(locale) for locale in locales)
        if factory is blog:
            # relationship fields do not support locales yet, so authors stay shared
            collections.append(authors())
    return tuple(collections)


def build_singletons(locales: tuple[str, ...] | list[str]) -> tuple[CollectionDefinition, ...]:
    return tuple(resume(locale) for locale in locales)


def build_cms_config(locales: tuple[str, ...] | list[str], settings: Settings) -> dict[str, Any]:
    """JSON-ready CMS configuration.

    Storage is local in development and cloud everywhere else.
    """
    storage = {"kind": "local"} if settings.environment == "development" else {"kind": "cloud"}
    return {
        "storage": storage,
        "cloud": {"project": settings.cms_cloud_project},
        "ui": {"brand": {"name": settings.cms_brand_name}},
        "collections": {c.name: c.to_dict() for c in build_collections(locales)},
        "singletons": {s.name: s.to_dict() for s in build_singletons(locales)},
    }
