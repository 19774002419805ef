"""
Tests for the CMS collection schema declarations
"""

import json

import pytest
from pydantic import ValidationError

from app.cms.schema import (
    FieldType,
    blog,
    build_cms_config,
    build_collections,
    build_singletons,
    collection_name,
)
from app.config import Settings


class TestCollectionNames:
    def test_locale_variant_name(self):
        assert collection_name("blog", "en") == "blogEN"
        assert collection_name("otherPages", "nl") == "otherPagesNL"

    def test_locale_less_name(self):
        assert collection_name("authors", "") == "authors"


class TestCollections:
    def test_admin_order(self):
        names = [c.name for c in build_collections(("en", "nl"))]
        assert names == [
            "blogEN",
            "blogNL",
            "authors",
            "projectsEN",
            "projectsNL",
            "otherPagesEN",
            "otherPagesNL",
        ]

    def test_blog_paths_per_locale(self):
        collection = blog("nl")
        assert collection.path == "src/data/blog/nl/*/"
        assert collection.locale == "nl"
        assert collection.label == "Blog (NL)"
        assert not collection.is_singleton

    def test_blog_fields(self):
        fields = {field.name: field for field in blog("en").fields}
        assert fields["title"].kind is FieldType.SLUG
        assert fields["title"].required
        assert fields["authors"].kind is FieldType.RELATIONSHIP
        assert fields["authors"].collection == "authors"
        assert "mappingKey" in fields
        assert fields["heroImage"].directory == "src/assets/images/blog"

    def test_authors_are_shared(self):
        authors = [c for c in build_collections(("en", "nl")) if c.name == "authors"]
        assert len(authors) == 1
        assert authors[0].locale is None

    def test_singletons(self):
        singletons = build_singletons(("en", "nl"))
        assert [s.name for s in singletons] == ["resumeEN", "resumeNL"]
        assert all(s.is_singleton for s in singletons)

    def test_definitions_are_frozen(self):
        with pytest.raises(ValidationError):
            blog("en").path = "elsewhere"


class TestCmsConfig:
    def test_local_storage_in_development(self):
        config = build_cms_config(("en", "nl"), Settings(environment="development"))
        assert config["storage"] == {"kind": "local"}

    def test_cloud_storage_elsewhere(self):
        settings = Settings(environment="production", cms_cloud_project="team/site")
        config = build_cms_config(("en",), settings)
        assert config["storage"] == {"kind": "cloud"}
        assert config["cloud"] == {"project": "team/site"}

    def test_json_ready(self):
        config = build_cms_config(("en", "nl"), Settings(environment="development"))
        data = json.loads(json.dumps(config))
        blog_en = data["collections"]["blogEN"]
        assert blog_en["slug_field"] == "title"
        assert blog_en["fields"][0] == {
            "name": "title",
            "kind": "slug",
            "label": "Title",
            "required": True,
            "options": [],
        }
        assert "slug_field" not in data["singletons"]["resumeNL"]
        assert data["ui"]["brand"]["name"] == "Cosmic Themes"
