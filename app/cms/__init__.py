"""CMS admin schema declarations."""

from .schema import (
    CollectionDefinition,
    FieldDefinition,
    FieldType,
    build_cms_config,
    build_collections,
    build_singletons,
    collection_name,
)

__all__ = [
    "CollectionDefinition",
    "FieldDefinition",
    "FieldType",
    "build_cms_config",
    "build_collections",
    "build_singletons",
    "collection_name",
]
